"""Typed decoding of Discord RPC payloads: public exports."""  # noqa: N999

from .colour import ColourRGB
from .decoders import (
    EVENT_DECODERS,
    EventBinding,
    decode_activity,
    decode_channel,
    decode_event,
    decode_light_server,
    decode_member,
    decode_message,
    decode_pan,
    decode_server,
    decode_user,
    decode_voice_state,
    decode_voice_user,
)
from .embeds import Attachment, Embed, EmbedField, decode_attachment, decode_embed
from .entities import (
    Activity,
    ActivityType,
    LightServer,
    Member,
    Message,
    Pan,
    PresenceStatus,
    RPCChannel,
    Server,
    User,
    VoiceState,
    VoiceUser,
)
from .errors import (
    DecodeError,
    DecodeNotImplemented,
    InvalidColour,
    InvalidIdentifier,
    InvalidTimestamp,
    MalformedField,
    MissingField,
    UnknownEnumValue,
    UnknownEvent,
)

__all__ = [
    "Activity",
    "ActivityType",
    "Attachment",
    "ColourRGB",
    "DecodeError",
    "DecodeNotImplemented",
    "EVENT_DECODERS",
    "Embed",
    "EmbedField",
    "EventBinding",
    "InvalidColour",
    "InvalidIdentifier",
    "InvalidTimestamp",
    "LightServer",
    "MalformedField",
    "Member",
    "Message",
    "MissingField",
    "Pan",
    "PresenceStatus",
    "RPCChannel",
    "Server",
    "UnknownEnumValue",
    "UnknownEvent",
    "User",
    "VoiceState",
    "VoiceUser",
    "decode_activity",
    "decode_attachment",
    "decode_channel",
    "decode_embed",
    "decode_event",
    "decode_light_server",
    "decode_member",
    "decode_message",
    "decode_pan",
    "decode_server",
    "decode_user",
    "decode_voice_state",
    "decode_voice_user",
]
