"""Decoders turning generic RPC payload trees into typed entities.

Each ``decode_*`` function takes one parsed payload (mappings, lists and
scalars) and returns a fresh frozen entity, or raises a ``DecodeError``.
Nested decoders are called directly and their errors propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import structlog
from pydantic import BaseModel

from DiscordRPC.coercion import (
    decode_colour,
    decode_each,
    decode_enum_symbol,
    decode_identifier,
    decode_timestamp,
    expect_mapping,
    extract_icon_token,
    optional_bool,
    optional_mapping,
    optional_str,
    require,
    require_bool,
    require_float,
    require_int,
    require_mapping,
    require_str,
)
from DiscordRPC.embeds import decode_attachment, decode_embed
from DiscordRPC.entities import (
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
from DiscordRPC.errors import DecodeError, DecodeNotImplemented, MissingField, UnknownEvent
from DiscordRPC.metrics import inc_counter

_log = structlog.get_logger()


def decode_user(payload: Any) -> User:
    data = expect_mapping(payload, "user")
    return User(
        id=decode_identifier(require(data, "id")),
        username=require_str(data, "username"),
        discriminator=require_str(data, "discriminator"),
        avatar_id=optional_str(data, "avatar"),
        bot_account=optional_bool(data, "bot", default=False),
    )


def decode_activity(payload: Any) -> Activity:
    data = expect_mapping(payload, "activity")
    raw_kind = require_int(data, "type")
    try:
        kind: ActivityType | int = ActivityType(raw_kind)
    except ValueError:
        kind = raw_kind
    return Activity(
        name=require_str(data, "name"),
        kind=kind,
        url=optional_str(data, "url"),
    )


def decode_member(payload: Any) -> Member:
    data = expect_mapping(payload, "member")
    activity = optional_mapping(data, "activity")
    return Member(
        user=decode_user(require_mapping(data, "user")),
        nick=optional_str(data, "nick"),
        status=decode_enum_symbol(require(data, "status"), PresenceStatus, field="status"),
        activity=None if activity is None else decode_activity(activity),
    )


def decode_light_server(payload: Any) -> LightServer:
    data = expect_mapping(payload, "guild")
    icon_url = optional_str(data, "icon_url")
    return LightServer(
        id=decode_identifier(require(data, "id")),
        name=require_str(data, "name"),
        icon_id=extract_icon_token(icon_url),
        icon_url=icon_url,
    )


def decode_server(payload: Any) -> Server:
    light = decode_light_server(payload)
    return Server(light=light, members=decode_each(payload, "members", decode_member))


def decode_voice_state(payload: Any) -> VoiceState:
    data = expect_mapping(payload, "voice_state")
    return VoiceState(
        mute=require_bool(data, "mute"),
        deaf=require_bool(data, "deaf"),
        self_mute=require_bool(data, "self_mute"),
        self_deaf=require_bool(data, "self_deaf"),
        suppress=require_bool(data, "suppress"),
    )


def decode_pan(payload: Any) -> Pan:
    data = expect_mapping(payload, "pan")
    return Pan(left=require_float(data, "left"), right=require_float(data, "right"))


def decode_voice_user(payload: Any) -> VoiceUser:
    data = expect_mapping(payload, "voice_user")
    return VoiceUser(
        user=decode_user(require_mapping(data, "user")),
        nick=optional_str(data, "nick"),
        mute=require_bool(data, "mute"),
        volume=require_int(data, "volume"),
        pan=decode_pan(require_mapping(data, "pan")),
        voice_state=decode_voice_state(require_mapping(data, "voice_state")),
    )


def _mention_id(raw: Any) -> int:
    return decode_identifier(raw, field="mentions")


def _mention_role_id(raw: Any) -> int:
    return decode_identifier(raw, field="mention_roles")


def decode_message(payload: Any) -> Message:
    data = expect_mapping(payload, "message")
    # The wire also carries a "bot" flag whose meaning is unknown; it is not decoded.
    return Message(
        id=decode_identifier(require(data, "id")),
        blocked=require_bool(data, "blocked"),
        content=require_str(data, "content"),
        author_colour=decode_colour(require(data, "author_color"), field="author_color"),
        timestamp=decode_timestamp(require(data, "timestamp"), field="timestamp"),
        tts=require_bool(data, "tts"),
        mentions=decode_each(data, "mentions", _mention_id),
        mention_roles=decode_each(data, "mention_roles", _mention_role_id),
        embeds=decode_each(data, "embeds", decode_embed),
        attachments=decode_each(data, "attachments", decode_attachment),
        author=decode_user(require_mapping(data, "author")),
        nick=optional_str(data, "nick"),
        pinned=require_bool(data, "pinned"),
        type=require_int(data, "type"),
    )


def decode_channel(payload: Any) -> RPCChannel:
    raise DecodeNotImplemented("RPCChannel")


# -----------------
# Event dispatch
# -----------------


@dataclass(frozen=True)
class EventBinding:
    decoder: Callable[[Any], BaseModel]
    # Sub-object of the event body holding the entity; None means the whole body
    key: str | None = None


EVENT_DECODERS: dict[str, EventBinding] = {
    "GET_GUILD": EventBinding(decode_server),
    "GUILD_CREATE": EventBinding(decode_light_server),
    "GUILD_STATUS": EventBinding(decode_light_server, key="guild"),
    "MESSAGE_CREATE": EventBinding(decode_message, key="message"),
    "MESSAGE_UPDATE": EventBinding(decode_message, key="message"),
    "VOICE_STATE_CREATE": EventBinding(decode_voice_user),
    "VOICE_STATE_UPDATE": EventBinding(decode_voice_user),
    "VOICE_STATE_DELETE": EventBinding(decode_voice_user),
    "GET_CHANNEL": EventBinding(decode_channel),
    "CHANNEL_CREATE": EventBinding(decode_channel),
}


def decode_event(event: str, payload: Mapping[str, Any]) -> BaseModel:
    """Decode the body of an RPC event with the decoder registered for it.

    Failures are counted and logged, then re-raised unchanged.
    """
    try:
        binding = EVENT_DECODERS.get(event)
        if binding is None:
            raise UnknownEvent(event)
        body: Any = payload
        if binding.key is not None:
            body = expect_mapping(payload, event).get(binding.key)
            if body is None:
                raise MissingField(binding.key)
        entity = binding.decoder(body)
    except DecodeError as exc:
        inc_counter("rpc.decode.failed")
        inc_counter(f"rpc.decode.{event}.failed")
        _log.warning("rpc.decode.rejected", rpc_event=event, **exc.as_log_fields())
        raise
    inc_counter("rpc.decode.ok")
    inc_counter(f"rpc.decode.{event}.ok")
    _log.debug("rpc.decode.completed", rpc_event=event, entity=type(entity).__name__)
    return entity
