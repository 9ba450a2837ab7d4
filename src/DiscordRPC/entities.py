# entities.py

from __future__ import annotations

from datetime import datetime
from enum import Enum, IntEnum

from pydantic import BaseModel, Field

from DiscordRPC import traits
from DiscordRPC.colour import ColourRGB
from DiscordRPC.embeds import Attachment, Embed

_FROZEN = dict(frozen=True, extra="forbid")


class PresenceStatus(str, Enum):
    ONLINE = "online"
    IDLE = "idle"
    DND = "dnd"


class ActivityType(IntEnum):
    PLAYING = 0
    STREAMING = 1


class User(BaseModel):
    """A user as sent over RPC."""

    id: int = Field(ge=0)
    username: str
    discriminator: str
    avatar_id: str | None = None
    bot_account: bool = False

    model_config = _FROZEN

    @property
    def distinct(self) -> str:
        return traits.distinct(self)

    @property
    def mention(self) -> str:
        return traits.mention(self)

    @property
    def creation_time(self) -> datetime:
        return traits.creation_time(self)

    def avatar_url(self, fmt: str | None = None, *, cdn_url: str = traits.DEFAULT_CDN_URL) -> str:
        return traits.avatar_url(self, fmt, cdn_url=cdn_url)


class Activity(BaseModel):
    """The game a member is playing or streaming."""

    name: str
    # Unknown wire values are kept as the raw int
    kind: ActivityType | int = Field(union_mode="left_to_right")
    url: str | None = None

    model_config = _FROZEN

    @property
    def streaming(self) -> bool:
        return self.kind == ActivityType.STREAMING


class Member(BaseModel):
    """A server member: a user plus presence, nickname and activity."""

    user: User
    nick: str | None = None
    status: PresenceStatus
    activity: Activity | None = None

    model_config = _FROZEN

    @property
    def id(self) -> int:
        return self.user.id

    @property
    def username(self) -> str:
        return self.user.username

    @property
    def discriminator(self) -> str:
        return self.user.discriminator

    @property
    def avatar_id(self) -> str | None:
        return self.user.avatar_id

    @property
    def bot_account(self) -> bool:
        return self.user.bot_account

    @property
    def distinct(self) -> str:
        return self.user.distinct

    @property
    def mention(self) -> str:
        return self.user.mention

    @property
    def creation_time(self) -> datetime:
        return self.user.creation_time

    def avatar_url(self, fmt: str | None = None, *, cdn_url: str = traits.DEFAULT_CDN_URL) -> str:
        return self.user.avatar_url(fmt, cdn_url=cdn_url)

    @property
    def display_name(self) -> str:
        return self.nick if self.nick is not None else self.user.username


class LightServer(BaseModel):
    """A server without member data: only ID, name and icon."""

    id: int = Field(ge=0)
    name: str
    icon_id: str | None = None
    icon_url: str | None = None

    model_config = _FROZEN

    @property
    def creation_time(self) -> datetime:
        return traits.creation_time(self)


class Server(BaseModel):
    """A server together with its online members."""

    light: LightServer
    members: tuple[Member, ...] = ()

    model_config = _FROZEN

    @property
    def id(self) -> int:
        return self.light.id

    @property
    def name(self) -> str:
        return self.light.name

    @property
    def icon_id(self) -> str | None:
        return self.light.icon_id

    @property
    def icon_url(self) -> str | None:
        return self.light.icon_url

    @property
    def creation_time(self) -> datetime:
        return self.light.creation_time

    def member(self, user_id: int) -> Member | None:
        for m in self.members:
            if m.id == user_id:
                return m
        return None


class VoiceState(BaseModel):
    mute: bool
    deaf: bool
    self_mute: bool
    self_deaf: bool
    suppress: bool

    model_config = _FROZEN


class Pan(BaseModel):
    """A voice user's stereo pan; 0.0 to 1.0 by convention, not enforced."""

    left: float
    right: float

    model_config = _FROZEN


class VoiceUser(BaseModel):
    """A user connected to a voice channel."""

    user: User
    nick: str | None = None
    mute: bool
    # Relative volume, 100 is the client default
    volume: int
    pan: Pan
    voice_state: VoiceState

    model_config = _FROZEN

    @property
    def id(self) -> int:
        return self.user.id

    @property
    def username(self) -> str:
        return self.user.username

    @property
    def discriminator(self) -> str:
        return self.user.discriminator

    @property
    def avatar_id(self) -> str | None:
        return self.user.avatar_id

    @property
    def bot_account(self) -> bool:
        return self.user.bot_account

    @property
    def distinct(self) -> str:
        return self.user.distinct

    @property
    def mention(self) -> str:
        return self.user.mention

    @property
    def creation_time(self) -> datetime:
        return self.user.creation_time

    def avatar_url(self, fmt: str | None = None, *, cdn_url: str = traits.DEFAULT_CDN_URL) -> str:
        return self.user.avatar_url(fmt, cdn_url=cdn_url)


class Message(BaseModel):
    """A chat message as sent over RPC."""

    id: int = Field(ge=0)
    # Sent by a blocked user; the client hides content by default
    blocked: bool
    content: str
    author_colour: ColourRGB
    timestamp: datetime
    tts: bool
    author: User
    mentions: tuple[int, ...] = ()
    mention_roles: tuple[int, ...] = ()
    embeds: tuple[Embed, ...] = ()
    attachments: tuple[Attachment, ...] = ()
    nick: str | None = None
    pinned: bool
    type: int

    model_config = _FROZEN

    @property
    def creation_time(self) -> datetime:
        return traits.creation_time(self)


class RPCChannel(BaseModel):
    """Reserved for channel payloads; carries no fields yet."""

    model_config = _FROZEN
