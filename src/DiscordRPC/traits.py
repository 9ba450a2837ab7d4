"""Capability traits shared by RPC entities.

Each trait is a structural protocol: an entity has the capability if it exposes
the listed attributes, without inheriting from anything. Behaviour derived from
a capability lives in the module-level helpers below so every implementer (and
every wrapper that forwards to one) computes it the same way.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol, runtime_checkable

DISCORD_EPOCH_MS = 1420070400000
DEFAULT_CDN_URL = "https://cdn.discordapp.com"


@runtime_checkable
class HasIdentity(Protocol):
    @property
    def id(self) -> int: ...


@runtime_checkable
class HasUserAttributes(Protocol):
    @property
    def username(self) -> str: ...

    @property
    def discriminator(self) -> str: ...

    @property
    def avatar_id(self) -> str | None: ...

    @property
    def bot_account(self) -> bool: ...


@runtime_checkable
class HasServerAttributes(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def icon_id(self) -> str | None: ...

    @property
    def icon_url(self) -> str | None: ...


@runtime_checkable
class HasVoiceAttributes(Protocol):
    @property
    def mute(self) -> bool: ...

    @property
    def deaf(self) -> bool: ...

    @property
    def self_mute(self) -> bool: ...

    @property
    def self_deaf(self) -> bool: ...


class _IdentifiedUser(HasIdentity, HasUserAttributes, Protocol):
    pass


def same_object(a: HasIdentity, b: HasIdentity) -> bool:
    """Whether two decoded entities describe the same remote object."""
    return a.id == b.id


def creation_time(obj: HasIdentity) -> datetime:
    ms = (obj.id >> 22) + DISCORD_EPOCH_MS
    return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(milliseconds=ms)


def distinct(user: HasUserAttributes) -> str:
    return f"{user.username}#{user.discriminator}"


def mention(obj: HasIdentity) -> str:
    return f"<@{obj.id}>"


def avatar_url(
    user: _IdentifiedUser, fmt: str | None = None, *, cdn_url: str = DEFAULT_CDN_URL
) -> str:
    """CDN URL of the user's avatar, or of the default avatar if none is set.

    Animated avatars (hash prefixed with ``a_``) default to gif, others to webp.
    """
    base = cdn_url.rstrip("/")
    if user.avatar_id is None:
        try:
            index = int(user.discriminator) % 5
        except ValueError:
            index = 0
        return f"{base}/embed/avatars/{index}.png"
    if fmt is None:
        fmt = "gif" if user.avatar_id.startswith("a_") else "webp"
    return f"{base}/avatars/{user.id}/{user.avatar_id}.{fmt}"
