"""Embed and attachment entities nested inside RPC messages.

Only the parts of an embed that identify and summarize it are decoded; nested
media objects are flattened to their URL.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from DiscordRPC.coercion import (
    decode_each,
    decode_identifier,
    decode_timestamp,
    expect_mapping,
    optional,
    optional_bool,
    optional_int,
    optional_mapping,
    optional_str,
    require,
    require_int,
    require_str,
)
from DiscordRPC.colour import ColourRGB
from DiscordRPC.errors import InvalidColour

_FROZEN = dict(frozen=True, extra="forbid")


class EmbedField(BaseModel):
    name: str
    value: str
    inline: bool = False

    model_config = _FROZEN


class Embed(BaseModel):
    type: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    colour: ColourRGB | None = None
    timestamp: datetime | None = None
    fields: tuple[EmbedField, ...] = ()
    footer_text: str | None = None
    image_url: str | None = None
    thumbnail_url: str | None = None
    author_name: str | None = None

    model_config = _FROZEN


class Attachment(BaseModel):
    id: int = Field(ge=0)
    filename: str
    size: int
    url: str
    proxy_url: str | None = None
    width: int | None = None
    height: int | None = None

    model_config = _FROZEN

    @property
    def image(self) -> bool:
        return self.width is not None and self.height is not None


def _nested_str(payload: Mapping[str, Any], key: str, inner: str) -> str | None:
    sub = optional_mapping(payload, key)
    if sub is None:
        return None
    return optional_str(sub, inner)


def _embed_colour(payload: Mapping[str, Any]) -> ColourRGB | None:
    raw = optional(payload, "color")
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw <= 0xFFFFFF:
        raise InvalidColour("color", raw)
    return ColourRGB(value=raw)


def decode_embed_field(payload: Any) -> EmbedField:
    data = expect_mapping(payload, "fields")
    return EmbedField(
        name=require_str(data, "name"),
        value=require_str(data, "value"),
        inline=optional_bool(data, "inline"),
    )


def decode_embed(payload: Any) -> Embed:
    data = expect_mapping(payload, "embeds")
    raw_ts = optional(data, "timestamp")
    fields = () if data.get("fields") is None else decode_each(data, "fields", decode_embed_field)
    return Embed(
        type=optional_str(data, "type"),
        title=optional_str(data, "title"),
        description=optional_str(data, "description"),
        url=optional_str(data, "url"),
        colour=_embed_colour(data),
        timestamp=None if raw_ts is None else decode_timestamp(raw_ts),
        fields=fields,
        footer_text=_nested_str(data, "footer", "text"),
        image_url=_nested_str(data, "image", "url"),
        thumbnail_url=_nested_str(data, "thumbnail", "url"),
        author_name=_nested_str(data, "author", "name"),
    )


def decode_attachment(payload: Any) -> Attachment:
    data = expect_mapping(payload, "attachments")
    return Attachment(
        id=decode_identifier(require(data, "id")),
        filename=require_str(data, "filename"),
        size=require_int(data, "size"),
        url=require_str(data, "url"),
        proxy_url=optional_str(data, "proxy_url"),
        width=optional_int(data, "width"),
        height=optional_int(data, "height"),
    )
