"""Field coercion primitives and payload accessors.

The primitives turn single wire scalars into strict Python values. The
accessors apply the required/optional rules shared by every entity decoder:

- a required key that is absent or null raises ``MissingField``;
- a key holding the wrong shape raises ``MalformedField``;
- an optional key that is absent or null yields ``None``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TypeVar

from DiscordRPC.colour import ColourRGB
from DiscordRPC.errors import (
    InvalidColour,
    InvalidIdentifier,
    InvalidTimestamp,
    MalformedField,
    MissingField,
    UnknownEnumValue,
)

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

MAX_SNOWFLAKE = 2**64 - 1

_DIGITS_RE = re.compile(r"[0-9]+")
_INT_RE = re.compile(r"-?[0-9]+")
_NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?([eE][-+]?[0-9]+)?")
_COLOUR_RE = re.compile(r"#([0-9a-fA-F]{6})")
_ICON_TOKEN_RE = re.compile(r"[0-9a-f]{32}")


# -----------------
# Scalar primitives
# -----------------


def decode_identifier(raw: Any, field: str = "id") -> int:
    """Parse a snowflake identifier from a decimal string or a plain int."""
    if isinstance(raw, bool):
        raise InvalidIdentifier(field, raw)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _DIGITS_RE.fullmatch(raw):
        # u64 has at most 20 digits; longer strings must not reach int()
        if len(raw.lstrip("0")) > 20:
            raise InvalidIdentifier(field, raw)
        value = int(raw)
    else:
        raise InvalidIdentifier(field, raw)
    if value < 0 or value > MAX_SNOWFLAKE:
        raise InvalidIdentifier(field, raw)
    return value


def decode_enum_symbol(raw: Any, known_set: type[E], field: str = "status") -> E:
    known = [member.value for member in known_set]
    if not isinstance(raw, str):
        raise UnknownEnumValue(field, raw, known)
    try:
        return known_set(raw.strip().lower())
    except ValueError:
        raise UnknownEnumValue(field, raw, known) from None


def decode_colour(raw: Any, field: str = "author_color") -> ColourRGB:
    if not isinstance(raw, str):
        raise InvalidColour(field, raw)
    m = _COLOUR_RE.fullmatch(raw)
    if not m:
        raise InvalidColour(field, raw)
    return ColourRGB(value=int(m.group(1), 16))


def decode_timestamp(raw: Any, field: str = "timestamp") -> datetime:
    if not isinstance(raw, str):
        raise InvalidTimestamp(field, raw)
    try:
        ts = datetime.fromisoformat(raw)
    except ValueError:
        raise InvalidTimestamp(field, raw) from None
    if ts.tzinfo is None:
        # Naive wire timestamps are UTC
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def extract_icon_token(url: str | None) -> str | None:
    """Return the first 32-hex-digit hash inside an icon URL, if any."""
    if not url:
        return None
    m = _ICON_TOKEN_RE.search(url)
    return m.group(0) if m else None


# ----------------
# Payload accessors
# ----------------


def expect_mapping(value: Any, field: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedField(field, "mapping", value)
    return value


def require(payload: Mapping[str, Any], key: str) -> Any:
    value = payload.get(key)
    if value is None:
        raise MissingField(key)
    return value


def optional(payload: Mapping[str, Any], key: str) -> Any:
    return payload.get(key)


def require_str(payload: Mapping[str, Any], key: str) -> str:
    value = require(payload, key)
    if not isinstance(value, str):
        raise MalformedField(key, "string", value)
    return value


def optional_str(payload: Mapping[str, Any], key: str) -> str | None:
    value = optional(payload, key)
    if value is not None and not isinstance(value, str):
        raise MalformedField(key, "string", value)
    return value


def require_bool(payload: Mapping[str, Any], key: str) -> bool:
    value = require(payload, key)
    if not isinstance(value, bool):
        raise MalformedField(key, "boolean", value)
    return value


def optional_bool(payload: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = optional(payload, key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise MalformedField(key, "boolean", value)
    return value


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise MalformedField(key, "integer", value)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.fullmatch(value):
        try:
            return int(value)
        except ValueError:
            # Beyond the interpreter's int-string digit limit
            raise MalformedField(key, "integer", value) from None
    raise MalformedField(key, "integer", value)


def require_int(payload: Mapping[str, Any], key: str) -> int:
    return _as_int(require(payload, key), key)


def optional_int(payload: Mapping[str, Any], key: str) -> int | None:
    value = optional(payload, key)
    if value is None:
        return None
    return _as_int(value, key)


def require_float(payload: Mapping[str, Any], key: str) -> float:
    value = require(payload, key)
    if isinstance(value, bool):
        raise MalformedField(key, "number", value)
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            # Out of float range saturates, like float("1e400")
            return math.copysign(math.inf, value)
    if isinstance(value, str) and _NUMBER_RE.fullmatch(value):
        return float(value)
    raise MalformedField(key, "number", value)


def require_mapping(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    return expect_mapping(require(payload, key), key)


def optional_mapping(payload: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = optional(payload, key)
    if value is None:
        return None
    return expect_mapping(value, key)


def require_list(payload: Mapping[str, Any], key: str) -> list[Any]:
    value = require(payload, key)
    # Strings and mappings are sequences/iterables too; only real arrays count
    if not isinstance(value, (list, tuple)):
        raise MalformedField(key, "list", value)
    return list(value)


def decode_each(
    payload: Mapping[str, Any], key: str, decoder: Callable[[Any], T]
) -> tuple[T, ...]:
    """Decode every element of a required list, stopping at the first failure."""
    return tuple(decoder(item) for item in require_list(payload, key))
