"""Typed decode failures raised by the RPC payload decoders.

Every decoder raises one of these directly to its caller. Nested decoders do
not wrap each other's errors, so ``kind`` and ``field`` always describe the
place where decoding actually stopped.
"""

from __future__ import annotations


class DecodeError(ValueError):
    """Base class for all payload decode failures."""

    kind: str = "DecodeError"

    def __init__(self, message: str, *, field: str | None = None, expected: str | None = None):
        super().__init__(message)
        self.field = field
        self.expected = expected

    def as_log_fields(self) -> dict[str, str | None]:
        return {"error_kind": self.kind, "field": self.field, "expected": self.expected}


class MissingField(DecodeError):
    """A required field is absent (or null) in the payload."""

    kind = "MissingField"

    def __init__(self, field: str):
        super().__init__(f"missing required field {field!r}", field=field)


class MalformedField(DecodeError):
    """A field is present but has the wrong shape."""

    kind = "MalformedField"

    def __init__(self, field: str, expected: str, got: object = None):
        got_name = type(got).__name__
        super().__init__(
            f"field {field!r} should be {expected}, got {got_name}",
            field=field,
            expected=expected,
        )


class InvalidIdentifier(DecodeError):
    kind = "InvalidIdentifier"

    def __init__(self, field: str, raw: object):
        super().__init__(
            f"field {field!r} is not a snowflake identifier: {raw!r}",
            field=field,
            expected="unsigned 64-bit decimal",
        )


class UnknownEnumValue(DecodeError):
    kind = "UnknownEnumValue"

    def __init__(self, field: str, raw: object, known: list[str]):
        super().__init__(
            f"field {field!r} has unknown value {raw!r} (known: {', '.join(known)})",
            field=field,
            expected="one of " + "|".join(known),
        )


class InvalidColour(DecodeError):
    kind = "InvalidColour"

    def __init__(self, field: str, raw: object):
        super().__init__(
            f"field {field!r} is not a colour: {raw!r}", field=field, expected="#RRGGBB"
        )


class InvalidTimestamp(DecodeError):
    kind = "InvalidTimestamp"

    def __init__(self, field: str, raw: object):
        super().__init__(
            f"field {field!r} is not an ISO-8601 timestamp: {raw!r}",
            field=field,
            expected="ISO-8601 date-time",
        )


class DecodeNotImplemented(DecodeError, NotImplementedError):
    """The payload names an entity this layer reserves but cannot decode yet."""

    kind = "NotImplemented"

    def __init__(self, entity: str):
        super().__init__(f"decoding {entity} is not implemented")
        self.entity = entity


class UnknownEvent(DecodeError, LookupError):
    kind = "UnknownEvent"

    def __init__(self, event: str):
        super().__init__(f"no decoder registered for RPC event {event!r}")
        self.event = event
