"""Tests for the scalar coercion primitives and payload accessors."""

import math
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from DiscordRPC.coercion import (
    MAX_SNOWFLAKE,
    decode_colour,
    decode_each,
    decode_enum_symbol,
    decode_identifier,
    decode_timestamp,
    extract_icon_token,
    optional_bool,
    optional_str,
    require,
    require_float,
    require_int,
    require_list,
    require_str,
)
from DiscordRPC.colour import ColourRGB
from DiscordRPC.entities import PresenceStatus
from DiscordRPC.errors import (
    InvalidColour,
    InvalidIdentifier,
    InvalidTimestamp,
    MalformedField,
    MissingField,
    UnknownEnumValue,
)


class TestDecodeIdentifier:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0", 0),
            ("0" * 30 + "42", 42),
            ("42", 42),
            ("175928847299117063", 175928847299117063),
            (str(MAX_SNOWFLAKE), MAX_SNOWFLAKE),
            (81384788765712384, 81384788765712384),
        ],
    )
    def test_valid(self, raw, expected):
        assert decode_identifier(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "abc",
            "12a",
            "-5",
            " 12",
            "1.5",
            "\u0661\u0662",
            -1,
            True,
            None,
            1.0,
            str(MAX_SNOWFLAKE + 1),
            "9" * 21,
            "1" * 5000,
        ],
    )
    def test_invalid(self, raw):
        with pytest.raises(InvalidIdentifier) as ei:
            decode_identifier(raw, field="author_id")
        assert ei.value.field == "author_id"
        assert ei.value.kind == "InvalidIdentifier"


class TestDecodeEnumSymbol:
    def test_known_values(self):
        assert decode_enum_symbol("online", PresenceStatus) is PresenceStatus.ONLINE
        assert decode_enum_symbol("idle", PresenceStatus) is PresenceStatus.IDLE
        assert decode_enum_symbol("dnd", PresenceStatus) is PresenceStatus.DND

    def test_normalizes_case_and_whitespace(self):
        assert decode_enum_symbol(" DND ", PresenceStatus) is PresenceStatus.DND

    @pytest.mark.parametrize("raw", ["invisible", "offline", "", 1, None])
    def test_unknown(self, raw):
        with pytest.raises(UnknownEnumValue) as ei:
            decode_enum_symbol(raw, PresenceStatus)
        assert ei.value.field == "status"
        assert "online" in ei.value.expected


class TestDecodeColour:
    def test_components(self):
        colour = decode_colour("#1A2b3C")
        assert colour.rgb == (0x1A, 0x2B, 0x3C)

    def test_reencodes_to_same_bytes(self):
        for raw in ("#000000", "#ffffff", "#faa61a", "#7289DA"):
            colour = decode_colour(raw)
            assert "#" + colour.hex == raw.lower()
            assert decode_colour("#" + colour.hex) == colour

    @pytest.mark.parametrize("raw", ["FAA61A", "#FAA61", "#FAA61AB", "#GGGGGG", "", None, 0xFAA61A])
    def test_invalid(self, raw):
        with pytest.raises(InvalidColour):
            decode_colour(raw)


class TestDecodeTimestamp:
    def test_offset_preserved(self):
        ts = decode_timestamp("2016-07-05T04:30:50.776000+00:00")
        assert ts == datetime(2016, 7, 5, 4, 30, 50, 776000, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        ts = decode_timestamp("2016-07-05T04:30:50Z")
        assert ts.utcoffset() == timedelta(0)

    def test_naive_is_utc(self):
        ts = decode_timestamp("2016-07-05T04:30:50")
        assert ts.tzinfo is timezone.utc

    @pytest.mark.parametrize("raw", ["yesterday", "05/07/2016", "", 1467693050, None])
    def test_invalid(self, raw):
        with pytest.raises(InvalidTimestamp) as ei:
            decode_timestamp(raw)
        assert ei.value.field == "timestamp"


class TestExtractIconToken:
    def test_found(self):
        url = "https://cdn.discordapp.com/icons/1/2aab26934e72b4ec300c5aa6cf67c7b3.jpg"
        assert extract_icon_token(url) == "2aab26934e72b4ec300c5aa6cf67c7b3"

    def test_first_match_wins(self):
        a, b = "a" * 32, "b" * 32
        assert extract_icon_token(f"https://x/{a}/{b}.png") == a

    @pytest.mark.parametrize("url", [None, "", "https://cdn.discordapp.com/icons/1/short.png"])
    def test_absent(self, url):
        assert extract_icon_token(url) is None


class TestAccessors:
    def test_require_missing_and_null(self):
        with pytest.raises(MissingField) as ei:
            require({}, "name")
        assert ei.value.field == "name"
        with pytest.raises(MissingField):
            require({"name": None}, "name")

    def test_require_str_wrong_shape(self):
        with pytest.raises(MalformedField) as ei:
            require_str({"name": 5}, "name")
        assert ei.value.expected == "string"

    def test_optional_str(self):
        assert optional_str({}, "nick") is None
        assert optional_str({"nick": None}, "nick") is None
        assert optional_str({"nick": "x"}, "nick") == "x"
        with pytest.raises(MalformedField):
            optional_str({"nick": ["x"]}, "nick")

    def test_optional_bool_default(self):
        assert optional_bool({}, "bot") is False
        assert optional_bool({"bot": True}, "bot") is True
        with pytest.raises(MalformedField):
            optional_bool({"bot": "yes"}, "bot")

    def test_require_int(self):
        assert require_int({"type": 2}, "type") == 2
        assert require_int({"type": "1"}, "type") == 1
        for bad in (True, "one", 1.5, []):
            with pytest.raises(MalformedField):
                require_int({"type": bad}, "type")

    def test_require_float(self):
        assert require_float({"left": 1}, "left") == 1.0
        assert require_float({"left": "0.25"}, "left") == 0.25
        # Out of the conventional range is not an error
        assert require_float({"left": 3.5}, "left") == 3.5
        with pytest.raises(MalformedField):
            require_float({"left": "loud"}, "left")

    def test_require_list_rejects_non_arrays(self):
        for bad in ("abc", {"a": 1}, 5):
            with pytest.raises(MalformedField) as ei:
                require_list({"members": bad}, "members")
            assert ei.value.expected == "list"

    def test_decode_each_is_fail_fast(self):
        seen = []

        def decoder(raw):
            seen.append(raw)
            return decode_identifier(raw, field="mentions")

        with pytest.raises(InvalidIdentifier):
            decode_each({"mentions": ["1", "x", "y"]}, "mentions", decoder)
        assert seen == ["1", "x"]

    def test_decode_each_preserves_order(self):
        out = decode_each({"ids": ["3", "1", "2"]}, "ids", decode_identifier)
        assert out == (3, 1, 2)

    @pytest.mark.parametrize("raw", ["١٠٠", "1_000", " 100", "100 ", "+100"])
    def test_require_int_is_ascii_strict(self, raw):
        with pytest.raises(MalformedField):
            require_int({"volume": raw}, "volume")

    def test_require_int_negative_string(self):
        assert require_int({"volume": "-3"}, "volume") == -3

    def test_require_int_beyond_digit_limit(self):
        with pytest.raises(MalformedField):
            require_int({"volume": "1" * 5000}, "volume")

    @pytest.mark.parametrize("raw", ["١.5", "1_0", " 0.5", "nan", "inf", "0x1"])
    def test_require_float_is_ascii_strict(self, raw):
        with pytest.raises(MalformedField):
            require_float({"left": raw}, "left")

    def test_require_float_saturates_huge_ints(self):
        assert require_float({"left": 10**400}, "left") == math.inf
        assert require_float({"left": -(10**400)}, "left") == -math.inf
        assert require_float({"left": "1e400"}, "left") == math.inf


@given(st.integers(min_value=0, max_value=MAX_SNOWFLAKE))
def test_identifier_round_trips_decimal_strings(n: int):
    assert decode_identifier(str(n)) == n
    assert decode_identifier(n) == n


@given(st.text(min_size=1, max_size=30).filter(lambda s: not s.isascii() or not s.isdigit()))
def test_identifier_rejects_non_decimal_strings(s: str):
    with pytest.raises(InvalidIdentifier):
        decode_identifier(s)


@given(st.integers(min_value=0, max_value=0xFFFFFF))
def test_colour_round_trips_through_hex(value: int):
    colour = decode_colour(f"#{value:06X}")
    assert colour.value == value
    assert decode_colour("#" + colour.hex) == colour
    assert ColourRGB.from_rgb(*colour.rgb) == colour
