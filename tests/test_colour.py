import pytest
from pydantic import ValidationError

from DiscordRPC.colour import ColourRGB


def test_components_from_value():
    c = ColourRGB(value=0xFAA61A)
    assert (c.red, c.green, c.blue) == (0xFA, 0xA6, 0x1A)
    assert c.hex == "faa61a"


def test_from_rgb_round_trip():
    c = ColourRGB.from_rgb(114, 137, 218)
    assert c.value == 0x7289DA
    assert c.rgb == (114, 137, 218)


def test_hex_is_zero_padded():
    assert ColourRGB(value=0x0000FF).hex == "0000ff"


@pytest.mark.parametrize("value", [-1, 0x1000000])
def test_value_bounds(value):
    with pytest.raises(ValidationError):
        ColourRGB(value=value)


def test_component_bounds():
    with pytest.raises(ValueError):
        ColourRGB.from_rgb(256, 0, 0)


def test_frozen():
    c = ColourRGB(value=1)
    with pytest.raises(ValidationError):
        c.value = 2
