"""
Unit tests for colors, the named-color table and the hex decoder.

This suite verifies:
- Hex decoding for 3, 4, 6 and 8 digit forms, with or without `#`
- Rejection of malformed hex text
- Case-sensitive named lookups
- Channel helpers and hex rendering
"""

import pytest

from stylekit.colors import NAMED_COLORS, Color, parse_hex_color, parse_named_color
from stylekit.errors import InvalidPropertyValue


@pytest.mark.parametrize(
    "code, expected",
    [
        ("f00", Color(1.0, 0.0, 0.0)),
        ("#F00", Color(1.0, 0.0, 0.0)),
        ("00ff00", Color(0.0, 1.0, 0.0)),
        ("0000ff80", Color.rgba(0, 0, 255, 128)),
        ("fff0", Color(1.0, 1.0, 1.0, 0.0)),
    ],
)
def test_parse_hex_color(code, expected):
    assert parse_hex_color(code) == expected


@pytest.mark.parametrize("code", ["", "ff", "12345", "1234567", "ggg", "+ff", "f_f"])
def test_parse_hex_color_rejects_malformed(code):
    with pytest.raises(InvalidPropertyValue):
        parse_hex_color(code)


def test_parse_named_color():
    assert parse_named_color("red") == Color(1.0, 0.0, 0.0)
    assert parse_named_color("rebeccapurple") == Color.rgb(0x66, 0x33, 0x99)
    assert parse_named_color("transparent").a == 0.0
    assert parse_named_color("RED") is None
    assert parse_named_color("unknownname") is None


def test_every_named_color_decodes():
    for name in NAMED_COLORS:
        assert isinstance(parse_named_color(name), Color)


def test_hex_rendering():
    assert Color.rgb(255, 128, 0).hex == "#ff8000"
    assert Color.rgba(255, 0, 0, 128).hex == "#ff000080"
    assert str(Color(0.0, 0.0, 0.0)) == "#000000"


def test_channel_helpers_clamp():
    color = Color(0.5, 0.5, 0.5)
    assert color.with_r(2.0).r == 1.0
    assert color.with_g(-1.0).g == 0.0
    assert color.with_b(0.25).b == 0.25
    assert color.with_alpha(0.5).a == 0.5
    assert color == Color(0.5, 0.5, 0.5)
