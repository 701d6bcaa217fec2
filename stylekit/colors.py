"""Colors, the CSS named-color table and the hex-color decoder.

Both lookups are plain callables so property extraction can be handed a different
table (see `stylekit.property.Tokens.as_color`).
"""
from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass, replace
from string import hexdigits
from typing import Optional

from typing_extensions import TypeAliasType

from stylekit.errors import InvalidPropertyValue

__all__ = [
    "Color",
    "NamedColorLookup",
    "HexColorDecoder",
    "NAMED_COLORS",
    "parse_named_color",
    "parse_hex_color",
]

NamedColorLookup = TypeAliasType("NamedColorLookup", Callable[[str], Optional["Color"]])
HexColorDecoder = TypeAliasType("HexColorDecoder", Callable[[str], "Color"])


def clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


@dataclass(frozen=True)
class Color:
    """sRGB color with every channel in ``0..1``."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @staticmethod
    def rgb(r: int, g: int, b: int) -> Color:
        return Color(r / 255, g / 255, b / 255)

    @staticmethod
    def rgba(r: int, g: int, b: int, a: int) -> Color:
        return Color(r / 255, g / 255, b / 255, a / 255)

    @property
    def hex(self) -> str:
        channels = [self.r, self.g, self.b] + ([self.a] if self.a < 1.0 else [])
        return "#" + "".join(f"{round(clamp(c) * 255):02x}" for c in channels)

    def with_r(self, r: float) -> Color:
        return replace(self, r=clamp(r))

    def with_g(self, g: float) -> Color:
        return replace(self, g=clamp(g))

    def with_b(self, b: float) -> Color:
        return replace(self, b=clamp(b))

    def with_alpha(self, a: float) -> Color:
        return replace(self, a=clamp(a))

    def __str__(self) -> str:
        return self.hex


def parse_hex_color(code: str) -> Color:
    """Decode `rgb`, `rgba`, `rrggbb` or `rrggbbaa` hex digits, with or without `#`.

    Raises:
        InvalidPropertyValue: The text is not 3, 4, 6 or 8 hex digits.
    """
    digits = code.removeprefix("#")
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    if len(digits) not in (6, 8):
        raise InvalidPropertyValue(f"Hex color must be 3, 4, 6 or 8 digits, got '#{code.removeprefix('#')}'")

    if not all(d in hexdigits for d in digits):
        raise InvalidPropertyValue(f"Invalid hex color '#{code.removeprefix('#')}'")

    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]

    if len(channels) == 3:
        return Color.rgb(*channels)
    return Color.rgba(*channels)


def parse_named_color(name: str) -> Color | None:
    """Case-sensitive lookup into `NAMED_COLORS`."""
    if (code := NAMED_COLORS.get(name)) is None:
        return None
    return parse_hex_color(code)


# https://www.w3.org/TR/css-color-4/#named-colors
NAMED_COLORS: dict[str, str] = {
    "transparent": "00000000",
    "aliceblue": "f0f8ff",
    "antiquewhite": "faebd7",
    "aqua": "00ffff",
    "aquamarine": "7fffd4",
    "azure": "f0ffff",
    "beige": "f5f5dc",
    "bisque": "ffe4c4",
    "black": "000000",
    "blanchedalmond": "ffebcd",
    "blue": "0000ff",
    "blueviolet": "8a2be2",
    "brown": "a52a2a",
    "burlywood": "deb887",
    "cadetblue": "5f9ea0",
    "chartreuse": "7fff00",
    "chocolate": "d2691e",
    "coral": "ff7f50",
    "cornflowerblue": "6495ed",
    "cornsilk": "fff8dc",
    "crimson": "dc143c",
    "cyan": "00ffff",
    "darkblue": "00008b",
    "darkcyan": "008b8b",
    "darkgoldenrod": "b8860b",
    "darkgray": "a9a9a9",
    "darkgreen": "006400",
    "darkgrey": "a9a9a9",
    "darkkhaki": "bdb76b",
    "darkmagenta": "8b008b",
    "darkolivegreen": "556b2f",
    "darkorange": "ff8c00",
    "darkorchid": "9932cc",
    "darkred": "8b0000",
    "darksalmon": "e9967a",
    "darkseagreen": "8fbc8f",
    "darkslateblue": "483d8b",
    "darkslategray": "2f4f4f",
    "darkslategrey": "2f4f4f",
    "darkturquoise": "00ced1",
    "darkviolet": "9400d3",
    "deeppink": "ff1493",
    "deepskyblue": "00bfff",
    "dimgray": "696969",
    "dimgrey": "696969",
    "dodgerblue": "1e90ff",
    "firebrick": "b22222",
    "floralwhite": "fffaf0",
    "forestgreen": "228b22",
    "fuchsia": "ff00ff",
    "gainsboro": "dcdcdc",
    "ghostwhite": "f8f8ff",
    "gold": "ffd700",
    "goldenrod": "daa520",
    "gray": "808080",
    "green": "008000",
    "greenyellow": "adff2f",
    "grey": "808080",
    "honeydew": "f0fff0",
    "hotpink": "ff69b4",
    "indianred": "cd5c5c",
    "indigo": "4b0082",
    "ivory": "fffff0",
    "khaki": "f0e68c",
    "lavender": "e6e6fa",
    "lavenderblush": "fff0f5",
    "lawngreen": "7cfc00",
    "lemonchiffon": "fffacd",
    "lightblue": "add8e6",
    "lightcoral": "f08080",
    "lightcyan": "e0ffff",
    "lightgoldenrodyellow": "fafad2",
    "lightgray": "d3d3d3",
    "lightgreen": "90ee90",
    "lightgrey": "d3d3d3",
    "lightpink": "ffb6c1",
    "lightsalmon": "ffa07a",
    "lightseagreen": "20b2aa",
    "lightskyblue": "87cefa",
    "lightslategray": "778899",
    "lightslategrey": "778899",
    "lightsteelblue": "b0c4de",
    "lightyellow": "ffffe0",
    "lime": "00ff00",
    "limegreen": "32cd32",
    "linen": "faf0e6",
    "magenta": "ff00ff",
    "maroon": "800000",
    "mediumaquamarine": "66cdaa",
    "mediumblue": "0000cd",
    "mediumorchid": "ba55d3",
    "mediumpurple": "9370db",
    "mediumseagreen": "3cb371",
    "mediumslateblue": "7b68ee",
    "mediumspringgreen": "00fa9a",
    "mediumturquoise": "48d1cc",
    "mediumvioletred": "c71585",
    "midnightblue": "191970",
    "mintcream": "f5fffa",
    "mistyrose": "ffe4e1",
    "moccasin": "ffe4b5",
    "navajowhite": "ffdead",
    "navy": "000080",
    "oldlace": "fdf5e6",
    "olive": "808000",
    "olivedrab": "6b8e23",
    "orange": "ffa500",
    "orangered": "ff4500",
    "orchid": "da70d6",
    "palegoldenrod": "eee8aa",
    "palegreen": "98fb98",
    "paleturquoise": "afeeee",
    "palevioletred": "db7093",
    "papayawhip": "ffefd5",
    "peachpuff": "ffdab9",
    "peru": "cd853f",
    "pink": "ffc0cb",
    "plum": "dda0dd",
    "powderblue": "b0e0e6",
    "purple": "800080",
    "rebeccapurple": "663399",
    "red": "ff0000",
    "rosybrown": "bc8f8f",
    "royalblue": "4169e1",
    "saddlebrown": "8b4513",
    "salmon": "fa8072",
    "sandybrown": "f4a460",
    "seagreen": "2e8b57",
    "seashell": "fff5ee",
    "sienna": "a0522d",
    "silver": "c0c0c0",
    "skyblue": "87ceeb",
    "slateblue": "6a5acd",
    "slategray": "708090",
    "slategrey": "708090",
    "snow": "fffafa",
    "springgreen": "00ff7f",
    "steelblue": "4682b4",
    "tan": "d2b48c",
    "teal": "008080",
    "thistle": "d8bfd8",
    "tomato": "ff6347",
    "turquoise": "40e0d0",
    "violet": "ee82ee",
    "wheat": "f5deb3",
    "white": "ffffff",
    "whitesmoke": "f5f5f5",
    "yellow": "ffff00",
    "yellowgreen": "9acd32",
}
