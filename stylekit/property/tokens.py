"""Domain tokens of a property value and the adapter from lexical tokens."""
from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar

from stylekit.css import tokens as css
from stylekit.errors import InvalidPropertyValue
from stylekit.numeric import NumericValue

__all__ = [
    "StyleToken",
    "Percentage",
    "Dimension",
    "Number",
    "Identifier",
    "HashLiteral",
    "QuotedString",
    "Slash",
    "Comma",
    "from_lexical",
]

class StyleToken:
    """One unit of a parsed property value."""
    is_delimiter: ClassVar[bool] = False

@dataclass(frozen=True, slots=True)
class Percentage(StyleToken):
    """A percent value, like `100%` or `73.23%`. Stored as written, not as a fraction."""
    value: NumericValue

    def __str__(self) -> str:
        return f"{self.value}%"

@dataclass(frozen=True, slots=True)
class Dimension(StyleToken):
    """A length, like `10px` or `35em`. Every unit is treated as pixels."""
    value: NumericValue

    def __str__(self) -> str:
        return f"{self.value}px"

@dataclass(frozen=True, slots=True)
class Number(StyleToken):
    """A plain numeric value, like `31.1` or `43`."""
    value: NumericValue

    def __str__(self) -> str:
        return str(self.value)

@dataclass(frozen=True, slots=True)
class Identifier(StyleToken):
    """A plain identifier, like `none` or `center`."""
    name: str

    def __str__(self) -> str:
        return self.name

@dataclass(frozen=True, slots=True)
class HashLiteral(StyleToken):
    """The text following a `#`, like `001122`."""
    code: str

    def __str__(self) -> str:
        return f"#{self.code}"

@dataclass(frozen=True, slots=True)
class QuotedString(StyleToken):
    text: str

    def __str__(self) -> str:
        return f'"{self.text}"'

@dataclass(frozen=True, slots=True)
class Slash(StyleToken):
    is_delimiter: ClassVar[bool] = True

    def __str__(self) -> str:
        return "/"

@dataclass(frozen=True, slots=True)
class Comma(StyleToken):
    is_delimiter: ClassVar[bool] = True

    def __str__(self) -> str:
        return ","


def from_lexical(token: css.Token) -> StyleToken:
    """Convert one lexical token into a `StyleToken`.

    Raises:
        InvalidPropertyValue: The token kind has no property value counterpart.
    """
    if isinstance(token, css.Ident):
        return Identifier(token.raw)
    elif isinstance(token, css.Hash):
        return HashLiteral(token.raw)
    elif isinstance(token, css.String):
        return QuotedString(token.raw)
    # Dimension and Percentage are Number subclasses
    elif isinstance(token, css.Dimension):
        return Dimension(NumericValue(token.value))
    elif isinstance(token, css.Percentage):
        return Percentage(NumericValue(token.unit_value * 100.0))
    elif isinstance(token, css.Number):
        return Number(NumericValue(token.value))
    elif isinstance(token, css.Comma):
        return Comma()
    elif type(token) is css.Delim and token.raw == "/":
        return Slash()
    raise InvalidPropertyValue(f"Invalid token: {token!r}")
