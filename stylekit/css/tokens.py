"""Primitive lexical tokens produced by `stylekit.css.lexer.Lexer`.

https://www.w3.org/TR/css-syntax-3/#tokenization
"""
from __future__ import annotations
from typing import Literal

__all__ = [
    "Token",
    "Ident",
    "Function",
    "AtKeyword",
    "Hash",
    "String",
    "BadString",
    "Url",
    "BadUrl",

    "Delim",
    "Colon",
    "Semicolon",
    "Comma",

    "Bracket",

    "Number",
    "Percentage",
    "Dimension",

    "Comment",
    "Whitespace",
    "CDC",
    "CDO",
    "EOF"
]

NumericType = Literal['integer', 'number']

class Token:
    raw: str
    def __init__(self, raw: str = ''):
        self.raw = raw

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r})'

    def __str__(self) -> str:
        return self.raw

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.raw == other.raw

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.raw))

class Ident(Token): pass
class Function(Token):
    def __str__(self) -> str:
        return f"{self.raw}("
class AtKeyword(Token):
    def __str__(self) -> str:
        return f"@{self.raw}"
class Hash(Token):
    def __init__(self, raw: str = '', *, type: Literal['id', 'unrestricted'] = 'unrestricted'):
        self.type = type
        super().__init__(raw)
    def __repr__(self) -> str:
        return f'Hash({"id, " if self.type == "id" else ""}{self.raw!r})'
    def __str__(self) -> str:
        return f"#{self.raw}"

class String(Token):
    def __str__(self) -> str:
        return f'"{self.raw}"'
class BadString(Token): pass
class Url(Token):
    def __str__(self) -> str:
        return f"url({self.raw})"
class BadUrl(Token): pass

class Delim(Token):
    def __init__(self, raw: str):
        if len(raw) > 1:
            raise ValueError("Delimiters may only be one codepoint long")
        super().__init__(raw)

class Colon(Delim): pass
class Semicolon(Delim): pass
class Comma(Delim): pass

BRACKETS = {"(": ")", "[": "]", "{": "}"}

class Bracket(Token):
    """One of `(`, `)`, `[`, `]`, `{` or `}`."""
    def __init__(self, raw: str):
        if raw not in "()[]{}" or len(raw) != 1:
            raise ValueError(f"Not a bracket: {raw!r}")
        super().__init__(raw)

    @property
    def opening(self) -> bool:
        return self.raw in BRACKETS

    @property
    def alt(self) -> str:
        """The matching bracket."""
        if self.opening:
            return BRACKETS[self.raw]
        return next(left for left, right in BRACKETS.items() if right == self.raw)

class Number(Token):
    value: float
    type: NumericType
    def __init__(self, value: float, type: NumericType, raw: str):
        self.value = value
        self.type = type
        super().__init__(raw)

    def __repr__(self) -> str:
        return f"Number({self.raw!r})"

class Percentage(Number):
    @property
    def unit_value(self) -> float:
        """The percentage as a fraction of one, `0.5` for `50%`."""
        return self.value / 100.0

    def __repr__(self) -> str:
        return f"Percentage({self.raw!r}%)"

    def __str__(self) -> str:
        return f"{self.raw}%"

class Dimension(Number):
    unit: str
    def __init__(self, value: float, type: NumericType, unit: str, raw: str):
        self.unit = unit
        super().__init__(value, type, raw)

    def __repr__(self) -> str:
        return f"Dimension({self.raw!r})"

    def __str__(self) -> str:
        return f"{self.raw}{self.unit}"

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other) and self.unit == other.unit

    def __hash__(self) -> int:
        return hash(("Dimension", self.raw, self.unit))

class Comment(Token):
    @property
    def text(self) -> str:
        return self.raw.removeprefix("/*").removesuffix("*/")

class Whitespace(Token): pass
class CDO(Token): pass
class CDC(Token): pass
class EOF(Token): pass
