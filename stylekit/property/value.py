"""Property values: token sequences, segmentation and typed extraction.

```python
prop = StyleProperty.parse("10px/1.4 sans")
stream = prop.as_stream()
stream.compound().as_length()  # Length('px', 10.0)
stream.compound().as_number()  # 1.4...
```
"""
from __future__ import annotations
from collections.abc import Iterator
from typing import SupportsIndex, overload

from stylekit.colors import Color, HexColorDecoder, NamedColorLookup, parse_hex_color, parse_named_color
from stylekit.css.lexer import Lexer
from stylekit.css.tokens import EOF, Comment, Whitespace
from stylekit.errors import InvalidPropertyValue
from stylekit.geometry import Length, Rect
from stylekit.property.tokens import (
    Dimension,
    HashLiteral,
    Identifier,
    Number,
    Percentage,
    QuotedString,
    StyleToken,
    from_lexical,
)
from stylekit.utils.logging import get_logger

__all__ = ["Tokens", "StyleProperty", "TokenStream", "AUTO", "UNDEFINED", "NONE"]

AUTO = "auto"
UNDEFINED = "undefined"
NONE = "none"

def token_length(token: StyleToken) -> Length | None:
    if isinstance(token, Percentage):
        return Length.percent(token.value.to_float())
    elif isinstance(token, Dimension):
        return Length.px(token.value.to_float())
    elif isinstance(token, Identifier) and token.name == AUTO:
        return Length.AUTO
    elif isinstance(token, Identifier) and token.name == UNDEFINED:
        return Length.UNDEFINED
    return None

def size_value(token: StyleToken) -> Length:
    if (length := token_length(token)) is None:
        raise InvalidPropertyValue(f"Can't treat `{token}` as size value")
    return length

class Tokens(tuple[StyleToken, ...]):
    """An immutable run of `StyleToken`s with typed accessors.

    A whole `StyleProperty` and every group cut from it by `TokenStream` share these
    accessors. Each one looks at the leading token(s) and raises
    `InvalidPropertyValue` on mismatch, except `as_identifier` which returns `None`.
    """

    @overload
    def __getitem__(self, index: SupportsIndex) -> StyleToken: ...
    @overload
    def __getitem__(self, index: slice) -> Tokens: ...
    def __getitem__(self, index):
        if isinstance(index, slice):
            return Tokens(super().__getitem__(index))
        return super().__getitem__(index)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"

    def to_text(self) -> str:
        """Render every token, separated by a single space.

        Tokens are space separated rather than concatenated so that `1px 2px` does not
        come back as `1px2px`, which would read as one dimension.
        """
        return " ".join(str(token) for token in self)

    def as_string(self) -> str:
        """The text of a leading quoted string."""
        if len(self) == 0:
            raise InvalidPropertyValue("Expected string literal, got nothing")
        token = self[0]
        if isinstance(token, QuotedString):
            return token.text
        raise InvalidPropertyValue(f"Expected string literal, got {token}")

    def as_identifier(self) -> str | None:
        """The first non empty identifier anywhere in the run, if there is one."""
        for token in self:
            if isinstance(token, Identifier) and token.name:
                return token.name
        return None

    def as_length(self) -> Length:
        """Percentages become `percent` lengths, dimensions become `px`, and the
        `auto` and `undefined` keywords map to their constants.
        """
        if len(self) == 0:
            raise InvalidPropertyValue("Expected length, found none")
        if (length := token_length(self[0])) is None:
            raise InvalidPropertyValue(f"Can't parse length from '{self[0]}'")
        return length

    def as_number(self) -> float:
        """The value of a leading percentage, dimension or number."""
        if len(self) == 0:
            raise InvalidPropertyValue("Expected number, found none")
        token = self[0]
        if isinstance(token, (Percentage, Dimension, Number)):
            return token.value.to_float()
        raise InvalidPropertyValue(f"Can't parse number from '{token}'")

    def as_optional_number(self) -> float | None:
        """Like `as_number`, but the `none` keyword is accepted and returns `None`.

        Useful for properties where either a numeric value or `none` is expected.
        Any other identifier is an error.
        """
        if len(self) == 0:
            raise InvalidPropertyValue("Expected optional number, found none")
        token = self[0]
        if isinstance(token, (Percentage, Dimension, Number)):
            return token.value.to_float()
        elif isinstance(token, Identifier) and token.name == NONE:
            return None
        raise InvalidPropertyValue(f"Can't parse optional number from {token}")

    def as_color(
        self,
        named: NamedColorLookup = parse_named_color,
        hex: HexColorDecoder = parse_hex_color,
    ) -> Color:
        """Resolve a leading identifier through `named` or a leading hash through `hex`.

        Only [named colors](https://developer.mozilla.org/en-US/docs/Web/CSS/named-color)
        and [hex colors](https://developer.mozilla.org/en-US/docs/Web/CSS/hex-color) are supported.
        """
        if len(self) == 0:
            raise InvalidPropertyValue("Expected color, got nothing")
        token = self[0]
        if isinstance(token, Identifier):
            if (color := named(token.name)) is None:
                raise InvalidPropertyValue(f"Unknown color name '{token.name}'")
            return color
        elif isinstance(token, HashLiteral):
            return hex(token.code)
        raise InvalidPropertyValue(f"Can't parse color from {token}")

    def as_rect(self) -> Rect:
        """Expand one to four lengths into a `Rect`, box shorthand style.

        One value is used for every edge. Two values are `top/bottom` and
        `left/right`. Three are `top`, `left/right` and `bottom`. Four are `top`,
        `right`, `bottom` and `left`.
        """
        match len(self):
            case 1:
                return Rect.all(size_value(self[0]))
            case 2:
                top_bottom = size_value(self[0])
                left_right = size_value(self[1])
                return Rect(left_right, left_right, top_bottom, top_bottom)
            case 3:
                top = size_value(self[0])
                left_right = size_value(self[1])
                bottom = size_value(self[2])
                return Rect(left_right, left_right, top, bottom)
            case 4:
                top = size_value(self[0])
                right = size_value(self[1])
                bottom = size_value(self[2])
                left = size_value(self[3])
                return Rect(left, right, top, bottom)
        raise InvalidPropertyValue(f"Can't extract rect from `{self.to_text()}`")

    def rect_map(self, prefix: str) -> dict[str, Length]:
        return self.as_rect().to_rect_map(prefix)


class StyleProperty(Tokens):
    """Every token of a single property value, in source order."""

    @classmethod
    def parse(cls, text: str, *, verbose: bool = False) -> StyleProperty:
        """Tokenize `text`. Whitespace and comments only separate values and are dropped.
        Input that ends inside a string or comment still parses, as if it were closed.

        Raises:
            InvalidPropertyValue: A lexical error, or a token that can't be part of a
                property value. Nothing is returned for a partially valid value.
        """
        logger = get_logger(f"{__name__}.{cls.__name__}", verbose=verbose)
        lexer = Lexer(text)
        values: list[StyleToken] = []
        while True:
            token = lexer.consume()
            if lexer.errors:
                logger.debug(f"Lexical error in `{text}`: {lexer.errors[0]}")
                raise InvalidPropertyValue(f"Can't parse `{text}`: {lexer.errors[0]}")
            if isinstance(token, EOF):
                break
            elif isinstance(token, (Whitespace, Comment)):
                continue

            try:
                values.append(from_lexical(token))
            except InvalidPropertyValue as error:
                logger.debug(f"Rejected token {token!r} in `{text}`")
                raise InvalidPropertyValue(
                    f"Can't parse `{text}` (invalid token `{token}`): {error.message}"
                ) from error

        for warning in lexer.warnings:
            logger.debug(f"Unterminated input in `{text}`: {warning}")
        logger.debug(f"Parsed `{text}` into {len(values)} tokens")
        return cls(values)

    from_str = parse

    def as_stream(self) -> TokenStream:
        return TokenStream(self)


class TokenStream:
    """Single pass cursor that cuts a `Tokens` run into delimiter separated groups.

    The offset only moves forward. Build a new stream to iterate again.
    """

    def __init__(self, tokens: Tokens) -> None:
        self.tokens = tokens
        self.offset = 0

    def __iter__(self) -> Iterator[Tokens]:
        while (group := self.compound()) is not None:
            yield group

    def single(self) -> Tokens | None:
        """The next token on its own. One delimiter directly after it is skipped."""
        if self.offset >= len(self.tokens):
            return None
        start = self.offset
        self.offset += 1
        if self.offset < len(self.tokens) and self.tokens[self.offset].is_delimiter:
            self.offset += 1
        return self.tokens[start:start + 1]

    def compound(self) -> Tokens | None:
        """Every token up to the next delimiter, or to the end. The delimiter is
        consumed but not returned.
        """
        if self.offset >= len(self.tokens):
            return None
        start = end = self.offset
        while self.offset < len(self.tokens):
            self.offset += 1
            end = self.offset
            if self.offset < len(self.tokens) and self.tokens[self.offset].is_delimiter:
                self.offset += 1
                break
        return self.tokens[start:end]
