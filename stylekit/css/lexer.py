""" CSS LEXING
https://www.w3.org/TR/css-syntax-3/#tokenizing-and-parsing

Turns raw property text into primitive lexical tokens. Lexical errors do not stop
tokenizing: they are recorded on `Lexer.errors` and the best-effort token is
returned, as CSS Syntax Level 3 prescribes. Callers decide whether an error is
fatal. Reaching the end of input inside a string, comment, url or escape only
ends that token and is recorded on `Lexer.warnings` instead.

References:
    - [tokenization](https://www.w3.org/TR/css-syntax-3/#tokenization)
    - [numbers](https://www.w3.org/TR/css-syntax-3/#consume-number)
    - [escapes](https://www.w3.org/TR/css-syntax-3/#consume-escaped-code-point)
"""

from __future__ import annotations
import re
from stylekit.css.tokens import *
from stylekit.css.tokens import NumericType

REPLACEMENT_CHAR = '\uFFFD'
DIGITS = '0123456789'
HEX_DIGITS = '0123456789abcdefABCDEF'
QUOTES = ('"', "'")
SIGNS = ('+', '-')

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current.isalpha()

    @staticmethod
    def non_ascii(current: str | None) -> bool:
        return current is not None and ord(current) >= 0x80

    @staticmethod
    def ident_start(current: str | None) -> bool:
        return current is not None and (Check.letter(current) or Check.non_ascii(current) or current == "_")

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and current in DIGITS

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current in '\t\n '

    @staticmethod
    def hex(current: str | None) -> bool:
        return current is not None and current in HEX_DIGITS

    @staticmethod
    def ident(current: str | None) -> bool:
        return Check.ident_start(current) or Check.digit(current) or current == "-"

    @staticmethod
    def escape(current: str | None, next: str | None) -> bool:
        return current == "\\" and next != "\n"

    @staticmethod
    def non_printable(current: str | None) -> bool:
        if current is None:
            return False
        o = ord(current)
        return o <= 0x08 or o == 0x0B or 0x0E <= o <= 0x1F or o == 0x7F

    @staticmethod
    def starts_with_ident(first: str | None, second: str | None, third: str | None) -> bool:
        if first == "-":
            return Check.ident_start(second) or second == "-" or Check.escape(second, third)
        elif first == "\\":
            return Check.escape(first, second)
        return Check.ident_start(first)

    @staticmethod
    def starts_with_number(first: str | None, second: str | None, third: str | None) -> bool:
        if first in SIGNS:
            if Check.digit(second):
                return True
            return second == "." and Check.digit(third)
        elif first == ".":
            return Check.digit(second)
        return Check.digit(first)


RETURNS = re.compile("\r\n|\f|\r")
class Lexer:
    def __init__(self, source: str) -> None:
        self.source: str = RETURNS.sub("\n", source).replace('\u0000', REPLACEMENT_CHAR)
        self.index = 0
        self.errors: list[ParseError] = []
        # Input ending inside a string, comment, url or escape: the token is still complete
        self.warnings: list[ParseError] = []

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        next = self.consume()
        if isinstance(next, EOF):
            raise StopIteration
        return next

    def process(self) -> list[Token]:
        """Tokenizes the entire remaining source at once."""
        return [token for token in self]

    def peek(self, amount: int = 1) -> str | None:
        """The code point `amount` positions ahead without consuming it."""
        index = self.index + amount - 1
        if index < len(self.source):
            return self.source[index]
        return None

    def next(self) -> str | None:
        if self.index < len(self.source):
            self.index += 1
            return self.source[self.index - 1]
        return None

    def reconsume(self):
        self.index -= 1

    def skip(self, amount: int = 1):
        self.index = min(self.index + amount, len(self.source))

    def error(self, error: ParseError):
        self.errors.append(error)

    def warn(self, error: ParseError):
        self.warnings.append(error)

    def _consume_comment_(self) -> Comment:
        # Leading `/` is consumed, `*` is next
        self.skip()
        start = self.index
        end = self.source.find("*/", start)
        if end == -1:
            self.warn(ParseError("Comment not closed"))
            self.index = len(self.source)
            return Comment(f"/*{self.source[start:]}")
        self.index = end + 2
        return Comment(f"/*{self.source[start:end]}*/")

    def _consume_whitespace_(self) -> Whitespace:
        start = self.index - 1
        while Check.whitespace(self.peek()):
            self.skip()
        return Whitespace(self.source[start:self.index])

    def _consume_string_(self, ending: str) -> String | BadString:
        raw = ''
        while True:
            next = self.next()
            if next is None:
                self.warn(ParseError("String was not closed"))
                return String(raw)
            elif next == ending:
                return String(raw)
            elif next == "\n":
                self.error(ParseError("String literal not closed before newline"))
                self.reconsume()
                return BadString(raw)
            elif next == "\\":
                if self.peek() is None:
                    continue
                elif self.peek() == "\n":
                    self.skip()
                else:
                    raw += self._consume_escape_()
            else:
                raw += next

    def _consume_escape_(self) -> str:
        """Consume the code points following a `\\` and return the escaped code point."""
        next = self.next()
        if next is None:
            self.warn(ParseError("Escape at end of input"))
            return REPLACEMENT_CHAR

        if Check.hex(next):
            digits = next
            while Check.hex(self.peek()) and len(digits) < 6:
                digits += self.next()
            if Check.whitespace(self.peek()):
                self.skip()
            code = int(digits, 16)
            if code == 0 or 0xD800 <= code <= 0xDFFF or code > 0x10FFFF:
                return REPLACEMENT_CHAR
            return chr(code)
        return next

    def _consume_ident_(self) -> str:
        result = ''
        while (next := self.next()) is not None:
            if Check.ident(next):
                result += next
            elif Check.escape(next, self.peek()):
                result += self._consume_escape_()
            else:
                self.reconsume()
                break
        return result

    def _consume_hash_(self) -> Hash | Delim:
        if Check.ident(self.peek()) or Check.escape(self.peek(), self.peek(2)):
            type = "id" if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)) else "unrestricted"
            return Hash(self._consume_ident_(), type=type)
        return Delim("#")

    def _consume_number_(self) -> tuple[float, NumericType, str]:
        """Consume a number from the code points. Returning a numeric value, a type
        of either integer or number, and the source text of the number.
        """
        _type: NumericType = 'integer'
        start = self.index
        if self.peek() in SIGNS:
            self.skip()

        while Check.digit(self.peek()):
            self.skip()

        if self.peek() == "." and Check.digit(self.peek(2)):
            _type = "number"
            self.skip(2)
            while Check.digit(self.peek()):
                self.skip()

        if self.peek() in ('e', 'E'):
            exponent = 0
            if Check.digit(self.peek(2)):
                exponent = 2
            elif self.peek(2) in SIGNS and Check.digit(self.peek(3)):
                exponent = 3
            if exponent:
                _type = "number"
                self.skip(exponent)
                while Check.digit(self.peek()):
                    self.skip()

        raw = self.source[start:self.index]
        return float(raw), _type, raw

    def _consume_numeric_(self) -> Number | Percentage | Dimension:
        """Consume code points a produce a Number, Percentage, or Dimension token."""
        value, _type, raw = self._consume_number_()
        if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
            return Dimension(value, _type, self._consume_ident_(), raw)
        elif self.peek() == "%":
            self.skip()
            return Percentage(value, _type, raw)
        return Number(value, _type, raw)

    def _consume_remnant_bad_url_(self):
        while (next := self.next()) is not None and next != ")":
            if Check.escape(next, self.peek()):
                self._consume_escape_()

    def _consume_url_(self) -> Url | BadUrl:
        raw = ''
        while Check.whitespace(self.peek()):
            self.skip()

        while True:
            next = self.next()
            if next == ")":
                return Url(raw)
            elif next is None:
                self.warn(ParseError("Url not closed"))
                return Url(raw)
            elif Check.whitespace(next):
                while Check.whitespace(self.peek()):
                    self.skip()
                if self.peek() == ")":
                    self.skip()
                    return Url(raw)
                elif self.peek() is None:
                    self.warn(ParseError("Url not closed"))
                    return Url(raw)
                self.error(ParseError("Whitespace inside of unquoted url"))
                self._consume_remnant_bad_url_()
                return BadUrl(raw)
            elif next in '"\'(' or Check.non_printable(next):
                self.error(ParseError(f"Unexpected {next!r} in url"))
                self._consume_remnant_bad_url_()
                return BadUrl(raw)
            elif next == "\\":
                if not Check.escape(next, self.peek()):
                    self.error(ParseError("Invalid backslash in url"))
                    self._consume_remnant_bad_url_()
                    return BadUrl(raw)
                raw += self._consume_escape_()
            else:
                raw += next

    def _consume_ident_like_(self) -> Ident | Function | Url | BadUrl:
        ident = self._consume_ident_()
        if ident.lower() == "url" and self.peek() == "(":
            self.skip()
            while Check.whitespace(self.peek()) and Check.whitespace(self.peek(2)):
                self.skip()
            if self.peek() in QUOTES or (Check.whitespace(self.peek()) and self.peek(2) in QUOTES):
                return Function(ident)
            return self._consume_url_()
        elif self.peek() == "(":
            self.skip()
            return Function(ident)
        return Ident(ident)

    def consume(self) -> Token:
        """Consume code points and return the next token."""
        next = self.next()
        if next is None:
            return EOF()
        elif next == "/" and self.peek() == "*":
            return self._consume_comment_()
        elif Check.whitespace(next):
            return self._consume_whitespace_()
        elif next in QUOTES:
            return self._consume_string_(next)
        elif next == '#':
            return self._consume_hash_()
        elif next == "+":
            if Check.starts_with_number(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_()
            return Delim(next)
        elif next == "-":
            if Check.starts_with_number(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_()
            elif self.peek() == "-" and self.peek(2) == ">":
                self.skip(2)
                return CDC('-->')
            elif Check.starts_with_ident(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_ident_like_()
            return Delim(next)
        elif next == ".":
            if Check.starts_with_number(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_()
            return Delim(next)
        elif next == "<":
            if self.source.startswith("!--", self.index):
                self.skip(3)
                return CDO('<!--')
            return Delim(next)
        elif next == "@":
            if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
                return AtKeyword(self._consume_ident_())
            return Delim(next)
        elif next == "\\":
            if Check.escape(next, self.peek()):
                self.reconsume()
                return self._consume_ident_like_()
            self.error(ParseError("Invalid backslash"))
            return Delim(next)
        elif Check.digit(next):
            self.reconsume()
            return self._consume_numeric_()
        elif Check.ident_start(next):
            self.reconsume()
            return self._consume_ident_like_()
        elif next in "()[]{}":
            return Bracket(next)
        elif next == ",":
            return Comma(next)
        elif next == ":":
            return Colon(next)
        elif next == ";":
            return Semicolon(next)
        return Delim(next)

class ParseError(Exception): pass
