"""
CSS-like lexical layer used to split a property value into primitive tokens.

References:
    - [syntax](https://www.w3.org/TR/css-syntax-3/)
    - [values](https://developer.mozilla.org/en-US/docs/Learn/CSS/Building_blocks/Values_and_units)

value => numbers, percentages, dimensions, idents, hashes, strings, `,` and `/`
"""
from stylekit.css.lexer import Lexer, ParseError

__all__ = ["Lexer", "ParseError"]
