from stylekit.property.tokens import (
    Comma,
    Dimension,
    HashLiteral,
    Identifier,
    Number,
    Percentage,
    QuotedString,
    Slash,
    StyleToken,
    from_lexical,
)
from stylekit.property.value import AUTO, NONE, UNDEFINED, StyleProperty, Tokens, TokenStream

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
    "Tokens",
    "StyleProperty",
    "TokenStream",
    "AUTO",
    "UNDEFINED",
    "NONE",
]
