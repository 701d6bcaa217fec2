"""Parse style property values and extract typed data from them.

```python
from stylekit import StyleProperty

StyleProperty.parse("1px 2px").as_rect()
StyleProperty.parse("#ff0000").as_color()
```
"""
from stylekit.colors import Color, parse_hex_color, parse_named_color
from stylekit.errors import InvalidPropertyValue
from stylekit.geometry import Length, Rect
from stylekit.numeric import NumericValue
from stylekit.property import StyleProperty, Tokens, TokenStream

__version__ = "0.1.0"

__all__ = [
    "Color",
    "InvalidPropertyValue",
    "Length",
    "NumericValue",
    "Rect",
    "StyleProperty",
    "TokenStream",
    "Tokens",
    "parse_hex_color",
    "parse_named_color",
]
