from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Literal

from stylekit.numeric import format_float

__all__ = ["Length", "Rect", "LengthKind"]

LengthKind = Literal['px', 'percent', 'auto', 'undefined']

@dataclass(frozen=True, slots=True)
class Length:
    """A length value: absolute pixels, a percentage, `auto` or `undefined`.

    `value` is only meaningful for `px` and `percent`.
    """
    kind: LengthKind
    value: float = 0.0

    AUTO: ClassVar[Length]
    UNDEFINED: ClassVar[Length]

    @staticmethod
    def px(value: float) -> Length:
        return Length('px', value)

    @staticmethod
    def percent(value: float) -> Length:
        return Length('percent', value)

    @property
    def is_auto(self) -> bool:
        return self.kind == 'auto'

    def __str__(self) -> str:
        if self.kind == 'px':
            return f"{format_float(self.value)}px"
        elif self.kind == 'percent':
            return f"{format_float(self.value)}%"
        return self.kind

Length.AUTO = Length('auto')
Length.UNDEFINED = Length('undefined')

@dataclass(frozen=True, slots=True)
class Rect:
    """Four box edges, each a `Length`."""
    left: Length = Length.UNDEFINED
    right: Length = Length.UNDEFINED
    top: Length = Length.UNDEFINED
    bottom: Length = Length.UNDEFINED

    @staticmethod
    def all(value: Length) -> Rect:
        return Rect(value, value, value, value)

    @property
    def points(self) -> tuple[Length, Length, Length, Length]:
        """Top, Right, Bottom, and Left respectively."""
        return (self.top, self.right, self.bottom, self.left)

    def to_rect_map(self, prefix: str) -> dict[str, Length]:
        """Split the rect into one scalar entry per edge, keyed `<prefix>-<edge>`.

        ```python
        Rect.all(Length.px(1)).to_rect_map("margin")
        # {'margin-left': ..., 'margin-right': ..., 'margin-top': ..., 'margin-bottom': ...}
        ```
        """
        return {
            f"{prefix}-left": self.left,
            f"{prefix}-right": self.right,
            f"{prefix}-top": self.top,
            f"{prefix}-bottom": self.bottom,
        }

    def __str__(self) -> str:
        return " ".join(str(point) for point in self.points)
