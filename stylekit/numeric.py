"""Canonical 32-bit float values.

`NumericValue` stores the raw float32 byte pattern so that tokens holding numbers
get exact equality and a stable hash. Two values are equal iff their bits are
equal: ``-0.0`` and ``0.0`` differ, and NaNs compare by payload.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import SupportsFloat

import numpy as np

__all__ = ["NumericValue", "to_float32", "format_float"]

FLOAT32 = np.dtype("<f4")


def to_float32(value: SupportsFloat) -> np.float32:
    """Narrow `value` to float32. Out of range values become signed infinity."""
    if isinstance(value, np.float32):
        return value
    with np.errstate(over="ignore"):
        return np.float32(float(value))


def format_float(value: SupportsFloat) -> str:
    """Shortest decimal text that reads back as the same float32, `10` for ``10.0``."""
    return np.format_float_positional(to_float32(value), trim="-")


@dataclass(frozen=True, slots=True)
class NumericValue:
    raw: bytes

    def __init__(self, value: SupportsFloat | bytes = 0.0) -> None:
        if isinstance(value, bytes):
            if len(value) != FLOAT32.itemsize:
                raise ValueError(f"Expected {FLOAT32.itemsize} bytes, got {len(value)}")
            raw = value
        else:
            raw = to_float32(value).tobytes()
        object.__setattr__(self, "raw", raw)

    @staticmethod
    def from_float(value: SupportsFloat) -> NumericValue:
        return NumericValue(value)

    @staticmethod
    def from_bits(bits: int) -> NumericValue:
        return NumericValue(bits.to_bytes(4, "little"))

    @property
    def bits(self) -> int:
        return int.from_bytes(self.raw, "little")

    def to_float32(self) -> np.float32:
        return np.frombuffer(self.raw, dtype=FLOAT32)[0]

    def to_float(self) -> float:
        """Widen to a Python float. Signaling NaNs come back quiet, so only
        `to_float32` is bit exact for every NaN payload.
        """
        return float(self.to_float32())

    def __float__(self) -> float:
        return self.to_float()

    def __repr__(self) -> str:
        return f"NumericValue({format_float(self.to_float32())})"

    def __str__(self) -> str:
        return format_float(self.to_float32())
