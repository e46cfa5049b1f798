"""Linear RGB colours with floating point components."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


def _to_byte(component: float) -> int:
    if math.isnan(component):
        return 0
    return int(min(max(component * 255.0, 0.0), 255.0))


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB colour; components are nominally in `[0, 1]` but may exceed it."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: Color | float) -> Color:
        return self.__mul__(other)

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def linear_to_gamma(self) -> Color:
        """Apply a gamma of 2; negative components become NaN."""
        return Color(*(math.sqrt(c) if c >= 0.0 else math.nan for c in self))

    def to_u8(self) -> tuple[int, int, int]:
        """Scale to 0..255, clamping and truncating; NaN maps to 0."""
        return (_to_byte(self.r), _to_byte(self.g), _to_byte(self.b))