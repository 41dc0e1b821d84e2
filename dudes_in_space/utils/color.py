"""ARGB colours with floating-point channels."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Callable

_Channel = Callable[[float], float]


@dataclass(frozen=True)
class Color:
    """A colour with alpha, red, green and blue channels, nominally in ``[0, 1]``."""

    a: float
    r: float
    g: float
    b: float

    def with_a(self, a: float) -> "Color":
        return replace(self, a=a)

    def with_r(self, r: float) -> "Color":
        return replace(self, r=r)

    def with_g(self, g: float) -> "Color":
        return replace(self, g=g)

    def with_b(self, b: float) -> "Color":
        return replace(self, b=b)

    def map_a(self, func: _Channel) -> "Color":
        return replace(self, a=func(self.a))

    def map_r(self, func: _Channel) -> "Color":
        return replace(self, r=func(self.r))

    def map_g(self, func: _Channel) -> "Color":
        return replace(self, g=func(self.g))

    def map_b(self, func: _Channel) -> "Color":
        return replace(self, b=func(self.b))

    @classmethod
    def from_rgb24(cls, r: int, g: int, b: int) -> "Color":
        """Build an opaque colour from 8-bit channels."""
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"channel value {channel!r} is outside 0..=255")
        return cls(1.0, r / 256.0, g / 256.0, b / 256.0)

    @classmethod
    def from_hsv(cls, a: float, h: float, s: float, v: float) -> "Color":
        """Build a colour from hue, saturation and value, each in ``[0, 1]``."""
        scaled = h * 6.0
        i = int(math.floor(scaled)) if scaled > 0 else 0
        f = scaled - i
        p = v * (1.0 - s)
        q = v * (1.0 - f * s)
        t = v * (1.0 - (1.0 - f) * s)
        sectors = (
            (v, t, p),
            (q, v, p),
            (p, v, t),
            (p, q, v),
            (t, p, v),
            (v, p, q),
        )
        r, g, b = sectors[i % 6]
        return cls(a, r, g, b)