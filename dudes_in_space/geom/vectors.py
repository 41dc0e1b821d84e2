"""Two-dimensional points, sizes, vectors and complex numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator

from dudes_in_space.geom.angle import Angle


@dataclass(frozen=True)
class Point:
    """A position in the plane."""

    x: Any
    y: Any

    @classmethod
    def origin(cls) -> "Point":
        """The point at (0, 0)."""
        return cls(0.0, 0.0)

    def __sub__(self, other: Any) -> "Vector":
        if not isinstance(other, Point):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    w: Any
    h: Any

    def __truediv__(self, divisor: Any) -> "Size":
        return Size(self.w / divisor, self.h / divisor)

    def __iter__(self) -> Iterator[Any]:
        yield self.w
        yield self.h


@dataclass(frozen=True)
class Vector:
    """A displacement in the plane."""

    x: Any
    y: Any

    def __add__(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def manhattan_length(self) -> Any:
        """Sum of absolute components."""
        return abs(self.x) + abs(self.y)

    def length_sqr(self) -> Any:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def angle(self) -> Angle:
        """Direction of the vector measured from the x axis."""
        return Angle.from_radians(math.atan2(self.y, self.x))


@dataclass(frozen=True)
class Complex:
    """A complex number with real and imaginary parts."""

    real: Any
    imag: Any

    @classmethod
    def from_cartesian(cls, real: Any, imag: Any) -> "Complex":
        return cls(real, imag)

    @classmethod
    def from_polar(cls, r: Any, angle: Angle) -> "Complex":
        """Build from a magnitude and an angle."""
        return cls(angle.cos() * r, angle.sin() * r)

    def into_cartesian(self) -> Point:
        """The number as a point (real, imag)."""
        return Point(self.real, self.imag)

    def __add__(self, other: Any) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)