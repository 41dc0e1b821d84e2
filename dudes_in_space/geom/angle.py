"""Angles and angle differences in radians."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import Any

from dudes_in_space.geom.noneg import deg_to_rad, rad_to_deg
from dudes_in_space.utils.ranges import Range

_FULL_TURN = math.pi * 2.0


def normalize_radians(value: float) -> float:
    """Map an angle into ``[0, 2*pi)`` (Euclidean remainder)."""
    r = math.fmod(value, _FULL_TURN)
    if r < 0.0:
        r += _FULL_TURN
    return r


def normalize_delta_radians(value: float) -> float:
    """Map an angle difference into ``(-2*pi, 2*pi)`` keeping its sign."""
    return math.fmod(value, _FULL_TURN)


@dataclass(frozen=True)
class Angle:
    """An absolute angle stored in radians."""

    value: float

    @classmethod
    def from_radians(cls, value: float) -> "Angle":
        return cls(value)

    @classmethod
    def from_degrees(cls, value: float) -> "Angle":
        return cls(deg_to_rad(value))

    def radians(self) -> float:
        """Radians in ``[0, 2*pi)``."""
        return normalize_radians(self.value)

    def degrees(self) -> float:
        """Degrees in ``[0, 360)``."""
        return normalize_radians(self.value) / math.pi * 180.0

    def cos(self) -> float:
        return math.cos(self.value)

    def sin(self) -> float:
        return math.sin(self.value)

    def signed_distance(self, other: "Angle") -> "DeltaAngle":
        """Shortest signed difference ``self - other``."""
        diff = normalize_radians(self.value) - normalize_radians(other.value)
        if abs(diff) > math.pi:
            diff = diff - _FULL_TURN if diff >= 0.0 else diff + _FULL_TURN
        return DeltaAngle(diff)

    def is_contained_in(self, bounds: Range) -> bool:
        """Check whether this angle lies within a range of angles."""
        if bounds.end - bounds.start < DeltaAngle.from_radians(math.pi):
            return (not self.signed_distance(bounds.start).is_neg()) and self.signed_distance(
                bounds.end
            ).is_neg()
        return (not self.signed_distance(bounds.start).is_neg()) or self.signed_distance(
            bounds.end
        ).is_neg()

    def __add__(self, other: Any) -> "Angle":
        if not isinstance(other, DeltaAngle):
            return NotImplemented
        return Angle(self.value + other.value)

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, DeltaAngle):
            return Angle(self.value - other.value)
        if isinstance(other, Angle):
            return DeltaAngle(self.value - other.value)
        return NotImplemented

    def __str__(self) -> str:
        return f"{rad_to_deg(self.value)}°"


@total_ordering
@dataclass(frozen=True)
class DeltaAngle:
    """A difference between two angles, in radians."""

    value: float

    @classmethod
    def from_radians(cls, value: float) -> "DeltaAngle":
        return cls(value)

    @classmethod
    def from_degrees(cls, value: float) -> "DeltaAngle":
        return cls(deg_to_rad(value))

    def radians(self) -> float:
        """Radians in ``(-2*pi, 2*pi)``."""
        return normalize_delta_radians(self.value)

    def degrees(self) -> float:
        return normalize_delta_radians(self.value) / math.pi * 180.0

    def is_neg(self) -> bool:
        return self.value < 0

    def __mul__(self, factor: Any) -> "DeltaAngle":
        return DeltaAngle(self.value * factor)

    def __truediv__(self, divisor: Any) -> "DeltaAngle":
        return DeltaAngle(self.value / divisor)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, DeltaAngle):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return f"{rad_to_deg(self.value)} Δ°"