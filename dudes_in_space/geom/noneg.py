"""Non-negative number wrapper and small numeric helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Tuple, Union

from dudes_in_space.utils.ranges import RangeInclusive


class NegError(ValueError):
    """Raised when a negative value is wrapped as non-negative."""

    def __init__(self, original_value: Any) -> None:
        super().__init__(f"value {original_value!r} is negative")
        self.original_value = original_value


def is_neg(value: Any) -> bool:
    """Return True if the value is below zero."""
    return value < 0


def sqr(value: Any) -> Any:
    """Return the square of a value."""
    return value * value


def deg_to_rad(value: float) -> float:
    """Convert degrees to radians."""
    return value / 180.0 * math.pi


def rad_to_deg(value: float) -> float:
    """Convert radians to degrees."""
    return value / math.pi * 180.0


def clamp(value: Any, bounds: Union[RangeInclusive, Tuple[Any, Any]]) -> Any:
    """Clamp a value into a closed range given as RangeInclusive or (lo, hi)."""
    if isinstance(bounds, RangeInclusive):
        lo, hi = bounds.start, bounds.end
    else:
        lo, hi = bounds
    if not lo <= hi:
        raise ValueError(f"invalid clamp bounds: {lo!r} > {hi!r}")
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


@total_ordering
@dataclass(frozen=True)
class NoNeg:
    """A number that can never be negative."""

    value: Any

    def __post_init__(self) -> None:
        if is_neg(self.value):
            raise NegError(self.value)

    @classmethod
    def wrap(cls, value: Any) -> "NoNeg":
        """Wrap a value, raising NegError if it is negative."""
        return cls(value)

    def unwrap(self) -> Any:
        """Return the plain value."""
        return self.value

    def sqrt(self) -> "NoNeg":
        return NoNeg(math.sqrt(self.value))

    def floor(self) -> "NoNeg":
        return NoNeg(type(self.value)(math.floor(self.value)))

    def limited_sub(self, rhs: "NoNeg") -> "NoNeg":
        """Subtract, saturating at zero."""
        diff = self.value - rhs.value
        if is_neg(diff):
            return NoNeg(type(diff)(0))
        return NoNeg(diff)

    def __add__(self, other: Any) -> "NoNeg":
        if not isinstance(other, NoNeg):
            return NotImplemented
        return NoNeg(self.value + other.value)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, NoNeg):
            return NotImplemented
        return self.value - other.value

    def __mul__(self, other: Any) -> "NoNeg":
        if not isinstance(other, NoNeg):
            return NotImplemented
        return NoNeg(self.value * other.value)

    def __truediv__(self, other: Any) -> "NoNeg":
        if not isinstance(other, NoNeg):
            return NotImplemented
        return NoNeg(self.value / other.value)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, NoNeg):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return str(self.value)


def noneg_float(value: float) -> NoNeg:
    """Build a NoNeg from a float that must be non-negative."""
    if not value >= 0.0:
        raise ValueError(f"value {value!r} must be non-negative")
    return NoNeg(float(value))


def abs_as_noneg(value: Any) -> NoNeg:
    """Return the absolute value wrapped as NoNeg."""
    return NoNeg(abs(value))