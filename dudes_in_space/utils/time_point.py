"""A time point counted in nanoseconds from zero."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

_MAX_NANOS = 2**64 - 1


def _to_nanos(duration: timedelta) -> int:
    return ((duration.days * 86400 + duration.seconds) * 10**6 + duration.microseconds) * 1000


@dataclass
class StaticTimePoint:
    """A point in simulated time; nanoseconds fit in 64 bits (about 600 years)."""

    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos <= _MAX_NANOS:
            raise ValueError(f"time point {self.nanos!r} is outside the 64-bit range")

    def __iadd__(self, duration: timedelta) -> "StaticTimePoint":
        nanos = _to_nanos(duration)
        if nanos < 0:
            raise ValueError("cannot advance a time point by a negative duration")
        if self.nanos + nanos > _MAX_NANOS:
            raise OverflowError("time point overflows 64 bits of nanoseconds")
        self.nanos += nanos
        return self

    def duration_since(self, other: "StaticTimePoint") -> timedelta:
        """Time elapsed from ``other`` to this point."""
        if self.nanos < other.nanos:
            raise ValueError("other time point is later than this one")
        return timedelta(microseconds=(self.nanos - other.nanos) / 1000)