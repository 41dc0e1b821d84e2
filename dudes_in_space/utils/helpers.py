"""Assorted numeric helpers: normalisation, energy transfer, durations."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, List, NamedTuple, Optional, Sequence, Union

from dudes_in_space.geom.noneg import NoNeg
from dudes_in_space.utils.ranges import Range, RangeInclusive

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000
_NS_PER_MIN = 60 * _NS_PER_S
_NS_PER_HOUR = 60 * _NS_PER_MIN
_NS_PER_DAY = 24 * _NS_PER_HOUR


class RequiredToBeInRangeError(ValueError):
    """Raised when a value lies outside the range it must be in."""

    def __init__(self, value: Any, bounds: Any) -> None:
        super().__init__(f"value {value!r} is not within {bounds!r}")
        self.value = value
        self.range = bounds


class EnergyTransfer(NamedTuple):
    source: NoNeg
    dst: NoNeg
    completely_drained: bool


class EnergyDrain(NamedTuple):
    source: NoNeg
    completely_drained: bool


def _as_noneg(value: Any) -> NoNeg:
    return value if isinstance(value, NoNeg) else NoNeg.wrap(value)


def normalize(values: Sequence[float]) -> List[float]:
    """Divide every value by the largest one."""
    if not values:
        raise ValueError("cannot normalize an empty sequence")
    top = max(values)
    return [x / top for x in values]


def normalize_opt(values: Sequence[Optional[float]]) -> List[Optional[float]]:
    """Divide every present value by the largest present one, keeping gaps."""
    present = [x for x in values if x is not None]
    if not present:
        raise ValueError("cannot normalize a sequence without values")
    top = max(present)
    return [None if x is None else x / top for x in values]


def transfer_energy(source: Any, dst: Any, delta_energy: Any, capacity: Any) -> EnergyTransfer:
    """Move up to ``delta_energy`` from source to dst without exceeding capacity."""
    source, dst = _as_noneg(source), _as_noneg(dst)
    delta, capacity = _as_noneg(delta_energy), _as_noneg(capacity)
    completely_drained = False
    if source < delta:
        delta = source
        completely_drained = True
    if dst + delta > capacity:
        delta = NoNeg.wrap(capacity - dst)
    return EnergyTransfer(NoNeg.wrap(source - delta), dst + delta, completely_drained)


def drain_energy(source: Any, delta_energy: Any) -> EnergyDrain:
    """Remove up to ``delta_energy`` from source."""
    source, delta = _as_noneg(source), _as_noneg(delta_energy)
    completely_drained = False
    if source < delta:
        delta = source
        completely_drained = True
    return EnergyDrain(NoNeg.wrap(source - delta), completely_drained)


def pretty_duration(duration: timedelta) -> str:
    """Render a duration in the largest fitting unit."""
    ns = ((duration.days * 86400 + duration.seconds) * 10**6 + duration.microseconds) * 1000
    if ns < 0:
        raise ValueError("duration must not be negative")
    if ns > _NS_PER_DAY:
        return f"{ns / 1e9 / 60.0 / 60.0 / 24.0:.2f} d"
    if ns > _NS_PER_HOUR:
        return f"{ns / 1e9 / 60.0 / 60.0:.2f} h"
    if ns > _NS_PER_MIN:
        return f"{ns / 1e9 / 60.0:.2f} m"
    if ns > _NS_PER_S:
        return f"{(ns // _NS_PER_MS) / 1000.0:.2f} s"
    if ns > _NS_PER_MS:
        return f"{(ns // _NS_PER_US) / 1000.0:.2f} ms"
    if ns > _NS_PER_US:
        return f"{ns / 1000.0:.2f} µs"
    return f"{ns} ns"


def required_to_be_in_range(value: Any, bounds: Union[Range, RangeInclusive]) -> Any:
    """Return ``value`` if it (or every element of it) lies within ``bounds``."""
    items = value if isinstance(value, (list, tuple)) else (value,)
    for item in items:
        if not bounds.contains(item):
            raise RequiredToBeInRangeError(value, bounds)
    return value