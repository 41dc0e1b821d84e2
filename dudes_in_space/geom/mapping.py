"""Mapping values from one range onto another."""

from __future__ import annotations

from typing import Any, Tuple, Union

from dudes_in_space.geom.noneg import clamp
from dudes_in_space.utils.ranges import Range, RangeInclusive

_RangeLike = Union[Range, RangeInclusive, Tuple[Any, Any]]


class FitIntoRangeError(ValueError):
    """Raised when a value lies outside the range it should be fitted from."""

    def __init__(self, x: Any, source: Any, target: Any) -> None:
        super().__init__(f"value {x!r} is outside {source!r}")
        self.x = x
        self.source = source
        self.target = target


def _bounds(r: _RangeLike) -> Tuple[Any, Any]:
    if isinstance(r, (Range, RangeInclusive)):
        return r.start, r.end
    start, end = r
    return start, end


def _as_range(r: _RangeLike) -> Range:
    return r if isinstance(r, Range) else Range(*_bounds(r))


def _as_range_inclusive(r: _RangeLike) -> RangeInclusive:
    return r if isinstance(r, RangeInclusive) else RangeInclusive(*_bounds(r))


def _linear(x: Any, source: Tuple[Any, Any], target: Tuple[Any, Any]) -> Any:
    in_start, in_end = source
    out_start, out_end = target
    return (x - in_start) * (out_end - out_start) / (in_end - in_start) + out_start


def map_into_range(x: Any, source: _RangeLike, target: _RangeLike) -> Any:
    """Map ``x`` linearly from the source range onto the target range."""
    return _linear(x, _bounds(source), _bounds(target))


def fit_into_range(x: Any, source: _RangeLike, target: _RangeLike) -> Any:
    """Like map_into_range, but ``x`` must lie in the half-open source range."""
    src = _as_range(source)
    if not src.contains(x):
        raise FitIntoRangeError(x, src, _as_range(target))
    return map_into_range(x, src, target)


def map_into_range_inclusive(x: Any, source: _RangeLike, target: _RangeLike) -> Any:
    """Map ``x`` linearly between closed ranges."""
    return _linear(x, _bounds(source), _bounds(target))


def fit_into_range_inclusive(x: Any, source: _RangeLike, target: _RangeLike) -> Any:
    """Like map_into_range_inclusive, but ``x`` must lie in the closed source range."""
    src = _as_range_inclusive(source)
    if not src.contains(x):
        raise FitIntoRangeError(x, src, _as_range_inclusive(target))
    return map_into_range_inclusive(x, src, target)


def clamp_into_range(x: Any, source: _RangeLike, target: _RangeLike) -> Any:
    """Clamp ``x`` into the source range, then map it onto the target range."""
    src = _bounds(source)
    return _linear(clamp(x, src), src, _bounds(target))


def sign(value: Any) -> Any:
    """One for non-negative values, minus one otherwise."""
    one = type(value)(1)
    return one if value >= 0 else -one