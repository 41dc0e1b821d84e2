"""Half-open and closed ranges with containment checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Range(Generic[T]):
    """A half-open range ``[start, end)``."""

    start: T
    end: T

    def contains(self, item: Any) -> bool:
        """Return True if ``start <= item < end``."""
        return self.start <= item and item < self.end

    def is_empty(self) -> bool:
        """Return True if the range holds no values."""
        return not (self.start < self.end)

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)


@dataclass(frozen=True)
class RangeInclusive(Generic[T]):
    """A closed range ``[start, end]``."""

    start: T
    end: T

    def contains(self, item: Any) -> bool:
        """Return True if ``start <= item <= end``."""
        return self.start <= item and item <= self.end

    def is_empty(self) -> bool:
        """Return True if the range holds no values."""
        return not (self.start <= self.end)

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)