"""Items and the recipes that consume or produce them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List

_MAX_COUNT = 2**32 - 1


def _field(data: Any, name: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError("expected a mapping")
    try:
        return data[name]
    except KeyError:
        raise ValueError(f"missing field `{name}`") from None


@dataclass
class Item:
    """A named stack of goods."""

    name: str
    count: int

    def __post_init__(self) -> None:
        if not 0 <= self.count <= _MAX_COUNT:
            raise ValueError(f"item count {self.count!r} is outside the 32-bit range")

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "count": self.count}

    @classmethod
    def from_dict(cls, data: Any) -> "Item":
        return cls(name=_field(data, "name"), count=_field(data, "count"))


@dataclass
class Recipe:
    """Turns input items into output items."""

    input: List[Item] = field(default_factory=list)
    output: List[Item] = field(default_factory=list)


@dataclass
class InputRecipe:
    """The items a production step consumes."""

    input: List[Item] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"input": [item.to_dict() for item in self.input]}

    @classmethod
    def from_dict(cls, data: Any) -> "InputRecipe":
        return cls([Item.from_dict(item) for item in _field(data, "input")])


@dataclass
class OutputRecipe:
    """The items a production step yields."""

    output: List[Item] = field(default_factory=list)