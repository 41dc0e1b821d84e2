"""Serialization of polymorphic objects tagged with a type id."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, Generic, TypeVar

T = TypeVar("T")

TypeId = str


class DynSerialize(ABC):
    """An object that can serialize itself together with its type id."""

    @abstractmethod
    def type_id(self) -> TypeId:
        """The id that selects the deserializer for this object."""

    @abstractmethod
    def serialize(self) -> Any:
        """The object's payload as plain data."""


class DynDeserializeSeed(ABC, Generic[T]):
    """Rebuilds objects of one type id from their payload."""

    @abstractmethod
    def type_id(self) -> TypeId:
        """The type id this seed handles."""

    @abstractmethod
    def deserialize(self, payload: Any) -> T:
        """Build an object from its payload."""


class UnknownTypeError(LookupError):
    """Raised when no seed is registered for a type id."""

    def __init__(self, type_id: str) -> None:
        super().__init__(f"no deserializer registered for type id `{type_id}`")
        self.type_id = type_id


def dyn_serialize(obj: DynSerialize) -> Dict[str, Any]:
    """Wrap an object's payload with its type id."""
    return {"tp": obj.type_id(), "payload": obj.serialize()}


class DynDeserializeSeedVault(Generic[T]):
    """A registry of seeds keyed by type id."""

    def __init__(self) -> None:
        self._seeds: Dict[TypeId, DynDeserializeSeed[T]] = {}

    def register(self, seed: DynDeserializeSeed[T]) -> "DynDeserializeSeedVault[T]":
        """Add a seed, replacing any with the same type id; returns the vault."""
        self._seeds[seed.type_id()] = seed
        return self

    def deserialize(self, data: Any) -> T:
        """Rebuild an object from the output of :func:`dyn_serialize`."""
        if not isinstance(data, Mapping):
            raise ValueError("expected a map with `tp` and `payload`")
        for field in ("tp", "payload"):
            if field not in data:
                raise ValueError(f"missing field `{field}`")
        type_id = data["tp"]
        if not isinstance(type_id, str):
            raise ValueError(f"type id must be a string, got {type_id!r}")
        seed = self._seeds.get(type_id)
        if seed is None:
            raise UnknownTypeError(type_id)
        return seed.deserialize(data["payload"])

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._seeds