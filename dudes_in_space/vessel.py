"""Vessels: a position and a set of modules people move between."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Sequence, Set

from dudes_in_space.dyn_serde import DynDeserializeSeedVault, dyn_serialize
from dudes_in_space.geom.vectors import Point
from dudes_in_space.modules.base import Module, ModuleCapability, ModuleId, VesselPersonInterface

if TYPE_CHECKING:
    from dudes_in_space.person import Person

VesselId = int

_MAX_ID = 2**32 - 1
_FIELDS = ("id", "pos", "modules")


@dataclass
class VesselCreateInfo:
    """What is needed to create a vessel."""

    pos: Point
    modules: List[Module] = field(default_factory=list)


@dataclass(frozen=True)
class MoveToModule:
    """A request to move a person into another module."""

    person_id: uuid.UUID
    module_id: ModuleId


def _point_from_dict(data: Any) -> Point:
    if not isinstance(data, Mapping):
        raise ValueError("expected struct Point")
    try:
        return Point(float(data["x"]), float(data["y"]))
    except KeyError as exc:
        raise ValueError(f"missing field `{exc.args[0]}`") from None


class Vessel(VesselPersonInterface):
    """A vessel holding modules; requests made during a step are applied after it."""

    def __init__(self, vessel_id: VesselId, pos: Point, modules: Iterable[Module] = ()) -> None:
        if not isinstance(vessel_id, int) or not 0 <= vessel_id <= _MAX_ID:
            raise ValueError(f"vessel id {vessel_id!r} is outside the 32-bit range")
        self.id = vessel_id
        self.pos = pos
        self._modules: List[Module] = list(modules)
        self._requests: List[MoveToModule] = []
        self._busy: Set[int] = set()

    @classmethod
    def from_create_info(cls, vessel_id: VesselId, info: VesselCreateInfo) -> "Vessel":
        return cls(vessel_id, info.pos, info.modules)

    def modules(self) -> Sequence[Module]:
        """The modules in order."""
        return tuple(self._modules)

    def add_module(self, module: Module) -> None:
        self._modules.append(module)

    def proceed(self) -> None:
        """Advance every module, then apply the requests they made."""
        for module in list(self._modules):
            self._busy.add(id(module))
            try:
                module.proceed(self)
            finally:
                self._busy.discard(id(module))
        requests, self._requests = self._requests, []
        for request in requests:
            self._move(request)

    def _move(self, request: MoveToModule) -> None:
        src = next((m for m in self._modules if m.contains_person(request.person_id)), None)
        if src is None:
            raise LookupError(f"no module holds person {request.person_id}")
        dst = next((m for m in self._modules if m.id() == request.module_id), None)
        if dst is None:
            raise LookupError(f"no module with id {request.module_id}")
        if src is dst or not dst.can_insert_person():
            return
        person = src.extract_person(request.person_id)
        if person is None:
            raise LookupError(f"person {request.person_id} could not be extracted")
        if not dst.insert_person(person):
            raise RuntimeError(f"module {request.module_id} refused person {request.person_id}")

    def modules_with_cap(self, cap: ModuleCapability) -> List[Module]:
        """Modules with the capability, excluding the one currently proceeding."""
        return [
            m
            for m in self._modules
            if id(m) not in self._busy and cap in m.capabilities()
        ]

    def move_to_module(self, person: "Person", module_id: ModuleId) -> None:
        self._requests.append(MoveToModule(person.id, module_id))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "pos": {"x": self.pos.x, "y": self.pos.y},
            "modules": [dyn_serialize(m) for m in self._modules],
        }

    @classmethod
    def from_dict(cls, data: Any, module_vault: DynDeserializeSeedVault[Module]) -> "Vessel":
        """Rebuild a vessel, looking its modules up in ``module_vault``."""
        if not isinstance(data, Mapping):
            raise ValueError("expected struct Vessel")
        for key in data:
            if key not in _FIELDS:
                raise ValueError(f"unknown field `{key}`, expected `id`, `pos`, `modules`")
        for key in _FIELDS:
            if key not in data:
                raise ValueError(f"missing field `{key}`")
        modules = data["modules"]
        if not isinstance(modules, list):
            raise ValueError("expected a list of modules")
        return cls(
            data["id"],
            _point_from_dict(data["pos"]),
            [module_vault.deserialize(m) for m in modules],
        )

    def __repr__(self) -> str:
        return f"Vessel(id={self.id!r}, pos={self.pos!r}, modules={self._modules!r})"