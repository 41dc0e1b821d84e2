"""A module where people live while they have nothing else to do."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Sequence

from dudes_in_space.core.visitors import CoreModule, ModuleVisitor
from dudes_in_space.dyn_serde import DynDeserializeSeed, TypeId
from dudes_in_space.items import Recipe
from dudes_in_space.modules.base import (
    AssemblyRecipe,
    ModuleCapability,
    ModuleId,
    PackageId,
    VesselPersonInterface,
)
from dudes_in_space.person import Person

CORE_PACKAGE_ID = "core"
TYPE_ID = "PersonnelArea"


class PersonnelArea(CoreModule):
    """Quarters for any number of people."""

    def __init__(
        self, personnel: Iterable[Person] = (), module_id: Optional[ModuleId] = None
    ) -> None:
        self.personnel: List[Person] = list(personnel)
        self._id = module_id if module_id is not None else uuid.uuid4()

    def type_id(self) -> TypeId:
        return TYPE_ID

    def serialize(self) -> Dict[str, Any]:
        return self.to_dict()

    def id(self) -> ModuleId:
        return self._id

    def package_id(self) -> PackageId:
        return CORE_PACKAGE_ID

    def proceed(self, vessel: VesselPersonInterface) -> None:
        for person in list(self.personnel):
            person.proceed(vessel)

    def capabilities(self) -> Sequence[ModuleCapability]:
        return ()

    def recipes(self) -> List[Recipe]:
        return []

    def assembly_recipes(self) -> Sequence[AssemblyRecipe]:
        return ()

    def extract_person(self, person_id: uuid.UUID) -> Optional[Person]:
        for index, person in enumerate(self.personnel):
            if person.id == person_id:
                return self.personnel.pop(index)
        return None

    def insert_person(self, person: Person) -> bool:
        self.personnel.append(person)
        return True

    def can_insert_person(self) -> bool:
        return True

    def contains_person(self, person_id: uuid.UUID) -> bool:
        return any(p.id == person_id for p in self.personnel)

    def accept_visitor(self, visitor: ModuleVisitor) -> Optional[Any]:
        return visitor.visit_personnel_area(self)

    def to_dict(self) -> Dict[str, Any]:
        return {"personnel": [p.to_dict() for p in self.personnel], "id": str(self._id)}

    @classmethod
    def from_dict(cls, data: Any) -> "PersonnelArea":
        if not isinstance(data, Mapping):
            raise ValueError("expected struct PersonnelArea")
        for key in ("personnel", "id"):
            if key not in data:
                raise ValueError(f"missing field `{key}`")
        personnel = data["personnel"]
        if not isinstance(personnel, list):
            raise ValueError("personnel must be a list")
        return cls(
            [Person.from_dict(p) for p in personnel],
            uuid.UUID(str(data["id"])),
        )

    def __repr__(self) -> str:
        return f"PersonnelArea(id={self._id!r}, personnel={self.personnel!r})"


class PersonnelAreaDynSeed(DynDeserializeSeed):
    """Rebuilds personnel areas."""

    def type_id(self) -> TypeId:
        return TYPE_ID

    def deserialize(self, payload: Any) -> PersonnelArea:
        return PersonnelArea.from_dict(payload)