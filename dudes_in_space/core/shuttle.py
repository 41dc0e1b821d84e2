"""Shuttles: small craft with a cockpit, engine, reactor and fuel tank."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from dudes_in_space.core.personnel_area import CORE_PACKAGE_ID
from dudes_in_space.dyn_serde import DynDeserializeSeed, TypeId
from dudes_in_space.items import InputRecipe, Recipe
from dudes_in_space.modules.base import (
    AssemblyRecipe,
    Module,
    ModuleCapability,
    ModuleFactory,
    ModuleId,
    ModuleTypeId,
    PackageId,
    VesselPersonInterface,
)
from dudes_in_space.person import Person
from dudes_in_space.utils import tagged_option

TYPE_ID = "Shuttle"
FACTORY_TYPE_ID = "ShuttleFactory"

_SHUTTLE_CAPABILITIES = (
    ModuleCapability.Cockpit,
    ModuleCapability.Engine,
    ModuleCapability.Reactor,
    ModuleCapability.FuelTank,
)


class _Shuttle(Module):
    """A shuttle flown by at most one pilot."""

    def __init__(self, module_id: Optional[ModuleId] = None) -> None:
        self._id = module_id if module_id is not None else uuid.uuid4()
        self.pilot: Optional[Person] = None

    def type_id(self) -> TypeId:
        return TYPE_ID

    def serialize(self) -> Dict[str, Any]:
        return {
            "id": str(self._id),
            "pilot": tagged_option.serialize(self.pilot, Person.to_dict),
        }

    def id(self) -> ModuleId:
        return self._id

    def package_id(self) -> PackageId:
        return CORE_PACKAGE_ID

    def proceed(self, vessel: VesselPersonInterface) -> None:
        if self.pilot is not None:
            self.pilot.proceed(vessel)

    def capabilities(self) -> Sequence[ModuleCapability]:
        return _SHUTTLE_CAPABILITIES

    def recipes(self) -> List[Recipe]:
        return []

    def assembly_recipes(self) -> Sequence[AssemblyRecipe]:
        return ()

    def extract_person(self, person_id: uuid.UUID) -> Optional[Person]:
        if self.pilot is not None and self.pilot.id == person_id:
            person, self.pilot = self.pilot, None
            return person
        return None

    def insert_person(self, person: Person) -> bool:
        if self.pilot is None:
            self.pilot = person
            return True
        return False

    def can_insert_person(self) -> bool:
        return self.pilot is None

    def contains_person(self, person_id: uuid.UUID) -> bool:
        return self.pilot is not None and self.pilot.id == person_id

    def __repr__(self) -> str:
        return f"Shuttle(id={self._id!r}, pilot={self.pilot!r})"


@dataclass(frozen=True)
class ShuttleFactory(ModuleFactory):
    """Builds shuttles."""

    def type_id(self) -> TypeId:
        return FACTORY_TYPE_ID

    def serialize(self) -> Dict[str, Any]:
        return {}

    def output_type_id(self) -> ModuleTypeId:
        return TYPE_ID

    def create(self, recipe: InputRecipe) -> Module:
        return _Shuttle()

    def output_capabilities(self) -> Sequence[ModuleCapability]:
        return _SHUTTLE_CAPABILITIES


class ShuttleFactoryDynSeed(DynDeserializeSeed):
    """Rebuilds shuttle factories."""

    def type_id(self) -> TypeId:
        return FACTORY_TYPE_ID

    def deserialize(self, payload: Any) -> ShuttleFactory:
        if not isinstance(payload, Mapping):
            raise ValueError("expected struct ShuttleFactory")
        return ShuttleFactory()