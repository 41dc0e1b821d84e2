"""A module that assembles other modules from recipes, run by one operator."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Sequence

from dudes_in_space.core.personnel_area import CORE_PACKAGE_ID
from dudes_in_space.core.visitors import CoreModule, ModuleVisitor
from dudes_in_space.dyn_serde import DynDeserializeSeed, DynDeserializeSeedVault, TypeId
from dudes_in_space.items import Recipe
from dudes_in_space.modules.base import (
    AssemblyRecipe,
    ModuleCapability,
    ModuleFactory,
    ModuleId,
    PackageId,
    VesselPersonInterface,
)
from dudes_in_space.person import Person
from dudes_in_space.utils import tagged_option

TYPE_ID = "Assembler"
_FIELDS = ("operator", "recipes", "id")


class Assembler(CoreModule):
    """Assembles modules; holds at most one operator."""

    def __init__(
        self,
        recipes: Iterable[AssemblyRecipe] = (),
        operator: Optional[Person] = None,
        module_id: Optional[ModuleId] = None,
    ) -> None:
        self.operator = operator
        self._recipes: List[AssemblyRecipe] = list(recipes)
        self._id = module_id if module_id is not None else uuid.uuid4()

    def add_recipe(self, recipe: AssemblyRecipe) -> None:
        self._recipes.append(recipe)

    def type_id(self) -> TypeId:
        return TYPE_ID

    def serialize(self) -> Dict[str, Any]:
        return self.to_dict()

    def id(self) -> ModuleId:
        return self._id

    def package_id(self) -> PackageId:
        return CORE_PACKAGE_ID

    def proceed(self, vessel: VesselPersonInterface) -> None:
        if self.operator is not None:
            self.operator.proceed(vessel)

    def capabilities(self) -> Sequence[ModuleCapability]:
        return (ModuleCapability.Crafting,)

    def recipes(self) -> List[Recipe]:
        return []

    def assembly_recipes(self) -> Sequence[AssemblyRecipe]:
        return tuple(self._recipes)

    def extract_person(self, person_id: uuid.UUID) -> Optional[Person]:
        if self.operator is not None and self.operator.id == person_id:
            person, self.operator = self.operator, None
            return person
        return None

    def insert_person(self, person: Person) -> bool:
        if self.operator is None:
            self.operator = person
            return True
        return False

    def can_insert_person(self) -> bool:
        return self.operator is None

    def contains_person(self, person_id: uuid.UUID) -> bool:
        return self.operator is not None and self.operator.id == person_id

    def accept_visitor(self, visitor: ModuleVisitor) -> Optional[Any]:
        return visitor.visit_assembler(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operator": tagged_option.serialize(self.operator, Person.to_dict),
            "recipes": [r.to_dict() for r in self._recipes],
            "id": str(self._id),
        }

    @classmethod
    def from_dict(
        cls, data: Any, factory_vault: DynDeserializeSeedVault[ModuleFactory]
    ) -> "Assembler":
        """Rebuild an assembler, looking recipe factories up in ``factory_vault``."""
        if not isinstance(data, Mapping):
            raise ValueError("expected struct Assembler")
        for key in data:
            if key not in _FIELDS:
                raise ValueError(f"unknown field `{key}`, expected `operator`, `recipes`, `id`")
        for key in _FIELDS:
            if key not in data:
                raise ValueError(f"missing field `{key}`")
        recipes = data["recipes"]
        if not isinstance(recipes, list):
            raise ValueError("recipes must be a list")
        return cls(
            recipes=[AssemblyRecipe.from_dict(r, factory_vault) for r in recipes],
            operator=tagged_option.deserialize(data["operator"], Person.from_dict),
            module_id=uuid.UUID(str(data["id"])),
        )

    def __repr__(self) -> str:
        return (
            f"Assembler(id={self._id!r}, operator={self.operator!r}, "
            f"recipes={self._recipes!r})"
        )


class AssemblerDynSeed(DynDeserializeSeed):
    """Rebuilds assemblers using a vault of module factories."""

    def __init__(self, factory_vault: DynDeserializeSeedVault[ModuleFactory]) -> None:
        self.factory_vault = factory_vault

    def type_id(self) -> TypeId:
        return TYPE_ID

    def deserialize(self, payload: Any) -> Assembler:
        return Assembler.from_dict(payload, self.factory_vault)