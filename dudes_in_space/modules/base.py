"""Interfaces shared by vessel modules, module factories and assembly recipes."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from dudes_in_space.dyn_serde import DynDeserializeSeedVault, DynSerialize, dyn_serialize
from dudes_in_space.items import InputRecipe, Recipe

if TYPE_CHECKING:
    from dudes_in_space.person import Person

PackageId = str
ModuleId = uuid.UUID
ModuleTypeId = str


class ModuleCapability(str, Enum):
    """What a module can do for its vessel."""

    Cockpit = "Cockpit"
    Cargo = "Cargo"
    FuelTank = "FuelTank"
    Radar = "Radar"
    Engine = "Engine"
    DockingPort = "DockingPort"
    Weapon = "Weapon"
    WarpDrive = "WarpDrive"
    Reactor = "Reactor"
    Crafting = "Crafting"


class VesselPersonInterface(ABC):
    """What a vessel offers to the people aboard it."""

    @abstractmethod
    def modules_with_cap(self, cap: ModuleCapability) -> List["Module"]:
        """Modules that have the capability and are not busy."""

    @abstractmethod
    def move_to_module(self, person: "Person", module_id: ModuleId) -> None:
        """Ask the vessel to move a person into another module."""


class Module(DynSerialize):
    """A part of a vessel."""

    @abstractmethod
    def id(self) -> ModuleId:
        """The module's unique id."""

    @abstractmethod
    def package_id(self) -> PackageId:
        """The package that provides this module."""

    @abstractmethod
    def proceed(self, vessel: VesselPersonInterface) -> None:
        """Advance the module by one step."""

    @abstractmethod
    def capabilities(self) -> Sequence[ModuleCapability]:
        """What this module can do."""

    @abstractmethod
    def recipes(self) -> List[Recipe]:
        """Item recipes this module can run."""

    @abstractmethod
    def assembly_recipes(self) -> Sequence["AssemblyRecipe"]:
        """Module recipes this module can assemble."""

    @abstractmethod
    def extract_person(self, person_id: uuid.UUID) -> Optional["Person"]:
        """Remove a person from the module and return them, if present."""

    @abstractmethod
    def insert_person(self, person: "Person") -> bool:
        """Place a person in the module; False if there is no room."""

    @abstractmethod
    def can_insert_person(self) -> bool:
        """True if there is room for another person."""

    @abstractmethod
    def contains_person(self, person_id: uuid.UUID) -> bool:
        """True if the person is in this module."""


class ModuleFactory(DynSerialize):
    """Builds modules of one type from input items."""

    @abstractmethod
    def output_type_id(self) -> ModuleTypeId:
        """Type id of the modules produced."""

    @abstractmethod
    def create(self, recipe: InputRecipe) -> Module:
        """Build a module from the given inputs."""

    @abstractmethod
    def output_capabilities(self) -> Sequence[ModuleCapability]:
        """Capabilities of the modules produced."""


_RECIPE_FIELDS = ("input", "output")


@dataclass
class AssemblyRecipe:
    """Input items together with the factory that turns them into a module."""

    input: InputRecipe
    output: ModuleFactory

    def create(self) -> Module:
        return self.output.create(self.input)

    def output_capabilities(self) -> Sequence[ModuleCapability]:
        return self.output.output_capabilities()

    def to_dict(self) -> Dict[str, Any]:
        return {"input": self.input.to_dict(), "output": dyn_serialize(self.output)}

    @classmethod
    def from_dict(
        cls, data: Any, factory_vault: DynDeserializeSeedVault[ModuleFactory]
    ) -> "AssemblyRecipe":
        """Rebuild a recipe, looking its factory up in ``factory_vault``."""
        if not isinstance(data, Mapping):
            raise ValueError("expected struct AssemblyRecipe")
        for key in data:
            if key not in _RECIPE_FIELDS:
                raise ValueError(f"unknown field `{key}`, expected `input`, `output`")
        for key in _RECIPE_FIELDS:
            if key not in data:
                raise ValueError(f"missing field `{key}`")
        return cls(
            input=InputRecipe.from_dict(data["input"]),
            output=factory_vault.deserialize(data["output"]),
        )