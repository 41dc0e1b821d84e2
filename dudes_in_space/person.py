"""People aboard vessels: their traits, objectives and decisions."""

from __future__ import annotations

import logging
import random
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar, Union

from dudes_in_space.modules.base import (
    Module,
    ModuleCapability,
    ModuleId,
    VesselPersonInterface,
)

log = logging.getLogger(__name__)

PersonId = uuid.UUID

E = TypeVar("E", bound=Enum)

_MAX_AGE = 255

_MALE_NAMES = (
    "Tyler",
    "Yurem",
    "Justus",
    "Kane",
    "Maximillian",
    "Mario",
    "Chaim",
    "Braxton",
    "Devon",
    "Noel",
    "Ezekiel",
    "Samir",
    "Jayden",
    "Andrew",
    "Drew",
    "Alden",
)

_FEMALE_NAMES = (
    "Olivia",
    "Sydney",
    "Jakayla",
    "Tabitha",
    "Janessa",
    "Krista",
    "Madeline",
    "Janelle",
    "Kennedy",
    "Melissa",
    "Kamila",
    "Shannon",
    "Mariana",
    "Lizeth",
    "Elizabeth",
    "Dana",
)


def _enum_from_name(cls: Type[E], name: Any) -> E:
    try:
        return cls[name]
    except (KeyError, TypeError):
        raise ValueError(f"unknown variant `{name}` for {cls.__name__}") from None


class Passion(IntEnum):
    """What drives a person; ordered as declared."""

    Trade = 0
    Crafting = 1
    Adventuring = 2
    Flying = 3
    Ruling = 4
    Money = 5
    Drugs = 6
    Sex = 7

    @classmethod
    def sample(cls, rng: random.Random) -> "Passion":
        """Draw a random passion; crafting is never drawn."""
        return rng.choice(_PASSION_DRAW)


_PASSION_DRAW = (
    Passion.Trade,
    Passion.Adventuring,
    Passion.Flying,
    Passion.Ruling,
    Passion.Money,
    Passion.Drugs,
    Passion.Sex,
)


class Morale(Enum):
    SickBastard = auto()
    Mercantile = auto()
    TheEndJustifiesTheMeans = auto()
    TitForTat = auto()
    Altruist = auto()
    Saint = auto()

    @classmethod
    def sample(cls, rng: random.Random) -> "Morale":
        return rng.choice(list(cls))


class Boldness(Enum):
    PantsShittingWorm = auto()
    Unconfident = auto()
    Cautious = auto()
    Average = auto()
    Brave = auto()
    WithoutSelfPreservation = auto()

    @classmethod
    def sample(cls, rng: random.Random) -> "Boldness":
        return rng.choice(list(cls))


class Awareness(Enum):
    Monkey = auto()
    TrumpSupporter = auto()
    Dummy = auto()
    Average = auto()
    Perceptive = auto()
    Ascended = auto()

    @classmethod
    def sample(cls, rng: random.Random) -> "Awareness":
        return rng.choice(list(cls))


class Gender(Enum):
    CisMale = auto()
    CisFemale = auto()
    MTFTrans = auto()
    FTMTrans = auto()
    NonBinary = auto()

    @classmethod
    def sample(cls, rng: random.Random) -> "Gender":
        return rng.choice(list(cls))


class Role(Enum):
    Captain = auto()
    Navigator = auto()
    Gunner = auto()
    Worker = auto()


def random_name(rng: random.Random, gender: Gender) -> str:
    """Pick a first name fitting the gender."""
    if gender in (Gender.CisMale, Gender.FTMTrans):
        return rng.choice(_MALE_NAMES)
    if gender in (Gender.CisFemale, Gender.MTFTrans):
        return rng.choice(_FEMALE_NAMES)
    return rng.choice(_MALE_NAMES + _FEMALE_NAMES)


SEARCHING_FOR_CRAFTING_MODULE = "SearchingForCraftingModule"
MOVING_TO_CRAFTING_MODULE = "MovingToCraftingModule"
CRUFTING = "Crufting"

_STAGES = (SEARCHING_FOR_CRAFTING_MODULE, MOVING_TO_CRAFTING_MODULE, CRUFTING)


@dataclass(frozen=True)
class CraftingVesselsStage:
    """A step of the vessel-crafting objective; ``dst`` is set only while moving."""

    tp: str
    dst: Optional[ModuleId] = None

    def __post_init__(self) -> None:
        if self.tp not in _STAGES:
            raise ValueError(f"unknown crafting stage `{self.tp}`")
        if (self.tp == MOVING_TO_CRAFTING_MODULE) != (self.dst is not None):
            raise ValueError(f"stage `{self.tp}` has a wrong destination {self.dst!r}")


@dataclass(frozen=True)
class CraftingVesselsObjective:
    stage: CraftingVesselsStage


@dataclass(frozen=True)
class TradingObjective:
    i: Optional[int] = None


PersonObjective = Union[CraftingVesselsObjective, TradingObjective]

_NEEDED_CAPS = (
    ModuleCapability.Cockpit,
    ModuleCapability.Engine,
    ModuleCapability.Reactor,
    ModuleCapability.FuelTank,
)


def _require(data: Any, name: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError("expected a mapping")
    try:
        return data[name]
    except KeyError:
        raise ValueError(f"missing field `{name}`") from None


def _stage_to_dict(stage: CraftingVesselsStage) -> Dict[str, Any]:
    if stage.dst is None:
        return {"tp": stage.tp}
    return {"tp": stage.tp, "dst": str(stage.dst)}


def _stage_from_dict(data: Any) -> CraftingVesselsStage:
    tp = _require(data, "tp")
    if tp == MOVING_TO_CRAFTING_MODULE:
        return CraftingVesselsStage(tp, uuid.UUID(str(_require(data, "dst"))))
    return CraftingVesselsStage(tp)


def _state_to_dict(state: Optional[PersonObjective]) -> Dict[str, Any]:
    if state is None:
        return {"tp": "Idle"}
    if isinstance(state, CraftingVesselsObjective):
        return {
            "tp": "PursuingObjective",
            "objective_tp": "CraftingVessels",
            "stage": _stage_to_dict(state.stage),
        }
    return {"tp": "PursuingObjective", "objective_tp": "Trading", "i": state.i}


def _state_from_dict(data: Any) -> Optional[PersonObjective]:
    tp = _require(data, "tp")
    if tp == "Idle":
        return None
    if tp != "PursuingObjective":
        raise ValueError(f"unknown variant `{tp}`, expected `Idle` or `PursuingObjective`")
    objective_tp = _require(data, "objective_tp")
    if objective_tp == "CraftingVessels":
        return CraftingVesselsObjective(_stage_from_dict(_require(data, "stage")))
    if objective_tp == "Trading":
        i = data.get("i")
        if i is not None and not (isinstance(i, int) and 0 <= i <= 255):
            raise ValueError(f"invalid trading value {i!r}")
        return TradingObjective(i)
    raise ValueError(
        f"unknown variant `{objective_tp}`, expected `CraftingVessels` or `Trading`"
    )


def _is_suitable(module: Module, needed: Sequence[ModuleCapability]) -> bool:
    missing = list(needed)
    for recipe in module.assembly_recipes():
        for cap in recipe.output_capabilities():
            if cap in missing:
                missing.remove(cap)
    return not missing


@dataclass
class Person:
    """A person with traits and an optional objective; no objective means idle."""

    id: PersonId
    name: str
    age: int
    gender: Gender
    passions: List[Passion] = field(default_factory=list)
    morale: Morale = Morale.TitForTat
    boldness: Boldness = Boldness.Average
    awareness: Awareness = Awareness.Average
    state: Optional[PersonObjective] = None

    def __post_init__(self) -> None:
        if not 0 <= self.age <= _MAX_AGE:
            raise ValueError(f"age {self.age!r} is outside 0..=255")

    @classmethod
    def random(cls, rng: random.Random) -> "Person":
        """Generate a random idle person."""
        gender = Gender.sample(rng)
        person_id = uuid.UUID(int=rng.getrandbits(128), version=4)
        name = random_name(rng, gender)
        age = rng.randint(15, 80)
        count = rng.randint(0, 4)
        passions = sorted({Passion.sample(rng) for _ in range(count)})
        return cls(
            id=person_id,
            name=name,
            age=age,
            gender=gender,
            passions=passions,
            morale=Morale.sample(rng),
            boldness=Boldness.sample(rng),
            awareness=Awareness.sample(rng),
        )

    def proceed(self, vessel: VesselPersonInterface) -> None:
        """Advance the person by one step."""
        if self.state is None:
            self._decide_objective()
        else:
            self._pursue_objective(vessel, self.state)

    def _decide_objective(self) -> None:
        log.debug("decide objective: %s -> %s", self.name, [p.name for p in self.passions])
        passions = list(self.passions)
        random.shuffle(passions)
        while passions:
            if passions.pop() is Passion.Flying:
                log.debug("move to vessel")
                self.state = CraftingVesselsObjective(
                    CraftingVesselsStage(SEARCHING_FOR_CRAFTING_MODULE)
                )
                break

    def _pursue_objective(self, vessel: VesselPersonInterface, objective: PersonObjective) -> None:
        if not isinstance(objective, CraftingVesselsObjective):
            return
        stage = objective.stage
        if stage.tp == SEARCHING_FOR_CRAFTING_MODULE:
            for module in vessel.modules_with_cap(ModuleCapability.Crafting):
                if _is_suitable(module, _NEEDED_CAPS):
                    self.state = CraftingVesselsObjective(
                        CraftingVesselsStage(MOVING_TO_CRAFTING_MODULE, module.id())
                    )
                    return
            self.state = None
        elif stage.tp == MOVING_TO_CRAFTING_MODULE:
            assert stage.dst is not None
            vessel.move_to_module(self, stage.dst)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "age": self.age,
            "gender": self.gender.name,
            "passions": [p.name for p in self.passions],
            "morale": self.morale.name,
            "boldness": self.boldness.name,
            "awareness": self.awareness.name,
            "state": _state_to_dict(self.state),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Person":
        """Rebuild a person; a missing state means idle."""
        age = _require(data, "age")
        if not isinstance(age, int):
            raise ValueError(f"age must be an integer, got {age!r}")
        passions = _require(data, "passions")
        if not isinstance(passions, list):
            raise ValueError("passions must be a list")
        return cls(
            id=uuid.UUID(str(_require(data, "id"))),
            name=str(_require(data, "name")),
            age=age,
            gender=_enum_from_name(Gender, _require(data, "gender")),
            passions=[_enum_from_name(Passion, p) for p in passions],
            morale=_enum_from_name(Morale, _require(data, "morale")),
            boldness=_enum_from_name(Boldness, _require(data, "boldness")),
            awareness=_enum_from_name(Awareness, _require(data, "awareness")),
            state=_state_from_dict(data["state"]) if "state" in data else None,
        )