"""Command line entry: load or create a world, advance it one step, save it."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import List, Optional

from dudes_in_space.core.assembler import AssemblerDynSeed
from dudes_in_space.core.personnel_area import PersonnelArea, PersonnelAreaDynSeed
from dudes_in_space.core.shuttle import ShuttleFactoryDynSeed
from dudes_in_space.dyn_serde import DynDeserializeSeedVault
from dudes_in_space.environment import Environment
from dudes_in_space.geom.vectors import Point
from dudes_in_space.modules.base import Module, ModuleFactory
from dudes_in_space.person import Person
from dudes_in_space.vessel import VesselCreateInfo


def preset0(rng: random.Random) -> Environment:
    """A single station at the origin with three random people aboard."""
    people = [Person.random(rng) for _ in range(3)]
    station = VesselCreateInfo(Point(0.0, 0.0), [PersonnelArea(people)])
    return Environment.create([station])


def default_module_vault() -> DynDeserializeSeedVault[Module]:
    """A vault that can rebuild every module the core package provides."""
    factory_vault: DynDeserializeSeedVault[ModuleFactory] = DynDeserializeSeedVault()
    factory_vault.register(ShuttleFactoryDynSeed())
    module_vault: DynDeserializeSeedVault[Module] = DynDeserializeSeedVault()
    module_vault.register(PersonnelAreaDynSeed())
    module_vault.register(AssemblerDynSeed(factory_vault))
    return module_vault


def _default_save_path() -> Path:
    return Path.home() / ".dudes_in_space" / "save.json"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dudes-in-space",
        description="Advance the saved world by one step, creating it if needed.",
    )
    parser.add_argument("--save", type=Path, default=None, help="path of the save file")
    args = parser.parse_args(argv)
    save_path: Path = args.save if args.save is not None else _default_save_path()

    if save_path.exists():
        environment = Environment.from_json(
            save_path.read_text(encoding="utf-8"), default_module_vault()
        )
    else:
        environment = preset0(random.Random())

    environment.proceed()
    print(environment)

    save_path.parent.mkdir(parents=True, exist_ok=True)
    save_path.write_text(environment.to_json(), encoding="utf-8")
    return 0