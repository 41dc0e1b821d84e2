# dudes_in_space

A small turn-based space simulation. An `Environment` holds vessels. Each
`Vessel` has a position and holds modules, such as personnel areas and
assemblers, and those modules hold people. A `Person` has a gender, an age,
passions, a morale, a boldness and an awareness. On each step an idle person
may pick an objective (a person with a passion for flying sets out to craft a
vessel) and works towards it: looking for an assembler whose recipes can
produce a cockpit, engine, reactor and fuel tank, then asking the vessel to
move them into it.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the simulation

```
dudes-in-space
dudes-in-space --save path/to/save.json
```

Each run loads the saved world from `~/.dudes_in_space/save.json`, or from
the file given with `--save`. If the file does not exist, it creates a fresh
world from the starting preset: one station at the origin whose personnel
area holds three random people. The run then advances the world by one step,
prints it, and writes it back to the save file as indented JSON, creating
the directory if needed.

## Using the library

```python
import random

from dudes_in_space.cli import default_module_vault, preset0
from dudes_in_space.environment import Environment

env = preset0(random.Random(42))
env.proceed()

text = env.to_json()
restored = Environment.from_json(text, default_module_vault())
```

The main pieces:

- `dudes_in_space.environment.Environment` – the world; `create`, `add`,
  `vessel_by_id`, `proceed`, `to_dict` / `from_dict`, `to_json` / `from_json`.
- `dudes_in_space.vessel.Vessel` – modules of one vessel; moves requested
  during a step are applied after every module has proceeded.
- `dudes_in_space.person.Person` – traits, `Person.random(rng)`, `proceed`.
- `dudes_in_space.core` – the `PersonnelArea` (any number of people),
  `Assembler` (one operator and a list of `AssemblyRecipe`s) and
  `ShuttleFactory` modules, and `visit_modules` with `ModuleVisitor` for
  walking a vessel's core modules.
- `dudes_in_space.modules.base` – the `Module` and `ModuleFactory`
  interfaces, `ModuleCapability` and `AssemblyRecipe`.
- `dudes_in_space.items` – `Item`, `Recipe`, `InputRecipe`, `OutputRecipe`.

Modules and module factories are saved as tagged records of the form
`{"tp": ..., "payload": ...}` (see `dudes_in_space.dyn_serde.dyn_serialize`).
To load them, register a seed for each type in a
`dudes_in_space.dyn_serde.DynDeserializeSeedVault`. Loading a type that has
no registered seed raises `UnknownTypeError`. `default_module_vault()` knows
personnel areas and assemblers, and assemblers' recipes may use the shuttle
factory.

The `dudes_in_space.geom` package holds geometry helpers: `Angle` and
`DeltaAngle`, `Point`, `Vector`, `Size`, `Complex`, `Rect`, `Matrix`,
`NoNeg`, linear interpolation (`lerp`, `LerpIntegrator`) and range mapping
(`map_into_range`, `fit_into_range`, `clamp_into_range` and friends). The
`dudes_in_space.utils` package holds `Range` / `RangeInclusive`, `Color`,
`StaticTimePoint`, energy transfer and duration formatting helpers, and the
tagged encoding of optional values.

## What it does not do

- There is no screen or interactive interface; each command run advances the
  world by exactly one step and prints its plain representation.
- Shuttles built by `ShuttleFactory` are not known to `default_module_vault()`,
  so a saved world containing one cannot be loaded with it.
- The trading objective and the final crafting stage do nothing yet: a person
  pursuing them simply stays as they are.