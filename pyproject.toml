[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dudes_in_space"
version = "0.0.1"
description = "A small turn-based space simulation of vessels, modules and the people who crew them"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "space", "game", "geometry"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dudes-in-space = "dudes_in_space.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dudes_in_space"]

[tool.pytest.ini_options]
addopts = "-ra"
