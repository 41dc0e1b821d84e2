"""A small turn-based space simulation of vessels, modules and their crews."""

__version__ = "0.0.1"