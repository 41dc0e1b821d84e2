"""Visitors over the modules provided by the core package."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from dudes_in_space.modules.base import Module

if TYPE_CHECKING:
    from dudes_in_space.vessel import Vessel


class ModuleVisitor:
    """Visits core modules; each method returns a result or None to keep going."""

    def visit_personnel_area(self, area: Any) -> Optional[Any]:
        return None

    def visit_assembler(self, assembler: Any) -> Optional[Any]:
        return None


class CoreModule(Module):
    """A module from the core package that accepts visitors."""

    @abstractmethod
    def accept_visitor(self, visitor: ModuleVisitor) -> Optional[Any]:
        """Dispatch to the visitor method for this module's kind."""


def visit_modules(vessel: "Vessel", visitor: ModuleVisitor) -> Optional[Any]:
    """Visit the vessel's core modules in order; return the first non-None result."""
    for module in vessel.modules():
        if isinstance(module, CoreModule):
            result = module.accept_visitor(visitor)
            if result is not None:
                return result
    return None