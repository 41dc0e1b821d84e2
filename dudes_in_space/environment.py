"""The simulated world: every vessel and the counter for new vessel ids."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from dudes_in_space.dyn_serde import DynDeserializeSeedVault
from dudes_in_space.modules.base import Module
from dudes_in_space.vessel import Vessel, VesselCreateInfo, VesselId

_FIELDS = ("next_vessel_id", "vessels")
_MAX_ID = 2**32 - 1


@dataclass
class Environment:
    """All vessels of the world; new vessels get increasing ids."""

    vessels: List[Vessel] = field(default_factory=list)
    next_vessel_id: VesselId = 0

    @classmethod
    def create(cls, create_infos: Iterable[VesselCreateInfo]) -> "Environment":
        """Build a world whose vessels get ids 0, 1, 2, ... in the given order."""
        environment = cls()
        for info in create_infos:
            environment.add(info)
        return environment

    def add(self, create_info: VesselCreateInfo) -> None:
        """Create a vessel with the next free id."""
        self.vessels.append(Vessel.from_create_info(self.next_vessel_id, create_info))
        self.next_vessel_id += 1

    def vessel_by_id(self, vessel_id: VesselId) -> Optional[Vessel]:
        """The vessel with the id, or None."""
        return next((v for v in self.vessels if v.id == vessel_id), None)

    def proceed(self) -> None:
        """Advance every vessel by one step."""
        for vessel in self.vessels:
            vessel.proceed()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vessels": [v.to_dict() for v in self.vessels],
            "next_vessel_id": self.next_vessel_id,
        }

    @classmethod
    def from_dict(
        cls, data: Any, module_vault: DynDeserializeSeedVault[Module]
    ) -> "Environment":
        """Rebuild a world, looking modules up in ``module_vault``."""
        if not isinstance(data, Mapping):
            raise ValueError("expected struct Environment")
        for key in data:
            if key not in _FIELDS:
                raise ValueError(f"unknown field `{key}`, expected `next_vessel_id` or `vessels`")
        for key in _FIELDS:
            if key not in data:
                raise ValueError(f"missing field `{key}`")
        next_vessel_id = data["next_vessel_id"]
        if (
            not isinstance(next_vessel_id, int)
            or isinstance(next_vessel_id, bool)
            or not 0 <= next_vessel_id <= _MAX_ID
        ):
            raise ValueError(f"invalid next vessel id {next_vessel_id!r}")
        vessels = data["vessels"]
        if not isinstance(vessels, list):
            raise ValueError("expected a list of vessels")
        return cls(
            vessels=[Vessel.from_dict(v, module_vault) for v in vessels],
            next_vessel_id=next_vessel_id,
        )

    def to_json(self) -> str:
        """The world as indented JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_json(
        cls, text: str, module_vault: DynDeserializeSeedVault[Module]
    ) -> "Environment":
        """Rebuild a world from the output of :meth:`to_json`."""
        return cls.from_dict(json.loads(text), module_vault)