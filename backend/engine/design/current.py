"""MPPT input current check."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from engine.equipment.models import Inverter, SolarPanel


@dataclass(frozen=True)
class CurrentCheck:
    is_safe: bool
    panel_isc: float
    inverter_max_current: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def check_current(panel: SolarPanel, inverter: Inverter) -> CurrentCheck:
    """Compare the module short-circuit current with the MPPT input limit."""
    return CurrentCheck(
        is_safe=panel.isc <= inverter.max_current_per_mppt,
        panel_isc=panel.isc,
        inverter_max_current=inverter.max_current_per_mppt,
    )
