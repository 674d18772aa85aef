"""Sizing scenarios of the financial simulation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScenarioType(str, Enum):
    CONSERVATIVE = "conservative"
    OPTIMAL = "optimal"
    AGGRESSIVE = "aggressive"


@dataclass(frozen=True)
class ScenarioConfig:
    """Sizing target and loss assumption of one scenario.

    ``offset_target`` is the fraction of annual consumption the system is
    sized to cover; ``system_loss_factor`` lumps inverter, wiring,
    soiling and temperature losses.
    """

    type: ScenarioType
    offset_target: float
    system_loss_factor: float
    # Shift applied to the profile's self-consumption rate.
    self_consumption_shift: float = 0.0

    @property
    def system_efficiency(self) -> float:
        return 1.0 - self.system_loss_factor


SCENARIOS: tuple[ScenarioConfig, ...] = (
    ScenarioConfig(ScenarioType.CONSERVATIVE, offset_target=0.7, system_loss_factor=0.20,
                   self_consumption_shift=-0.05),
    ScenarioConfig(ScenarioType.OPTIMAL, offset_target=1.0, system_loss_factor=0.15),
    ScenarioConfig(ScenarioType.AGGRESSIVE, offset_target=1.2, system_loss_factor=0.12,
                   self_consumption_shift=0.05),
)

RECOMMENDED_SCENARIO: ScenarioType = ScenarioType.OPTIMAL
