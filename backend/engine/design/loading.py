"""DC/AC ratio (inverter loading) classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from engine.equipment.models import Inverter, SolarPanel

UNDERLOADED_BELOW: float = 0.80
NOMINAL_UP_TO: float = 1.10
OPTIMAL_UP_TO: float = 1.35


class RatioStatus(str, Enum):
    UNDERLOADED = "underloaded"
    NOMINAL = "nominal"
    OPTIMAL = "optimal"
    CLIPPING = "clipping"


@dataclass(frozen=True)
class LoadingCheck:
    ratio: float
    status: RatioStatus

    def to_dict(self) -> dict[str, Any]:
        return {"ratio": self.ratio, "status": self.status.value}


def classify_ratio(ratio: float) -> RatioStatus:
    """Bands: ``<0.8`` | ``[0.8, 1.1]`` | ``(1.1, 1.35]`` | ``>1.35``."""
    if ratio < UNDERLOADED_BELOW:
        return RatioStatus.UNDERLOADED
    if ratio <= NOMINAL_UP_TO:
        return RatioStatus.NOMINAL
    if ratio <= OPTIMAL_UP_TO:
        return RatioStatus.OPTIMAL
    return RatioStatus.CLIPPING


def analyze_loading(total_panel_count: int, panel: SolarPanel, inverter: Inverter) -> LoadingCheck:
    """Installed DC kWp over inverter AC kW, with its loading band."""
    dc_kw = total_panel_count * panel.power_w / 1000.0
    ratio = dc_kw / inverter.power_kw
    return LoadingCheck(ratio=ratio, status=classify_ratio(ratio))
