"""Inputs of the financial simulation: customer request and global settings."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from engine.site.profile import Orientation


class ConsumptionProfile(str, Enum):
    """When in the day the household or business uses its electricity."""

    DAY_WEIGHTED = "day_weighted"        # 08:00 - 18:00
    BALANCED = "balanced"                # round the clock / home office
    EVENING_WEIGHTED = "evening_weighted"  # mostly after 18:00


class BuildingType(str, Enum):
    """Tariff class of the connection."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"


# Fraction of on-site production consumed directly, by consumption profile.
SELF_CONSUMPTION_RATES: dict[ConsumptionProfile, float] = {
    ConsumptionProfile.DAY_WEIGHTED: 0.90,
    ConsumptionProfile.BALANCED: 0.65,
    ConsumptionProfile.EVENING_WEIGHTED: 0.40,
}


def _finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


@dataclass(frozen=True)
class CalculationInput:
    """A customer's feasibility request.

    ``roof_area`` (m^2) may be zero or negative; such roofs simply size to
    a zero-kW system.  Coordinates are optional and only used to resolve
    the site profile.
    """

    consumption_profile: ConsumptionProfile
    building_type: BuildingType
    bill_amount: float
    roof_area: float
    orientation: Orientation = Orientation.SOUTH
    latitude: float | None = None
    longitude: float | None = None
    location_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "consumption_profile", ConsumptionProfile(self.consumption_profile))
        object.__setattr__(self, "building_type", BuildingType(self.building_type))
        object.__setattr__(self, "orientation", Orientation(self.orientation))
        _finite("bill_amount", self.bill_amount)
        _finite("roof_area", self.roof_area)
        if self.bill_amount < 0:
            raise ValueError(f"bill_amount must be >= 0, got {self.bill_amount}")
        for name in ("latitude", "longitude"):
            value = getattr(self, name)
            if value is not None:
                _finite(name, value)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "consumption_profile": self.consumption_profile.value,
            "building_type": self.building_type.value,
            "bill_amount": self.bill_amount,
            "roof_area": self.roof_area,
            "orientation": self.orientation.value,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "location_name": self.location_name,
        }


@dataclass(frozen=True)
class GlobalSettings:
    """Commercial assumptions shared by every simulation.

    Parameters
    ----------
    currency_rate : float
        Local currency units per USD.
    base_price : float
        Fallback electricity tariff (local currency / kWh).
    panel_wattage : float
        Module rating assumed when counting panels (W).
    system_cost_per_kw : float
        Turn-key installed cost (USD / kWp).
    energy_inflation_rate : float
        Annual electricity price escalation (fraction).
    panel_degradation_rate : float
        Annual output loss (fraction).
    maintenance_cost_fraction : float
        One-time maintenance (inverter replacement) cost at year 10, as a
        fraction of capital cost.
    sell_price_multiplier : float
        Export price as a fraction of the tariff.
    tariff_rates : mapping
        Tariff per building type; missing entries fall back to
        ``base_price``.
    """

    currency_rate: float = 34.5
    base_price: float = 3.5
    panel_wattage: float = 550.0
    system_cost_per_kw: float = 800.0
    energy_inflation_rate: float = 0.05
    panel_degradation_rate: float = 0.005
    maintenance_cost_fraction: float = 0.05
    sell_price_multiplier: float = 0.6
    tariff_rates: Mapping[BuildingType, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in (
            "currency_rate", "base_price", "panel_wattage", "system_cost_per_kw",
            "energy_inflation_rate", "panel_degradation_rate",
            "maintenance_cost_fraction", "sell_price_multiplier",
        ):
            _finite(name, getattr(self, name))
        if self.panel_wattage <= 0:
            raise ValueError(f"panel_wattage must be > 0, got {self.panel_wattage}")
        if not 0.0 <= self.panel_degradation_rate < 1.0:
            raise ValueError(
                f"panel_degradation_rate must be in [0, 1), got {self.panel_degradation_rate}"
            )
        rates = {BuildingType(k): float(v) for k, v in dict(self.tariff_rates).items()}
        object.__setattr__(self, "tariff_rates", rates)

    def tariff_for(self, building_type: BuildingType | str) -> float:
        """Tariff for the building type, falling back to ``base_price``."""
        return self.tariff_rates.get(BuildingType(building_type), self.base_price)

    def to_dict(self) -> dict[str, Any]:
        return {
            "currency_rate": self.currency_rate,
            "base_price": self.base_price,
            "panel_wattage": self.panel_wattage,
            "system_cost_per_kw": self.system_cost_per_kw,
            "energy_inflation_rate": self.energy_inflation_rate,
            "panel_degradation_rate": self.panel_degradation_rate,
            "maintenance_cost_fraction": self.maintenance_cost_fraction,
            "sell_price_multiplier": self.sell_price_multiplier,
            "tariff_rates": {k.value: v for k, v in self.tariff_rates.items()},
        }
