"""Equipment catalog records: PV modules, inverters and optional add-ons.

Records are immutable.  Constructors reject values that cannot describe
real hardware (non-finite numbers, non-positive ratings or dimensions) so
that bad catalog rows fail loudly instead of leaking ``nan`` into a design.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a finite value > 0, got {value}")


def _require_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite value >= 0, got {value}")


# ======================================================================
# PV module
# ======================================================================

@dataclass(frozen=True)
class SolarPanel:
    """Datasheet values of a crystalline PV module at STC.

    Parameters
    ----------
    power_w : float
        Nameplate power (W).
    voc, isc : float
        Open-circuit voltage (V) and short-circuit current (A).
    vmpp, impp : float
        Maximum-power-point voltage (V) and current (A).
    width_m, height_m : float
        Module footprint (m).  ``height_m`` is the long side, mounted
        portrait along the roof slope.
    temp_coeff_voc : float
        Voc temperature coefficient in %/degC.  Datasheets print it as a
        negative number; a positive value is treated as a sign slip.
    price_usd : float
        Unit price (USD).
    """

    id: str
    brand: str
    model: str
    power_w: float
    voc: float
    isc: float
    vmpp: float
    impp: float
    width_m: float
    height_m: float
    temp_coeff_voc: float
    price_usd: float = 0.0

    def __post_init__(self) -> None:
        for name in ("power_w", "voc", "isc", "vmpp", "impp", "width_m", "height_m"):
            _require_positive(name, getattr(self, name))
        if not math.isfinite(self.temp_coeff_voc):
            raise ValueError(f"temp_coeff_voc must be finite, got {self.temp_coeff_voc}")
        _require_non_negative("price_usd", self.price_usd)

    @property
    def area_m2(self) -> float:
        return self.width_m * self.height_m

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ======================================================================
# Inverter
# ======================================================================

@dataclass(frozen=True)
class Inverter:
    """String inverter with one or more MPPT inputs.

    ``max_current_per_mppt`` is the maximum short-circuit current an MPPT
    input accepts (A).  ``mppt_min_voltage`` / ``mppt_max_voltage`` bound
    the tracking window (V).
    """

    id: str
    brand: str
    model: str
    power_kw: float
    max_input_voltage: float
    mppt_min_voltage: float
    mppt_max_voltage: float
    mppt_count: int
    max_strings_per_mppt: int
    max_current_per_mppt: float
    start_voltage: float = 0.0
    price_usd: float = 0.0

    def __post_init__(self) -> None:
        for name in ("power_kw", "max_input_voltage", "mppt_max_voltage", "max_current_per_mppt"):
            _require_positive(name, getattr(self, name))
        _require_non_negative("mppt_min_voltage", self.mppt_min_voltage)
        _require_non_negative("start_voltage", self.start_voltage)
        _require_non_negative("price_usd", self.price_usd)
        if self.mppt_min_voltage > self.mppt_max_voltage:
            raise ValueError(
                f"mppt_min_voltage ({self.mppt_min_voltage}) exceeds "
                f"mppt_max_voltage ({self.mppt_max_voltage})"
            )
        if int(self.mppt_count) < 1:
            raise ValueError(f"mppt_count must be >= 1, got {self.mppt_count}")
        if int(self.max_strings_per_mppt) < 1:
            raise ValueError(f"max_strings_per_mppt must be >= 1, got {self.max_strings_per_mppt}")

    @property
    def max_strings(self) -> int:
        """Total parallel strings the inverter accepts across all MPPTs."""
        return self.mppt_count * self.max_strings_per_mppt

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ======================================================================
# Add-ons
# ======================================================================

@dataclass(frozen=True)
class Battery:
    """Home battery.  ``compatible_brands`` lists inverter brands, or ``"All"``."""

    id: str
    brand: str
    model: str
    capacity_kwh: float
    max_output_kw: float
    compatible_brands: tuple[str, ...] = field(default_factory=tuple)
    price_usd: float = 0.0

    def __post_init__(self) -> None:
        _require_positive("capacity_kwh", self.capacity_kwh)
        _require_positive("max_output_kw", self.max_output_kw)
        _require_non_negative("price_usd", self.price_usd)
        # Accept any iterable of brands but store a tuple.
        object.__setattr__(self, "compatible_brands", tuple(self.compatible_brands))

    def is_compatible_with(self, inverter: Inverter) -> bool:
        brands = {b.strip().lower() for b in self.compatible_brands}
        return "all" in brands or inverter.brand.strip().lower() in brands

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["compatible_brands"] = list(self.compatible_brands)
        return data


@dataclass(frozen=True)
class HeatPump:
    """Air-source heat pump, rated by thermal output and COP."""

    id: str
    brand: str
    model: str
    thermal_power_kw: float
    cop: float
    price_usd: float = 0.0

    def __post_init__(self) -> None:
        _require_positive("thermal_power_kw", self.thermal_power_kw)
        _require_positive("cop", self.cop)
        _require_non_negative("price_usd", self.price_usd)

    @property
    def electrical_power_kw(self) -> float:
        return self.thermal_power_kw / self.cop

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
