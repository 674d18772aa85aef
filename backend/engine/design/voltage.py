"""Temperature-compensated string voltage limits.

The upper string length is set by the open-circuit voltage on the
coldest morning (-10 degC), which must stay below the inverter's maximum
DC input voltage.  The lower string length is set by the MPP voltage on
the hottest afternoon (70 degC cell temperature), which must stay above
the bottom of the MPPT window.

References
----------
- IEC 62548:2016, Photovoltaic (PV) arrays - Design requirements, §6.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

from engine.equipment.models import Inverter, SolarPanel

T_STC: float = 25.0        # degC
T_COLD: float = -10.0      # design minimum ambient (degC)
T_HOT: float = 70.0        # design maximum cell temperature (degC)

_EPS = 1e-9


@dataclass(frozen=True)
class VoltageLimits:
    """Allowed panels per string and the per-panel design voltages."""

    min_panels_per_string: int
    max_panels_per_string: int
    voc_at_cold: float
    vmpp_at_hot: float

    @property
    def is_feasible(self) -> bool:
        return self.max_panels_per_string >= self.min_panels_per_string

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def normalized_temp_coeff(temp_coeff_voc: float) -> float:
    """Voc coefficient (%/degC) forced negative; a positive value is a sign slip."""
    return -abs(temp_coeff_voc)


def voltage_limits(panel: SolarPanel, inverter: Inverter) -> VoltageLimits:
    """Compute string length bounds for a panel / inverter pair.

    ``voc_at_cold = Voc * (1 + (T_COLD - 25) * coeff / 100)`` and
    ``vmpp_at_hot = Vmpp * (1 + (T_HOT - 25) * coeff / 100)`` with the
    coefficient normalised negative.  The bounds are not cross-checked
    here: ``max < min`` is left for the caller to report.
    """
    coeff = normalized_temp_coeff(panel.temp_coeff_voc)

    voc_at_cold = panel.voc * (1.0 + (T_COLD - T_STC) * coeff / 100.0)
    vmpp_at_hot = panel.vmpp * (1.0 + (T_HOT - T_STC) * coeff / 100.0)

    max_panels = math.floor(inverter.max_input_voltage / max(voc_at_cold, _EPS))
    # Extreme coefficients can drive vmpp_at_hot to zero or below.
    min_panels = math.ceil(inverter.mppt_min_voltage / max(vmpp_at_hot, _EPS))

    return VoltageLimits(
        min_panels_per_string=int(min_panels),
        max_panels_per_string=int(max_panels),
        voc_at_cold=voc_at_cold,
        vmpp_at_hot=vmpp_at_hot,
    )
