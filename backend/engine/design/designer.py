"""Engineering design pipeline for one roof / panel / inverter combination.

Processing chain
~~~~~~~~~~~~~~~~
1. Winter-solstice shadow spacing (rows on flat roofs).
2. Panel packing on the roof rectangle -> module count.
3. Voltage limits -> allowed string lengths.
4. MPPT input current check.
5. String / MPPT distribution of the packed module count.
6. DC/AC loading band.
7. Optional battery / heat-pump notes.

Every check runs; their diagnostics are collected in order on the
:class:`ValidationReport`.  Nothing here raises for engineering problems.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from engine.equipment.models import Battery, HeatPump, Inverter, SolarPanel

from .current import check_current
from .layout import FLUSH_ROW_GAP_M, LayoutAnalysis, pack_layout
from .loading import RatioStatus, analyze_loading
from .report import DiagnosticLog, ValidationReport
from .shadow import ShadowAnalysis, shadow_spacing
from .stringing import distribute_strings
from .voltage import voltage_limits

logger = logging.getLogger(__name__)

DEFAULT_TILT_DEG: float = 20.0


@dataclass(frozen=True)
class DesignResult:
    panel: SolarPanel
    inverter: Inverter
    battery: Battery | None
    heat_pump: HeatPump | None
    tilt_deg: float
    is_flat_roof: bool
    report: ValidationReport
    shadow: ShadowAnalysis
    min_row_spacing: float
    layout: LayoutAnalysis

    def to_dict(self) -> dict[str, Any]:
        return {
            "panel": self.panel.to_dict(),
            "inverter": self.inverter.to_dict(),
            "battery": self.battery.to_dict() if self.battery else None,
            "heat_pump": self.heat_pump.to_dict() if self.heat_pump else None,
            "tilt_deg": self.tilt_deg,
            "is_flat_roof": self.is_flat_roof,
            "report": self.report.to_dict(),
            "shadow": self.shadow.to_dict(),
            "min_row_spacing": self.min_row_spacing,
            "layout": self.layout.to_dict(),
        }


def _check_addons(
    log: DiagnosticLog,
    inverter: Inverter,
    battery: Battery | None,
    heat_pump: HeatPump | None,
) -> None:
    if battery is not None:
        if battery.is_compatible_with(inverter):
            log.success(
                f"Battery {battery.brand} {battery.model} ({battery.capacity_kwh:g} kWh) "
                f"is compatible with {inverter.brand} inverters."
            )
        else:
            log.warning(
                f"Battery {battery.brand} {battery.model} is not listed as compatible with "
                f"{inverter.brand} inverters; a hybrid inverter or separate charger may be needed."
            )
    if heat_pump is not None:
        log.success(
            f"Heat pump {heat_pump.brand} {heat_pump.model} adds about "
            f"{heat_pump.electrical_power_kw:.2f} kW of electrical load "
            f"({heat_pump.thermal_power_kw:g} kW thermal, COP {heat_pump.cop:g})."
        )


def design(
    latitude: float,
    roof_width: float,
    roof_length: float,
    panel: SolarPanel,
    inverter: Inverter,
    tilt_deg: float = DEFAULT_TILT_DEG,
    is_flat_roof: bool = False,
    battery: Battery | None = None,
    heat_pump: HeatPump | None = None,
) -> DesignResult:
    """Lay out and validate a PV design.

    Parameters
    ----------
    latitude : float
        Site latitude (degrees), used for solstice shadow geometry.
    roof_width, roof_length : float
        Usable roof rectangle (m).  Non-positive values give an empty
        layout.
    panel, inverter : SolarPanel, Inverter
        Candidate equipment pair.
    tilt_deg : float
        Module tilt (degrees from horizontal).
    is_flat_roof : bool
        ``True`` for tilted racking on a flat roof (rows spaced for
        shading), ``False`` for flush mounting on a pitched roof.
    battery, heat_pump : optional
        Add-ons; they only contribute informational messages.

    Returns
    -------
    DesignResult
    """
    log = DiagnosticLog()

    # ---- 1-2. Geometry ----
    shadow = shadow_spacing(latitude, tilt_deg, panel.height_m)
    layout = pack_layout(roof_width, roof_length, panel, tilt_deg, is_flat_roof, shadow)
    total = layout.total_panel_count

    if total == 0:
        log.warning("No panels fit on the given roof dimensions.")

    # ---- 3. Voltage window ----
    limits = voltage_limits(panel, inverter)
    is_valid = True
    if not limits.is_feasible:
        is_valid = False
        log.error(
            f"Panel voltage does not fit the inverter window: at most "
            f"{limits.max_panels_per_string} panels per string by Voc at -10 °C "
            f"({limits.voc_at_cold:.2f} V), but at least {limits.min_panels_per_string} "
            f"needed to reach the MPPT minimum ({limits.vmpp_at_hot:.2f} V per panel at 70 °C)."
        )
    else:
        log.success(
            f"String length range {limits.min_panels_per_string}-"
            f"{limits.max_panels_per_string} panels (Voc at -10 °C {limits.voc_at_cold:.2f} V, "
            f"Vmpp at 70 °C {limits.vmpp_at_hot:.2f} V)."
        )

    # ---- 4. Current ----
    current = check_current(panel, inverter)
    if current.is_safe:
        log.success(
            f"Panel Isc {current.panel_isc:g} A is within the MPPT input limit "
            f"of {current.inverter_max_current:g} A."
        )
    else:
        log.warning(
            f"Panel Isc {current.panel_isc:g} A exceeds the MPPT input limit of "
            f"{current.inverter_max_current:g} A; the inverter will clip current."
        )

    # ---- 5. String distribution ----
    outcome = distribute_strings(
        total, inverter, limits.min_panels_per_string, limits.max_panels_per_string,
    )
    if not outcome.success:
        is_valid = False
        log.error(f"String distribution failed: {outcome.error}.")
    elif outcome.config:
        rows = ", ".join(
            f"MPPT {c.mppt_id}: {c.string_count} x {c.panels_per_string}" for c in outcome.config
        )
        log.success(f"Electrical layout: {rows}.")

    # ---- 6. Loading ----
    loading = analyze_loading(total, panel, inverter)
    if loading.status == RatioStatus.UNDERLOADED:
        log.warning(f"DC/AC ratio {loading.ratio:.2f} is low; the inverter is oversized.")
    elif loading.status == RatioStatus.CLIPPING:
        log.warning(f"DC/AC ratio {loading.ratio:.2f} is high; expect clipping losses.")
    else:
        log.success(f"DC/AC ratio {loading.ratio:.2f} ({loading.status.value}).")

    # ---- 7. Add-ons ----
    _check_addons(log, inverter, battery, heat_pump)

    report = ValidationReport(
        is_valid=is_valid,
        ac_dc_ratio=round(loading.ratio, 3),
        ratio_status=loading.status,
        electrical_config=outcome.config,
        voltage_check=limits,
        current_check=current,
        messages=log.freeze(),
    )

    logger.info(
        "Design %s / %s: %d panels, %.2f kWp, valid=%s",
        panel.model, inverter.model, total, layout.total_dc_kw, is_valid,
    )

    return DesignResult(
        panel=panel,
        inverter=inverter,
        battery=battery,
        heat_pump=heat_pump,
        tilt_deg=tilt_deg,
        is_flat_roof=is_flat_roof,
        report=report,
        shadow=shadow,
        min_row_spacing=shadow.min_spacing if is_flat_roof else FLUSH_ROW_GAP_M,
        layout=layout,
    )
