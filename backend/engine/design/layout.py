"""Rectangular panel packing on a roof plane.

Modules are mounted portrait in a regular grid: columns across the roof
width, rows along the roof length.  Flush-mounted (pitched roof) rows sit
5 cm apart; tilted rows on a flat roof are spaced by their horizontal
projection plus the winter-solstice shadow clearance.

The full list of panel rectangles is returned.  Capping how many of them
a UI draws is left to the presentation layer.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

from engine.equipment.models import SolarPanel

from .shadow import ShadowAnalysis

LATERAL_GAP_M: float = 0.02        # clamp gap between neighbouring modules
FLUSH_ROW_GAP_M: float = 0.05      # gap between flush-mounted rows


@dataclass(frozen=True)
class PanelRect:
    """Footprint of one module in roof coordinates (m, origin top-left)."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class LayoutAnalysis:
    total_panel_count: int
    rows: int
    columns: int
    used_area: float            # m^2 of module surface
    packing_efficiency: float   # % of roof area covered by modules
    total_dc_kw: float
    roof_width: float
    roof_length: float
    panels: tuple[PanelRect, ...]

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["panels"] = [asdict(p) for p in self.panels]
        return data


def row_pitch(panel: SolarPanel, tilt_deg: float, is_flat_roof: bool, shadow: ShadowAnalysis) -> float:
    """Distance between the leading edges of consecutive rows (m)."""
    if is_flat_roof:
        return math.cos(math.radians(tilt_deg)) * panel.height_m + shadow.min_spacing
    return panel.height_m + FLUSH_ROW_GAP_M


def _roof_side(value: float) -> float:
    return value if math.isfinite(value) and value > 0 else 0.0


def pack_layout(
    roof_width: float,
    roof_length: float,
    panel: SolarPanel,
    tilt_deg: float,
    is_flat_roof: bool,
    shadow: ShadowAnalysis,
) -> LayoutAnalysis:
    """Fit as many modules as possible in a ``roof_width`` x ``roof_length`` rectangle.

    Non-positive or non-finite roof dimensions are treated as zero and give
    an empty layout with zero packing efficiency.
    """
    width = _roof_side(roof_width)
    length = _roof_side(roof_length)

    lateral_pitch = panel.width_m + LATERAL_GAP_M
    longitudinal_pitch = row_pitch(panel, tilt_deg, is_flat_roof, shadow)

    columns = max(0, math.floor(width / lateral_pitch))
    pitch_ok = math.isfinite(longitudinal_pitch) and longitudinal_pitch > 0
    rows = max(0, math.floor(length / longitudinal_pitch)) if pitch_ok else 0
    total = max(0, columns * rows)

    # Footprint drawn for a tilted module is its horizontal projection.
    rect_h = math.cos(math.radians(tilt_deg)) * panel.height_m if is_flat_roof else panel.height_m

    panels = tuple(
        PanelRect(
            x=round(c * lateral_pitch, 4),
            y=round(r * longitudinal_pitch, 4),
            w=panel.width_m,
            h=round(rect_h, 4),
        )
        for r in range(rows)
        for c in range(columns)
    )

    used_area = total * panel.width_m * panel.height_m
    roof_area = width * length
    efficiency = used_area / roof_area * 100.0 if roof_area > 0 else 0.0

    return LayoutAnalysis(
        total_panel_count=total,
        rows=rows,
        columns=columns,
        used_area=round(used_area, 2),
        packing_efficiency=round(efficiency, 2),
        total_dc_kw=round(total * panel.power_w / 1000.0, 3),
        roof_width=width,
        roof_length=length,
        panels=panels,
    )
