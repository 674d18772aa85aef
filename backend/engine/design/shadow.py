"""Winter-solstice row spacing for tilted racking.

On 21 December the noon sun altitude is approximately
``90 - |latitude| - 23.45`` degrees.  A row of modules of slope length
``l`` tilted at ``beta`` casts a shadow of ``l * sin(beta) / tan(alpha)``
behind it; the next row must start at least that far away to stay
unshaded at solar noon on the shortest day.

The latitude is taken as ``|latitude|`` so southern sites get their own
winter solstice (21 June); the signed formula would give them summer
altitudes above 90 degrees and negative tangents.  When the sun stays at
or below the horizon the spacing is a fixed 15 m rather than the 0.5 m
clamp the bare formula would reach.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

SOLAR_DECLINATION_DEG: float = 23.45
MIN_SHADOW_M: float = 0.5
MAX_SHADOW_M: float = 20.0
DEGENERATE_SHADOW_M: float = 15.0
_MIN_TAN: float = 0.01


@dataclass(frozen=True)
class ShadowAnalysis:
    min_spacing: float       # m, row-to-row clearance
    altitude_deg: float      # winter-solstice noon sun altitude
    shadow_length: float     # m

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def solstice_altitude(latitude: float) -> float:
    """Noon sun altitude (deg) at the winter solstice of the site's hemisphere."""
    return 90.0 - abs(latitude) - SOLAR_DECLINATION_DEG


def shadow_spacing(latitude: float, tilt_deg: float, panel_length_m: float) -> ShadowAnalysis:
    """Minimum row spacing that avoids inter-row shading at the solstice.

    Near-polar sites (sun at or below the horizon, or ``|tan(alpha)| <
    0.01``) get a fixed 15 m.  Otherwise the shadow length is clamped to
    ``[0.5, 20]`` m.
    """
    altitude = solstice_altitude(latitude)
    tan_alpha = math.tan(math.radians(altitude))

    if altitude <= 0 or abs(tan_alpha) < _MIN_TAN:
        length = DEGENERATE_SHADOW_M
    else:
        raw = panel_length_m * math.sin(math.radians(tilt_deg)) / tan_alpha
        length = min(MAX_SHADOW_M, max(MIN_SHADOW_M, raw))

    length = round(length, 2)
    return ShadowAnalysis(
        min_spacing=length,
        altitude_deg=round(altitude, 2),
        shadow_length=length,
    )
