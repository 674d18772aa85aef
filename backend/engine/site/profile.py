"""Site solar resource and roof orientation.

A :class:`SiteSolarProfile` is the per-location input to the financial
simulation: an annual average of daily peak-sun hours plus twelve monthly
multipliers that shape the seasonal curve.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

MONTHS_PER_YEAR: int = 12


class Orientation(str, Enum):
    """Compass direction the roof plane faces."""

    SOUTH = "south"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    EAST = "east"
    WEST = "west"
    NORTH = "north"


# Yield relative to a south-facing plane (northern hemisphere).
DIRECTION_EFFICIENCY: dict[Orientation, float] = {
    Orientation.SOUTH: 1.0,
    Orientation.SOUTH_EAST: 0.96,
    Orientation.SOUTH_WEST: 0.96,
    Orientation.EAST: 0.88,
    Orientation.WEST: 0.88,
    Orientation.NORTH: 0.65,
}


def direction_efficiency(orientation: Orientation | str) -> float:
    """Return the orientation yield factor, 1.0 for unknown directions."""
    try:
        return DIRECTION_EFFICIENCY[Orientation(orientation)]
    except ValueError:
        return 1.0


@dataclass(frozen=True)
class SiteSolarProfile:
    """Solar resource for one location.

    Parameters
    ----------
    name : str
        Display name of the site (usually a city).
    latitude, longitude : float
        Site coordinates (degrees, positive north / east).
    avg_insolation : float
        Average daily peak-sun hours over the year (h/day, i.e.
        kWh/m^2/day).
    monthly_factors : sequence of 12 floats
        January..December multipliers applied to ``avg_insolation``.
    id : int or None
        Identifier in the site table, when the profile came from one.
    """

    name: str
    latitude: float
    longitude: float
    avg_insolation: float
    monthly_factors: tuple[float, ...]
    id: int | None = None

    def __post_init__(self) -> None:
        factors = tuple(float(f) for f in self.monthly_factors)
        if len(factors) != MONTHS_PER_YEAR:
            raise ValueError(
                f"monthly_factors must have {MONTHS_PER_YEAR} values, got {len(factors)}"
            )
        if any(not math.isfinite(f) or f <= 0 for f in factors):
            raise ValueError(f"monthly_factors must all be finite and > 0, got {factors}")
        if not math.isfinite(self.avg_insolation) or self.avg_insolation < 0:
            raise ValueError(f"avg_insolation must be >= 0, got {self.avg_insolation}")
        if not (math.isfinite(self.latitude) and -90.0 <= self.latitude <= 90.0):
            raise ValueError(f"latitude must be within [-90, 90], got {self.latitude}")
        if not math.isfinite(self.longitude):
            raise ValueError(f"longitude must be finite, got {self.longitude}")
        object.__setattr__(self, "monthly_factors", factors)

    @classmethod
    def from_factors(
        cls,
        name: str,
        latitude: float,
        longitude: float,
        avg_insolation: float,
        monthly_factors: Sequence[float],
        id: int | None = None,
    ) -> SiteSolarProfile:
        return cls(
            name=name,
            latitude=latitude,
            longitude=longitude,
            avg_insolation=avg_insolation,
            monthly_factors=tuple(monthly_factors),
            id=id,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "avg_insolation": self.avg_insolation,
            "monthly_factors": list(self.monthly_factors),
        }
