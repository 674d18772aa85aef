"""String / MPPT distribution search.

Finds a symmetric electrical layout: every string has the same length
``L`` and the strings are spread as evenly as possible over the MPPT
inputs.  Lengths are tried from the longest allowed down to the shortest,
since longer strings mean fewer parallel strings and lower DC current.

Asymmetric layouts (different string lengths on different MPPTs) are not
searched.  A panel count with no divisor inside the allowed range is
reported as a failure rather than silently rounded.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Union

from engine.equipment.models import Inverter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElectricalConfig:
    """Strings wired to one MPPT input."""

    mppt_id: int
    string_count: int
    panels_per_string: int

    @property
    def panel_count(self) -> int:
        return self.string_count * self.panels_per_string

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DistributionSuccess:
    config: tuple[ElectricalConfig, ...]

    success = True
    error = None

    @property
    def string_length(self) -> int | None:
        return self.config[0].panels_per_string if self.config else None

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "config": [c.to_dict() for c in self.config], "error": None}


@dataclass(frozen=True)
class DistributionFailure:
    reason: str

    success = False
    config: tuple[ElectricalConfig, ...] = ()

    @property
    def error(self) -> str:
        return self.reason

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "config": [], "error": self.reason}


DistributionOutcome = Union[DistributionSuccess, DistributionFailure]


def _spread_over_mppts(num_strings: int, inverter: Inverter, string_length: int) -> tuple[ElectricalConfig, ...]:
    """Assign ``ceil(remaining / remaining_mppts)`` strings to each MPPT in turn."""
    rows: list[ElectricalConfig] = []
    remaining = num_strings
    for idx in range(inverter.mppt_count):
        if remaining <= 0:
            break
        mppts_left = inverter.mppt_count - idx
        count = min(math.ceil(remaining / mppts_left), inverter.max_strings_per_mppt)
        rows.append(ElectricalConfig(mppt_id=idx + 1, string_count=count, panels_per_string=string_length))
        remaining -= count
    return tuple(rows)


def distribute_strings(
    total_panels: int,
    inverter: Inverter,
    min_per_string: int,
    max_per_string: int,
) -> DistributionOutcome:
    """Search a symmetric string layout for ``total_panels`` modules.

    Parameters
    ----------
    total_panels : int
        Modules to wire.  Zero succeeds with an empty configuration.
    inverter : Inverter
        Supplies ``mppt_count`` and ``max_strings_per_mppt``.
    min_per_string, max_per_string : int
        String length bounds from the voltage calculation.

    Returns
    -------
    DistributionSuccess or DistributionFailure
        The first (longest) string length ``L`` with
        ``total_panels % L == 0`` and
        ``total_panels / L <= mppt_count * max_strings_per_mppt``.
    """
    if total_panels <= 0:
        return DistributionSuccess(config=())

    capacity = inverter.max_strings
    lowest = max(1, min_per_string)

    for length in range(max_per_string, lowest - 1, -1):
        if total_panels % length != 0:
            continue
        num_strings = total_panels // length
        if num_strings > capacity:
            continue
        config = _spread_over_mppts(num_strings, inverter, length)
        logger.debug(
            "Distributed %d panels as %d x %d over %d MPPT(s)",
            total_panels, num_strings, length, len(config),
        )
        return DistributionSuccess(config=config)

    if max_per_string < min_per_string:
        reason = (
            f"No valid string length: voltage limits are inverted "
            f"(min {min_per_string} > max {max_per_string} panels per string)"
        )
    else:
        reason = (
            f"{total_panels} panels cannot be split into equal strings of "
            f"{min_per_string}-{max_per_string} panels within {capacity} inverter inputs "
            f"({inverter.mppt_count} MPPT x {inverter.max_strings_per_mppt} strings)"
        )
    return DistributionFailure(reason=reason)
