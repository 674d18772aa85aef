"""Resolve a roof location to the nearest known site solar profile."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

from engine.errors import DataNotFoundError

from .presets import SITE_PRESETS
from .profile import SiteSolarProfile

logger = logging.getLogger(__name__)

# Beyond this planar distance (degrees) the nearest site is a weak proxy.
FAR_MATCH_THRESHOLD_DEG: float = 1.8


@dataclass(frozen=True)
class SiteMatch:
    """Outcome of a nearest-site lookup."""

    site: SiteSolarProfile
    distance_deg: float
    is_far_match: bool


def resolve_site(
    latitude: float,
    longitude: float,
    sites: Iterable[SiteSolarProfile] = SITE_PRESETS,
    far_threshold_deg: float = FAR_MATCH_THRESHOLD_DEG,
) -> SiteMatch:
    """Return the site closest to ``(latitude, longitude)``.

    Distance is the planar Euclidean distance in degrees, which is adequate
    for choosing between sites a few degrees apart.  A match farther than
    ``far_threshold_deg`` is still returned but flagged and logged.

    Raises
    ------
    DataNotFoundError
        If the coordinates are not finite or the site table is empty.
    """
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise DataNotFoundError(
            f"Cannot resolve a site for coordinates ({latitude}, {longitude})"
        )

    best: SiteSolarProfile | None = None
    best_dist = math.inf
    for site in sites:
        dist = math.hypot(site.latitude - latitude, site.longitude - longitude)
        if dist < best_dist:
            best, best_dist = site, dist

    if best is None:
        raise DataNotFoundError("No solar profile available: site table is empty")

    is_far = best_dist > far_threshold_deg
    if is_far:
        logger.warning(
            "Nearest solar profile %s is %.2f deg from (%.4f, %.4f); results are approximate",
            best.name, best_dist, latitude, longitude,
        )
    else:
        logger.debug("Resolved (%.4f, %.4f) to %s (%.2f deg)", latitude, longitude, best.name, best_dist)

    return SiteMatch(site=best, distance_deg=best_dist, is_far_match=is_far)


def get_site(site_id: int, sites: Iterable[SiteSolarProfile] = SITE_PRESETS) -> SiteSolarProfile:
    """Exact lookup by site id."""
    for site in sites:
        if site.id == site_id:
            return site
    raise DataNotFoundError(f"No solar profile for site id {site_id}")
