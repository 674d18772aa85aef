"""Site solar resource: profiles, reference presets and nearest-site lookup."""

from .profile import (
    DIRECTION_EFFICIENCY,
    Orientation,
    SiteSolarProfile,
    direction_efficiency,
)
from .presets import SITE_PRESETS
from .resolver import FAR_MATCH_THRESHOLD_DEG, SiteMatch, get_site, resolve_site

__all__ = [
    # profile
    "Orientation",
    "DIRECTION_EFFICIENCY",
    "SiteSolarProfile",
    "direction_efficiency",
    # presets
    "SITE_PRESETS",
    # resolver
    "FAR_MATCH_THRESHOLD_DEG",
    "SiteMatch",
    "resolve_site",
    "get_site",
]
