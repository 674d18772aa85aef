"""Reference site table.

Average daily peak-sun hours and monthly shape factors for a set of
reference cities, taken from national solar potential atlas (GEPA)
figures.  Used by :func:`engine.site.resolver.resolve_site` when the
caller does not supply its own table.
"""

from __future__ import annotations

from .profile import SiteSolarProfile

# ======================================================================
# City presets
# ======================================================================

SITE_PRESETS: tuple[SiteSolarProfile, ...] = (
    SiteSolarProfile(
        id=1, name="Adana", latitude=37.00, longitude=35.32, avg_insolation=5.5,
        monthly_factors=(0.60, 0.70, 0.85, 1.00, 1.15, 1.25, 1.30, 1.28, 1.15, 0.95, 0.75, 0.60),
    ),
    SiteSolarProfile(
        id=6, name="Ankara", latitude=39.93, longitude=32.85, avg_insolation=4.8,
        monthly_factors=(0.55, 0.65, 0.85, 1.00, 1.20, 1.30, 1.35, 1.30, 1.10, 0.90, 0.65, 0.50),
    ),
    SiteSolarProfile(
        id=7, name="Antalya", latitude=36.89, longitude=30.71, avg_insolation=5.6,
        monthly_factors=(0.62, 0.72, 0.87, 1.02, 1.18, 1.28, 1.32, 1.30, 1.18, 0.98, 0.78, 0.62),
    ),
    SiteSolarProfile(
        id=16, name="Bursa", latitude=40.18, longitude=29.06, avg_insolation=4.2,
        monthly_factors=(0.58, 0.68, 0.83, 0.98, 1.15, 1.25, 1.28, 1.25, 1.08, 0.88, 0.68, 0.55),
    ),
    SiteSolarProfile(
        id=21, name="Diyarbakır", latitude=37.91, longitude=40.23, avg_insolation=5.3,
        monthly_factors=(0.58, 0.68, 0.85, 1.02, 1.20, 1.30, 1.35, 1.32, 1.15, 0.92, 0.72, 0.58),
    ),
    SiteSolarProfile(
        id=34, name="İstanbul", latitude=41.00, longitude=28.97, avg_insolation=4.0,
        monthly_factors=(0.55, 0.65, 0.80, 0.95, 1.15, 1.25, 1.30, 1.25, 1.05, 0.85, 0.65, 0.52),
    ),
    SiteSolarProfile(
        id=35, name="İzmir", latitude=38.42, longitude=27.14, avg_insolation=5.1,
        monthly_factors=(0.60, 0.70, 0.85, 1.00, 1.18, 1.27, 1.32, 1.28, 1.12, 0.92, 0.72, 0.60),
    ),
    SiteSolarProfile(
        id=42, name="Konya", latitude=37.87, longitude=32.48, avg_insolation=5.0,
        monthly_factors=(0.56, 0.66, 0.84, 1.00, 1.20, 1.30, 1.35, 1.30, 1.12, 0.90, 0.70, 0.55),
    ),
    SiteSolarProfile(
        id=61, name="Trabzon", latitude=41.00, longitude=39.71, avg_insolation=3.8,
        monthly_factors=(0.52, 0.62, 0.78, 0.92, 1.12, 1.22, 1.28, 1.22, 1.02, 0.82, 0.62, 0.50),
    ),
    SiteSolarProfile(
        id=63, name="Şanlıurfa", latitude=37.15, longitude=38.79, avg_insolation=5.4,
        monthly_factors=(0.58, 0.68, 0.86, 1.03, 1.22, 1.32, 1.36, 1.33, 1.16, 0.93, 0.73, 0.58),
    ),
    SiteSolarProfile(
        id=65, name="Van", latitude=38.50, longitude=43.37, avg_insolation=4.6,
        monthly_factors=(0.50, 0.60, 0.80, 0.98, 1.20, 1.30, 1.38, 1.32, 1.10, 0.88, 0.65, 0.48),
    ),
)
