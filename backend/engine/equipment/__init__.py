"""Equipment catalog records (modules, inverters, batteries, heat pumps)."""

from .models import Battery, HeatPump, Inverter, SolarPanel
from .catalog import (
    BATTERIES,
    HEAT_PUMPS,
    INVERTERS,
    PANELS,
    get_battery,
    get_heat_pump,
    get_inverter,
    get_panel,
)

__all__ = [
    # models
    "SolarPanel",
    "Inverter",
    "Battery",
    "HeatPump",
    # catalog
    "PANELS",
    "INVERTERS",
    "BATTERIES",
    "HEAT_PUMPS",
    "get_panel",
    "get_inverter",
    "get_battery",
    "get_heat_pump",
]
