"""Reference equipment catalog.

A small, read-only catalog of common modules, inverters and add-ons used
as defaults by the HTTP adapter and as fixtures in tests.  Production
deployments are expected to supply their own catalog.
"""

from __future__ import annotations

from engine.errors import DataNotFoundError

from .models import Battery, HeatPump, Inverter, SolarPanel

# ======================================================================
# Modules
# ======================================================================

PANELS: tuple[SolarPanel, ...] = (
    SolarPanel(
        id="p1", brand="CW Enerji", model="CW-108PM-455W",
        power_w=455, voc=49.30, isc=11.60, vmpp=41.50, impp=10.97,
        width_m=1.048, height_m=2.108, temp_coeff_voc=-0.27, price_usd=145,
    ),
    SolarPanel(
        id="p2", brand="TommaTech", model="TT-545-144PM",
        power_w=545, voc=49.60, isc=13.90, vmpp=41.80, impp=13.04,
        width_m=1.134, height_m=2.279, temp_coeff_voc=-0.27, price_usd=175,
    ),
    SolarPanel(
        id="p3", brand="Jinko Solar", model="Tiger Neo 600W",
        power_w=600, voc=51.50, isc=14.50, vmpp=42.80, impp=14.02,
        width_m=1.134, height_m=2.465, temp_coeff_voc=-0.25, price_usd=200,
    ),
    SolarPanel(
        id="p4", brand="Longi", model="Hi-MO 5m 550W",
        power_w=550, voc=49.80, isc=13.90, vmpp=41.90, impp=13.13,
        width_m=1.134, height_m=2.279, temp_coeff_voc=-0.27, price_usd=180,
    ),
)

# ======================================================================
# Inverters
# ======================================================================

INVERTERS: tuple[Inverter, ...] = (
    Inverter(
        id="inv1", brand="Huawei", model="SUN2000-10KTL",
        power_kw=10, max_input_voltage=1100,
        mppt_min_voltage=140, mppt_max_voltage=980,
        mppt_count=2, max_strings_per_mppt=1, max_current_per_mppt=13.5,
        start_voltage=200, price_usd=1200,
    ),
    Inverter(
        id="inv2", brand="Huawei", model="SUN2000-20KTL",
        power_kw=20, max_input_voltage=1100,
        mppt_min_voltage=200, mppt_max_voltage=800,
        mppt_count=2, max_strings_per_mppt=2, max_current_per_mppt=22,
        start_voltage=200, price_usd=1800,
    ),
    Inverter(
        id="inv3", brand="Growatt", model="MID 15KTL3-X",
        power_kw=15, max_input_voltage=1100,
        mppt_min_voltage=200, mppt_max_voltage=1000,
        mppt_count=2, max_strings_per_mppt=2, max_current_per_mppt=26,
        start_voltage=250, price_usd=1400,
    ),
    Inverter(
        id="inv4", brand="Fronius", model="Symo 10.0-3-M",
        power_kw=10, max_input_voltage=1000,
        mppt_min_voltage=200, mppt_max_voltage=800,
        mppt_count=2, max_strings_per_mppt=2, max_current_per_mppt=27,
        start_voltage=200, price_usd=1600,
    ),
)

# ======================================================================
# Add-ons
# ======================================================================

BATTERIES: tuple[Battery, ...] = (
    Battery(
        id="b1", brand="Huawei", model="LUNA2000-10",
        capacity_kwh=10, max_output_kw=5, compatible_brands=("Huawei",),
        price_usd=4200,
    ),
    Battery(
        id="b2", brand="BYD", model="Battery-Box Premium HVS 10.2",
        capacity_kwh=10.2, max_output_kw=10.2,
        compatible_brands=("Fronius", "Growatt", "Huawei"), price_usd=4600,
    ),
    Battery(
        id="b3", brand="Pylontech", model="Force H2",
        capacity_kwh=7.1, max_output_kw=3.5, compatible_brands=("All",),
        price_usd=2900,
    ),
)

HEAT_PUMPS: tuple[HeatPump, ...] = (
    HeatPump(id="hp1", brand="Daikin", model="Altherma 3 H HT 14",
             thermal_power_kw=14, cop=4.5, price_usd=7800),
    HeatPump(id="hp2", brand="Mitsubishi", model="Ecodan 8.5",
             thermal_power_kw=8.5, cop=4.2, price_usd=5200),
)


def _find(records, record_id: str, kind: str):
    for rec in records:
        if rec.id == record_id:
            return rec
    raise DataNotFoundError(f"{kind} '{record_id}' not found in catalog")


def get_panel(panel_id: str) -> SolarPanel:
    return _find(PANELS, panel_id, "Panel")


def get_inverter(inverter_id: str) -> Inverter:
    return _find(INVERTERS, inverter_id, "Inverter")


def get_battery(battery_id: str) -> Battery:
    return _find(BATTERIES, battery_id, "Battery")


def get_heat_pump(heat_pump_id: str) -> HeatPump:
    return _find(HEAT_PUMPS, heat_pump_id, "Heat pump")
