"""Shared test fixtures for SolarScope engine and API tests."""

from __future__ import annotations

import pytest

from engine.economics import BuildingType, CalculationInput, ConsumptionProfile, GlobalSettings
from engine.equipment import Inverter, SolarPanel
from engine.site import SiteSolarProfile


# ======================================================================
# Equipment fixtures
# ======================================================================

@pytest.fixture
def panel_550() -> SolarPanel:
    """550 W mono-PERC module (Longi Hi-MO 5m datasheet values)."""
    return SolarPanel(
        id="t550", brand="Longi", model="Hi-MO 5m 550W",
        power_w=550, voc=49.8, isc=13.9, vmpp=41.9, impp=13.13,
        width_m=1.134, height_m=2.279, temp_coeff_voc=-0.27,
    )


@pytest.fixture
def inverter_20kw() -> Inverter:
    """20 kW, 2 MPPT x 2 strings, 1100 V maximum input."""
    return Inverter(
        id="t20", brand="Huawei", model="SUN2000-20KTL",
        power_kw=20, max_input_voltage=1100,
        mppt_min_voltage=200, mppt_max_voltage=800,
        mppt_count=2, max_strings_per_mppt=2, max_current_per_mppt=22,
    )


# ======================================================================
# Site / financial fixtures
# ======================================================================

@pytest.fixture
def flat_site() -> SiteSolarProfile:
    """Site with no seasonality: every month factor is 1.0."""
    return SiteSolarProfile.from_factors(
        name="Flatland", latitude=39.93, longitude=32.85,
        avg_insolation=5.0, monthly_factors=[1.0] * 12, id=99,
    )


@pytest.fixture
def settings() -> GlobalSettings:
    return GlobalSettings(
        currency_rate=30.0,
        base_price=2.5,
        panel_wattage=500,
        system_cost_per_kw=1000,
        energy_inflation_rate=0.05,
        panel_degradation_rate=0.005,
        maintenance_cost_fraction=0.05,
        sell_price_multiplier=0.6,
        tariff_rates={BuildingType.RESIDENTIAL: 2.5, BuildingType.COMMERCIAL: 4.0},
    )


@pytest.fixture
def household() -> CalculationInput:
    """Residential customer, 1500/month bill, 60 m^2 south roof."""
    return CalculationInput(
        consumption_profile=ConsumptionProfile.BALANCED,
        building_type=BuildingType.RESIDENTIAL,
        bill_amount=1500,
        roof_area=60,
    )
