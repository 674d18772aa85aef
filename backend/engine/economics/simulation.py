"""Multi-scenario financial simulation of a rooftop PV system.

For each sizing scenario (Conservative / Optimal / Aggressive) the engine

1. derives annual consumption from the monthly bill and tariff,
2. sizes the system to the scenario's consumption offset, capped by the
   roof area (6 m^2 per kWp),
3. simulates twelve months of production, self-consumption and export,
4. projects 25 years of savings with panel degradation, energy-price
   inflation and a one-time maintenance charge at year 10.

Monthly and yearly series are computed as 12- and 25-element numpy
vectors.  All functions are pure; results are immutable records.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from engine.errors import DataNotFoundError
from engine.site.profile import SiteSolarProfile, direction_efficiency

from .inputs import SELF_CONSUMPTION_RATES, CalculationInput, GlobalSettings
from .scenarios import RECOMMENDED_SCENARIO, SCENARIOS, ScenarioConfig, ScenarioType

logger = logging.getLogger(__name__)

# ======================================================================
# Constants
# ======================================================================

PROJECTION_YEARS: int = 25
MAINTENANCE_YEAR: int = 10
ROOF_AREA_PER_KW: float = 6.0          # m^2 of roof per installed kWp
CO2_KG_PER_KWH: float = 0.65           # grid emission factor
DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_NAMES: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
MIN_SELF_CONSUMPTION: float = 0.20
MAX_SELF_CONSUMPTION: float = 0.95


# ======================================================================
# Result records
# ======================================================================

@dataclass(frozen=True)
class MonthlyData:
    """Energy (kWh) and savings (local currency) of one calendar month."""

    month: str
    production: float
    consumption: float
    self_consumed: float
    surplus: float
    deficit: float
    savings: float


@dataclass(frozen=True)
class YearlyData:
    """One year of the 25-year projection (cumulative values to date)."""

    year: int
    production: float
    consumption: float
    savings: float
    cumulative_savings: float
    cumulative_cost: float
    net_profit: float
    roi: float
    degradation_factor: float
    cash_flow_without_solar: float


@dataclass(frozen=True)
class ScenarioResult:
    scenario: ScenarioType
    system_size_kw: float
    panel_count: int
    total_cost_usd: float
    total_cost_local: float
    payback_year: int
    net_profit_25_years: float
    monthly_savings: float
    annual_production_kwh: float
    annual_savings: float
    co2_saved_tons: float
    self_consumption_rate: float   # % of production consumed on site
    grid_sale_revenue: float
    average_roi: float
    monthly: tuple[MonthlyData, ...]
    yearly: tuple[YearlyData, ...]

    @property
    def initial_investment(self) -> float:
        return self.total_cost_local

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenario": self.scenario.value,
            "system_size_kw": self.system_size_kw,
            "panel_count": self.panel_count,
            "total_cost_usd": self.total_cost_usd,
            "total_cost_local": self.total_cost_local,
            "initial_investment": self.initial_investment,
            "payback_year": self.payback_year,
            "net_profit_25_years": self.net_profit_25_years,
            "monthly_savings": self.monthly_savings,
            "annual_production_kwh": self.annual_production_kwh,
            "annual_savings": self.annual_savings,
            "co2_saved_tons": self.co2_saved_tons,
            "self_consumption_rate": self.self_consumption_rate,
            "grid_sale_revenue": self.grid_sale_revenue,
            "average_roi": self.average_roi,
            "monthly": [asdict(m) for m in self.monthly],
            "yearly": [asdict(y) for y in self.yearly],
        }


@dataclass(frozen=True)
class SimulationResult:
    """All scenario results for one request.  Always recomputed, never edited."""

    scenarios: dict[ScenarioType, ScenarioResult]
    recommended_scenario: ScenarioType
    site: SiteSolarProfile
    input: CalculationInput

    @property
    def recommended(self) -> ScenarioResult:
        return self.scenarios[self.recommended_scenario]

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenarios": {k.value: v.to_dict() for k, v in self.scenarios.items()},
            "recommended_scenario": self.recommended_scenario.value,
            "site": self.site.to_dict(),
            "input": self.input.to_dict(),
        }


# ======================================================================
# Sizing helpers
# ======================================================================

def annual_consumption_kwh(bill_amount: float, tariff: float) -> float:
    """Annual consumption implied by a monthly bill: ``bill / tariff * 12``."""
    if tariff <= 0:
        return 0.0
    return bill_amount / tariff * 12.0


def target_system_kw(
    annual_consumption: float,
    offset_target: float,
    specific_yield: float,
    system_efficiency: float,
    roof_area: float,
) -> float:
    """Size the system to the offset target, capped by the usable roof area."""
    max_kw_from_roof = max(roof_area, 0.0) / ROOF_AREA_PER_KW
    denom = specific_yield * system_efficiency
    if denom <= 0:
        return 0.0
    target_kw = annual_consumption * offset_target / denom
    return max(0.0, min(target_kw, max_kw_from_roof))


def self_consumption_factor(input: CalculationInput, config: ScenarioConfig) -> float:
    """Profile self-consumption rate shifted by scenario and clamped."""
    rate = SELF_CONSUMPTION_RATES[input.consumption_profile] + config.self_consumption_shift
    return min(MAX_SELF_CONSUMPTION, max(MIN_SELF_CONSUMPTION, rate))


def _truncate(value: float, digits: int = 2) -> float:
    """Round toward zero so the reported size never exceeds the computed one.

    The epsilon absorbs float noise such as ``0.29 * 100 == 28.999999999999996``
    that would lose the last digit; the ``min`` keeps the result at or below ``value``.
    """
    scale = 10 ** digits
    return min(math.floor(value * scale + 1e-9) / scale, value)


# ======================================================================
# Time series
# ======================================================================

def _monthly_series(
    system_kw: float,
    site: SiteSolarProfile,
    dir_eff: float,
    system_efficiency: float,
    annual_consumption: float,
    self_consumption: float,
    tariff: float,
    sell_multiplier: float,
) -> dict[str, NDArray[np.float64]]:
    factors = np.asarray(site.monthly_factors, dtype=np.float64)
    days = np.asarray(DAYS_IN_MONTH, dtype=np.float64)

    production = system_kw * (site.avg_insolation * factors) * days * system_efficiency * dir_eff
    consumption = np.full(len(DAYS_IN_MONTH), annual_consumption / 12.0)

    self_consumed = np.minimum(production, consumption) * self_consumption
    surplus = np.maximum(0.0, production - self_consumed)
    deficit = np.maximum(0.0, consumption - self_consumed)
    savings = self_consumed * tariff + surplus * tariff * sell_multiplier

    return {
        "production": production,
        "consumption": consumption,
        "self_consumed": self_consumed,
        "surplus": surplus,
        "deficit": deficit,
        "savings": savings,
    }


def project_cash_flow(
    annual_production: float,
    annual_consumption: float,
    annual_savings: float,
    capex: float,
    tariff: float,
    settings: GlobalSettings,
    years: int = PROJECTION_YEARS,
) -> tuple[YearlyData, ...]:
    """Build the yearly projection.

    Year ``n`` savings are ``annual_savings * (1 - d)^(n-1) * (1 + i)^(n-1)``.
    Cumulative cost starts at ``capex`` and grows once, at year 10, by
    ``capex * maintenance_cost_fraction``.
    """
    yr = np.arange(1, years + 1, dtype=np.float64)
    degradation = (1.0 - settings.panel_degradation_rate) ** (yr - 1.0)
    inflation = (1.0 + settings.energy_inflation_rate) ** (yr - 1.0)

    savings = annual_savings * degradation * inflation
    cumulative_savings = np.cumsum(savings)

    maintenance = np.where(yr == MAINTENANCE_YEAR, capex * settings.maintenance_cost_fraction, 0.0)
    cumulative_cost = capex + np.cumsum(maintenance)
    net_profit = cumulative_savings - cumulative_cost

    if capex > 0:
        roi = cumulative_savings / capex * 100.0
    else:
        roi = np.zeros_like(yr)

    bill_without_solar = np.cumsum(annual_consumption * tariff * inflation)

    return tuple(
        YearlyData(
            year=int(yr[i]),
            production=float(annual_production * degradation[i]),
            consumption=float(annual_consumption),
            savings=float(savings[i]),
            cumulative_savings=float(cumulative_savings[i]),
            cumulative_cost=float(cumulative_cost[i]),
            net_profit=float(net_profit[i]),
            roi=round(float(roi[i]), 1),
            degradation_factor=round(float(degradation[i]), 4),
            cash_flow_without_solar=-float(bill_without_solar[i]),
        )
        for i in range(years)
    )


def payback_year(yearly: tuple[YearlyData, ...]) -> int:
    """First year with positive net profit; the horizon length if none."""
    for entry in yearly:
        if entry.net_profit > 0:
            return entry.year
    return len(yearly) if yearly else PROJECTION_YEARS


# ======================================================================
# Scenario
# ======================================================================

def simulate_scenario(
    input: CalculationInput,
    settings: GlobalSettings,
    site: SiteSolarProfile,
    config: ScenarioConfig,
) -> ScenarioResult:
    """Run one sizing scenario."""
    tariff = settings.tariff_for(input.building_type)
    dir_eff = direction_efficiency(input.orientation)
    annual_consumption = annual_consumption_kwh(input.bill_amount, tariff)

    system_efficiency = config.system_efficiency
    specific_yield = site.avg_insolation * 365 * dir_eff

    system_kw = target_system_kw(
        annual_consumption,
        config.offset_target,
        specific_yield,
        system_efficiency,
        input.roof_area,
    )
    panel_count = math.ceil(system_kw * 1000.0 / settings.panel_wattage)
    sc_rate = self_consumption_factor(input, config)

    m = _monthly_series(
        system_kw, site, dir_eff, system_efficiency, annual_consumption,
        sc_rate, tariff, settings.sell_price_multiplier,
    )
    monthly = tuple(
        MonthlyData(
            month=MONTH_NAMES[i],
            production=float(m["production"][i]),
            consumption=float(m["consumption"][i]),
            self_consumed=float(m["self_consumed"][i]),
            surplus=float(m["surplus"][i]),
            deficit=float(m["deficit"][i]),
            savings=float(m["savings"][i]),
        )
        for i in range(len(MONTH_NAMES))
    )

    annual_production = float(np.sum(m["production"]))
    annual_savings = float(np.sum(m["savings"]))
    total_self_consumed = float(np.sum(m["self_consumed"]))
    total_surplus = float(np.sum(m["surplus"]))

    cost_usd = system_kw * settings.system_cost_per_kw
    cost_local = cost_usd * settings.currency_rate

    yearly = project_cash_flow(
        annual_production, annual_consumption, annual_savings,
        cost_local, tariff, settings,
    )

    self_consumption_pct = (
        total_self_consumed / annual_production * 100.0 if annual_production > 0 else 0.0
    )

    result = ScenarioResult(
        scenario=config.type,
        system_size_kw=_truncate(system_kw),
        panel_count=panel_count,
        total_cost_usd=round(cost_usd, 2),
        total_cost_local=round(cost_local, 2),
        payback_year=payback_year(yearly),
        net_profit_25_years=round(yearly[-1].net_profit, 2),
        monthly_savings=round(annual_savings / 12.0, 2),
        annual_production_kwh=round(annual_production, 2),
        annual_savings=round(annual_savings, 2),
        co2_saved_tons=round(annual_production * CO2_KG_PER_KWH / 1000.0, 2),
        self_consumption_rate=round(self_consumption_pct, 1),
        grid_sale_revenue=round(total_surplus * tariff * settings.sell_price_multiplier, 2),
        average_roi=yearly[-1].roi,
        monthly=monthly,
        yearly=yearly,
    )
    logger.debug(
        "Scenario %s: %.2f kWp, %d panels, payback year %d",
        config.type.value, system_kw, panel_count, result.payback_year,
    )
    return result


# ======================================================================
# Main entry point
# ======================================================================

def simulate(
    input: CalculationInput,
    settings: GlobalSettings,
    site: SiteSolarProfile | None,
) -> SimulationResult:
    """Run all sizing scenarios for one customer request.

    Parameters
    ----------
    input : CalculationInput
        Bill, tariff class, consumption profile, roof area and orientation.
    settings : GlobalSettings
        Commercial assumptions (tariffs, costs, inflation, degradation).
    site : SiteSolarProfile or None
        Solar resource of the resolved location.

    Returns
    -------
    SimulationResult
        One :class:`ScenarioResult` per scenario; ``optimal`` is always the
        recommended one.

    Raises
    ------
    DataNotFoundError
        If no solar profile was resolved for the location.
    """
    if site is None:
        raise DataNotFoundError("No solar profile resolved for the requested location")

    scenarios = {cfg.type: simulate_scenario(input, settings, site, cfg) for cfg in SCENARIOS}

    recommended = scenarios[RECOMMENDED_SCENARIO]
    logger.info(
        "Simulated %d scenarios for %s: optimal %.2f kWp, payback year %d",
        len(scenarios), site.name, recommended.system_size_kw, recommended.payback_year,
    )

    return SimulationResult(
        scenarios=scenarios,
        recommended_scenario=RECOMMENDED_SCENARIO,
        site=site,
        input=input,
    )
