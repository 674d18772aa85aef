"""Financial feasibility: multi-scenario sizing and 25-year cash flow."""

from .inputs import (
    SELF_CONSUMPTION_RATES,
    BuildingType,
    CalculationInput,
    ConsumptionProfile,
    GlobalSettings,
)
from .scenarios import RECOMMENDED_SCENARIO, SCENARIOS, ScenarioConfig, ScenarioType
from .simulation import (
    MonthlyData,
    ScenarioResult,
    SimulationResult,
    YearlyData,
    simulate,
    simulate_scenario,
)

__all__ = [
    # inputs
    "BuildingType",
    "ConsumptionProfile",
    "CalculationInput",
    "GlobalSettings",
    "SELF_CONSUMPTION_RATES",
    # scenarios
    "ScenarioType",
    "ScenarioConfig",
    "SCENARIOS",
    "RECOMMENDED_SCENARIO",
    # simulation
    "MonthlyData",
    "YearlyData",
    "ScenarioResult",
    "SimulationResult",
    "simulate",
    "simulate_scenario",
]
