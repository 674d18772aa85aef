"""Pydantic schemas for the financial simulation endpoint."""

from pydantic import BaseModel, Field

from engine.economics.inputs import BuildingType, ConsumptionProfile
from engine.site.profile import Orientation


class SettingsOverrides(BaseModel):
    """Per-request overrides of the configured commercial assumptions."""

    currency_rate: float | None = Field(default=None, gt=0)
    base_price: float | None = Field(default=None, gt=0)
    panel_wattage: float | None = Field(default=None, gt=0)
    system_cost_per_kw: float | None = Field(default=None, ge=0)
    energy_inflation_rate: float | None = Field(default=None, ge=-0.5, le=1.0)
    panel_degradation_rate: float | None = Field(default=None, ge=0.0, lt=1.0)
    maintenance_cost_fraction: float | None = Field(default=None, ge=0.0, le=1.0)
    sell_price_multiplier: float | None = Field(default=None, ge=0.0, le=2.0)
    tariff_rates: dict[BuildingType, float] | None = None


class SimulationRequest(BaseModel):
    consumption_profile: ConsumptionProfile = ConsumptionProfile.BALANCED
    building_type: BuildingType = BuildingType.RESIDENTIAL
    bill_amount: float = Field(ge=0, description="Monthly electricity bill (local currency)")
    roof_area: float = Field(allow_inf_nan=False, description="Usable roof area (m²); values <= 0 size to zero")
    orientation: Orientation = Orientation.SOUTH
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    location_name: str | None = None
    site_id: int | None = Field(default=None, description="Reference site; overrides coordinates")
    settings: SettingsOverrides | None = None


class MonthlyResponse(BaseModel):
    month: str
    production: float
    consumption: float
    self_consumed: float
    surplus: float
    deficit: float
    savings: float


class YearlyResponse(BaseModel):
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


class ScenarioResponse(BaseModel):
    scenario: str
    system_size_kw: float
    panel_count: int
    total_cost_usd: float
    total_cost_local: float
    initial_investment: float
    payback_year: int
    net_profit_25_years: float
    monthly_savings: float
    annual_production_kwh: float
    annual_savings: float
    co2_saved_tons: float
    self_consumption_rate: float
    grid_sale_revenue: float
    average_roi: float
    monthly: list[MonthlyResponse]
    yearly: list[YearlyResponse]


class SiteResponse(BaseModel):
    id: int | None
    name: str
    latitude: float
    longitude: float
    avg_insolation: float
    monthly_factors: list[float]


class SimulationResponse(BaseModel):
    scenarios: dict[str, ScenarioResponse]
    recommended_scenario: str
    site: SiteResponse
    input: dict
    site_distance_deg: float | None = None
    far_site_match: bool = False
