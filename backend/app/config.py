from pydantic_settings import BaseSettings

from engine.economics.inputs import BuildingType, GlobalSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "", "case_sensitive": False}

    # App
    environment: str = "development"
    debug: bool = False
    app_name: str = "SolarScope"
    json_logs: bool = False
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Commercial defaults (GlobalSettings snapshot)
    usd_rate: float = 34.5
    electricity_price: float = 3.5
    panel_wattage: float = 550.0
    system_cost_per_kw: float = 800.0
    energy_inflation_rate: float = 0.05
    panel_degradation_rate: float = 0.005
    maintenance_cost_fraction: float = 0.05
    sell_price_multiplier: float = 0.6

    # Tariffs per building type (local currency / kWh)
    tariff_residential: float = 2.6
    tariff_commercial: float = 3.9
    tariff_industrial: float = 3.5

    # Design / rendering
    far_site_threshold_deg: float = 1.8
    render_panel_limit: int = 400

    def global_settings(self) -> GlobalSettings:
        return GlobalSettings(
            currency_rate=self.usd_rate,
            base_price=self.electricity_price,
            panel_wattage=self.panel_wattage,
            system_cost_per_kw=self.system_cost_per_kw,
            energy_inflation_rate=self.energy_inflation_rate,
            panel_degradation_rate=self.panel_degradation_rate,
            maintenance_cost_fraction=self.maintenance_cost_fraction,
            sell_price_multiplier=self.sell_price_multiplier,
            tariff_rates={
                BuildingType.RESIDENTIAL: self.tariff_residential,
                BuildingType.COMMERCIAL: self.tariff_commercial,
                BuildingType.INDUSTRIAL: self.tariff_industrial,
            },
        )


settings = Settings()
