"""Pydantic schemas for the engineering design endpoint."""

from pydantic import BaseModel, Field, model_validator


class PanelSpec(BaseModel):
    id: str = "custom"
    brand: str = ""
    model: str = ""
    power_w: float = Field(gt=0)
    voc: float = Field(gt=0)
    isc: float = Field(gt=0)
    vmpp: float = Field(gt=0)
    impp: float = Field(gt=0)
    width_m: float = Field(gt=0)
    height_m: float = Field(gt=0)
    temp_coeff_voc: float
    price_usd: float = Field(default=0.0, ge=0)


class InverterSpec(BaseModel):
    id: str = "custom"
    brand: str = ""
    model: str = ""
    power_kw: float = Field(gt=0)
    max_input_voltage: float = Field(gt=0)
    mppt_min_voltage: float = Field(ge=0)
    mppt_max_voltage: float = Field(gt=0)
    mppt_count: int = Field(ge=1)
    max_strings_per_mppt: int = Field(ge=1)
    max_current_per_mppt: float = Field(gt=0)
    start_voltage: float = Field(default=0.0, ge=0)
    price_usd: float = Field(default=0.0, ge=0)


class DesignRequest(BaseModel):
    latitude: float | None = Field(default=None, ge=-90, le=90)
    site_id: int | None = None
    roof_width: float = Field(allow_inf_nan=False, description="Roof rectangle width (m)")
    roof_length: float = Field(allow_inf_nan=False, description="Roof rectangle length (m)")
    panel_id: str | None = None
    panel: PanelSpec | None = None
    inverter_id: str | None = None
    inverter: InverterSpec | None = None
    battery_id: str | None = None
    heat_pump_id: str | None = None
    tilt_deg: float = Field(default=20.0, ge=0, le=90)
    is_flat_roof: bool = False

    @model_validator(mode="after")
    def _check_sources(self) -> "DesignRequest":
        if self.latitude is None and self.site_id is None:
            raise ValueError("latitude or site_id is required")
        if self.panel is None and self.panel_id is None:
            raise ValueError("panel or panel_id is required")
        if self.inverter is None and self.inverter_id is None:
            raise ValueError("inverter or inverter_id is required")
        return self


class DiagnosticResponse(BaseModel):
    severity: str
    text: str


class ElectricalConfigResponse(BaseModel):
    mppt_id: int
    string_count: int
    panels_per_string: int


class VoltageCheckResponse(BaseModel):
    min_panels_per_string: int
    max_panels_per_string: int
    voc_at_cold: float
    vmpp_at_hot: float


class CurrentCheckResponse(BaseModel):
    is_safe: bool
    panel_isc: float
    inverter_max_current: float


class ValidationReportResponse(BaseModel):
    is_valid: bool
    ac_dc_ratio: float
    ratio_status: str
    electrical_config: list[ElectricalConfigResponse]
    voltage_check: VoltageCheckResponse
    current_check: CurrentCheckResponse
    messages: list[DiagnosticResponse]


class ShadowResponse(BaseModel):
    min_spacing: float
    altitude_deg: float
    shadow_length: float


class PanelRectResponse(BaseModel):
    x: float
    y: float
    w: float
    h: float


class LayoutResponse(BaseModel):
    total_panel_count: int
    rows: int
    columns: int
    used_area: float
    packing_efficiency: float
    total_dc_kw: float
    roof_width: float
    roof_length: float
    panels: list[PanelRectResponse]
    panels_truncated: bool = False


class DesignResponse(BaseModel):
    panel: dict
    inverter: dict
    battery: dict | None
    heat_pump: dict | None
    tilt_deg: float
    is_flat_roof: bool
    report: ValidationReportResponse
    shadow: ShadowResponse
    min_row_spacing: float
    layout: LayoutResponse
