"""Financial simulation endpoint."""
import dataclasses
import logging

from fastapi import APIRouter, HTTPException, status

from app.config import settings
from app.core.logging import calculation_timer
from app.schemas.simulation import SimulationRequest, SimulationResponse

from engine.economics import CalculationInput, GlobalSettings, simulate
from engine.errors import DataNotFoundError
from engine.site import SiteSolarProfile, get_site, resolve_site

logger = logging.getLogger(__name__)

router = APIRouter()


def _effective_settings(body: SimulationRequest) -> GlobalSettings:
    base = settings.global_settings()
    if body.settings is None:
        return base
    overrides = body.settings.model_dump(exclude_none=True)
    if "tariff_rates" in overrides:
        overrides["tariff_rates"] = {**base.tariff_rates, **overrides["tariff_rates"]}
    return dataclasses.replace(base, **overrides)


def _resolve(body: SimulationRequest) -> tuple[SiteSolarProfile, float | None, bool]:
    if body.site_id is not None:
        return get_site(body.site_id), None, False
    if body.latitude is None or body.longitude is None:
        raise DataNotFoundError("A site_id or latitude/longitude pair is required to resolve a solar profile")
    match = resolve_site(
        body.latitude, body.longitude, far_threshold_deg=settings.far_site_threshold_deg,
    )
    return match.site, round(match.distance_deg, 3), match.is_far_match


@router.post(
    "/simulate",
    response_model=SimulationResponse,
    summary="Financial simulation",
    description="Size the system under three scenarios and project 25 years of savings.",
)
async def run_simulation(body: SimulationRequest):
    try:
        site, distance, is_far = _resolve(body)
        calc_input = CalculationInput(
            consumption_profile=body.consumption_profile,
            building_type=body.building_type,
            bill_amount=body.bill_amount,
            roof_area=body.roof_area,
            orientation=body.orientation,
            latitude=body.latitude,
            longitude=body.longitude,
            location_name=body.location_name,
        )
        with calculation_timer(logger, "simulation", site=site.name) as log_fields:
            result = simulate(calc_input, _effective_settings(body), site)
            log_fields["scenario"] = result.recommended_scenario.value
    except DataNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    payload = result.to_dict()
    payload["site_distance_deg"] = distance
    payload["far_site_match"] = is_far
    return payload
