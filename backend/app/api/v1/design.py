"""Engineering design endpoint."""
import logging

from fastapi import APIRouter, HTTPException, Query, status

from app.config import settings
from app.core.logging import calculation_timer
from app.schemas.design import DesignRequest, DesignResponse

from engine.design import design
from engine.equipment import (
    Inverter,
    SolarPanel,
    get_battery,
    get_heat_pump,
    get_inverter,
    get_panel,
)
from engine.errors import DataNotFoundError
from engine.site import get_site

logger = logging.getLogger(__name__)

router = APIRouter()


def cap_panels(layout: dict, limit: int) -> dict:
    """Trim the drawable rectangle list to ``limit`` entries for the UI."""
    panels = layout["panels"]
    capped = dict(layout)
    capped["panels"] = panels[:limit]
    capped["panels_truncated"] = len(panels) > limit
    return capped


@router.post(
    "/design",
    response_model=DesignResponse,
    summary="Engineering design",
    description="Lay out panels on the roof and validate the string / inverter configuration.",
)
async def run_design(
    body: DesignRequest,
    render_limit: int | None = Query(default=None, ge=0, description="Max panel rectangles returned"),
):
    try:
        latitude = body.latitude if body.latitude is not None else get_site(body.site_id).latitude
        panel = SolarPanel(**body.panel.model_dump()) if body.panel else get_panel(body.panel_id)
        inverter = Inverter(**body.inverter.model_dump()) if body.inverter else get_inverter(body.inverter_id)
        battery = get_battery(body.battery_id) if body.battery_id else None
        heat_pump = get_heat_pump(body.heat_pump_id) if body.heat_pump_id else None
    except DataNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    with calculation_timer(logger, "design") as log_fields:
        result = design(
            latitude=latitude,
            roof_width=body.roof_width,
            roof_length=body.roof_length,
            panel=panel,
            inverter=inverter,
            tilt_deg=body.tilt_deg,
            is_flat_roof=body.is_flat_roof,
            battery=battery,
            heat_pump=heat_pump,
        )
        log_fields["panel_count"] = result.layout.total_panel_count
        log_fields["is_valid"] = result.report.is_valid

    payload = result.to_dict()
    limit = settings.render_panel_limit if render_limit is None else render_limit
    payload["layout"] = cap_panels(payload["layout"], limit)
    return payload
