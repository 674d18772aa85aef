"""Read-only reference data: equipment catalog and site table."""
from fastapi import APIRouter

from engine.equipment import BATTERIES, HEAT_PUMPS, INVERTERS, PANELS
from engine.site import SITE_PRESETS

router = APIRouter()


@router.get("/catalog", summary="Equipment catalog")
async def get_catalog():
    return {
        "panels": [p.to_dict() for p in PANELS],
        "inverters": [i.to_dict() for i in INVERTERS],
        "batteries": [b.to_dict() for b in BATTERIES],
        "heat_pumps": [h.to_dict() for h in HEAT_PUMPS],
    }


@router.get("/sites", summary="Reference sites")
async def list_sites():
    return [s.to_dict() for s in SITE_PRESETS]
