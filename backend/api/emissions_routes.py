# api/emissions_routes.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from api._resp import fail_from, ok
from api.dependencies import get_factor_store
from core.emissions import MODE_KG_PER_KM
from core.exceptions import AppError
from models.emissions import EmissionsRequest, EmissionsResult
from services.emissions.calculator import emissions_for_leg
from services.emissions.factors import EmissionFactorTable

router = APIRouter(prefix="/emissions", tags=["emissions"])


@router.post("/estimate")
def estimate_emissions(
    req: EmissionsRequest, store: EmissionFactorTable = Depends(get_factor_store)
):
    try:
        per_leg = [emissions_for_leg(leg, store) for leg in req.legs]
    except AppError as e:
        # unknown vehicle/fuel -> 422, same as route planning
        fail_from(e)
    result = EmissionsResult(total_kg_co2=float(sum(per_leg)), per_leg_kg_co2=per_leg)
    return ok(result.model_dump(), table=store.name)


@router.get("/factors")
def list_factors(store: EmissionFactorTable = Depends(get_factor_store)):
    return ok(
        {
            "table": store.name,
            "units": "gCO2/km",
            "factors": [f.model_dump(mode="json") for f in store.active()],
            "mode_kg_per_km": MODE_KG_PER_KM,
        }
    )
