# api/planning_routes.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from api._resp import fail_from, ok
from api.dependencies import get_planner
from core.exceptions import AppError
from models.planning import PlanRequest
from services.planning.planner import TripPlanner

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/plan", summary="Rank all travel modes by eco score and suggest greener options")
async def plan_route(req: PlanRequest, planner: TripPlanner = Depends(get_planner)):
    try:
        result = await planner.plan(req)
    except AppError as e:
        fail_from(e)
    return ok(result.model_dump(mode="json"))


@router.post("/alternatives", summary="All candidates for a single travel mode")
async def route_alternatives(req: PlanRequest, planner: TripPlanner = Depends(get_planner)):
    try:
        result = await planner.alternatives(req)
    except AppError as e:
        fail_from(e)
    return ok(result.model_dump(mode="json"))


@router.post("/eco-suggestions", summary="Greener alternatives to the driving route")
async def eco_suggestions(req: PlanRequest, planner: TripPlanner = Depends(get_planner)):
    try:
        result = await planner.eco_suggestions(req)
    except AppError as e:
        fail_from(e)
    return ok(result.model_dump(mode="json"))
