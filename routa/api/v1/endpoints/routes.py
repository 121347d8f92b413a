# File: routa/api/v1/endpoints/routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from routa.api.deps import get_planner, to_http_exception
from routa.core.config import settings
from routa.core.errors import RoutaError
from routa.models.plan import BudgetTier, TravelPlan
from routa.models.schemas import (
    BudgetEstimate,
    BudgetEstimateRequest,
    RouteOptions,
    RouteRequest,
    ScaleRequest,
)
from routa.services.plan_service import RoutePlanner

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/options", response_model=RouteOptions)
def route_options():
    return RouteOptions(
        durations=list(settings.DURATION_OPTIONS),
        default_duration=settings.DEFAULT_DURATION,
        budget_tiers=list(BudgetTier),
    )


@router.post("/estimate", response_model=BudgetEstimate)
def estimate_budget(request: BudgetEstimateRequest, planner: RoutePlanner = Depends(get_planner)):
    """
    Preview the budget for a trip before generating a route.
    """
    try:
        return planner.estimate_budget(request.budget_tier, request.duration, request.number_of_people)
    except RoutaError as e:
        raise to_http_exception(e)


@router.post("/generate", response_model=TravelPlan)
async def generate_route(request: RouteRequest, planner: RoutePlanner = Depends(get_planner)):
    """
    Generates a day-by-day travel plan for a destination, budget tier and party size.
    """
    try:
        return await planner.generate_route(
            request.destination_id,
            request.budget_tier,
            request.duration,
            request.number_of_people,
        )
    except RoutaError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Unexpected error in /generate: %s", e)
        raise HTTPException(status_code=500, detail="An internal server error occurred.")


@router.post("/scale", response_model=TravelPlan)
def scale_route(request: ScaleRequest, planner: RoutePlanner = Depends(get_planner)):
    try:
        return planner.scale_for_party(request.plan, request.number_of_people)
    except RoutaError as e:
        raise to_http_exception(e)


@router.post("/saved", status_code=status.HTTP_201_CREATED, response_model=TravelPlan)
async def save_route(plan: TravelPlan, planner: RoutePlanner = Depends(get_planner)):
    try:
        await planner.save_route(plan)
    except RoutaError as e:
        raise to_http_exception(e)
    return plan


@router.get("/saved", response_model=List[TravelPlan])
async def list_saved_routes(planner: RoutePlanner = Depends(get_planner)):
    try:
        return await planner.fetch_saved_routes()
    except RoutaError as e:
        raise to_http_exception(e)


@router.delete("/saved/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_saved_route(plan_id: str, planner: RoutePlanner = Depends(get_planner)):
    try:
        await planner.delete_route(plan_id)
    except RoutaError as e:
        raise to_http_exception(e)
