# File: routa/api/v1/endpoints/destinations.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from routa.api.deps import get_planner, to_http_exception
from routa.core.config import settings
from routa.core.errors import DestinationNotFound, RoutaError
from routa.models.catalog import Accommodation, AccommodationType, Destination, Place
from routa.models.schemas import DestinationComparison
from routa.services.plan_service import RoutePlanner

router = APIRouter()


@router.get("", response_model=List[Destination])
async def list_destinations(planner: RoutePlanner = Depends(get_planner)):
    try:
        return await planner.catalog.fetch_all_destinations()
    except RoutaError as e:
        raise to_http_exception(e)


@router.get("/popular", response_model=List[Destination])
async def popular_destinations(
    limit: int = Query(settings.POPULAR_LIMIT, ge=1, le=50),
    planner: RoutePlanner = Depends(get_planner),
):
    try:
        return await planner.catalog.fetch_popular_destinations(limit)
    except RoutaError as e:
        raise to_http_exception(e)


@router.get("/search", response_model=List[Destination])
async def search_destinations(q: str = Query(..., min_length=1), planner: RoutePlanner = Depends(get_planner)):
    try:
        return await planner.catalog.search_destinations(q)
    except RoutaError as e:
        raise to_http_exception(e)


@router.get("/compare", response_model=DestinationComparison)
async def compare_destinations(left: str, right: str, planner: RoutePlanner = Depends(get_planner)):
    """
    Compare two destinations side by side and suggest alternatives.
    """
    try:
        return await planner.compare(left, right)
    except RoutaError as e:
        raise to_http_exception(e)


@router.get("/{destination_id}", response_model=Destination)
async def get_destination(destination_id: str, planner: RoutePlanner = Depends(get_planner)):
    try:
        return await planner.catalog.fetch_destination(destination_id)
    except RoutaError as e:
        raise to_http_exception(e)


@router.get("/{destination_id}/places", response_model=List[Place])
async def list_places(destination_id: str, planner: RoutePlanner = Depends(get_planner)):
    try:
        return await planner.catalog.fetch_places(destination_id)
    except RoutaError as e:
        raise to_http_exception(e)


@router.get("/{destination_id}/places/search", response_model=List[Place])
async def search_places(
    destination_id: str,
    q: str = Query(..., min_length=1),
    planner: RoutePlanner = Depends(get_planner),
):
    try:
        return await planner.catalog.search_places(destination_id, q)
    except RoutaError as e:
        raise to_http_exception(e)


@router.get("/{destination_id}/accommodations", response_model=List[Accommodation])
async def list_accommodations(
    destination_id: str,
    type: Optional[AccommodationType] = None,
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    planner: RoutePlanner = Depends(get_planner),
):
    try:
        if min_price is not None or max_price is not None:
            options = await planner.catalog.fetch_accommodations_by_price_range(
                min_price or 0, max_price if max_price is not None else float("inf"), destination_id
            )
            if type is not None:
                options = [a for a in options if a.type == type]
        elif type is not None:
            options = await planner.catalog.fetch_accommodations_by_type(type, destination_id)
        else:
            options = await planner.catalog.fetch_accommodations(destination_id)
    except RoutaError as e:
        raise to_http_exception(e)
    return options


@router.get("/{destination_id}/accommodations/{accommodation_id}", response_model=Accommodation)
async def get_accommodation(
    destination_id: str,
    accommodation_id: str,
    planner: RoutePlanner = Depends(get_planner),
):
    try:
        accommodation = await planner.catalog.fetch_accommodation(accommodation_id)
        if accommodation.destination_id != destination_id:
            raise DestinationNotFound(accommodation_id)
    except RoutaError as e:
        raise to_http_exception(e)
    return accommodation
