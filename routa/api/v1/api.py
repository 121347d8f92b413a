from fastapi import APIRouter
from routa.api.v1.endpoints import destinations, routes

api_router = APIRouter()
api_router.include_router(destinations.router, prefix="/destinations", tags=["Destinations"])
api_router.include_router(routes.router, prefix="/routes", tags=["Routes & Planning"])
