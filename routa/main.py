import logging

from fastapi import FastAPI

from routa.core.config import settings

# ─── Logging setup ───
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

from routa.api import healthcheck
from routa.api.v1.api import api_router

app = FastAPI(
    title="Routa Travel Planner API",
    description="Destination catalog, budget estimates and day-by-day route generation.",
    version="1.0.0"
)

# Include the v1 router
app.include_router(api_router, prefix="/api/v1")
app.include_router(healthcheck.router)

@app.get("/", tags=["Health"])
def read_root():
    """
    Root endpoint to check if the API is running.
    """
    return {"status": "ok", "message": "Welcome to the Routa API!"}

# To run the app:
# uvicorn routa.main:app --reload
