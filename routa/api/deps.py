from functools import lru_cache

from fastapi import HTTPException, status

from routa.core.errors import (
    DecodingError,
    DestinationNotFound,
    InvalidInput,
    NetworkError,
    RouteGenerationFailed,
    RoutaError,
)
from routa.services.plan_service import RoutePlanner, build_planner

_STATUS_BY_ERROR = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    DestinationNotFound: status.HTTP_404_NOT_FOUND,
    RouteGenerationFailed: 422,
    NetworkError: status.HTTP_502_BAD_GATEWAY,
    DecodingError: status.HTTP_502_BAD_GATEWAY,
}


@lru_cache(maxsize=1)
def get_planner() -> RoutePlanner:
    # One planner per process; tests swap it through app.dependency_overrides
    return build_planner()


def to_http_exception(error: RoutaError) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.detail)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=error.detail)
