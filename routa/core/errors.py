# routa/core/errors.py


class RoutaError(Exception):
    """Base class for errors raised by the planning core and its data providers."""

    message = "An unknown error occurred"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.message
        super().__init__(self.detail)


class InvalidInput(RoutaError, ValueError):
    message = "Invalid input"


class DestinationNotFound(RoutaError):
    message = "Destination not found"

    def __init__(self, destination_id: str | None = None):
        self.destination_id = destination_id
        detail = f"Destination '{destination_id}' not found" if destination_id else None
        super().__init__(detail)


class RouteGenerationFailed(RoutaError):
    message = "Route could not be generated"


class NetworkError(RoutaError):
    message = "Network error"


class DecodingError(RoutaError):
    message = "Could not decode catalog data"
