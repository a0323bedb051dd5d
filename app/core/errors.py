# File: app/core/errors.py

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class TripPlannerError(Exception):
    """
    Base error. Carries the HTTP status and the message shown to the caller.
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Something went wrong. Please try again."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ConfigurationError(TripPlannerError):
    message = "API configuration error. Please contact support."


class ValidationError(TripPlannerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Missing required fields"


class GenerationError(TripPlannerError):
    message = "Failed to generate trip plan. Please try again."


class CredentialError(GenerationError):
    message = "API key configuration error. Please check your setup."


class PersistenceError(TripPlannerError):
    message = "Failed to save the trip. Please try again."


class TripNotFoundError(TripPlannerError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Trip not found"


class AuthenticationError(TripPlannerError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Could not validate credentials"


async def _trip_planner_error_handler(request: Request, exc: TripPlannerError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TripPlannerError, _trip_planner_error_handler)
