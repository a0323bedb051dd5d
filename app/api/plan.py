# File: app/api/plan.py

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.core.errors import GenerationError, TripPlannerError, ValidationError
from app.models.schemas import ApiTestResponse, TripPlan, TripRequest
from app.services.generation_client import GenerationClient, get_generation_client
from app.services.prompt_builder import TEST_PROMPT, build_prompt

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Trip Planning"])

REQUIRED_FIELDS = ("destination", "days", "interests", "month", "budget", "travelers")


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def validate_trip_request(payload: Any) -> TripRequest:
    """
    Checks presence first, then values. Raises ValidationError (400) before
    anything is sent to the model.
    """
    if not isinstance(payload, dict):
        payload = {}

    missing = [field for field in REQUIRED_FIELDS if not payload.get(field)]
    if missing:
        logger.info("Rejected trip request, missing fields: %s", missing)
        raise ValidationError()

    try:
        return TripRequest.model_validate(payload)
    except PydanticValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        logger.info("Rejected trip request, invalid fields: %s", fields)
        raise ValidationError(f"Invalid trip request: {', '.join(fields)}") from e


@router.post("/plan-trip", response_model=TripPlan)
def plan_trip(
    payload: Any = Body(default=None),
    client: GenerationClient = Depends(get_generation_client),
):
    """
    Generates a day-by-day itinerary for the requested trip.
    """
    client.ensure_configured()
    request = validate_trip_request(payload)

    try:
        itinerary = client.generate(build_prompt(request), settings.MAX_OUTPUT_TOKENS)
    except TripPlannerError:
        raise
    except Exception as e:
        logger.exception("Unexpected error generating trip plan")
        raise GenerationError() from e

    return TripPlan(**request.model_dump(), itinerary=itinerary)


@router.get("/test-api", response_model=ApiTestResponse, response_model_exclude_none=True)
def check_api(client: GenerationClient = Depends(get_generation_client)):
    """
    Sends a tiny prompt to confirm the generation credential works.
    """
    try:
        text = client.generate(TEST_PROMPT, settings.TEST_MAX_TOKENS)
    except Exception as e:
        logger.error("API test failed: %s", e)
        result = ApiTestResponse(success=False, error=str(e.__cause__ or e), timestamp=_timestamp())
        return JSONResponse(status_code=500, content=result.model_dump(exclude_none=True))

    return ApiTestResponse(
        success=True,
        message="API key is working correctly!",
        response=text,
        timestamp=_timestamp(),
    )
