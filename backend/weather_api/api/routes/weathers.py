"""Weathers Routes: list, get and create Weather resources.

Invariants:
    - Each handler is the request boundary: any exception from the application
      becomes a 500 problem detail "Try again later" (logged, never echoed)
    - Empty list and missing id → 404 plain text "Not found"
    - POST validates description presence before touching the application;
      empty/missing → 400 "Description is required", application never called
    - Result Failure → 400 with the ordered reasons; Success → 201 + Location

Design Decisions:
    - Plain-text bodies for the fixed 4xx messages: clients compare them verbatim
    - Explicit try/except per handler over relying on the catch-all: Starlette's
      ServerErrorMiddleware re-raises after the catch-all responds
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from weather_api.api.dependencies import get_weather_application
from weather_api.api.error_handlers import problem_response
from weather_api.core.domain_types import WeatherId
from weather_api.core.messages import MessageKey, get_message
from weather_api.core.result import Failure
from weather_api.schemas.weather import (
    WeatherCommand, WeatherCommandResponse, WeatherQueryResponse,
)
from weather_api.services.weather_application import WeatherApplication

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/weathers", tags=["weathers"])

_ERROR_RESPONSES = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Try again later"},
}


def _text(key: MessageKey, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(get_message(key), status_code=status_code)


@router.get(
    "", response_model=list[WeatherQueryResponse],
    responses={
        status.HTTP_404_NOT_FOUND: {"description": "Not found"},
        **_ERROR_RESPONSES,
    },
)
async def list_weathers(
    application: WeatherApplication = Depends(get_weather_application),
):
    """List all weathers (404 when there are none)."""
    try:
        weathers = await application.get_all_weather()
    except Exception as e:
        logger.error(f"Failed to list weathers: {e}", exc_info=True)
        return problem_response()
    if not weathers:
        return _text(MessageKey.NOT_FOUND, status.HTTP_404_NOT_FOUND)
    return [WeatherQueryResponse.model_validate(w) for w in weathers]


@router.get(
    "/{weather_id}", response_model=WeatherQueryResponse,
    responses={
        status.HTTP_404_NOT_FOUND: {"description": "Not found"},
        **_ERROR_RESPONSES,
    },
)
async def get_weather(
    weather_id: UUID,
    application: WeatherApplication = Depends(get_weather_application),
):
    """Get one weather by id."""
    try:
        weather = await application.get_weather(WeatherId(weather_id))
    except Exception as e:
        logger.error(
            f"Failed to get weather: {e}",
            exc_info=True, extra={"weather_id": str(weather_id)},
        )
        return problem_response()
    if weather is None:
        return _text(MessageKey.NOT_FOUND, status.HTTP_404_NOT_FOUND)
    return WeatherQueryResponse.model_validate(weather)


@router.post(
    "", response_model=WeatherCommandResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid or duplicate description"},
        **_ERROR_RESPONSES,
    },
)
async def create_weather(
    response: Response,
    command: WeatherCommand | None = None,
    application: WeatherApplication = Depends(get_weather_application),
):
    """Create a weather with a unique description."""
    if command is None or not command.description:
        return _text(MessageKey.DESCRIPTION_REQUIRED, status.HTTP_400_BAD_REQUEST)
    try:
        result = await application.add_weather(command)
    except Exception as e:
        logger.error(f"Failed to create weather: {e}", exc_info=True)
        return problem_response()
    if isinstance(result, Failure):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=list(result.reasons),
        )
    created = result.value
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    logger.info("Weather created", extra={"weather_id": str(created.id)})
    return created
