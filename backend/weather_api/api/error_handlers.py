"""Error Handlers: global exception handlers and the generic problem response.

Invariants:
    - WeatherApiError below 500 → structured JSON with error code, message, severity
    - WeatherApiError at 500 or above → same problem detail as the catch-all
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500 problem detail "Try again later", never leaks internals

Design Decisions:
    - Three-layer handler: domain (WeatherApiError), validation (Pydantic), catch-all (Exception)
    - problem_response() shared with routes: their own try/except returns the same body
      as the catch-all, so clients see one 500 shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from weather_api.core.errors import WeatherApiError, ErrorSeverity
from weather_api.core.messages import MessageKey, get_message

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"
PROBLEM_TITLE = "An error occurred while processing your request."


def problem_response(
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> JSONResponse:
    """RFC 7807 problem detail with the fixed unknown-error message."""
    return JSONResponse(
        status_code=status_code,
        media_type=PROBLEM_MEDIA_TYPE,
        content={
            "type": "about:blank",
            "title": PROBLEM_TITLE,
            "status": status_code,
            "detail": get_message(MessageKey.UNKNOWN_ERROR),
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Weather API domain/infrastructure error handler."""

    @app.exception_handler(WeatherApiError)
    async def weather_api_error_handler(request: Request, exc: WeatherApiError):
        """Handle all Weather API domain/infrastructure errors."""
        logger.error(
            f"WeatherApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        if exc.http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            return problem_response()
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return problem_response()


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
