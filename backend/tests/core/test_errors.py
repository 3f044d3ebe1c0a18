"""Error Hierarchy: envelope shape and status codes.

Tests cover:
    - to_response() carries code, category, severity and context
    - DatabaseError is critical, 500, and names only the failed operation
"""

from weather_api.core.errors import (
    DatabaseError, ErrorCategory, ErrorContext, ErrorSeverity,
    InvalidDescriptionError, WeatherApiError,
)


def test_invalid_description_envelope():
    error = InvalidDescriptionError(ErrorContext(weather_id="abc"))
    body = error.to_response()["error"]
    assert body["code"] == "INVALID_DESCRIPTION"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert body["severity"] == ErrorSeverity.ERROR.value
    assert body["context"]["weather_id"] == "abc"
    assert "timestamp" in body


def test_database_error_is_critical_server_error():
    error = DatabaseError("query")
    assert isinstance(error, WeatherApiError)
    assert error.http_status == 500
    assert error.severity == ErrorSeverity.CRITICAL
    assert error.category == ErrorCategory.DATABASE
    assert error.operation == "query"
    assert error.message == "Database query failed"


def test_error_context_defaults():
    context = ErrorContext()
    assert context.weather_id is None
    assert context.timestamp.tzinfo is not None
    assert not hasattr(context, "debug_info")
