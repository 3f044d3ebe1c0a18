"""Error Hierarchy: typed, categorized exceptions for unexpected and guard failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Expected domain outcomes (duplicate description, not found) are NOT errors:
      they travel as Result / None values (core/result.py)
    - to_response() produces the REST envelope for client-side (4xx) errors;
      5xx errors are answered with the generic problem detail instead

Design Decisions:
    - Single hierarchy with WeatherApiError base: one global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    weather_id: str | None = None


class WeatherApiError(Exception):
    """Base exception for all Weather API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "weather_id": self.context.weather_id,
                },
            }
        }


# ─── Domain Guard Errors (400-level) ────────────────────────────

class InvalidDescriptionError(WeatherApiError):
    """Entity construction attempted with an empty description."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Weather description must not be empty",
            "INVALID_DESCRIPTION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(WeatherApiError):
    """Database operation failed. The driver message stays in the log only."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
