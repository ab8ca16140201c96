"""Error Hierarchy - typed, categorized exceptions for event clock failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - TimezoneNotFoundError is carried as a lookup result, never raised to callers
      of the clock operations
    - to_response() produces the REST envelope used by the diagnostics API

Design Decisions:
    - Single hierarchy with EventClockError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability without coupling to logging framework
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and API envelopes."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    timezone_key: str | None = None
    user_message: str | None = None


class EventClockError(Exception):
    """Base exception for all event clock errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "timezone_key": self.context.timezone_key,
                },
            }
        }


# ─── Resolution Errors ──────────────────────────────────────────

class TimezoneNotFoundError(EventClockError):
    """Timezone identifier not found in the host database."""
    def __init__(self, key: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.timezone_key = key
        super().__init__(
            f"Timezone '{key}' not found on this host: {reason}",
            "TIMEZONE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )
        self.key = key


# ─── Input Errors (400-level) ───────────────────────────────────

class InvalidInstantError(EventClockError):
    """Value passed for conversion is not a timestamp."""
    def __init__(
        self, value: object, reason: str | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            reason or f"Expected a datetime instant, got {type(value).__name__}",
            "INVALID_INSTANT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.value = value
