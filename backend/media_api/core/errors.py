"""Error Hierarchy — typed, categorized exceptions for Media API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Lookup misses are 404 only in strict mode; default mode returns null
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with MediaApiError base: one global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


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
    """Request-scoped context attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    media_id: str | None = None
    debug_info: dict[str, Any] | None = None


class MediaApiError(Exception):
    """Base exception for all Media API errors."""

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
                    "media_id": self.context.media_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class MediaNotFoundError(MediaApiError):
    """No live record has the requested id."""
    def __init__(self, media_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.media_id = media_id
        super().__init__(
            f"Media '{media_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.media_id = media_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreNotInitializedError(MediaApiError):
    """Store requested before application startup created it."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Media store is not initialized",
            "STORE_UNAVAILABLE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 503,
        )
