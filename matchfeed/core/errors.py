"""Error Hierarchy - typed, categorized exceptions for all matchfeed failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error maps to exactly one HTTP status (400, 404 or 500)
    - to_response() produces the {"success": false, "error": ...} envelope
    - StorageError carries the raw driver message, untranslated

Design Decisions:
    - Single hierarchy with MatchfeedError base: one FastAPI handler catches all
    - Storage failures are client errors (400): every handler issues exactly one
      statement, so a rejected statement is attributed to the request that sent it
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: int | None = None
    operation: str | None = None


class MatchfeedError(Exception):
    """Base exception for all matchfeed errors."""

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
        """Convert to the standard failure envelope."""
        return {"success": False, "error": self.message}


# ─── Request Errors (400/404) ───────────────────────────────────

class RequestValidationFailed(MatchfeedError):
    """Request is well-formed JSON but semantically unusable."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ResourceNotFoundError(MatchfeedError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type


# ─── Storage Errors (400) ───────────────────────────────────────

class StorageError(MatchfeedError):
    """Database rejected or failed to run a statement."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.operation = operation
