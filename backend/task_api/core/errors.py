"""Error Hierarchy — typed, categorized exceptions for all Task API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the uniform failure envelope {success: false, message, code}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TaskApiError base: FastAPI global handler catches all (ADR: uniform error shape)
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    task_id: str | None = None
    operation: str | None = None


class TaskApiError(Exception):
    """Base exception for all Task API errors."""

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
        """Convert to the uniform failure envelope."""
        return {
            "success": False,
            "message": self.message,
            "code": self.code,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(TaskApiError):
    """Required field missing/empty or enum field outside its value set."""
    def __init__(
        self,
        message: str,
        field_errors: list[dict[str, str]] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field_errors = field_errors or []

    def to_response(self) -> dict:
        response = super().to_response()
        response["errors"] = self.field_errors
        return response


class NotFoundError(TaskApiError):
    """Identifier does not resolve to an existing record (malformed ids included)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.task_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreUnavailableError(TaskApiError):
    """Persistence layer unreachable or failed unexpectedly."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
