"""Error Hierarchy — typed, categorized exceptions for exceptional company API failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Expected business-rule violations are SaveResult values, NOT exceptions
    - Infrastructure and contract-violation errors (500-level) are critical
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with CompanyApiError base: one global handler catches all
    - ErrorContext as dataclass: observability context without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    company_code: str | None = None
    debug_info: dict[str, Any] | None = None


class CompanyApiError(Exception):
    """Base exception for all company API errors."""

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
                    "company_code": self.context.company_code,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(CompanyApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure / Contract Errors (500-level) ───────────────

class DatabaseError(CompanyApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class DeleteFailedError(CompanyApiError):
    """Repository reported a delete as not performed — should never happen."""
    def __init__(self, company_code: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.company_code = company_code
        super().__init__(
            "Unknown error attempting to delete company.",
            "DELETE_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )


class UnknownSaveResultError(CompanyApiError):
    """Save returned a value outside SaveResult — programming-contract violation."""
    def __init__(self, result: object, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown save result: {result!r}",
            "UNKNOWN_SAVE_RESULT", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.result = result
