"""Error Hierarchy — typed exceptions for infrastructure faults that leave the pipeline.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Business failures are NOT here: they are MemberError values (core/member_errors.py)
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MemberRegistryError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - IntegrityViolation lives in core so repositories can signal constraint failures
      without the core importing the ORM driver
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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    debug_info: dict[str, Any] | None = None


class MemberRegistryError(Exception):
    """Base exception for all member registry faults."""

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
            }
        }


class IntegrityViolation(MemberRegistryError):
    """A unique or not-null constraint rejected a write.

    Raised by MemberRepository.save; the persist step turns it into a MemberError.
    """
    def __init__(self, description: str, context: ErrorContext | None = None):
        super().__init__(
            "Integrity constraint violated", "INTEGRITY_VIOLATION",
            ErrorCategory.CONFLICT, ErrorSeverity.ERROR, context, 409,
        )
        self.description = description


class DatabaseError(MemberRegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )


class RequestValidationFailure(MemberRegistryError):
    """Request body rejected at the transport boundary (types, bounds, length)."""
    def __init__(self, details: list[dict[str, str]], context: ErrorContext | None = None):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class InternalError(MemberRegistryError):
    """Unexpected fault; the message never carries the underlying exception."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, context, 500,
        )
