"""Error Hierarchy — typed, categorized exceptions for all Student Records failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors carry no HTTP status: api/error_handlers.py maps category → status
    - FieldValidationError carries one message per field (last write wins)

Design Decisions:
    - Single hierarchy with StudentRecordsError base: global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: timestamp captured where the error is raised, not where it is rendered
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
    CONFLICT = "conflict"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to every error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    student_id: int | None = None


class StudentRecordsError(Exception):
    """Base exception for all Student Records errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()


# ─── Domain Errors ──────────────────────────────────────────────

class FieldValidationError(StudentRecordsError):
    """Request input failed field validation before reaching the service."""
    def __init__(self, errors: dict[str, str], context: ErrorContext | None = None):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.errors = dict(errors)


class NotFoundError(StudentRecordsError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(StudentRecordsError):
    """A uniqueness rule would be violated."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context,
        )


class DuplicateEmailError(ConflictError):
    """Another student already uses this email."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__("Email is already registered", context)
        self.email = email


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(StudentRecordsError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
