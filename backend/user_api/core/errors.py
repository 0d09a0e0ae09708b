"""Error Hierarchy — typed, categorized exceptions for all User API failure modes.

Invariants:
    - Every error has a detail (str), code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the failure envelope {"errors": [{"detail": ...}]}
    - No internal details leaked in user-facing details

Design Decisions:
    - Single hierarchy with UserApiError base: FastAPI global handler catches all (uniform error shape)
    - PersistenceError carries an explicit kind: handlers match on the kind,
      never on driver exception classes or vendor error codes
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from user_api.core.domain_types import PersistenceErrorKind
from user_api.core.envelope import error_envelope


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
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class UserApiError(Exception):
    """Base exception for all User API errors."""

    def __init__(
        self,
        detail: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(detail)
        self.detail = detail
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the failure envelope."""
        return error_envelope(self.detail)


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidIdError(UserApiError):
    """Path id is not an integer the users table can hold."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        super().__init__(
            "Invalid ID", "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.raw_id = raw_id


class UserNotFoundError(UserApiError):
    """Targeted user does not exist."""
    def __init__(self, user_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            "User not found", "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.user_id = user_id


class InvalidRequestError(UserApiError):
    """Request could not be applied; the cause is not surfaced."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid request", "INVALID_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(UserApiError):
    """Persistence operation failed with a classified kind."""
    def __init__(
        self,
        kind: PersistenceErrorKind,
        message: str,
        operation: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        ctx.debug_info = {"message": message}
        super().__init__(
            "Service unavailable", "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.kind = kind
        self.message = message
        self.operation = operation

    @property
    def is_not_found(self) -> bool:
        return self.kind is PersistenceErrorKind.NOT_FOUND
