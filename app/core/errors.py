"""Error Hierarchy — typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; DatabaseError (500) is terminal for the request
    - to_response() produces the public JSON body; DatabaseError never exposes internal detail

Design Decisions:
    - Single hierarchy with ApiError base: FastAPI global handler catches all (uniform error shape)
    - Public bodies are flat ({"error": ...} / {"errors": [...]}) to match existing frontend clients
"""

from dataclasses import dataclass
from enum import Enum


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
    ROUTE_NOT_FOUND = "route_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class FieldError:
    """One rule violation on one request field."""
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ApiError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public REST error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(ApiError):
    """Request input failed one or more field rules."""
    def __init__(self, errors: list[FieldError]):
        super().__init__(
            f"{len(errors)} field(s) failed validation",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        return {"errors": [e.to_dict() for e in self.errors]}


class NotFoundError(ApiError):
    """Requested row does not exist."""
    def __init__(self, resource_type: str, resource_id: int):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class RouteNotFoundError(ApiError):
    """No route matches the request method and path."""
    def __init__(self, method: str, path: str):
        super().__init__(
            "Route not found",
            "ROUTE_NOT_FOUND", ErrorCategory.ROUTE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.method = method
        self.path = path


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ApiError):
    """Database operation failed. Detail is for logs only."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"error": INTERNAL_ERROR_MESSAGE}
