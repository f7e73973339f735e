"""Error Handlers — global exception handlers for the API.

Invariants:
    - ApiError → its own to_response() body and http_status
    - RequestValidationError → 400 {"errors": [{"field", "message"}]}
    - Unmatched path or method → 404 {"error": "Route not found"}
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (ApiError), validation (Pydantic), routing
      (Starlette HTTPException), catch-all (Exception)
    - Database errors logged with the chained driver exception; clients get a generic body
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import (
    ApiError, DatabaseError, FieldError, RouteNotFoundError, ValidationError,
    INTERNAL_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "path", "query")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        }
        if isinstance(exc, DatabaseError):
            extra["operation"] = exc.operation
            logger.error(f"DatabaseError: {exc.message}", extra=extra, exc_info=exc)
        else:
            logger.info(f"{type(exc).__name__}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        error = ValidationError(to_field_errors(exc.errors()))
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (unknown path or method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            error = RouteNotFoundError(request.method, request.url.path)
            return JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def to_field_errors(errors: list[dict]) -> list[FieldError]:
    """Flatten Pydantic error dicts into ordered field/message pairs."""
    result = []
    for e in errors:
        loc = [str(part) for part in e.get("loc", ())]
        if e.get("type") == "json_invalid":
            loc = ["body"]
        elif len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        result.append(FieldError(field=".".join(loc) or "body", message=e["msg"]))
    return result
