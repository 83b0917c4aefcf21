"""Error Handlers — global exception handlers mapping every failure to the error envelope.

Invariants:
    - This module is the only place that turns an error into an HTTP status
    - Validation (FieldValidationError or RequestValidationError) → 400 {timestamp, status, errors}
    - StudentRecordsError → {timestamp, status, error, message}, status from its category
    - Exception (catch-all) → 500 {timestamp, status, error, message}
    - timestamp is an ISO-8601 UTC string

Design Decisions:
    - Three-layer handler: domain (StudentRecordsError), validation (Pydantic), catch-all (Exception)
    - Category → status table here, so core/ and services/ never see HTTP codes
    - RequestValidationError keyed by the last loc element so path/body errors read like field errors
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from student_records.core.errors import (
    ErrorCategory, FieldValidationError, StudentRecordsError,
)

logger = logging.getLogger(__name__)

STATUS_BY_CATEGORY: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCategory.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCategory.DATABASE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_field_validation_handler(app)
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_field_validation_handler(app: FastAPI) -> None:
    """Register handler for explicit field validation failures."""

    @app.exception_handler(FieldValidationError)
    async def field_validation_handler(request: Request, exc: FieldValidationError):
        """Handle field validation raised by routes before calling a service."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_envelope(exc.errors, exc.context.timestamp),
        )


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Student Records domain/infrastructure error handler."""

    @app.exception_handler(StudentRecordsError)
    async def domain_error_handler(request: Request, exc: StudentRecordsError):
        """Handle all Student Records domain/infrastructure errors."""
        http_status = status_for(exc)
        log = logger.error if http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "student_id": exc.context.student_id,
            },
        )
        return JSONResponse(
            status_code=http_status,
            content=build_error_envelope(
                http_status, exc.message, exc.context.timestamp,
            ),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed bodies and path parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_envelope(_field_errors(exc)),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all for anything not mapped above."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_envelope(
                status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc),
            ),
        )


def status_for(exc: StudentRecordsError) -> int:
    """HTTP status for a domain error; unknown categories are server errors."""
    return STATUS_BY_CATEGORY.get(
        exc.category, status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def build_error_envelope(
    http_status: int, message: str, timestamp: datetime | None = None,
) -> dict:
    """Build the {timestamp, status, error, message} envelope."""
    return {
        "timestamp": _iso(timestamp),
        "status": http_status,
        "error": HTTPStatus(http_status).phrase,
        "message": message,
    }


def build_validation_envelope(
    errors: dict[str, str], timestamp: datetime | None = None,
) -> dict:
    """Build the {timestamp, status: 400, errors} envelope."""
    return {
        "timestamp": _iso(timestamp),
        "status": status.HTTP_400_BAD_REQUEST,
        "errors": dict(errors),
    }


def _field_errors(exc: RequestValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for e in exc.errors():
        loc = e.get("loc") or ("request",)
        errors[str(loc[-1])] = e["msg"]
    return errors


def _iso(timestamp: datetime | None) -> str:
    return (timestamp or datetime.now(timezone.utc)).isoformat()
