"""Error Handlers — global exception handlers for the member registry API.

Invariants:
    - Every handler answers with MemberRegistryError.to_response(): one envelope shape
    - RequestValidationError → RequestValidationFailure (400) with one detail per field
    - Exception (catch-all) → InternalError (500), never leaks internal details
    - MemberError values never reach these handlers (routes fold them into responses)

Design Decisions:
    - Non-registry exceptions are converted to registry errors first, then share
      a single responder (log level follows severity)
    - Detail field is the dotted pydantic location, e.g. "body.membership_number"
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import (
    ErrorSeverity,
    InternalError,
    MemberRegistryError,
    RequestValidationFailure,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(MemberRegistryError)
    async def registry_error_handler(request: Request, exc: MemberRegistryError):
        return _respond(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        return _respond(request, RequestValidationFailure(validation_details(exc.errors())))

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}", exc_info=True,
        )
        return _respond(request, InternalError())


def validation_details(errors) -> list[dict[str, str]]:
    """Flatten pydantic errors into {field, message, type} entries."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]


def _respond(request: Request, exc: MemberRegistryError) -> JSONResponse:
    logger.log(
        _LOG_LEVELS[exc.severity],
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())
