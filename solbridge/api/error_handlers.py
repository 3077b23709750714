"""Error Handlers: global exception handlers producing the failure envelope.

Invariants:
    - SolbridgeError → its own http_status (400) and {"success": false, "error": message}
    - RequestValidationError → 400; "Missing required fields" when any field is absent
      (absent field names logged as missing_fields, never returned),
      otherwise "Invalid input: <field>: <reason>" for the first problem found
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (SolbridgeError), validation (Pydantic), catch-all
    - Pydantic errors reuse domain error classes so every 400 has one shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from solbridge.core.errors import (
    InvalidInputError, MissingFieldsError, SolbridgeError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_solbridge_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_solbridge_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SolbridgeError)
    async def solbridge_error_handler(request: Request, exc: SolbridgeError):
        """Handle all SolBridge domain errors."""
        logger.info(
            f"SolbridgeError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        error = _validation_error_to_domain(exc)
        logger.info(
            f"Validation error on {request.url.path}: {error.message}",
            extra={
                "error_code": error.code,
                "path": request.url.path,
                "missing_fields": (
                    error.fields if isinstance(error, MissingFieldsError) else None
                ),
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "An unexpected error occurred"},
        )


def _field_name(loc: tuple) -> str:
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


def _validation_error_to_domain(exc: RequestValidationError) -> SolbridgeError:
    """Map Pydantic errors onto MissingFieldsError / InvalidInputError."""
    errors = exc.errors()
    missing = [_field_name(e["loc"]) for e in errors if e["type"] == "missing"]
    if missing:
        return MissingFieldsError(missing)
    if not errors:
        return InvalidInputError("Invalid request data")
    first = errors[0]
    return InvalidInputError(f"{_field_name(first['loc'])}: {first['msg']}")
