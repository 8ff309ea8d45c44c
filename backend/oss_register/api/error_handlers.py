"""Error Handlers — global exception handlers for the register API.

Invariants:
    - RejectionError → {message, detail} with its resolved status
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: rejection (operations), validation (Pydantic), catch-all
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from oss_register.core.errors import DEFAULT_ERROR_MESSAGE, RejectionError

logger = logging.getLogger(__name__)

VALIDATION_ERROR_MESSAGE = "Invalid request data"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_rejection_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_rejection_handler(app: FastAPI) -> None:

    @app.exception_handler(RejectionError)
    async def rejection_handler(request: Request, exc: RejectionError):
        """Serialize a normalized operation rejection."""
        logger.info(
            f"Rejected: {exc.message}",
            extra={"http_status": exc.http_status, "path": request.url.path},
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
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": DEFAULT_ERROR_MESSAGE,
                "detail": DEFAULT_ERROR_MESSAGE,
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return {
        "message": VALIDATION_ERROR_MESSAGE,
        "detail": "; ".join(f"{e['field']}: {e['message']}" for e in errors),
        "errors": errors,
    }
