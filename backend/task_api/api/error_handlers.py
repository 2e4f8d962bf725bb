"""Error Handlers — global exception handlers rendering the uniform failure envelope.

Invariants:
    - TaskApiError → {success: false, message, code} with the error's HTTP status
    - RequestValidationError (malformed body) → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (TaskApiError), validation (Pydantic), catch-all (Exception)
    - Malformed bodies report 400, not FastAPI's default 422: every validation
      failure has one status code regardless of which layer caught it
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from task_api.core.errors import TaskApiError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_task_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_task_api_error_handler(app: FastAPI) -> None:
    """Register domain/store error handler."""

    @app.exception_handler(TaskApiError)
    async def task_api_error_handler(request: Request, exc: TaskApiError):
        """Handle all Task API domain/store errors."""
        log = logger.error if exc.severity == ErrorSeverity.CRITICAL else logger.warning
        log(
            f"TaskApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "task_id": exc.context.task_id,
                "operation": exc.context.operation,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

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
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the failure envelope for a malformed request."""
    return {
        "success": False,
        "message": "Invalid request data",
        "code": "VALIDATION_ERROR",
        "errors": [
            {
                "field": ".".join(
                    str(loc) for loc in e["loc"] if loc != "body"
                ) or "body",
                "message": e["msg"],
            }
            for e in exc.errors()
        ],
    }
