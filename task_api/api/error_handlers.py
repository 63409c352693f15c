"""Error Handlers — global exception handlers for the Task API.

Invariants:
    - TaskApiError → its own envelope and http_status
    - RequestValidationError → 422 with a field → messages map
      (malformed path identifiers → 404, the resource cannot exist)
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (TaskApiError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from task_api.core.errors import (
    ErrorSeverity, ResourceNotFoundError, TaskApiError, TaskValidationError,
    internal_error_response,
)
from task_api.core.validation_messages import format_field_errors, is_path_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _log_domain_error(request: Request, exc: TaskApiError) -> None:
    extra = {
        "error_code": exc.code,
        "path": request.url.path,
        "method": request.method,
        "status_code": exc.http_status,
    }
    if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING):
        logger.warning(f"{exc.code}: {exc.message}", extra=extra)
    else:
        logger.error(f"{exc.code}: {exc.message}", extra=extra)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Task API domain/infrastructure error handler."""

    @app.exception_handler(TaskApiError)
    async def domain_error_handler(request: Request, exc: TaskApiError):
        """Handle all Task API domain/infrastructure errors."""
        _log_domain_error(request, exc)
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
        error = to_domain_error(exc)
        _log_domain_error(request, error)
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=internal_error_response(),
        )


def to_domain_error(exc: RequestValidationError) -> TaskApiError:
    """Map a framework validation error onto the domain hierarchy."""
    errors = exc.errors()
    if is_path_error(errors):
        return ResourceNotFoundError("Task")
    return TaskValidationError(format_field_errors(errors))
