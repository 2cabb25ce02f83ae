"""Error Handlers — global exception handlers for the catalog API.

Invariants:
    - DeadMediaError → its http_status (404, 421, 500)
    - RequestValidationError → 400
    - StarletteHTTPException (unmatched route, wrong method) → its own status
    - Exception (catch-all) → 500, never leaks internal details
    - Every error response has an empty body: the status code is the only signal

Design Decisions:
    - Four-layer handler: domain, validation, routing, catch-all
    - Extracted from main.py so create_app stays a flat wiring list
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from deadmedia.core.errors import DeadMediaError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register catalog domain/infrastructure error handler."""

    @app.exception_handler(DeadMediaError)
    async def domain_error_handler(request: Request, exc: DeadMediaError):
        level = logging.ERROR if exc.http_status >= 500 else logging.INFO
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                **exc.to_log_extra(),
                "method": request.method,
                "path": request.url.path,
            },
        )
        return Response(status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.info(
            f"Invalid request data on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404 unmatched route, 405 method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        logger.info(
            f"{request.method} {request.url.path} answered {exc.status_code}",
            extra={"path": request.url.path},
        )
        return Response(status_code=exc.status_code, headers=exc.headers)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return Response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
