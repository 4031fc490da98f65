"""API middleware — request logging and error handling.

Starlette middleware is a stack (last added, first executed).  In
``main.create_app``::

    app.add_middleware(ErrorHandlingMiddleware)   # added 1st → inner
    app.add_middleware(RequestLoggingMiddleware)  # added 2nd → outermost

so RequestLoggingMiddleware sees the final status code even when
ErrorHandlingMiddleware replaced an exception with a JSON error body.
"""

from __future__ import annotations

import time

import structlog
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from festival_organizer.api.schemas import ErrorResponse
from festival_organizer.utils.errors import (
    FestivalOrganizerError,
    ProviderUnavailableError,
    ResponseParsingError,
)
from festival_organizer.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with method, path, status code, and duration."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        response: Response | None = None

        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            status_code = response.status_code if response else 500
            _logger.info(
                "http_request",
                method=request.method,
                path=str(request.url.path),
                status=status_code,
                duration_ms=duration_ms,
            )


def _status_for(exc: FestivalOrganizerError) -> int:
    # Upstream failures map to Bad Gateway.
    if isinstance(exc, (ResponseParsingError, ProviderUnavailableError)):
        return 502
    return 500


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Convert ``FestivalOrganizerError`` subclasses into JSON error responses.

    The full error is logged server-side; the client gets the error type
    and message only.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except FestivalOrganizerError as exc:
            upstream_status = getattr(exc, "status_code", None)
            _logger.error(
                "application_error",
                error_type=type(exc).__name__,
                message=exc.message,
                provider=exc.provider_name,
                upstream_status=upstream_status,
                path=str(request.url.path),
            )
            body = ErrorResponse(
                error=type(exc).__name__,
                detail=exc.message,
                provider=exc.provider_name,
                upstream_status=upstream_status,
            )
            return JSONResponse(
                status_code=_status_for(exc),
                content=body.model_dump(),
            )
