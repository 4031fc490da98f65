"""Festival organizer API layer — routes, schemas and middleware."""

from festival_organizer.api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from festival_organizer.api.routes import router
from festival_organizer.api.schemas import (
    ErrorResponse,
    FestivalHierarchyResponse,
    HealthResponse,
)

__all__ = [
    "ErrorHandlingMiddleware",
    "ErrorResponse",
    "FestivalHierarchyResponse",
    "HealthResponse",
    "RequestLoggingMiddleware",
    "router",
]
