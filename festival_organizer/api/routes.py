"""FastAPI routes for the festival organizer.

# ─── API ROUTE MAP ────────────────────────────────────────────────────
#
# Endpoint              Method  Description
# ───────────────────────────────────────────────────────────────────
# /api/v1/festivals     GET     Record label -> band -> festival hierarchy
# /api/v1/health        GET     Health check + cache state
#
# Services are resolved from ``app.state`` (populated by the lifespan in
# main.py) through ``Depends`` helpers, so tests can build an app with
# mocks on ``app.state`` and exercise the routes unchanged.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request

from festival_organizer import __version__
from festival_organizer.api.schemas import (
    CacheStatusResponse,
    ErrorResponse,
    FestivalHierarchyResponse,
    HealthResponse,
    RecordLabelResponse,
)
from festival_organizer.interfaces.cache_provider import IFestivalCache
from festival_organizer.interfaces.festival_service import IFestivalService
from festival_organizer.services.output_formatter import hierarchy_to_dict
from festival_organizer.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

router = APIRouter(prefix="/api/v1")


def _get_festival_service(request: Request) -> IFestivalService:
    """Return the festival service from application state."""
    return request.app.state.festival_service


def _get_festival_cache(request: Request) -> IFestivalCache:
    """Return the festival cache from application state."""
    return request.app.state.festival_cache


FestivalServiceDep = Annotated[IFestivalService, Depends(_get_festival_service)]
FestivalCacheDep = Annotated[IFestivalCache, Depends(_get_festival_cache)]


@router.get(
    "/festivals",
    response_model=FestivalHierarchyResponse,
    responses={502: {"model": ErrorResponse}},
    summary="Festivals grouped by record label and band",
)
async def get_festivals(service: FestivalServiceDep) -> FestivalHierarchyResponse:
    """Return every record label with its bands and their festivals, sorted by name."""
    hierarchy = await service.get_all_festivals()
    record_labels = [RecordLabelResponse.model_validate(item) for item in hierarchy_to_dict(hierarchy)]
    _logger.debug("festivals_served", record_labels=len(record_labels))
    return FestivalHierarchyResponse(
        record_labels=record_labels,
        total_record_labels=len(record_labels),
        generated_at=datetime.now(timezone.utc),
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Application health check",
)
async def health_check(request: Request, cache: FestivalCacheDep) -> HealthResponse:
    """Return application health, version, and cache state.

    Does not touch the festivals API; an empty cache is still healthy.
    """
    config = getattr(request.app.state, "config", {}) or {}
    version = config.get("app", {}).get("version", __version__)
    return HealthResponse(
        status="healthy",
        version=str(version),
        cache=CacheStatusResponse(**cache.describe()),
    )
