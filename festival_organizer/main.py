"""Festival organizer FastAPI application entry point.

Wires together the festivals API provider, the hierarchy cache and the
festival service.  On startup the lifespan lists the festival hierarchy to
``OUTPUT_FILE_URI`` (unless ``LIST_FESTIVALS_ON_APP_START=false``); a
failure there aborts startup and leaves no output file behind.

Also exposes ``build_components`` / ``list_festivals`` for the CLI.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import httpx
import uvicorn
from fastapi import FastAPI

from festival_organizer import __version__
from festival_organizer.api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from festival_organizer.api.routes import router as api_router
from festival_organizer.config.loader import load_config
from festival_organizer.config.settings import Settings
from festival_organizer.interfaces.cache_provider import IFestivalCache
from festival_organizer.interfaces.festival_api_provider import IFestivalAPIProvider
from festival_organizer.interfaces.festival_service import IFestivalService
from festival_organizer.models.hierarchy import Hierarchy
from festival_organizer.providers.cache.festival_cache import FestivalCache
from festival_organizer.providers.cache.passthrough_cache import PassthroughFestivalCache
from festival_organizer.providers.festival_api.rest_api_provider import FestivalRESTAPIProvider
from festival_organizer.services.festival_service import FestivalService
from festival_organizer.services.output_formatter import write_hierarchy_file
from festival_organizer.utils.logging import configure_logging, get_logger

_logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Component assembly
# ---------------------------------------------------------------------------


def _build_cache(app_settings: Settings, api_provider: IFestivalAPIProvider) -> IFestivalCache:
    if app_settings.cache_enabled:
        return FestivalCache(api_provider=api_provider, ttl=app_settings.cache_ttl)
    return PassthroughFestivalCache(api_provider=api_provider)


def build_components(
    app_settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """Construct every provider and service instance.

    The cache is created exactly once here and shared by reference; nothing
    else constructs one.  Returns a flat dict of named components to be
    stored on ``app.state``.  The caller owns ``http_client`` and must
    close it.
    """
    http_client = http_client or httpx.AsyncClient(timeout=app_settings.http_timeout)

    api_provider = FestivalRESTAPIProvider(
        http_client=http_client,
        base_uri=app_settings.festivals_api_uri,
        backoff=app_settings.build_backoff(),
    )
    festival_cache = _build_cache(app_settings, api_provider)
    festival_service = FestivalService(cache=festival_cache)

    return {
        "http_client": http_client,
        "festival_api_provider": api_provider,
        "festival_cache": festival_cache,
        "festival_service": festival_service,
    }


async def list_festivals(service: IFestivalService, output_path: str | Path) -> Hierarchy:
    """Fetch the festival hierarchy and write its text listing to *output_path*.

    The file is only written once the hierarchy was fetched successfully.
    """
    hierarchy = await service.get_all_festivals()
    write_hierarchy_file(hierarchy, output_path)
    return hierarchy


# ---------------------------------------------------------------------------
# Application lifespan (startup / shutdown)
# ---------------------------------------------------------------------------


@asynccontextmanager
async def _lifespan(application: FastAPI):  # noqa: ANN201
    """Initialise components on startup, list festivals, clean up on shutdown."""
    app_settings: Settings = application.state.settings
    components = build_components(app_settings)

    for key, value in components.items():
        setattr(application.state, key, value)

    http_client: httpx.AsyncClient = components["http_client"]
    try:
        if app_settings.list_festivals_on_app_start:
            await list_festivals(components["festival_service"], app_settings.output_file_uri)

        _logger.info(
            "app_startup",
            version=__version__,
            environment=app_settings.app_env,
            festivals_api=app_settings.festivals_api_uri,
            cache=type(components["festival_cache"]).__name__,
        )

        yield
    finally:
        await http_client.aclose()
        _logger.info("app_shutdown", message="HTTP client closed")


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    app_settings = app_settings or Settings()
    config = load_config(settings=app_settings)
    configure_logging(log_level=config["logging"]["level"])

    application = FastAPI(
        title="Festival Organizer API",
        version=__version__,
        description=(
            "Regroups the festivals API line-up feed by record label and band, "
            "sorted alphabetically and cached for 24 hours."
        ),
        lifespan=_lifespan,
    )
    application.state.settings = app_settings
    application.state.config = config

    # -- Middleware (order matters: last added = first executed) --
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)

    application.include_router(api_router)

    return application


# ---------------------------------------------------------------------------
# Server entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    _settings = Settings()
    uvicorn.run(
        "festival_organizer.main:create_app",
        factory=True,
        host=_settings.app_host,
        port=_settings.app_port,
        reload=(_settings.app_env == "development"),
    )
