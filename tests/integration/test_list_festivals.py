"""Integration tests for the startup listing driven by the app lifespan."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from festival_organizer.config.settings import Settings
from festival_organizer.main import build_components, create_app, list_festivals
from festival_organizer.providers.cache import FestivalCache, PassthroughFestivalCache
from festival_organizer.providers.festival_api.rest_api_provider import FestivalRESTAPIProvider
from festival_organizer.utils.errors import ResponseParsingError
from tests.conftest import EXPECTED_LISTING_LINES, EXPECTED_RECORD_LABELS, FESTIVALS_JSON


def _settings(tmp_path, **overrides) -> Settings:
    defaults = {
        "output_file_uri": str(tmp_path / "RestructuredFestivalData.txt"),
        "festivals_api_uri": "http://festivals.test/api/v1/",
    }
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


class TestBuildComponents:
    def test_ttl_cache_by_default(self, tmp_path) -> None:
        components = build_components(_settings(tmp_path, cache_ttl_hours=3))

        cache = components["festival_cache"]
        assert isinstance(cache, FestivalCache)
        assert cache.ttl.total_seconds() == 3 * 3600
        assert components["festival_api_provider"].build_url("festivals") == (
            "http://festivals.test/api/v1/festivals"
        )

    def test_passthrough_when_cache_disabled(self, tmp_path) -> None:
        components = build_components(_settings(tmp_path, cache_enabled=False))
        assert isinstance(components["festival_cache"], PassthroughFestivalCache)


class TestListFestivals:
    @pytest.mark.asyncio
    async def test_end_to_end_over_mock_transport(self, tmp_path) -> None:
        statuses = iter([429, 429, 200])

        def handler(request: httpx.Request) -> httpx.Response:
            status = next(statuses)
            return httpx.Response(status, text=FESTIVALS_JSON if status == 200 else "")

        settings = _settings(tmp_path, backoff_initial_interval=0.0, backoff_max_interval=0.0)
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            components = build_components(settings, http_client=client)
            hierarchy = await list_festivals(components["festival_service"], settings.output_file_uri)

        assert [label.name for label in hierarchy] == EXPECTED_RECORD_LABELS
        written = (tmp_path / "RestructuredFestivalData.txt").read_text(encoding="utf-8")
        assert written.splitlines() == EXPECTED_LISTING_LINES


class TestStartupListing:
    def test_startup_writes_listing(self, tmp_path, sample_festivals) -> None:
        app = create_app(_settings(tmp_path))

        with patch.object(
            FestivalRESTAPIProvider, "get_festivals", AsyncMock(return_value=sample_festivals)
        ) as mock_get:
            with TestClient(app) as client:
                # The startup listing primed the cache.
                assert client.get("/api/v1/health").json()["cache"]["state"] == "FRESH"
                client.get("/api/v1/festivals")

        mock_get.assert_awaited_once()
        listing = (tmp_path / "RestructuredFestivalData.txt").read_text(encoding="utf-8")
        assert listing.splitlines() == EXPECTED_LISTING_LINES

    def test_startup_failure_aborts_without_file(self, tmp_path) -> None:
        app = create_app(_settings(tmp_path))
        failure = ResponseParsingError(message="bad body", provider_name="festivals_api", status_code=429)

        with patch.object(FestivalRESTAPIProvider, "get_festivals", AsyncMock(side_effect=failure)):
            with pytest.raises(ResponseParsingError):
                with TestClient(app):
                    pass

        assert not (tmp_path / "RestructuredFestivalData.txt").exists()

    def test_startup_listing_disabled(self, tmp_path) -> None:
        app = create_app(_settings(tmp_path, list_festivals_on_app_start=False))

        with patch.object(FestivalRESTAPIProvider, "get_festivals", AsyncMock()) as mock_get:
            with TestClient(app) as client:
                assert client.get("/api/v1/health").json()["cache"]["state"] == "EMPTY"

        mock_get.assert_not_awaited()
        assert not (tmp_path / "RestructuredFestivalData.txt").exists()
