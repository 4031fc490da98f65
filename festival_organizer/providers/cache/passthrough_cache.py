"""Cache stand-in that never caches.

Every call fetches the festival list and restructures it again.  Selected
when ``CACHE_ENABLED=false``; handy when pointing the app at a local API
whose data changes between requests.
"""

from __future__ import annotations

from festival_organizer.interfaces.cache_provider import IFestivalCache
from festival_organizer.interfaces.festival_api_provider import IFestivalAPIProvider
from festival_organizer.models.hierarchy import Hierarchy
from festival_organizer.services.restructure import restructure_festivals
from festival_organizer.utils.logging import get_logger


class PassthroughFestivalCache(IFestivalCache):
    """Fetches and restructures on every call."""

    def __init__(self, api_provider: IFestivalAPIProvider) -> None:
        self._api_provider = api_provider
        self._logger = get_logger(__name__)

    async def get_all_music_festivals(self) -> Hierarchy:
        festivals = await self._api_provider.get_festivals()
        self._logger.debug("festival_passthrough_fetch", festivals=len(festivals))
        return restructure_festivals(festivals)

    def describe(self) -> dict[str, str | None]:
        return {"type": "passthrough", "state": None, "populated_at": None, "ttl": None}
