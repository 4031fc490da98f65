"""Festival service — the entry point callers use to get the festival hierarchy.

Delegates to whichever :class:`IFestivalCache` it was constructed with, so
callers never depend on the concrete caching strategy.
"""

from __future__ import annotations

from festival_organizer.interfaces.cache_provider import IFestivalCache
from festival_organizer.interfaces.festival_service import IFestivalService
from festival_organizer.models.hierarchy import Hierarchy


class FestivalService(IFestivalService):
    """Service layer for the festival organizer."""

    def __init__(self, cache: IFestivalCache) -> None:
        self._cache = cache

    async def get_all_festivals(self) -> Hierarchy:
        return await self._cache.get_all_music_festivals()
