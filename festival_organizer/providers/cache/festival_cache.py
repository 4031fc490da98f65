"""Time-to-live cache for the restructured festival hierarchy.

The first call to :meth:`FestivalCache.get_all_music_festivals` fetches the
festival list from the API provider, restructures it and stores the result
with its population timestamp.  Later calls return the stored hierarchy
until it is older than the TTL (24 hours by default); the next call after
that repopulates it.

States::

    EMPTY  --populate-->  FRESH  --TTL elapses-->  STALE  --populate-->  FRESH

Concurrency: fresh reads return the current snapshot without locking.  The
check-and-populate path runs under a single ``asyncio.Lock`` and re-checks
the state after acquiring it, so callers that arrive while a population is
in flight wait for it and share its result instead of triggering a second
fetch.

A failed population (parse error or unreachable API) propagates to the
caller and leaves the previous snapshot and timestamp untouched.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable

from festival_organizer.interfaces.cache_provider import IFestivalCache
from festival_organizer.interfaces.festival_api_provider import IFestivalAPIProvider
from festival_organizer.models.hierarchy import Hierarchy
from festival_organizer.services.restructure import restructure_festivals
from festival_organizer.utils.logging import get_logger

DEFAULT_TTL = timedelta(hours=24)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CacheState(str, Enum):  # noqa: UP042 (StrEnum needs 3.11)
    """Lifecycle states of the festival cache."""

    EMPTY = "EMPTY"
    FRESH = "FRESH"
    STALE = "STALE"


class FestivalCache(IFestivalCache):
    """Single-entry TTL cache holding the current festival hierarchy.

    Constructed once by the composition root and shared by reference.

    Parameters
    ----------
    api_provider:
        Source of the raw festival list.
    ttl:
        How long a populated hierarchy stays fresh.
    clock:
        Returns the current time; injectable for tests.
    """

    def __init__(
        self,
        api_provider: IFestivalAPIProvider,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._api_provider = api_provider
        self._ttl = ttl
        self._clock = clock
        self._hierarchy: Hierarchy | None = None
        self._populated_at: datetime | None = None
        self._lock = asyncio.Lock()
        self._logger = get_logger(__name__)

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    @property
    def populated_at(self) -> datetime | None:
        return self._populated_at

    @property
    def state(self) -> CacheState:
        if self._hierarchy is None or self._populated_at is None:
            return CacheState.EMPTY
        if self._clock() - self._ttl > self._populated_at:
            return CacheState.STALE
        return CacheState.FRESH

    # ------------------------------------------------------------------
    # IFestivalCache implementation
    # ------------------------------------------------------------------

    async def get_all_music_festivals(self) -> Hierarchy:
        """Return the cached hierarchy, repopulating it first if empty or stale."""
        if self.state is CacheState.FRESH:
            self._logger.debug("festival_cache_hit")
            return self._hierarchy

        async with self._lock:
            state = self.state
            if state is not CacheState.FRESH:
                self._logger.info("festival_cache_miss", state=state.value)
                await self._populate()
            return self._hierarchy

    def describe(self) -> dict[str, str | None]:
        return {
            "type": "ttl",
            "state": self.state.value,
            "populated_at": self._populated_at.isoformat() if self._populated_at else None,
            "ttl": str(self._ttl),
        }

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _populate(self) -> None:
        """Fetch, restructure and swap in a new snapshot.  Caller holds the lock."""
        festivals = await self._api_provider.get_festivals()
        hierarchy = restructure_festivals(festivals)

        # Both fields are assigned together after the fetch succeeded.
        self._hierarchy = hierarchy
        self._populated_at = self._clock()
        self._logger.info(
            "festival_cache_populated",
            festivals=len(festivals),
            record_labels=len(hierarchy),
            populated_at=self._populated_at.isoformat(),
        )
