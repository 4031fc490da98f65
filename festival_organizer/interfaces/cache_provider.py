"""Abstract base class for the festival hierarchy cache.

The cache sits between the festival service and the festival data
provider.  It owns the current :data:`~festival_organizer.models.hierarchy.Hierarchy`
snapshot and decides when the provider has to be called again.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from festival_organizer.models.hierarchy import Hierarchy


class IFestivalCache(ABC):
    """Contract for festival hierarchy caches."""

    @abstractmethod
    async def get_all_music_festivals(self) -> Hierarchy:
        """Return the sorted record label -> band -> festival hierarchy.

        Implementations may call the festival data provider to (re)build
        the hierarchy.  Provider errors propagate unchanged.
        """

    @abstractmethod
    def describe(self) -> dict[str, str | None]:
        """Return a JSON-serialisable summary of the cache state for health checks."""
