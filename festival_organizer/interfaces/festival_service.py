"""Abstract base class for the festival service facade."""

from __future__ import annotations

from abc import ABC, abstractmethod

from festival_organizer.models.hierarchy import Hierarchy


class IFestivalService(ABC):
    """Contract for callers that need the regrouped festival data."""

    @abstractmethod
    async def get_all_festivals(self) -> Hierarchy:
        """Return record labels with their bands and festivals, all sorted by name.

        Raises
        ------
        festival_organizer.utils.errors.FestivalOrganizerError
            If the festival data could not be fetched or decoded.
        """
