"""Abstract base class for festival data providers.

Defines the contract for fetching the raw, flat festival list from an
upstream source.  The REST implementation lives in
``festival_organizer/providers/festival_api/``; tests inject mocks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from festival_organizer.models.festival import RawFestival


class IFestivalAPIProvider(ABC):
    """Contract for services that deliver the raw festival list."""

    @abstractmethod
    async def get_festivals(self) -> list[RawFestival]:
        """Fetch every festival with its bands and their record labels.

        Returns
        -------
        list[RawFestival]
            Festivals in the order the upstream source lists them.

        Raises
        ------
        festival_organizer.utils.errors.ResponseParsingError
            If the upstream response cannot be decoded.
        festival_organizer.utils.errors.ProviderUnavailableError
            If the upstream source cannot be reached.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier used in logs and error messages."""
