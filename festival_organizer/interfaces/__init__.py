"""Public interface definitions for the festival organizer.

Business logic depends only on these abstract base classes; concrete
implementations are wired together in ``festival_organizer/main.py``.

    Interface              →  Concrete implementations
    ─────────────────────────────────────────────────────────────
    IFestivalAPIProvider   →  FestivalRESTAPIProvider
    IFestivalCache         →  FestivalCache, PassthroughFestivalCache
    IFestivalService       →  FestivalService
"""

from festival_organizer.interfaces.cache_provider import IFestivalCache
from festival_organizer.interfaces.festival_api_provider import IFestivalAPIProvider
from festival_organizer.interfaces.festival_service import IFestivalService

__all__ = [
    "IFestivalAPIProvider",
    "IFestivalCache",
    "IFestivalService",
]
