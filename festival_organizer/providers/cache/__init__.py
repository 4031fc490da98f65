"""Festival hierarchy caches.

FestivalCache keeps the restructured hierarchy in memory for 24 hours so
repeated requests do not hit the festivals API.  It is per-process; it is
not shared across workers and does not survive a restart.
"""

from festival_organizer.providers.cache.festival_cache import CacheState, FestivalCache
from festival_organizer.providers.cache.passthrough_cache import PassthroughFestivalCache

__all__ = ["CacheState", "FestivalCache", "PassthroughFestivalCache"]
