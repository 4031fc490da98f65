"""Festivals API provider: HTTP transport with backoff plus JSON decoding."""

from festival_organizer.providers.festival_api.decoder import decode_festivals
from festival_organizer.providers.festival_api.rest_api_provider import (
    FestivalRESTAPIProvider,
)

__all__ = ["FestivalRESTAPIProvider", "decode_festivals"]
