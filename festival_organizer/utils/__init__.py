"""Utility modules for the festival organizer.

- **backoff** -- Exponential backoff policy used by the festivals REST
  provider to space out retries against a throttling endpoint.
- **errors** -- Exception hierarchy rooted at FestivalOrganizerError.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

from festival_organizer.utils.backoff import BackOffExecution, ExponentialBackOff
from festival_organizer.utils.errors import (
    ConfigurationError,
    FestivalOrganizerError,
    ProviderUnavailableError,
    ResponseParsingError,
)
from festival_organizer.utils.logging import configure_logging, get_logger

__all__ = [
    "BackOffExecution",
    "ConfigurationError",
    "ExponentialBackOff",
    "FestivalOrganizerError",
    "ProviderUnavailableError",
    "ResponseParsingError",
    "configure_logging",
    "get_logger",
]
