"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ────────────────────────────────────────────────
#
# Settings are read from two sources (in priority order):
#
#   1. **Environment variables** — e.g. FESTIVALS_API_URI=http://localhost:9000/
#   2. **.env file** — key=value lines in the working directory's .env
#
# Field ``festivals_api_uri`` maps to env var ``FESTIVALS_API_URI``
# (pydantic-settings uppercases and matches).  Defaults apply when
# neither source sets a value.
# ──────────────────────────────────────────────────────────────────────
"""

from datetime import timedelta

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from festival_organizer.utils.backoff import (
    DEFAULT_INITIAL_INTERVAL,
    DEFAULT_MAX_ELAPSED_TIME,
    DEFAULT_MAX_INTERVAL,
    DEFAULT_MULTIPLIER,
    ExponentialBackOff,
)
from festival_organizer.utils.errors import ConfigurationError

DEFAULT_FESTIVALS_API_URI = "http://eacodingtest.digital.energyaustralia.com.au/api/v1/"


class Settings(BaseSettings):
    """Festival organizer settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Festivals API ===
    festivals_api_uri: str = DEFAULT_FESTIVALS_API_URI
    http_timeout: float = Field(default=30.0, gt=0)

    # === Backoff (seconds) ===
    backoff_initial_interval: float = Field(default=DEFAULT_INITIAL_INTERVAL, ge=0)
    backoff_multiplier: float = Field(default=DEFAULT_MULTIPLIER, ge=1.0)
    backoff_max_interval: float = Field(default=DEFAULT_MAX_INTERVAL, ge=0)
    backoff_max_elapsed_time: float = Field(default=DEFAULT_MAX_ELAPSED_TIME, ge=0)

    # === Cache ===
    # False swaps the TTL cache for a passthrough that fetches on every call.
    cache_enabled: bool = True
    cache_ttl_hours: int = Field(default=24, gt=0)

    # === Startup listing ===
    list_festivals_on_app_start: bool = True
    output_file_uri: str = "RestructuredFestivalData.txt"

    # === App Config ===
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    app_env: str = "development"
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _check_backoff_bounds(self) -> "Settings":
        if self.backoff_max_interval < self.backoff_initial_interval:
            raise ValueError(
                "backoff_max_interval must be >= backoff_initial_interval "
                f"(got {self.backoff_max_interval} < {self.backoff_initial_interval})"
            )
        return self

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(hours=self.cache_ttl_hours)

    def build_backoff(self) -> ExponentialBackOff:
        """Return the backoff policy described by the ``backoff_*`` fields.

        Raises:
            ConfigurationError: If the fields do not form a valid policy.
        """
        try:
            return ExponentialBackOff(
                initial_interval=self.backoff_initial_interval,
                multiplier=self.backoff_multiplier,
                max_interval=self.backoff_max_interval,
                max_elapsed_time=self.backoff_max_elapsed_time,
            )
        except ValueError as exc:
            raise ConfigurationError(message=f"Invalid backoff settings: {exc}") from exc
