"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. config/config.yaml  — static defaults checked into the repo
  2. .env file           — local developer overrides (not committed)
  3. Environment vars    — set at deploy time

The YAML file is read first, then the values resolved by ``Settings``
are deep-merged on top.
"""

from pathlib import Path

import yaml

from festival_organizer.config.settings import Settings
from festival_organizer.utils.errors import ConfigurationError


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge with environment-based Settings.

    Args:
        path: Path to the YAML configuration file.  A missing file is
              treated as an empty config.
        settings: Resolved settings; a fresh ``Settings()`` when omitted.

    Returns:
        Fully resolved configuration dictionary.

    Raises:
        ConfigurationError: If the YAML file is not a mapping.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    if not isinstance(yaml_config, dict):
        raise ConfigurationError(message=f"{path} must contain a mapping at top level")

    settings = settings or Settings()
    env_overrides = {
        "app": {
            "host": settings.app_host,
            "port": settings.app_port,
            "env": settings.app_env,
        },
        "festivals_api": {
            "uri": settings.festivals_api_uri,
            "timeout": settings.http_timeout,
            "backoff": {
                "initial_interval": settings.backoff_initial_interval,
                "multiplier": settings.backoff_multiplier,
                "max_interval": settings.backoff_max_interval,
                "max_elapsed_time": settings.backoff_max_elapsed_time,
            },
        },
        "cache": {
            "enabled": settings.cache_enabled,
            "ttl_hours": settings.cache_ttl_hours,
        },
        "listing": {
            "on_app_start": settings.list_festivals_on_app_start,
            "output_file": settings.output_file_uri,
        },
        "logging": {
            "level": settings.log_level,
        },
    }

    _deep_merge(yaml_config, env_overrides)
    return yaml_config


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
