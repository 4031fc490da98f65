"""Configuration module — exports Settings and load_config."""

from festival_organizer.config.loader import load_config
from festival_organizer.config.settings import Settings

__all__ = ["Settings", "load_config"]
