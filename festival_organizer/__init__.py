"""Festival organizer — regroups a festival line-up feed by record label."""

__version__ = "0.1.0"
