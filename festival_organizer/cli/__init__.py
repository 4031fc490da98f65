"""CLI tools for the festival organizer.

- ``python -m festival_organizer.cli.list_festivals`` — fetch the festivals
  feed once and write the record label listing (also ``python -m
  festival_organizer.cli``).
"""
