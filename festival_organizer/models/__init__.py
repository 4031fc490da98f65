"""Festival organizer domain models — re-exports all public model classes.

    - festival.py   — raw API records (RawFestival, RawBand)
    - hierarchy.py  — regrouped output (RecordLabel, Band, Festival, Hierarchy)
"""

from __future__ import annotations

from festival_organizer.models.festival import RawBand, RawFestival
from festival_organizer.models.hierarchy import Band, Festival, Hierarchy, RecordLabel

__all__ = [
    "Band",
    "Festival",
    "Hierarchy",
    "RawBand",
    "RawFestival",
    "RecordLabel",
]
