"""Regroup the flat festival list into a record label -> band -> festival hierarchy.

The API lists festivals with their bands; consumers want the inverse view,
grouped by the record label that manages each band.  Restructuring runs in
two passes:

    1. Insert every (label, band, festival) triple into plain dicts,
       creating label and band entries on first sight.  Re-inserting a
       triple is idempotent; the later festival entry replaces the earlier
       one under the same key.
    2. Sort each level by name (ordinal string comparison, so ``""`` comes
       first and upper case sorts before lower case) and freeze the result
       into :class:`RecordLabel` / :class:`Band` / :class:`Festival` models.

Building unsorted first avoids re-sorting on every insertion: insertion is
O(n) over all bands, sorting is O(k log k) per level.

A band is assumed to belong to one label.  If the source data lists the
same band name under two labels, it simply appears under both.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import structlog

from festival_organizer.models.festival import RawFestival
from festival_organizer.models.hierarchy import Band, Festival, Hierarchy, RecordLabel

logger = structlog.get_logger(logger_name=__name__)

# label name -> band name -> festival name -> Festival
_LabelIndex = dict[str, dict[str, dict[str, Festival]]]


def restructure_festivals(festivals: Sequence[RawFestival] | None) -> Hierarchy:
    """Convert a flat festival list into a sorted label -> band -> festival hierarchy.

    Parameters
    ----------
    festivals:
        Raw festivals as decoded from the API.  ``None`` is treated as an
        empty list.

    Returns
    -------
    Hierarchy
        Record labels sorted by name; each label's bands and each band's
        festivals are sorted by name as well.
    """
    index = _index_by_record_label(festivals or ())
    hierarchy = tuple(
        RecordLabel(name=label_name, bands=_sorted_bands(bands))
        for label_name, bands in _sorted_items(index)
    )
    logger.debug("festivals_restructured", record_labels=len(hierarchy))
    return hierarchy


def _index_by_record_label(festivals: Iterable[RawFestival]) -> _LabelIndex:
    index: _LabelIndex = {}
    for festival in festivals:
        festival_name = festival.name
        for band in festival.bands:
            bands_by_name = index.setdefault(band.record_label, {})
            festivals_by_name = bands_by_name.setdefault(band.name, {})
            festivals_by_name[festival_name] = Festival(name=festival_name)
            logger.debug(
                "festival_added",
                festival=festival_name,
                band=band.name,
                record_label=band.record_label,
            )
    return index


def _sorted_bands(bands: dict[str, dict[str, Festival]]) -> dict[str, Band]:
    return {
        band_name: Band(name=band_name, festivals=dict(_sorted_items(festivals)))
        for band_name, festivals in _sorted_items(bands)
    }


def _sorted_items(mapping: dict) -> list[tuple]:
    """Return the (name, value) pairs of *mapping* in ascending name order."""
    return sorted(mapping.items(), key=lambda item: item[0])
