"""Output formatting for the festival hierarchy.

Two renderings are supported:

- **Text listing** — the file written on startup and by the CLI.  One line
  per record label (no indent), one per band (5 spaces), one per festival
  (10 spaces), in hierarchy order::

      Fourth Woman Records
           Jill Black
                LOL-palooza

- **Dict** — a JSON-serialisable nested structure used by the API and the
  CLI's ``--json`` mode.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from festival_organizer.models.hierarchy import Hierarchy
from festival_organizer.utils.logging import get_logger

LEADING_SPACES = "     "

_logger = get_logger(__name__)


def format_hierarchy_lines(hierarchy: Hierarchy) -> list[str]:
    """Flatten *hierarchy* into indented listing lines."""
    lines: list[str] = []
    for record_label in hierarchy:
        lines.append(record_label.name)
        for band_name, band in record_label.bands.items():
            lines.append(LEADING_SPACES + band_name)
            for festival_name in band.festivals:
                lines.append(LEADING_SPACES + LEADING_SPACES + festival_name)
    return lines


def write_hierarchy_file(hierarchy: Hierarchy, path: str | Path) -> Path:
    """Write the text listing of *hierarchy* to *path*, one newline-terminated line each.

    The parent directory must already exist.  Returns the path written.
    """
    output_path = Path(path)
    lines = format_hierarchy_lines(hierarchy)
    output_path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    _logger.info("festival_listing_written", path=str(output_path), lines=len(lines))
    return output_path


def hierarchy_to_dict(hierarchy: Hierarchy) -> list[dict[str, Any]]:
    """Convert *hierarchy* to plain lists and dicts, preserving sort order.

    Dict keys are not used for ordering on the wire; every level is a list
    so JSON consumers see the sorted order regardless of their parser.
    """
    return [
        {
            "name": record_label.name,
            "bands": [
                {
                    "name": band.name,
                    "festivals": [{"name": f.name} for f in band.festivals.values()],
                }
                for band in record_label.bands.values()
            ],
        }
        for record_label in hierarchy
    ]
