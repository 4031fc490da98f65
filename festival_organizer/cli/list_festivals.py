# =============================================================================
# festival_organizer/cli/list_festivals.py — one-shot festival listing
# =============================================================================
#
# Fetches the festivals feed once, regroups it by record label and band,
# and writes the indented text listing (or JSON with --json).  This is the
# same listing the web app writes on startup, without starting a server.
#
# Typical usage:
#   python -m festival_organizer.cli.list_festivals
#   python -m festival_organizer.cli.list_festivals --output labels.txt
#   python -m festival_organizer.cli.list_festivals --json > labels.json
#   python -m festival_organizer.cli.list_festivals --api-uri http://localhost:9000/api/v1/
#
# Exit codes: 0 on success, 1 when the festivals API could not be read.
# Nothing is written to --output when the fetch fails.
# =============================================================================

"""Standalone CLI for listing festivals grouped by record label.

Usage::

    python -m festival_organizer.cli.list_festivals [--output PATH]
        [--api-uri URI] [--json] [--quiet]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from pydantic import ValidationError

from festival_organizer.config.settings import Settings
from festival_organizer.utils.errors import FestivalOrganizerError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m festival_organizer.cli.list_festivals",
        description="List festivals grouped by record label and band.",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="File to write the listing to (default: OUTPUT_FILE_URI setting).",
    )
    parser.add_argument(
        "--api-uri",
        help="Festivals API base URI (default: FESTIVALS_API_URI setting).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the hierarchy as JSON to stdout instead of writing the listing file.",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only log warnings and errors (implied by --json).",
    )
    return parser


async def _run(args: argparse.Namespace, app_settings: Settings) -> int:
    from festival_organizer.main import build_components, list_festivals
    from festival_organizer.services.output_formatter import hierarchy_to_dict

    try:
        components = build_components(app_settings)
    except FestivalOrganizerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        service = components["festival_service"]
        if args.json:
            hierarchy = await service.get_all_festivals()
            json.dump(hierarchy_to_dict(hierarchy), sys.stdout, indent=2, ensure_ascii=False)
            sys.stdout.write("\n")
        else:
            output = args.output or app_settings.output_file_uri
            hierarchy = await list_festivals(service, output)
            print(f"Wrote {len(hierarchy)} record labels to {output}")
    except FestivalOrganizerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        await components["http_client"].aclose()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run one listing and return the process exit code."""
    args = _build_parser().parse_args(argv)

    overrides = {}
    if args.api_uri:
        overrides["festivals_api_uri"] = args.api_uri
    try:
        app_settings = Settings(**overrides)
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    from festival_organizer.utils.logging import configure_logging

    # Logs go to stderr so stdout carries only the listing summary / JSON.
    quiet = args.quiet or args.json
    configure_logging(
        log_level="WARNING" if quiet else app_settings.log_level,
        stream=sys.stderr,
    )

    return asyncio.run(_run(args, app_settings))


if __name__ == "__main__":
    sys.exit(main())
