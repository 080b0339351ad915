# =============================================================================
# musicmap/cli/recommend.py — Recommend Command
# =============================================================================
#
# Reads a newline-delimited list of artists you already know, looks each one
# up on music-map.com, and prints every *other* artist those pages mention,
# ranked by summed similarity strength:
#
#   python -m musicmap.cli known.txt
#   musicmap known.txt --limit 20
#   musicmap known.txt --parallel 8 --timeout 30 --quiet
#
# stdout carries only the report, so it can be piped into head or a file.
# Log lines (including one warning per artist page that failed to download)
# go to stderr.
#
# Exit codes:
#   0 — report printed (possibly empty, e.g. when every download failed)
#   1 — no input file given, input file unreadable, or invalid configuration
# =============================================================================

"""Command-line interface for musicmap recommendations."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from musicmap.config.loader import DEFAULT_CONFIG_PATH, load_settings
from musicmap.config.settings import Settings
from musicmap.utils.errors import ConfigurationError, KnownArtistsLoadError
from musicmap.utils.logging import configure_logging

USAGE_MESSAGE = (
    "Please pass the filename of a newline-delimited text file containing a "
    "list of known artists to look up as the first argument."
)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the recommend CLI.

    The positional file is optional at the argparse level so that a missing
    argument prints the usage message to stdout and exits 1, rather than
    argparse's own stderr/exit-2 behaviour.
    """
    parser = argparse.ArgumentParser(
        prog="musicmap",
        description=(
            "Find artists similar to the ones you already know, "
            "ranked by total similarity on music-map.com."
        ),
    )
    parser.add_argument(
        "known_artists_file",
        nargs="?",
        default=None,
        help="UTF-8 text file with one known artist per line.",
    )
    parser.add_argument(
        "--limit", "-n",
        type=int,
        default=None,
        help="Print only the top N artists.",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help=f"YAML settings file (default: {DEFAULT_CONFIG_PATH}, ignored if absent).",
    )
    parser.add_argument(
        "--parallel",
        type=int,
        default=None,
        dest="max_parallel_downloads",
        help="Maximum simultaneous page downloads (default: 24).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        dest="request_timeout_seconds",
        help="Per-page timeout in seconds (default: 15).",
    )
    parser.add_argument(
        "--parser",
        choices=["regex", "soup"],
        default=None,
        dest="page_parser",
        help="Page parsing strategy (default: regex).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level for stderr output (default: INFO).",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors.",
    )
    return parser


async def _run(known_artists_file: Path, settings: Settings, limit: int | None) -> int:
    """Load the known artists, run the pipeline, print the report.

    Returns 0 on success, 1 on an input error.
    """
    # Deferred so that a bad argument fails fast without importing httpx/bs4.
    from musicmap.main import run_recommendations
    from musicmap.services.known_artist_loader import load_known_artists
    from musicmap.services.report_formatter import write_report

    try:
        known = load_known_artists(known_artists_file)
    except KnownArtistsLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(USAGE_MESSAGE)
        return 1

    try:
        result = await run_recommendations(known, settings)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    write_report(result.strengths, sys.stdout, limit=limit)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.known_artists_file is None:
        print(USAGE_MESSAGE)
        return 1

    try:
        settings = load_settings(
            args.config,
            max_parallel_downloads=args.max_parallel_downloads,
            request_timeout_seconds=args.request_timeout_seconds,
            page_parser=args.page_parser,
            log_level="WARNING" if args.quiet else args.log_level,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level, json_output=settings.app_env == "production")
    return asyncio.run(_run(Path(args.known_artists_file), settings, args.limit))


if __name__ == "__main__":
    sys.exit(main())
