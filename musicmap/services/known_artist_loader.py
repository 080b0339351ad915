"""Loads the caller's known-artist list from a newline-delimited text file."""

from __future__ import annotations

from pathlib import Path

from musicmap.models.artist import KnownArtistSet
from musicmap.utils.errors import KnownArtistsLoadError
from musicmap.utils.logging import get_logger

_logger = get_logger(__name__)


def load_known_artists(path: str | Path) -> KnownArtistSet:
    """Read one artist name per line from *path*.

    The file is UTF-8 (a leading byte-order mark is tolerated).  Lines are
    stripped, blank lines skipped, and names that differ only by case are
    kept once, in their first spelling.

    Raises:
        KnownArtistsLoadError: If the file is missing, unreadable, or not UTF-8.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise KnownArtistsLoadError(f"Cannot read known artist list {file_path}: {exc}") from exc

    known = KnownArtistSet.from_names(text.splitlines())
    _logger.info("known_artists_loaded", path=str(file_path), count=len(known))
    return known
