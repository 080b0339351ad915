"""Ranks aggregated strengths and renders them as report lines.

One line per candidate, strongest first::

      7.0	X
      3.0	Y

The strength is printed ``%5.1f`` and separated from the name by a tab.
Equal strengths are ordered by name (case-insensitively, then exactly) so
that two runs over the same pages print the same report.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TextIO

from musicmap.models.artist import RankedArtist
from musicmap.utils.text_normalizer import fold_artist_name


def rank_artists(strengths: Mapping[str, float], limit: int | None = None) -> list[RankedArtist]:
    """Sort *strengths* by descending strength, ties by name.

    Args:
        strengths: The aggregated map, artist name to summed strength.
        limit: Keep only the first *limit* entries.  ``None`` keeps all.
    """
    ordered = sorted(
        strengths.items(),
        key=lambda item: (-item[1], fold_artist_name(item[0]), item[0]),
    )
    if limit is not None:
        ordered = ordered[: max(limit, 0)]
    return [RankedArtist(name=name, strength=strength) for name, strength in ordered]


def format_report_line(artist: RankedArtist) -> str:
    return f"{artist.strength:5.1f}\t{artist.name}"


def render_report(ranked: Iterable[RankedArtist]) -> list[str]:
    return [format_report_line(artist) for artist in ranked]


def write_report(
    strengths: Mapping[str, float],
    stream: TextIO,
    limit: int | None = None,
) -> int:
    """Write the ranked report to *stream* and return the number of lines."""
    lines = render_report(rank_artists(strengths, limit=limit))
    for line in lines:
        stream.write(line + "\n")
    stream.flush()
    return len(lines)
