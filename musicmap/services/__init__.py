"""Services around the pipeline: input loading and report rendering."""

from musicmap.services.known_artist_loader import load_known_artists
from musicmap.services.report_formatter import (
    format_report_line,
    rank_artists,
    render_report,
    write_report,
)

__all__ = [
    "format_report_line",
    "load_known_artists",
    "rank_artists",
    "render_report",
    "write_report",
]
