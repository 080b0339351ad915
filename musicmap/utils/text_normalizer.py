"""Artist-name normalisation shared by the loader, aggregator and page source.

Two different normalisations are needed and they must not be mixed up:

- :func:`fold_artist_name` is for *comparison*.  It case-folds so that
  "Björk", "BJÖRK" and "björk" compare equal when filtering known artists.
- :func:`artist_page_path` is for *addressing*.  music-map.com keys its pages
  on the lower-cased name, path-encoded as a single segment.
"""

from __future__ import annotations

import html
from urllib.parse import quote


def fold_artist_name(name: str) -> str:
    """Return the case-insensitive comparison key for *name*."""
    return name.strip().casefold()


def clean_display_name(raw: str) -> str:
    """Turn the raw anchor text of an artist link into a display name.

    HTML entities are decoded ("Simon &amp; Garfunkel" -> "Simon & Garfunkel")
    and surrounding whitespace is dropped; the casing is left alone.
    """
    return html.unescape(raw).strip()


def artist_page_path(name: str) -> str:
    """Return the URL path segment for *name*'s page.

    >>> artist_page_path("Simon & Garfunkel")
    'simon%20%26%20garfunkel'
    """
    return quote(name.lower(), safe="")
