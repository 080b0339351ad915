"""Abstract base class for page parsers (the Extractor stage).

The pipeline only ever calls :meth:`IPageParser.parse_page`, so a parser
for different markup, or one backed by a structured API response, can be
swapped in without touching the pipeline wiring.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from musicmap.models.artist import ParsedRelation


class IPageParser(ABC):
    """Contract for turning page content into ranked (name, strength) pairs."""

    @abstractmethod
    def parse_page(self, content: str) -> list[ParsedRelation]:
        """Extract related artists and their strengths from *content*.

        The artist's own entry is excluded.  Order is the page's order
        (closest first).  Content that does not match the expected
        structure yields an empty list; this method never raises for
        malformed input.
        """

    @abstractmethod
    def get_parser_name(self) -> str:
        """Return a short identifier such as ``"regex"``."""
