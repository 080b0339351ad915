"""BeautifulSoup-based parser for music-map.com artist pages.

Reads the artist anchors through the HTML tree instead of a fixed
attribute-order regex, so it tolerates quoting and attribute-order changes
in the markup.  The strength array lives inside a ``<script>`` block,
which BeautifulSoup does not interpret, so that half still uses the
shared ``Aid[0]`` pattern.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from musicmap.interfaces.page_parser import IPageParser
from musicmap.models.artist import ParsedRelation
from musicmap.providers.parser.regex_parser import extract_strengths, pair_relations

_ANCHOR_ID_RE = re.compile(r"^s\d+$")


class SoupPageParser(IPageParser):
    """Alternative parser selected with ``page_parser = "soup"``."""

    def parse_page(self, content: str) -> list[ParsedRelation]:
        soup = BeautifulSoup(content, "html.parser")
        names = [
            link.get_text(strip=True)
            for link in soup.find_all("a", class_="S", id=_ANCHOR_ID_RE, href=True)
        ]
        # Pair first so an anchor with no text (an image link) still takes its
        # slot in the strength array; only then drop the nameless entry.
        relations = pair_relations(names[1:], extract_strengths(content))
        return [relation for relation in relations if relation.name]

    def get_parser_name(self) -> str:
        return "soup"
