"""Regex-based parser for music-map.com artist pages.

A music-map page carries its data in two places:

1. One anchor per artist, in relatedness order, starting with the page's
   own artist::

       <a href="the+beatles" class=S id=s0>The Beatles</a>
       <a href="the+rolling+stones" class=S id=s1>The Rolling Stones</a>

2. A script literal with the matching strengths, where the leading ``-1``
   stands for the page's own artist::

       Aid[0]=new Array(-1,8.74,6.12,...);

Both lists drop their first entry and are then zipped.  Extra entries on
either side are ignored.
"""

from __future__ import annotations

import re

from musicmap.interfaces.page_parser import IPageParser
from musicmap.models.artist import ParsedRelation
from musicmap.utils.text_normalizer import clean_display_name

ARTIST_LINK_RE = re.compile(r'<a href="(?P<slug>.+?)" class=S id=s\d+>(?P<name>.+?)</a>')
STRENGTH_ARRAY_RE = re.compile(
    r"Aid\[0\]=new Array\(\s*-1(?P<values>(?:\s*,\s*-?\d+(?:\.\d+)?)*)\s*\);"
)
_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")


def extract_strengths(content: str) -> list[float]:
    """Return the strengths from the page's ``Aid[0]`` array, self entry excluded."""
    match = STRENGTH_ARRAY_RE.search(content)
    if match is None:
        return []
    return [float(value) for value in _NUMBER_RE.findall(match.group("values"))]


def pair_relations(names: list[str], strengths: list[float]) -> list[ParsedRelation]:
    """Zip related names with strengths, stopping at the shorter list."""
    return [
        ParsedRelation(name=name, strength=strength)
        for name, strength in zip(names, strengths)
    ]


class RegexPageParser(IPageParser):
    """Default parser: two regular expressions over the raw page text."""

    def parse_page(self, content: str) -> list[ParsedRelation]:
        names = [
            clean_display_name(match.group("name"))
            for match in ARTIST_LINK_RE.finditer(content)
        ]
        # names[0] is the page's own artist
        return pair_relations(names[1:], extract_strengths(content))

    def get_parser_name(self) -> str:
        return "regex"
