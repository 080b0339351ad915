"""Page parsers for music-map.com artist pages."""

from musicmap.providers.parser.regex_parser import RegexPageParser
from musicmap.providers.parser.soup_parser import SoupPageParser

__all__ = ["RegexPageParser", "SoupPageParser"]
