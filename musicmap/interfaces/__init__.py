"""Abstract interfaces for the swappable pipeline stages."""

from musicmap.interfaces.page_parser import IPageParser
from musicmap.interfaces.page_provider import IArtistPageProvider

__all__ = ["IArtistPageProvider", "IPageParser"]
