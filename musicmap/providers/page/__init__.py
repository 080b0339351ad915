"""Artist page sources."""

from musicmap.providers.page.music_map_provider import MusicMapPageProvider

__all__ = ["MusicMapPageProvider"]
