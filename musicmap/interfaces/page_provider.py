"""Abstract base class for artist page sources (the Fetcher stage).

A page source turns an artist name into an :class:`ArtistPage`.  It owns
the whole failure story for that one artist: whatever goes wrong, it
returns a page with ``content=None`` instead of raising, so one bad name
can never stop a run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from musicmap.models.artist import ArtistPage


class IArtistPageProvider(ABC):
    """Contract for services that download an artist's similarity page."""

    @abstractmethod
    async def fetch_page(self, artist_name: str) -> ArtistPage:
        """Download the page for *artist_name*.

        Parameters
        ----------
        artist_name:
            The known artist, in the spelling the caller supplied.

        Returns
        -------
        ArtistPage
            With ``content`` set on success, ``None`` on any failure.
            Never raises for a per-artist problem.
        """

    @abstractmethod
    def page_url(self, artist_name: str) -> str:
        """Return the URL that :meth:`fetch_page` would request."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier such as ``"music_map"``."""
