"""music-map.com artist page source.

Implements IArtistPageProvider by requesting
``https://www.music-map.com/<lower-cased, path-encoded name>``.  Every
per-artist failure (non-2xx status, timeout, transport error) is logged
as a warning and turned into an ArtistPage with no content; there are no
retries.  The ``httpx.AsyncClient`` is injected via the constructor for
testability, and its connection pool is expected to be sized to the same
cap as the pipeline's download semaphore (see ``musicmap.main``).
"""

from __future__ import annotations

import asyncio

import httpx

from musicmap.config.settings import Settings
from musicmap.interfaces.page_provider import IArtistPageProvider
from musicmap.models.artist import ArtistPage
from musicmap.utils.errors import PageFetchError
from musicmap.utils.logging import get_logger
from musicmap.utils.text_normalizer import artist_page_path

_PROVIDER_NAME = "music_map"


class MusicMapPageProvider(IArtistPageProvider):
    """Downloads one artist's similarity page per call."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http = http_client
        self._base_url = settings.base_url if settings.base_url.endswith("/") else settings.base_url + "/"
        self._timeout = settings.request_timeout_seconds
        self._headers = {"User-Agent": settings.user_agent}
        self._logger = get_logger(__name__)

    # -- Private helpers -------------------------------------------------------

    async def _download(self, url: str) -> httpx.Response:
        try:
            response = await self._http.get(url, headers=self._headers, follow_redirects=True)
        except httpx.TimeoutException as exc:
            raise PageFetchError(f"timed out: {exc}", provider_name=_PROVIDER_NAME) from exc
        except httpx.HTTPError as exc:
            raise PageFetchError(
                f"{type(exc).__name__}: {exc}", provider_name=_PROVIDER_NAME
            ) from exc

        if not response.is_success:
            raise PageFetchError(
                f"HTTP {response.status_code} {response.reason_phrase}".rstrip(),
                provider_name=_PROVIDER_NAME,
                status_code=response.status_code,
            )
        return response

    async def _download_within_timeout(self, url: str) -> httpx.Response:
        """Bound the whole request, not just each socket operation."""
        try:
            return await asyncio.wait_for(self._download(url), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise PageFetchError(
                f"timed out after {self._timeout:g}s", provider_name=_PROVIDER_NAME
            ) from exc

    # -- IArtistPageProvider implementation ------------------------------------

    def page_url(self, artist_name: str) -> str:
        return f"{self._base_url}{artist_page_path(artist_name)}"

    async def fetch_page(self, artist_name: str) -> ArtistPage:
        url = self.page_url(artist_name)
        try:
            response = await self._download_within_timeout(url)
        except PageFetchError as exc:
            self._logger.warning(
                "artist_page_fetch_failed",
                artist=artist_name,
                status=exc.status_code,
                error=exc.message,
                url=url,
                hint=f"check the artist name on {self._base_url}",
            )
            return ArtistPage(artist_name=artist_name, status_code=exc.status_code, url=url)

        self._logger.debug(
            "artist_page_fetched",
            artist=artist_name,
            status=response.status_code,
            size=len(response.content),
        )
        return ArtistPage(
            artist_name=artist_name,
            content=response.text,
            status_code=response.status_code,
            url=url,
        )

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME
