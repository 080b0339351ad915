"""Unit tests for the music-map.com page source."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from musicmap.config.settings import Settings
from musicmap.providers.page.music_map_provider import MusicMapPageProvider


def _response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.reason_phrase = httpx.codes.get_reason_phrase(status_code)
    response.text = text
    response.content = text.encode("utf-8")
    return response


def _provider(client: AsyncMock, settings: Settings) -> MusicMapPageProvider:
    provider = MusicMapPageProvider(client, settings)
    provider._logger = MagicMock()
    return provider


class TestPageUrl:
    def test_lowercases_and_encodes(self, settings: Settings) -> None:
        provider = MusicMapPageProvider(AsyncMock(), settings)
        assert provider.page_url("Simon & Garfunkel") == "https://music-map.test/simon%20%26%20garfunkel"

    def test_base_url_without_trailing_slash(self, settings: Settings) -> None:
        settings = settings.model_copy(update={"base_url": "https://music-map.test"})
        provider = MusicMapPageProvider(AsyncMock(), settings)
        assert provider.page_url("Muse") == "https://music-map.test/muse"

    def test_provider_name(self, settings: Settings) -> None:
        assert MusicMapPageProvider(AsyncMock(), settings).get_provider_name() == "music_map"


class TestFetchPage:
    @pytest.mark.asyncio
    async def test_success_captures_body_verbatim(self, settings: Settings) -> None:
        client = AsyncMock()
        client.get = AsyncMock(return_value=_response(200, "<html>body</html>"))
        provider = _provider(client, settings)

        page = await provider.fetch_page("Radiohead")

        assert page.artist_name == "Radiohead"
        assert page.content == "<html>body</html>"
        assert page.status_code == 200
        assert page.fetched is True
        client.get.assert_awaited_once()
        assert client.get.await_args.args[0] == "https://music-map.test/radiohead"
        provider._logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_success_status_yields_empty_page(self, settings: Settings) -> None:
        client = AsyncMock()
        client.get = AsyncMock(return_value=_response(404, "Not Found"))
        provider = _provider(client, settings)

        page = await provider.fetch_page("Nonexistent Band")

        assert page.content is None
        assert page.status_code == 404
        assert page.fetched is False
        provider._logger.warning.assert_called_once()
        kwargs = provider._logger.warning.call_args.kwargs
        assert kwargs["artist"] == "Nonexistent Band"
        assert kwargs["status"] == 404

    @pytest.mark.asyncio
    async def test_transport_error_yields_empty_page(self, settings: Settings) -> None:
        client = AsyncMock()
        client.get = AsyncMock(side_effect=httpx.ConnectError("connection refused"))
        provider = _provider(client, settings)

        page = await provider.fetch_page("Muse")

        assert page.content is None
        assert page.status_code is None
        provider._logger.warning.assert_called_once()
        assert "ConnectError" in provider._logger.warning.call_args.kwargs["error"]

    @pytest.mark.asyncio
    async def test_httpx_timeout_yields_empty_page(self, settings: Settings) -> None:
        client = AsyncMock()
        client.get = AsyncMock(side_effect=httpx.ReadTimeout("read timed out"))
        provider = _provider(client, settings)

        page = await provider.fetch_page("Muse")

        assert page.content is None
        assert "timed out" in provider._logger.warning.call_args.kwargs["error"]

    @pytest.mark.asyncio
    async def test_overall_timeout_bounds_slow_request(self, settings: Settings) -> None:
        settings = settings.model_copy(update={"request_timeout_seconds": 0.05})

        async def _hang(*args, **kwargs):
            await asyncio.sleep(10)

        client = AsyncMock()
        client.get = AsyncMock(side_effect=_hang)
        provider = _provider(client, settings)

        page = await asyncio.wait_for(provider.fetch_page("Muse"), timeout=2)

        assert page.content is None
        assert page.status_code is None
        assert "timed out" in provider._logger.warning.call_args.kwargs["error"]

    @pytest.mark.asyncio
    async def test_sends_user_agent_and_follows_redirects(self, settings: Settings) -> None:
        client = AsyncMock()
        client.get = AsyncMock(return_value=_response(200, "ok"))
        provider = _provider(client, settings)

        await provider.fetch_page("Muse")

        kwargs = client.get.await_args.kwargs
        assert kwargs["headers"]["User-Agent"] == settings.user_agent
        assert kwargs["follow_redirects"] is True
