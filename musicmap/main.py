"""musicmap entry point helpers.

Wires providers, the parser and the pipeline together from a
:class:`Settings` instance.  The CLI (``musicmap.cli.recommend``) calls
:func:`run_recommendations`; tests call the individual ``build_*``
factories.
"""

from __future__ import annotations

import httpx

from musicmap.config.settings import Settings
from musicmap.interfaces.page_parser import IPageParser
from musicmap.models.artist import KnownArtistSet
from musicmap.models.pipeline import PipelineResult
from musicmap.pipeline.orchestrator import RecommendationPipeline
from musicmap.providers.page.music_map_provider import MusicMapPageProvider
from musicmap.providers.parser.regex_parser import RegexPageParser
from musicmap.providers.parser.soup_parser import SoupPageParser
from musicmap.utils.errors import ConfigurationError

_PARSERS: dict[str, type[IPageParser]] = {
    "regex": RegexPageParser,
    "soup": SoupPageParser,
}


def available_parsers() -> list[str]:
    return sorted(_PARSERS)


def build_page_parser(settings: Settings) -> IPageParser:
    """Instantiate the parser named by ``settings.page_parser``."""
    parser_cls = _PARSERS.get(settings.page_parser.lower())
    if parser_cls is None:
        raise ConfigurationError(
            f"Unknown page parser {settings.page_parser!r}; "
            f"expected one of {', '.join(available_parsers())}"
        )
    return parser_cls()


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared HTTP client, its pool capped at the download limit."""
    limit = settings.max_parallel_downloads
    return httpx.AsyncClient(
        limits=httpx.Limits(max_connections=limit, max_keepalive_connections=limit),
        timeout=httpx.Timeout(settings.request_timeout_seconds),
    )


def build_pipeline(settings: Settings, http_client: httpx.AsyncClient) -> RecommendationPipeline:
    return RecommendationPipeline(
        page_provider=MusicMapPageProvider(http_client, settings),
        page_parser=build_page_parser(settings),
        max_parallel_downloads=settings.max_parallel_downloads,
    )


async def run_recommendations(
    known_artists: KnownArtistSet,
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> PipelineResult:
    """Run the full pipeline for *known_artists*.

    When no client is supplied one is created from *settings* and closed
    afterwards; a supplied client is left open for the caller.
    """
    if http_client is not None:
        return await build_pipeline(settings, http_client).run(known_artists)

    # Fail on a bad parser name before opening any connections.
    build_page_parser(settings)
    async with build_http_client(settings) as client:
        return await build_pipeline(settings, client).run(known_artists)
