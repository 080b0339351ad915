"""Pipeline orchestrator: Fetcher+Extractor workers feeding one Aggregator.

Stage wiring for one run::

    KnownArtistSet
        │ one coroutine per known artist, at most max_parallel_downloads
        │ running at once (shared semaphore)
        ▼
    fetch_page() ──ArtistPage──→ parse_page() ──Relationship──→ queue
                                                                  │
                                                   StrengthAggregator.consume()
                                                                  │
                                                           PipelineResult

Completion is explicit: the END_OF_STREAM marker is queued only after
every worker coroutine has returned, and the result is built only after
the aggregator has drained everything ahead of that marker.
"""

from __future__ import annotations

import asyncio

import structlog

from musicmap.interfaces.page_parser import IPageParser
from musicmap.interfaces.page_provider import IArtistPageProvider
from musicmap.models.artist import KnownArtistSet, Relationship
from musicmap.models.pipeline import PipelineResult
from musicmap.pipeline.aggregator import END_OF_STREAM, StrengthAggregator
from musicmap.utils.concurrency import build_download_semaphore, throttled_gather
from musicmap.utils.logging import get_logger


class RecommendationPipeline:
    """Runs the fetch, extract and aggregate stages over a set of known artists."""

    def __init__(
        self,
        page_provider: IArtistPageProvider,
        page_parser: IPageParser,
        max_parallel_downloads: int,
    ) -> None:
        self._pages = page_provider
        self._parser = page_parser
        self._max_parallel = max_parallel_downloads
        self._logger: structlog.BoundLogger = get_logger(__name__)

    async def _fetch_and_extract(self, artist_name: str, queue: asyncio.Queue) -> bool:
        """Fetch and parse one artist's page; return whether it was fetched."""
        page = await self._pages.fetch_page(artist_name)
        if page.content is None:
            return False

        relations = self._parser.parse_page(page.content)
        self._logger.debug(
            "artist_page_parsed",
            artist=artist_name,
            parser=self._parser.get_parser_name(),
            relationships=len(relations),
        )
        for relation in relations:
            queue.put_nowait(
                Relationship(
                    known_artist=page.artist_name,
                    related_artist=relation.name,
                    strength=relation.strength,
                )
            )
        return True

    async def run(self, known_artists: KnownArtistSet) -> PipelineResult:
        """Process every known artist and return the single aggregation snapshot."""
        queue: asyncio.Queue = asyncio.Queue()
        aggregator = StrengthAggregator(known_artists)
        consumer = asyncio.create_task(aggregator.consume(queue))

        semaphore = build_download_semaphore(self._max_parallel)
        names = list(known_artists)
        try:
            outcomes = await throttled_gather(
                [self._fetch_and_extract(name, queue) for name in names],
                semaphore=semaphore,
            )
        finally:
            queue.put_nowait(END_OF_STREAM)

        strengths = await consumer

        fetched = 0
        for name, outcome in zip(names, outcomes):
            if isinstance(outcome, BaseException):
                # Contract says page sources and parsers do not raise; if one
                # does anyway, that artist counts as failed and the run goes on.
                self._logger.error(
                    "artist_page_worker_failed",
                    artist=name,
                    error=f"{type(outcome).__name__}: {outcome}",
                )
            elif outcome:
                fetched += 1

        result = PipelineResult(
            strengths=strengths,
            pages_fetched=fetched,
            pages_failed=len(names) - fetched,
            relationships_seen=aggregator.relationships_seen,
            relationships_discarded=aggregator.relationships_discarded,
        )
        self._logger.info(
            "pipeline_complete",
            pages=len(names),
            pages_failed=result.pages_failed,
            relationships=result.relationships_seen,
            discarded_known=result.relationships_discarded,
            candidates=result.candidate_count,
        )
        return result
