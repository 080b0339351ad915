"""Single-writer aggregation of relationship strengths.

# ─── WHY ONE WRITER ───────────────────────────────────────────────────
#
#   worker ─┐
#   worker ─┼──Relationship──→ asyncio.Queue ──→ StrengthAggregator.consume()
#   worker ─┘                                        (sole owner of the dict)
#
# Download workers never touch the strengths dict.  They put Relationships
# on a queue and exactly one task drains it, so the dict needs no lock.
# Summation is commutative, so whatever order the workers finish in, the
# totals come out the same.
#
# The orchestrator puts END_OF_STREAM on the queue once every worker has
# returned; consume() then publishes one read-only snapshot and the
# aggregator refuses further input.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from types import MappingProxyType

from musicmap.models.artist import KnownArtistSet, Relationship
from musicmap.utils.errors import PipelineError

END_OF_STREAM = object()


class StrengthAggregator:
    """Sums strengths per related artist, skipping artists the caller already knows."""

    def __init__(self, known_artists: KnownArtistSet) -> None:
        self._known = known_artists
        self._strengths: dict[str, float] = {}
        self._seen = 0
        self._discarded = 0
        self._closed = False

    @property
    def relationships_seen(self) -> int:
        return self._seen

    @property
    def relationships_discarded(self) -> int:
        return self._discarded

    @property
    def closed(self) -> bool:
        return self._closed

    def add(self, relationship: Relationship) -> bool:
        """Fold one relationship into the totals.

        Returns ``False`` when the related artist is a known artist and the
        relationship was discarded.
        """
        if self._closed:
            raise PipelineError("Aggregator already published its snapshot")

        self._seen += 1
        name = relationship.related_artist
        if name in self._known:
            self._discarded += 1
            return False

        self._strengths[name] = self._strengths.get(name, 0.0) + relationship.strength
        return True

    def close(self) -> Mapping[str, float]:
        """Stop accepting input and return the final, read-only totals."""
        self._closed = True
        return MappingProxyType(dict(self._strengths))

    async def consume(self, queue: asyncio.Queue) -> Mapping[str, float]:
        """Drain *queue* until :data:`END_OF_STREAM`, then :meth:`close`."""
        while True:
            item = await queue.get()
            try:
                if item is END_OF_STREAM:
                    return self.close()
                self.add(item)
            finally:
                queue.task_done()
