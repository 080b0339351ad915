"""Result model for one pipeline run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class PipelineResult:
    """The single aggregation snapshot of a run, plus bookkeeping counters.

    ``strengths`` is a read-only view: once the aggregator publishes it,
    nothing downstream may change it.
    """

    strengths: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    pages_fetched: int = 0
    pages_failed: int = 0
    relationships_seen: int = 0
    relationships_discarded: int = 0

    @property
    def candidate_count(self) -> int:
        return len(self.strengths)
