"""musicmap domain models — re-exports all public model classes."""

from __future__ import annotations

from musicmap.models.artist import (
    ArtistPage,
    KnownArtistSet,
    ParsedRelation,
    RankedArtist,
    Relationship,
)
from musicmap.models.pipeline import PipelineResult

__all__ = [
    "ArtistPage",
    "KnownArtistSet",
    "ParsedRelation",
    "PipelineResult",
    "RankedArtist",
    "Relationship",
]
