"""Domain models for the artist-similarity pipeline.

Pydantic v2 models with frozen config (plus a frozen dataclass for the
known-artist set): a page or relationship is produced
once by one stage and read by the next, never edited in between.

Data flow:
    KnownArtistSet ──names──→ Fetcher ──ArtistPage──→ Extractor
        ──Relationship──→ Aggregator ──strengths──→ Reporter ──RankedArtist──→ stdout
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from musicmap.utils.text_normalizer import fold_artist_name


class ArtistPage(BaseModel):
    """The result of fetching one known artist's page.

    ``content`` is ``None`` when the download failed; ``status_code`` is
    ``None`` when no HTTP response was received at all (timeout, DNS,
    connection reset).
    """

    model_config = ConfigDict(frozen=True)

    artist_name: str
    content: str | None = None
    status_code: int | None = None
    url: str = ""

    @property
    def fetched(self) -> bool:
        return self.content is not None


class ParsedRelation(BaseModel):
    """One (name, strength) pair read off a page, before it is attributed."""

    model_config = ConfigDict(frozen=True)

    name: str
    strength: float


class Relationship(BaseModel):
    """An affinity score from a known artist to a related artist."""

    model_config = ConfigDict(frozen=True)

    known_artist: str
    related_artist: str
    strength: float


class RankedArtist(BaseModel):
    """One line of the final report."""

    model_config = ConfigDict(frozen=True)

    name: str
    strength: float


@dataclass(frozen=True)
class KnownArtistSet:
    """The caller's already-familiar artists.

    Keeps the names in the spelling they were first given (they are used to
    build page URLs and appear in logs) together with their case-folded
    forms, which are what membership tests compare against.  Read-only after
    construction, so concurrent workers may share it.
    """

    names: tuple[str, ...] = ()
    folded: frozenset[str] = frozenset()

    @classmethod
    def from_names(cls, names: Iterable[str]) -> KnownArtistSet:
        """Build a set from raw names, dropping blanks and case-insensitive duplicates."""
        kept: list[str] = []
        seen: set[str] = set()
        for raw in names:
            name = raw.strip()
            if not name:
                continue
            key = fold_artist_name(name)
            if key in seen:
                continue
            seen.add(key)
            kept.append(name)
        return cls(names=tuple(kept), folded=frozenset(seen))

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return fold_artist_name(name) in self.folded

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)
