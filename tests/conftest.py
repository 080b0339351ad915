"""Shared pytest fixtures for the musicmap test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from musicmap.config.settings import Settings
from musicmap.models.artist import KnownArtistSet

PageBuilder = Callable[..., str]


def _build_page(
    artist: str,
    related: list[tuple[str, float]],
    strengths: list[float] | None = None,
) -> str:
    """Render a page shaped like music-map.com's artist pages.

    The first anchor is the artist's own link and the array starts with -1,
    as on the live site.  *strengths* overrides the array contents when a
    test needs the two lists to disagree.
    """
    anchors = [f'<a href="{artist.lower().replace(" ", "+")}" class=S id=s0>{artist}</a>']
    for idx, (name, _) in enumerate(related, start=1):
        slug = name.lower().replace(" ", "+")
        anchors.append(f'<a href="{slug}" class=S id=s{idx}>{name}</a>')

    values = strengths if strengths is not None else [s for _, s in related]
    array = ",".join(["-1", *(f"{v:g}" for v in values)])

    return (
        "<html><head><title>Music-Map</title></head><body>\n"
        '<div id=gnodMap>\n' + "\n".join(anchors) + "\n</div>\n"
        "<script>\n"
        "var NrWords=0;\n"
        f"Aid[0]=new Array({array});\n"
        "</script>\n"
        "</body></html>\n"
    )


@pytest.fixture
def page_html() -> PageBuilder:
    """Return a builder for fake artist pages: ``page_html(artist, [(name, strength), ...])``."""
    return _build_page


@pytest.fixture
def settings() -> Settings:
    """Settings with test defaults; nothing read from a .env file."""
    return Settings(
        _env_file=None,
        base_url="https://music-map.test/",
        max_parallel_downloads=4,
        request_timeout_seconds=2.0,
        app_env="test",
    )


@pytest.fixture
def known_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write a known-artist file and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "known.txt"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def known_ab() -> KnownArtistSet:
    return KnownArtistSet.from_names(["A", "B"])
