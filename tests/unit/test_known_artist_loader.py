"""Unit tests for the known-artist file loader and KnownArtistSet."""

from __future__ import annotations

from pathlib import Path

import pytest

from musicmap.models.artist import KnownArtistSet
from musicmap.services.known_artist_loader import load_known_artists
from musicmap.utils.errors import KnownArtistsLoadError


class TestLoadKnownArtists:
    def test_reads_one_name_per_line(self, known_file) -> None:
        known = load_known_artists(known_file("Radiohead\nMuse\nBjörk\n"))
        assert list(known) == ["Radiohead", "Muse", "Björk"]

    def test_deduplicates_case_insensitively(self, known_file) -> None:
        known = load_known_artists(known_file("Muse\nMUSE\nmuse\n"))
        assert list(known) == ["Muse"]
        assert len(known) == 1

    def test_skips_blank_lines_and_strips(self, known_file) -> None:
        known = load_known_artists(known_file("\n  Radiohead  \n\n\t\nMuse\r\n"))
        assert list(known) == ["Radiohead", "Muse"]

    def test_tolerates_byte_order_mark(self, tmp_path: Path) -> None:
        path = tmp_path / "bom.txt"
        path.write_bytes(b"\xef\xbb\xbfRadiohead\nMuse\n")
        assert list(load_known_artists(path)) == ["Radiohead", "Muse"]

    def test_empty_file(self, known_file) -> None:
        assert len(load_known_artists(known_file(""))) == 0

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(KnownArtistsLoadError):
            load_known_artists(tmp_path / "missing.txt")

    def test_non_utf8_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes("Bj\xf6rk\n".encode("latin-1"))
        with pytest.raises(KnownArtistsLoadError):
            load_known_artists(path)


class TestKnownArtistSet:
    def test_membership_is_case_insensitive(self) -> None:
        known = KnownArtistSet.from_names(["The Beatles"])
        assert "the beatles" in known
        assert "THE BEATLES" in known
        assert " The Beatles " in known
        assert "Beatles" not in known

    def test_non_string_is_not_member(self) -> None:
        assert 42 not in KnownArtistSet.from_names(["42"])

    def test_keeps_first_spelling(self) -> None:
        known = KnownArtistSet.from_names(["dEUS", "Deus"])
        assert known.names == ("dEUS",)
        assert known.folded == frozenset({"deus"})

    def test_is_immutable(self) -> None:
        known = KnownArtistSet.from_names(["A"])
        with pytest.raises(AttributeError):
            known.names = ("B",)  # type: ignore[misc]
