"""Unit tests for ranking and report rendering."""

from __future__ import annotations

import io
from types import MappingProxyType

from musicmap.models.artist import RankedArtist
from musicmap.services.report_formatter import (
    format_report_line,
    rank_artists,
    render_report,
    write_report,
)


class TestRankArtists:
    def test_descending_strength(self) -> None:
        ranked = rank_artists({"Y": 3.0, "X": 7.0, "Z": 5.5})
        assert [r.name for r in ranked] == ["X", "Z", "Y"]

    def test_non_increasing(self) -> None:
        strengths = {f"artist{i}": float((i * 37) % 11) - 4 for i in range(40)}
        values = [r.strength for r in rank_artists(strengths)]
        assert values == sorted(values, reverse=True)

    def test_ties_broken_by_name(self) -> None:
        ranked = rank_artists({"beta": 2.0, "Alpha": 2.0, "gamma": 2.0, "Top": 9.0})
        assert [r.name for r in ranked] == ["Top", "Alpha", "beta", "gamma"]

    def test_ties_differing_only_by_case_are_stable(self) -> None:
        ranked = rank_artists({"abc": 1.0, "ABC": 1.0})
        assert [r.name for r in ranked] == ["ABC", "abc"]

    def test_limit(self) -> None:
        ranked = rank_artists({"X": 7.0, "Y": 3.0, "Z": 5.0}, limit=2)
        assert [r.name for r in ranked] == ["X", "Z"]

    def test_zero_limit(self) -> None:
        assert rank_artists({"X": 7.0}, limit=0) == []

    def test_accepts_read_only_mapping(self) -> None:
        ranked = rank_artists(MappingProxyType({"X": 1.0}))
        assert ranked == [RankedArtist(name="X", strength=1.0)]


class TestFormatting:
    def test_line_format(self) -> None:
        assert format_report_line(RankedArtist(name="X", strength=7.0)) == "  7.0\tX"

    def test_rounds_to_one_decimal(self) -> None:
        assert format_report_line(RankedArtist(name="Y", strength=3.14159)) == "  3.1\tY"

    def test_wide_values_overflow_field(self) -> None:
        assert format_report_line(RankedArtist(name="Z", strength=12345.67)) == "12345.7\tZ"

    def test_negative_value(self) -> None:
        assert format_report_line(RankedArtist(name="N", strength=-2.5)) == " -2.5\tN"

    def test_render_report(self) -> None:
        lines = render_report([RankedArtist(name="X", strength=7.0), RankedArtist(name="Y", strength=3.0)])
        assert lines == ["  7.0\tX", "  3.0\tY"]


class TestWriteReport:
    def test_writes_sorted_lines(self) -> None:
        out = io.StringIO()
        count = write_report({"Y": 3.0, "X": 7.0}, out)

        assert count == 2
        assert out.getvalue() == "  7.0\tX\n  3.0\tY\n"

    def test_empty_map_writes_nothing(self) -> None:
        out = io.StringIO()
        assert write_report({}, out) == 0
        assert out.getvalue() == ""
