"""Tests for TextSnapshot line and byte offset access."""

import pytest

from fuzzylocate.schemas.match import Match
from fuzzylocate.snapshot import TextSnapshot


class TestTextSnapshot:
    """Test row access and UTF-8 byte offsets."""

    def test_line_count_and_text(self):
        snapshot = TextSnapshot("one\ntwo\nthree")
        assert snapshot.line_count() == 3
        assert snapshot.line_text(1) == "two"

    def test_trailing_newline_adds_empty_row(self):
        snapshot = TextSnapshot("one\n")
        assert snapshot.line_count() == 2
        assert snapshot.line_text(1) == ""

    def test_empty_document_has_one_row(self):
        snapshot = TextSnapshot("")
        assert snapshot.line_count() == 1
        assert snapshot.row_start_offset(0) == 0
        assert snapshot.row_end_offset(0) == 0

    def test_offsets_exclude_terminator(self):
        snapshot = TextSnapshot("ab\ncde\n")
        assert snapshot.row_start_offset(1) == 3
        assert snapshot.row_end_offset(1) == 6
        assert snapshot.row_start_offset(2) == 7

    def test_offsets_are_utf8_bytes(self):
        snapshot = TextSnapshot("héllo\nwörld")
        assert snapshot.row_end_offset(0) == 6
        assert snapshot.row_start_offset(1) == 7
        assert snapshot.row_end_offset(1) == 13
        assert snapshot.slice(7, 13) == "wörld"

    def test_text_for_match(self):
        snapshot = TextSnapshot("a\nbb\nccc")
        match = Match(start=2, end=8, start_row=1, end_row=3, cost=0, matched_lines=2)
        assert snapshot.text_for(match) == "bb\nccc"

    def test_out_of_range_row(self):
        with pytest.raises(IndexError):
            TextSnapshot("a").line_text(5)

    def test_from_path(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("x\ny\n", encoding="utf-8")
        snapshot = TextSnapshot.from_path(path)
        assert snapshot.text == "x\ny\n"
        assert snapshot.line_count() == 3


class TestMatch:
    """Test Match helpers."""

    def test_row_count_and_slice(self):
        match = Match(start=4, end=10, start_row=2, end_row=5, cost=1, matched_lines=3)
        assert match.row_count == 3
        assert match.as_slice() == slice(4, 10)

    def test_matched_ratio_uses_longer_side(self):
        match = Match(start=0, end=10, start_row=0, end_row=5, cost=9, matched_lines=4)
        assert match.matched_ratio(4) == 0.8
        assert match.matched_ratio(8) == 0.5
