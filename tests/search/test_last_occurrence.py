"""Tests for the Boyer-Moore last occurrence table."""
from __future__ import annotations

import pytest

from patternmatch.search.boyer_moore import build_last_occurrence_table
from patternmatch.search.comparator import ignore_case
from patternmatch.search.errors import InvalidArgumentError


class TestLastOccurrenceTable:
    def test_octocat(self):
        table = build_last_occurrence_table("octocat")
        assert dict(table) == {"o": 3, "c": 4, "t": 6, "a": 5}

    def test_lookup_present(self):
        table = build_last_occurrence_table("octocat")
        assert table.lookup("o") == 3
        assert table["t"] == 6

    def test_lookup_absent_is_none(self):
        table = build_last_occurrence_table("octocat")
        assert table.lookup("z") is None
        assert "z" not in table

    def test_index_zero_is_not_absent(self):
        table = build_last_occurrence_table("abc")
        assert table.lookup("a") == 0
        assert table.lookup("a") is not None

    def test_empty_pattern(self):
        table = build_last_occurrence_table("")
        assert len(table) == 0
        assert table.lookup("a") is None

    def test_keyed_by_comparator_key(self):
        table = build_last_occurrence_table("AbA", ignore_case.key)
        assert dict(table) == {"a": 2, "b": 1}
        assert table.lookup("B") == 1

    def test_none_pattern(self):
        with pytest.raises(InvalidArgumentError):
            build_last_occurrence_table(None)
