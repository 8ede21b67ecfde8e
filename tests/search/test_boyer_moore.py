"""Tests for Boyer-Moore search."""
from __future__ import annotations

from patternmatch.search.boyer_moore import boyer_moore_search
from patternmatch.search.comparator import CountingComparator, exact, ignore_case


class TestBoyerMooreBasics:
    def test_worked_example(self):
        assert boyer_moore_search("abab", "ababab", exact) == [0, 2]

    def test_overlapping(self):
        assert boyer_moore_search("aa", "aaaa", exact) == [0, 1, 2]

    def test_no_match(self):
        assert boyer_moore_search("xyz", "abcabcabc", exact) == []

    def test_text_shorter_than_pattern(self):
        assert boyer_moore_search("abc", "ab", exact) == []

    def test_single_symbol(self):
        assert boyer_moore_search("a", "banana", exact) == [1, 3, 5]

    def test_repeated_symbols(self):
        assert boyer_moore_search("aab", "aaabaab", exact) == [1, 4]


class TestBoyerMooreShifts:
    def test_absent_symbol_skips_window(self):
        counter = CountingComparator(exact)
        assert boyer_moore_search("abc", "xxxxxxabc", counter) == [6]
        # one comparison per skipped window, then three for the match
        assert counter.count == 5

    def test_aligns_last_occurrence(self):
        # each mismatch lands on a symbol that occurs left of the cursor,
        # so the window jumps to line that occurrence up
        counter = CountingComparator(exact)
        assert boyer_moore_search("abc", "xxaabc", counter) == [3]
        # window 0: c/a, shift to 2; window 2: c/b, shift to 3; window 3: match
        assert counter.count == 5

    def test_occurrence_right_of_cursor_shifts_by_one(self):
        # window 0 matches "a" then fails on b/a at j=0; "a" last occurs
        # at 1, right of the cursor, so the window moves by exactly one
        counter = CountingComparator(exact)
        assert boyer_moore_search("ba", "aaba", counter) == [2]
        assert counter.count == 5


class TestBoyerMooreComparator:
    def test_keyless_comparator_scans_pattern(self):
        # no key to index by, so last occurrences are found through compare
        def compare(a, b):
            return 0 if a.lower() == b.lower() else 1

        assert boyer_moore_search("AB", "xaby", compare) == [1]
        assert boyer_moore_search("abC", "xxAABc", compare) == [3]

    def test_case_insensitive(self):
        assert boyer_moore_search("AB", "xaby", ignore_case) == [1]

    def test_case_sensitive(self):
        assert boyer_moore_search("AB", "xaby", exact) == []
