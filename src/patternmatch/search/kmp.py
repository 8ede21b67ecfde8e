"""Knuth-Morris-Pratt search driven by a failure table.

The failure table (a.k.a. prefix function) records, for every position
i of the pattern, the length of the longest proper prefix of
pattern[0..i] that is also a suffix of it:

    pattern:       a  b  a  b  a  c
    failure table [0, 0, 1, 2, 3, 0]

When the scan mismatches after matching j symbols, the table says how
much of those j symbols is still a valid prefix, so the text cursor
never moves backwards. Total work is O(len(text) + len(pattern)).
"""
from __future__ import annotations

from collections.abc import Sequence

from patternmatch.search.comparator import CompareFn, SymbolComparator, as_comparator
from patternmatch.search.errors import InvalidArgumentError, check_search_args


def build_failure_table(
    pattern: Sequence | None,
    comparator: SymbolComparator | CompareFn | None,
) -> list[int]:
    """Compute the failure table for `pattern`.

    Linear in len(pattern): on a mismatch the prefix cursor falls back
    through entries that are already filled in instead of restarting.

    Raises:
        InvalidArgumentError: if pattern or comparator is None.
    """
    if pattern is None or comparator is None:
        raise InvalidArgumentError("build_failure_table: pattern and comparator are required")
    cmp = as_comparator(comparator)
    m = len(pattern)
    if m <= 1:
        return [0] * m

    table = [0] * m
    i = 0  # length of the prefix matched so far
    j = 1  # position being filled
    while j < m:
        if cmp(pattern[i], pattern[j]) == 0:
            table[j] = i + 1
            i += 1
            j += 1
        elif i != 0:
            i = table[i - 1]
        else:
            table[j] = 0
            j += 1
    return table


def kmp_search(
    pattern: Sequence | None,
    text: Sequence | None,
    comparator: SymbolComparator | CompareFn | None,
) -> list[int]:
    """Return every start index of `pattern` in `text`, overlaps included.

    Raises:
        InvalidArgumentError: if pattern is None or empty, or text or
            comparator is None.
    """
    check_search_args("kmp_search", pattern, text, comparator)
    cmp = as_comparator(comparator)
    m = len(pattern)
    n = len(text)
    matches: list[int] = []
    if n < m:
        return matches

    table = build_failure_table(pattern, cmp)

    check = 0  # text cursor
    start = 0  # candidate match start
    j = 0      # pattern cursor
    while check < n and n - start >= m:
        if cmp(text[check], pattern[j]) == 0:
            check += 1
            j += 1
            if j == m:
                matches.append(start)
                # keep the longest border so overlapping matches are found
                j = table[j - 1]
                start = check - j
        elif j == 0:
            start += 1
            check = start
        else:
            j = table[j - 1]
            start = check - j
    return matches
