"""Boyer-Moore search with the bad-character (last occurrence) rule only.

Each window is compared right to left. On a mismatch the text symbol
under the cursor decides the shift:

    - not in the pattern at all: jump the window past it entirely
    - last seen at or right of the current pattern index: shift by one
    - last seen left of it: line that occurrence up with the text symbol

The good-suffix rule and the Galil rule are not applied, so every new
window is compared from its rightmost symbol again. Worst case is
O(len(text) * len(pattern)); with a large alphabet most mismatches hit
the "not in pattern" case and the scan is sub-linear on average.
"""
from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping, Sequence
from functools import partial

from patternmatch.search.comparator import (
    CompareFn,
    KeyFn,
    SymbolComparator,
    as_comparator,
    identity_key,
)
from patternmatch.search.errors import InvalidArgumentError, check_search_args


class LastOccurrenceTable(Mapping[Hashable, int]):
    """Read-only map from symbol key to its highest index in the pattern.

    Symbols absent from the pattern have no entry; lookup() returns
    None for them, never 0.
    """

    __slots__ = ("_last", "_key")

    def __init__(self, last: dict[Hashable, int], key: KeyFn) -> None:
        self._last = last
        self._key = key

    def lookup(self, symbol) -> int | None:
        """Return the last index of `symbol` in the pattern, or None."""
        return self._last.get(self._key(symbol))

    def __getitem__(self, key: Hashable) -> int:
        return self._last[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._last)

    def __len__(self) -> int:
        return len(self._last)

    def __repr__(self) -> str:
        return f"LastOccurrenceTable({self._last!r})"


def build_last_occurrence_table(
    pattern: Sequence | None,
    key: KeyFn | None = None,
) -> LastOccurrenceTable:
    """Map each symbol of `pattern` (through `key`) to its last index.

    An empty pattern yields an empty table.

    Raises:
        InvalidArgumentError: if pattern is None.
    """
    if pattern is None:
        raise InvalidArgumentError("build_last_occurrence_table: pattern must not be None")
    if key is None:
        key = identity_key
    last: dict[Hashable, int] = {}
    # later occurrences overwrite earlier ones
    for index, symbol in enumerate(pattern):
        last[key(symbol)] = index
    return LastOccurrenceTable(last, key)


def _scan_last_occurrence(pattern: Sequence, cmp, symbol) -> int | None:
    """Last index of `symbol` in `pattern` found through `cmp`, or None.

    Used in place of the table when the comparator has no key to index by.
    """
    for index in range(len(pattern) - 1, -1, -1):
        if cmp(pattern[index], symbol) == 0:
            return index
    return None


def boyer_moore_search(
    pattern: Sequence | None,
    text: Sequence | None,
    comparator: SymbolComparator | CompareFn | None,
) -> list[int]:
    """Return every start index of `pattern` in `text`, overlaps included.

    Raises:
        InvalidArgumentError: if pattern is None or empty, or text or
            comparator is None.
    """
    check_search_args("boyer_moore_search", pattern, text, comparator)
    cmp = as_comparator(comparator)
    m = len(pattern)
    n = len(text)
    matches: list[int] = []
    if m > n:
        return matches

    if cmp.key is None:
        lookup = partial(_scan_last_occurrence, pattern, cmp)
    else:
        lookup = build_last_occurrence_table(pattern, cmp.key).lookup
    last_start = n - m
    start = 0
    while start <= last_start:
        j = m - 1
        check = start + j
        while j >= 0 and cmp(pattern[j], text[check]) == 0:
            j -= 1
            check -= 1
        if j < 0:
            matches.append(start)
            start += 1
            continue

        occurrence = lookup(text[check])
        if occurrence is None:
            start = check + 1
        elif occurrence >= j:
            start += 1
        else:
            start = check - occurrence
    return matches
