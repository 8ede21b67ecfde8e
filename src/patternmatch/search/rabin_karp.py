"""Rabin-Karp search with a polynomial rolling hash.

The hash of a window c_0 .. c_{m-1} is

    sum(value(c_i) * BASE ** (m - 1 - i) for i in range(m))

Sliding the window one position to the right drops the leading term and
shifts everything up by one power of BASE:

    new = (old - value(c_0) * BASE ** (m - 1)) * BASE + value(c_m)

so each slide costs O(1) once BASE ** (m - 1) is known. That leading
coefficient is built up by repeated multiplication while the first
window is hashed and then carried along with the hash value.

Python integers do not overflow, so no modular reduction is applied;
hash values grow with the pattern length. A hash hit is only a
candidate: every one is confirmed symbol by symbol, left to right,
through the comparator before it is reported.

Example, hashing "bunn" and sliding to "unny" in "bunny":

    hash("bunn") = 98*113**3 + 117*113**2 + 110*113 + 110 = 142910419
    hash("unny") = (142910419 - 98*113**3) * 113 + 121     = 170236090
"""
from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from patternmatch.search.comparator import (
    CompareFn,
    KeyFn,
    SymbolComparator,
    as_comparator,
)
from patternmatch.search.errors import check_search_args

BASE = 113


def symbol_value(key: Hashable) -> int:
    """Numeric value of a symbol key for hashing.

    Single characters hash by code point; any other key falls back to
    hash(), which is stable for the lifetime of one search call.
    """
    if isinstance(key, str) and len(key) == 1:
        return ord(key)
    if isinstance(key, int):
        return key
    return hash(key)


@dataclass(slots=True)
class RollingHash:
    """Hash of the current window plus BASE ** (width - 1)."""
    value: int
    leading: int
    width: int

    @classmethod
    def of(cls, window: Sequence, key: KeyFn) -> RollingHash:
        """Hash `window` directly in O(len(window))."""
        value = 0
        leading = 1
        for i, symbol in enumerate(window):
            value = value * BASE + symbol_value(key(symbol))
            if i:
                leading *= BASE
        return cls(value=value, leading=leading, width=len(window))

    def roll(self, outgoing, incoming, key: KeyFn) -> None:
        """Slide the window one position: drop `outgoing`, append `incoming`."""
        self.value = (
            (self.value - symbol_value(key(outgoing)) * self.leading) * BASE
            + symbol_value(key(incoming))
        )


def _constant_key(symbol) -> int:
    return 0


def _window_equals(pattern: Sequence, text: Sequence, start: int, cmp) -> bool:
    for i in range(len(pattern)):
        if cmp(text[start + i], pattern[i]) != 0:
            return False
    return True


def rabin_karp_search(
    pattern: Sequence | None,
    text: Sequence | None,
    comparator: SymbolComparator | CompareFn | None,
) -> list[int]:
    """Return every start index of `pattern` in `text`, overlaps included.

    Raises:
        InvalidArgumentError: if pattern is None or empty, or text or
            comparator is None.
    """
    check_search_args("rabin_karp_search", pattern, text, comparator)
    cmp = as_comparator(comparator)
    # without a key every window is a hash hit and is checked symbol by symbol
    key = cmp.key if cmp.key is not None else _constant_key
    m = len(pattern)
    n = len(text)
    matches: list[int] = []
    if m > n:
        return matches

    target = RollingHash.of(pattern, key).value
    window = RollingHash.of(text[:m], key)
    for start in range(n - m + 1):
        if start:
            window.roll(text[start - 1], text[start + m - 1], key)
        if window.value == target and _window_equals(pattern, text, start, cmp):
            matches.append(start)
    return matches
