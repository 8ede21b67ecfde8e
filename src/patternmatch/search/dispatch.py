"""Pick a search algorithm by name.

Usage:
    find_all("abab", "ababab")                              # [0, 2]
    find_all("AB", "xaby", algorithm="boyer-moore",
             comparator=ignore_case)                        # [1]
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from patternmatch.search.boyer_moore import boyer_moore_search
from patternmatch.search.comparator import CompareFn, SymbolComparator, exact
from patternmatch.search.errors import InvalidArgumentError
from patternmatch.search.kmp import kmp_search
from patternmatch.search.rabin_karp import rabin_karp_search

log = logging.getLogger(__name__)

SearchFn = Callable[..., list[int]]

ALGORITHMS: dict[str, SearchFn] = {
    "kmp": kmp_search,
    "boyer-moore": boyer_moore_search,
    "rabin-karp": rabin_karp_search,
}

DEFAULT_ALGORITHM = "kmp"


def get_algorithm(name: str) -> SearchFn:
    """Look up a search function by its registered name."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        known = ", ".join(sorted(ALGORITHMS))
        raise InvalidArgumentError(
            f"unknown algorithm {name!r} (expected one of: {known})"
        ) from None


def find_all(
    pattern: Sequence,
    text: Sequence,
    algorithm: str = DEFAULT_ALGORITHM,
    comparator: SymbolComparator | CompareFn = exact,
) -> list[int]:
    """Run the named algorithm and return all match positions."""
    search = get_algorithm(algorithm)
    matches = search(pattern, text, comparator)
    log.debug(
        "%s: pattern_len=%d text_len=%d matches=%d",
        algorithm, len(pattern), len(text), len(matches),
    )
    return matches
