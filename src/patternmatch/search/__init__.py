"""Exact substring search: KMP, Boyer-Moore and Rabin-Karp."""

from patternmatch.search.boyer_moore import (
    LastOccurrenceTable,
    boyer_moore_search,
    build_last_occurrence_table,
)
from patternmatch.search.comparator import (
    CountingComparator,
    SymbolComparator,
    as_comparator,
    exact,
    ignore_case,
)
from patternmatch.search.dispatch import ALGORITHMS, find_all, get_algorithm
from patternmatch.search.errors import InvalidArgumentError
from patternmatch.search.kmp import build_failure_table, kmp_search
from patternmatch.search.rabin_karp import BASE, rabin_karp_search

__all__ = [
    "ALGORITHMS",
    "BASE",
    "CountingComparator",
    "InvalidArgumentError",
    "LastOccurrenceTable",
    "SymbolComparator",
    "as_comparator",
    "boyer_moore_search",
    "build_failure_table",
    "build_last_occurrence_table",
    "exact",
    "find_all",
    "get_algorithm",
    "ignore_case",
    "kmp_search",
    "rabin_karp_search",
]
