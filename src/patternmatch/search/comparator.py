"""Symbol comparators injected into every search algorithm.

A comparator answers one question: are two symbols equal? The
algorithms only ever test ``compare(a, b) == 0``, so a caller can swap
in case-insensitive or locale-aware equality without touching the
search code.

Two of the algorithms also need to *index* symbols: Boyer-Moore keeps
a table of last occurrences and Rabin-Karp turns each symbol into a
number for its rolling hash. Both do that through the comparator's
``key`` function, which maps a symbol to a hashable canonical form.
The contract is simple: if ``compare(a, b) == 0`` then
``key(a) == key(b)``. A bare two-argument callable has no key; the
algorithms then fall back to working through ``compare`` alone, which
is slower but correct for any notion of equality.

Usage:
    kmp_search("AB", "xaby", ignore_case)      # [1]
    kmp_search("AB", "xaby", exact)            # []
    kmp_search("AB", "xaby", lambda a, b: 0 if a == b else 1)
"""
from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, TypeAlias

from patternmatch.search.errors import InvalidArgumentError

Symbol: TypeAlias = Any
CompareFn: TypeAlias = Callable[[Symbol, Symbol], int]
KeyFn: TypeAlias = Callable[[Symbol], Hashable]


def identity_key(symbol: Symbol) -> Hashable:
    """Key for comparators that agree with ==."""
    return symbol


def _ordinal_compare(a: Symbol, b: Symbol) -> int:
    if a == b:
        return 0
    try:
        return -1 if a < b else 1
    except TypeError:
        # unordered symbols (e.g. int vs str) are simply unequal
        return 1


def _casefold(symbol: str) -> str:
    return symbol.casefold()


def _casefold_compare(a: str, b: str) -> int:
    return _ordinal_compare(a.casefold(), b.casefold())


@dataclass(frozen=True, slots=True)
class SymbolComparator:
    """An equality capability plus, optionally, a key consistent with it.

    With key=None the symbol-indexing algorithms cannot hash or table
    symbols and compare through `compare` instead.
    """
    compare: CompareFn
    key: KeyFn | None = None

    def __call__(self, a: Symbol, b: Symbol) -> int:
        return self.compare(a, b)

    def equal(self, a: Symbol, b: Symbol) -> bool:
        return self.compare(a, b) == 0


exact = SymbolComparator(_ordinal_compare, identity_key)
ignore_case = SymbolComparator(_casefold_compare, _casefold)


class CountingComparator:
    """Wraps a comparator and counts how many comparisons pass through it.

    Used by the profiling harness to report the work each algorithm
    does. Not thread-safe: give each search call its own instance.
    """

    __slots__ = ("_inner", "count")

    def __init__(self, inner: SymbolComparator | CompareFn = exact) -> None:
        self._inner = as_comparator(inner)
        self.count = 0

    @property
    def key(self) -> KeyFn | None:
        return self._inner.key

    def __call__(self, a: Symbol, b: Symbol) -> int:
        self.count += 1
        return self._inner.compare(a, b)

    def equal(self, a: Symbol, b: Symbol) -> bool:
        return self(a, b) == 0

    def reset(self) -> None:
        self.count = 0


def as_comparator(
    comparator: SymbolComparator | CountingComparator | CompareFn | None,
) -> SymbolComparator | CountingComparator:
    """Normalize a comparator argument.

    SymbolComparator and CountingComparator instances pass through
    unchanged. Any other callable is treated as a bare ``compare``
    function with no key.

    Raises:
        InvalidArgumentError: if `comparator` is None or not callable.
    """
    if comparator is None:
        raise InvalidArgumentError("comparator must not be None")
    if isinstance(comparator, (SymbolComparator, CountingComparator)):
        return comparator
    if not callable(comparator):
        raise InvalidArgumentError(
            f"comparator must be callable, got {type(comparator).__name__}"
        )
    return SymbolComparator(comparator)
