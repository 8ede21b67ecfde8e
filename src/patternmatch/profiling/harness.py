"""Time and count comparisons for every search algorithm on one workload.

Each algorithm gets a fresh CountingComparator so the report shows how
many symbol comparisons it made, next to wall-clock time. The harness
also checks that all algorithms report the same matches; a mismatch is
a bug, not a performance result.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from patternmatch.profiling.corpus import Workload, generate_workload
from patternmatch.search.comparator import CountingComparator, exact, ignore_case
from patternmatch.search.dispatch import ALGORITHMS

log = logging.getLogger(__name__)


@dataclass(slots=True)
class AlgorithmResult:
    """Timing and work counters for a single algorithm."""
    name: str
    time_ms: float
    comparisons: int
    matches: int


@dataclass(slots=True)
class BenchmarkResult:
    """Results for all algorithms on one workload."""
    text_length: int
    pattern_length: int
    alphabet: str
    results: list[AlgorithmResult] = field(default_factory=list)
    agree: bool = True

    def fastest(self) -> AlgorithmResult:
        return min(self.results, key=lambda r: r.time_ms)


def run_benchmark(
    text_length: int = 100_000,
    pattern_length: int = 8,
    alphabet: str = "lower",
    occurrences: int = 50,
    seed: int = 42,
    case_insensitive: bool = False,
    workload: Workload | None = None,
) -> BenchmarkResult:
    """Run every registered algorithm on the same workload.

    Pass `workload` to reuse a prebuilt one; otherwise it is generated
    from the other arguments.
    """
    if workload is None:
        workload = generate_workload(
            text_length=text_length,
            pattern_length=pattern_length,
            alphabet=alphabet,
            occurrences=occurrences,
            seed=seed,
        )
    base = ignore_case if case_insensitive else exact

    bench = BenchmarkResult(
        text_length=len(workload.text),
        pattern_length=len(workload.pattern),
        alphabet=workload.alphabet,
    )
    reference: list[int] | None = None
    for name, search in ALGORITHMS.items():
        counter = CountingComparator(base)
        t0 = time.perf_counter()
        matches = search(workload.pattern, workload.text, counter)
        elapsed_ms = (time.perf_counter() - t0) * 1000
        log.debug(
            "%s: %.2f ms, %d comparisons, %d matches",
            name, elapsed_ms, counter.count, len(matches),
        )

        if reference is None:
            reference = matches
        elif matches != reference:
            log.error("%s disagrees with %s", name, next(iter(ALGORITHMS)))
            bench.agree = False

        bench.results.append(AlgorithmResult(
            name=name,
            time_ms=elapsed_ms,
            comparisons=counter.count,
            matches=len(matches),
        ))
    return bench
