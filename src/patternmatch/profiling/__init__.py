"""Benchmark workloads, harness and reports for the search algorithms."""

from patternmatch.profiling.corpus import ALPHABETS, Workload, generate_workload
from patternmatch.profiling.harness import (
    AlgorithmResult,
    BenchmarkResult,
    run_benchmark,
)
from patternmatch.profiling.report import format_report

__all__ = [
    "ALPHABETS",
    "AlgorithmResult",
    "BenchmarkResult",
    "Workload",
    "format_report",
    "generate_workload",
    "run_benchmark",
]
