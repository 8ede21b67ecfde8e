"""Format BenchmarkResult data for terminal output."""
from __future__ import annotations

from patternmatch.profiling.harness import BenchmarkResult


def format_report(result: BenchmarkResult, label: str = "Benchmark") -> str:
    """Format a BenchmarkResult as a readable table."""
    lines = [
        f"=== {label} ===",
        f"Text length:     {result.text_length:,}",
        f"Pattern length:  {result.pattern_length:,}",
        f"Alphabet:        {result.alphabet}",
        "",
        f"{'Algorithm':<14} {'Time (ms)':>12} {'Comparisons':>14} "
        f"{'Cmp/char':>10} {'Matches':>9}",
        "-" * 63,
    ]
    for r in result.results:
        per_char = r.comparisons / result.text_length if result.text_length else 0.0
        lines.append(
            f"{r.name:<14} {r.time_ms:>12.2f} {r.comparisons:>14,} "
            f"{per_char:>10.3f} {r.matches:>9,}"
        )
    lines.append("")
    if result.results:
        lines.append(f"Fastest:         {result.fastest().name}")
    lines.append(f"Results agree:   {'yes' if result.agree else 'NO'}")
    return "\n".join(lines)
