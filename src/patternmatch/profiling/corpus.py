"""Generate seeded search workloads for profiling.

A workload is a random text over a fixed alphabet with a pattern
planted at known positions. The alphabet size is the interesting knob:
Boyer-Moore skips far on a large alphabet and barely at all on DNA,
while KMP and Rabin-Karp do roughly the same work either way.
"""
from __future__ import annotations

import random
import string
from dataclasses import dataclass

ALPHABETS: dict[str, str] = {
    "binary": "01",
    "dna": "ACGT",
    "lower": string.ascii_lowercase,
    "printable": string.ascii_letters + string.digits + string.punctuation,
}


@dataclass(slots=True)
class Workload:
    """A text, a pattern, and where the pattern was planted."""
    text: str
    pattern: str
    alphabet: str
    planted: list[int]


def generate_workload(
    text_length: int = 100_000,
    pattern_length: int = 8,
    alphabet: str = "lower",
    occurrences: int = 50,
    seed: int = 42,
) -> Workload:
    """Build a random text with `occurrences` non-overlapping copies of a pattern.

    The planted positions are a lower bound on the true match set: the
    random filler can contain extra occurrences, especially on small
    alphabets.
    """
    if alphabet not in ALPHABETS:
        known = ", ".join(sorted(ALPHABETS))
        raise ValueError(f"unknown alphabet {alphabet!r} (expected one of: {known})")
    if pattern_length < 1:
        raise ValueError("pattern_length must be at least 1")
    if occurrences * pattern_length > text_length:
        raise ValueError("text too short for the requested occurrences")

    rng = random.Random(seed)
    symbols = ALPHABETS[alphabet]
    pattern = "".join(rng.choice(symbols) for _ in range(pattern_length))
    chars = [rng.choice(symbols) for _ in range(text_length)]

    # one slot per occurrence so planted copies never overlap
    slot = text_length // max(occurrences, 1)
    planted: list[int] = []
    for k in range(occurrences):
        pos = k * slot + rng.randrange(slot - pattern_length + 1)
        chars[pos:pos + pattern_length] = pattern
        planted.append(pos)

    return Workload(
        text="".join(chars),
        pattern=pattern,
        alphabet=alphabet,
        planted=planted,
    )
