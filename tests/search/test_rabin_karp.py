"""Tests for Rabin-Karp search and its rolling hash."""
from __future__ import annotations

from patternmatch.search.comparator import (
    CountingComparator,
    SymbolComparator,
    exact,
    identity_key,
    ignore_case,
)
from patternmatch.search.rabin_karp import (
    BASE,
    RollingHash,
    rabin_karp_search,
    symbol_value,
)


class TestRollingHash:
    def test_base(self):
        assert BASE == 113

    def test_direct_hash(self):
        h = RollingHash.of("bunn", identity_key)
        assert h.value == 142910419
        assert h.leading == 113 ** 3
        assert h.width == 4

    def test_roll_matches_direct_hash(self):
        h = RollingHash.of("bunn", identity_key)
        h.roll("b", "y", identity_key)
        assert h.value == 170236090
        assert h.value == RollingHash.of("unny", identity_key).value

    def test_single_symbol_window(self):
        h = RollingHash.of("a", identity_key)
        assert h.value == ord("a")
        assert h.leading == 1
        h.roll("a", "b", identity_key)
        assert h.value == ord("b")

    def test_long_window_does_not_overflow(self):
        window = "z" * 200
        h = RollingHash.of(window, identity_key)
        h.roll("z", "z", identity_key)
        assert h.value == RollingHash.of(window, identity_key).value

    def test_symbol_values(self):
        assert symbol_value("a") == 97
        assert symbol_value(7) == 7
        assert symbol_value("ss") == hash("ss")


class TestRabinKarpSearch:
    def test_worked_example(self):
        assert rabin_karp_search("abab", "ababab", exact) == [0, 2]

    def test_overlapping(self):
        assert rabin_karp_search("aa", "aaaa", exact) == [0, 1, 2]

    def test_bunny(self):
        assert rabin_karp_search("unny", "bunny", exact) == [1]

    def test_text_shorter_than_pattern(self):
        assert rabin_karp_search("abc", "ab", exact) == []

    def test_match_at_both_ends(self):
        assert rabin_karp_search("ab", "abxxab", exact) == [0, 4]

    def test_case_insensitive(self):
        assert rabin_karp_search("AB", "xaby", ignore_case) == [1]

    def test_case_sensitive(self):
        assert rabin_karp_search("AB", "xaby", exact) == []

    def test_only_hash_hits_are_compared(self):
        counter = CountingComparator(exact)
        assert rabin_karp_search("abc", "zzabczzabc", counter) == [2, 7]
        assert counter.count == 6


class TestRabinKarpCollisions:
    def test_keyless_comparator_checks_every_window(self):
        calls = []

        def compare(a, b):
            calls.append((a, b))
            return 0 if a.lower() == b.lower() else 1

        assert rabin_karp_search("AB", "xaby", compare) == [1]
        # three windows, each compared at least once
        assert len(calls) >= 3

    def test_collisions_are_verified(self):
        # a constant key makes every window collide with the pattern hash
        colliding = SymbolComparator(exact.compare, key=lambda s: "x")
        assert rabin_karp_search("ab", "abbaab", colliding) == [0, 4]

    def test_collision_check_is_left_to_right(self):
        seen = []

        def compare(a, b):
            seen.append(b)
            return 0 if a == b else 1

        colliding = SymbolComparator(compare, key=lambda s: 0)
        rabin_karp_search("abc", "abd", colliding)
        assert seen == ["a", "b", "c"]
