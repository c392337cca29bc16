"""Deterministic Miller-Rabin witness sets for 64-bit inputs.

Each entry pairs an inclusive upper bound on ``n`` with the smallest known
base set that makes Miller-Rabin exact up to that bound. Sources:
https://miller-rabin.appspot.com/ and
https://en.wikipedia.org/wiki/Miller%E2%80%93Rabin_primality_test#Testing_against_small_sets_of_bases
"""

from __future__ import annotations

from bisect import bisect_left

from primality.core.bounds import U64_MAX, ensure_odd, ensure_range

WITNESS_TABLE: tuple[tuple[int, tuple[int, ...]], ...] = (
    (2_046, (2,)),
    (1_373_652, (2, 3)),
    (9_080_190, (31, 73)),
    (25_326_000, (2, 3, 5)),
    (3_215_031_750, (2, 3, 5, 7)),
    (4_759_123_140, (2, 7, 61)),
    (1_122_004_669_632, (2, 13, 23, 1_662_803)),
    (2_152_302_898_746, (2, 3, 5, 7, 11)),
    (3_474_749_660_382, (2, 3, 5, 7, 11, 13)),
    (341_550_071_728_320, (2, 3, 5, 7, 11, 13, 17)),
    (3_825_123_056_546_413_050, (2, 3, 5, 7, 11, 13, 17, 19, 23)),
    (U64_MAX, (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)),
)

_UPPER_BOUNDS = tuple(bound for bound, _ in WITNESS_TABLE)


def select_witnesses(n: int) -> tuple[int, ...]:
    """Return the minimal witness set for odd ``n`` in [3, 2**64 - 1].

    Raises:
        ValueError: If n <= 2, n is even, or n exceeds 64 bits.
    """
    n = ensure_odd(ensure_range(n, 3, U64_MAX, "n"), "n")
    return WITNESS_TABLE[bisect_left(_UPPER_BOUNDS, n)][1]
