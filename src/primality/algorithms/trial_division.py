"""Trial division with 6k +/- 1 stepping.

The only certain test available for inputs of any size, at O(sqrt(n)) cost.
It is meant for moderate inputs; there is no timeout hook, so callers that
need bounded latency must impose one themselves.
"""

from __future__ import annotations

from primality.core.bounds import U64_MAX, U128_MAX, ensure_range
from primality.core.result import Primality

# The 25 primes below 100, answered by membership without dividing.
SMALL_PRIMES = frozenset({
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41,
    43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
})


def _divide(n: int) -> Primality:
    if n % 2 == 0 or n % 3 == 0:
        return Primality.COMPOSITE

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return Primality.COMPOSITE
        i += 6

    return Primality.PRIME


def trial_division_u64(n: int) -> Primality:
    """Trial division for ``n`` in [0, 2**64 - 1].

    Returns:
        ZERO_OR_ONE for 0 and 1, otherwise PRIME or COMPOSITE.
    """
    n = ensure_range(n, 0, U64_MAX)
    if n < 2:
        return Primality.ZERO_OR_ONE
    if n in SMALL_PRIMES:
        return Primality.PRIME
    return _divide(n)


def trial_division_u128(n: int) -> Primality:
    """Trial division for ``n`` in [0, 2**128 - 1].

    Values that fit in 64 bits are handed to :func:`trial_division_u64`.
    """
    n = ensure_range(n, 0, U128_MAX)
    if n <= U64_MAX:
        return trial_division_u64(n)
    return _divide(n)


def trial_division(n: int) -> Primality:
    """Trial division for any non-negative integer.

    Values that fit in 128 bits are handed to :func:`trial_division_u128`.
    """
    n = ensure_range(n, 0, None)
    if n <= U128_MAX:
        return trial_division_u128(n)
    return _divide(n)
