"""Sieve of Eratosthenes and the packed small-prime lookup table.

The table covers every integer in [0, 65535]. Only odd numbers are stored:
bit ``i`` (little-endian within each byte) represents ``2*i + 1``, so the
whole range fits in 4 KiB. It is built once per process from a NumPy sieve
and cached.
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np

from primality.core.bounds import U16_MAX, ensure_range

TABLE_LIMIT = U16_MAX


def prime_sieve_mask(limit: int) -> np.ndarray:
    """Generate a boolean mask where mask[i] is True if i is prime.

    Args:
        limit: Size of the mask (0 to limit-1).

    Returns:
        Boolean array of length limit.

    Raises:
        ValueError: If limit is negative.
    """
    limit = ensure_range(limit, 0, None, "limit")

    mask = np.ones(limit, dtype=bool)
    mask[:2] = False

    for i in range(2, int(np.sqrt(max(limit - 1, 0))) + 1):
        if mask[i]:
            mask[i*i::i] = False

    return mask


@lru_cache(maxsize=None)
def small_prime_table() -> np.ndarray:
    """Return the packed odd-number prime table (read-only uint8 array)."""
    mask = prime_sieve_mask(TABLE_LIMIT + 1)
    table = np.packbits(mask[1::2], bitorder="little")
    table.setflags(write=False)
    return table


def query_small_prime(n: int) -> bool:
    """Look up whether ``n`` in [0, 65535] is prime.

    Even numbers are answered without touching the table: 2 is the only
    even prime.

    Raises:
        ValueError: If n is outside [0, 65535].
    """
    n = ensure_range(n, 0, TABLE_LIMIT, "n")
    if n % 2 == 0:
        return n == 2

    pos = (n - 1) // 2
    return bool((small_prime_table()[pos >> 3] >> (pos & 7)) & 1)
