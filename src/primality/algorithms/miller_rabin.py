"""Miller-Rabin primality test.

Two entry points:

* :func:`miller_rabin_u64` is deterministic. It draws its bases from the
  published witness sets in :mod:`primality.core.witnesses` and returns PRIME
  or COMPOSITE.
* :func:`miller_rabin` is probabilistic and works on integers of any size.
  Each round picks a uniform base in [2, n - 2]; a composite survives a single
  round with probability at most 1/4, so ``k`` rounds bound the
  false-positive rate by 4**-k. It never returns PRIME.

See https://en.wikipedia.org/wiki/Miller%E2%80%93Rabin_primality_test
"""

from __future__ import annotations

import logging

from primality.core.bounds import U64_MAX, ensure_odd, ensure_range, ensure_rounds
from primality.core.modular import _modpow_u64
from primality.core.random_source import RandomSource, resolve_rng
from primality.core.result import Primality
from primality.core.witnesses import select_witnesses

logger = logging.getLogger(__name__)


def decompose(n: int) -> tuple[int, int]:
    """Write ``n - 1`` as ``2**r * d`` with d odd and return ``(r, d)``."""
    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1
    return r, d


def _passes(x: int, r: int, n: int, square) -> bool:
    """Whether a witness whose first residue is ``x`` fails to expose ``n``."""
    n_minus_one = n - 1
    if x == 1 or x == n_minus_one:
        return True

    for _ in range(r):
        x = square(x)
        if x == n_minus_one:
            return True

    return False


def miller_rabin_u64(n: int) -> Primality:
    """Deterministic Miller-Rabin for odd ``n`` in [3, 2**64 - 1].

    Raises:
        ValueError: If n < 3, n is even, or n exceeds 64 bits.
    """
    n = ensure_odd(ensure_range(n, 3, U64_MAX))
    r, d = decompose(n)

    witnesses = select_witnesses(n)
    logger.debug("n=%d witnesses %s", n, witnesses)
    for a in witnesses:
        x = _modpow_u64(a, d, n)
        if not _passes(x, r, n, lambda v: _modpow_u64(v, 2, n)):
            logger.debug("witness %d proves %d composite", a, n)
            return Primality.COMPOSITE

    return Primality.PRIME


def miller_rabin(n: int, k: int, rng: RandomSource | None = None) -> Primality:
    """Probabilistic Miller-Rabin for odd ``n > 4``.

    Args:
        n: Odd integer greater than 4.
        k: Number of rounds (>= 1).
        rng: Source of uniform integers. Defaults to the system source.

    Returns:
        COMPOSITE as soon as a round exposes n, otherwise PROBABLY_PRIME.

    Raises:
        ValueError: If n <= 4, n is even, or k < 1.
    """
    n = ensure_odd(ensure_range(n, 5, None))
    k = ensure_rounds(k)
    rng = resolve_rng(rng)

    r, d = decompose(n)
    for round_index in range(k):
        a = rng.randint(2, n - 2)
        x = pow(a, d, n)
        if not _passes(x, r, n, lambda v: pow(v, 2, n)):
            logger.debug("round %d: base %d proves %d composite", round_index + 1, a, n)
            return Primality.COMPOSITE

    return Primality.PROBABLY_PRIME
