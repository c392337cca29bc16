"""Solovay-Strassen primality test.

Each round draws a uniform base ``a`` in [2, n - 2] and compares the
Legendre symbol ``(a | n)`` with Euler's criterion ``a**((n-1)/2) mod n``.
A composite survives a single round with probability at most 1/2, which is
weaker than Miller-Rabin's 1/4 per round.

See https://en.wikipedia.org/wiki/Solovay%E2%80%93Strassen_primality_test
"""

from __future__ import annotations

import logging
from typing import Callable

from primality.core.bounds import U64_MAX, ensure_int, ensure_odd, ensure_range, ensure_rounds
from primality.core.legendre import _reciprocity
from primality.core.modular import _modpow_u64
from primality.core.random_source import RandomSource, resolve_rng
from primality.core.result import Primality

logger = logging.getLogger(__name__)

# Answered without running any rounds. 2, 3 and 5 are too small for the
# general algorithm and are reported like any other probabilistic pass.
FIXED_OUTCOMES = {
    0: Primality.ZERO_OR_ONE,
    1: Primality.ZERO_OR_ONE,
    2: Primality.PROBABLY_PRIME,
    3: Primality.PROBABLY_PRIME,
    5: Primality.PROBABLY_PRIME,
}


def _rounds(
    n: int,
    k: int,
    rng: RandomSource,
    power: Callable[[int, int, int], int],
) -> Primality:
    n_minus_one = n - 1
    exponent = n_minus_one // 2

    for round_index in range(k):
        a = rng.randint(2, n - 2)
        symbol = _reciprocity(a, n)

        if symbol == 0:
            logger.debug("round %d: base %d shares a factor with %d", round_index + 1, a, n)
            return Primality.COMPOSITE

        if symbol == 1:
            expected = 1
        elif symbol == -1:
            expected = n_minus_one
        else:
            raise ArithmeticError(f"Legendre symbol of ({a} | {n}) returned {symbol}")

        if power(a, exponent, n) != expected:
            logger.debug("round %d: base %d is an Euler witness for %d", round_index + 1, a, n)
            return Primality.COMPOSITE

    return Primality.PROBABLY_PRIME


def _fixed_outcome(n) -> Primality | None:
    n = ensure_int(n)
    return FIXED_OUTCOMES.get(n)


def solovay_strassen_u64(n: int, k: int, rng: RandomSource | None = None) -> Primality:
    """Solovay-Strassen for ``n`` in [0, 2**64 - 1].

    0 and 1 give ZERO_OR_ONE and 2, 3, 5 give PROBABLY_PRIME directly. Any
    other n must be odd and greater than 5.

    Raises:
        ValueError: If n is even (other than 0 and 2), exceeds 64 bits, or
            k < 1.
    """
    k = ensure_rounds(k)
    fixed = _fixed_outcome(n)
    if fixed is not None:
        return fixed

    n = ensure_odd(ensure_range(n, 7, U64_MAX))
    return _rounds(n, k, resolve_rng(rng), _modpow_u64)


def solovay_strassen(n: int, k: int, rng: RandomSource | None = None) -> Primality:
    """Solovay-Strassen for a non-negative integer of any size.

    Same fixed outcomes and preconditions as :func:`solovay_strassen_u64`,
    with Python's arbitrary-precision ``pow`` for Euler's criterion.
    """
    k = ensure_rounds(k)
    fixed = _fixed_outcome(n)
    if fixed is not None:
        return fixed

    n = ensure_odd(ensure_range(n, 7, None))
    return _rounds(n, k, resolve_rng(rng), pow)
