"""Single entry point that picks a test by method name and input size."""

from __future__ import annotations

import numpy as np

from primality.algorithms.miller_rabin import miller_rabin, miller_rabin_u64
from primality.algorithms.solovay_strassen import solovay_strassen, solovay_strassen_u64
from primality.algorithms.trial_division import trial_division
from primality.core.bounds import U16_MAX, U64_MAX, ensure_range
from primality.core.random_source import RandomSource
from primality.core.result import Primality

DEFAULT_ROUNDS = 20

METHODS = ("auto", "trial", "miller-rabin", "solovay-strassen")


def _miller_rabin(n: int, rounds: int, rng: RandomSource | None) -> Primality:
    if n <= U64_MAX:
        return miller_rabin_u64(n)
    return miller_rabin(n, rounds, rng)


def _solovay_strassen(n: int, rounds: int, rng: RandomSource | None) -> Primality:
    if n <= U64_MAX:
        return solovay_strassen_u64(n, rounds, rng)
    return solovay_strassen(n, rounds, rng)


def check(
    n: int,
    method: str = "auto",
    rounds: int = DEFAULT_ROUNDS,
    rng: RandomSource | None = None,
) -> Primality:
    """Test any non-negative integer with the named method.

    0 and 1, 2 and 3, and other even numbers are settled before the chosen
    algorithm runs, so every method accepts every non-negative input.

    Args:
        n: Integer to test.
        method: One of ``METHODS``. ``auto`` uses trial division below 2**16,
            deterministic Miller-Rabin below 2**64 and probabilistic
            Miller-Rabin above.
        rounds: Rounds for probabilistic methods.
        rng: Randomness source for probabilistic methods.

    Raises:
        ValueError: If n is negative or method is unknown.
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method {method!r}, expected one of {', '.join(METHODS)}")

    n = ensure_range(n, 0, None)
    if n < 2:
        return Primality.ZERO_OR_ONE
    if n < 4:
        return Primality.PRIME
    if n % 2 == 0:
        return Primality.COMPOSITE

    if method == "auto":
        method = "trial" if n <= U16_MAX else "miller-rabin"

    if method == "trial":
        return trial_division(n)
    if method == "miller-rabin":
        return _miller_rabin(n, rounds, rng)
    return _solovay_strassen(n, rounds, rng)


def primality_array(
    numbers: np.ndarray,
    method: str = "auto",
    rounds: int = DEFAULT_ROUNDS,
    rng: RandomSource | None = None,
) -> np.ndarray:
    """Check primality for an array of numbers.

    Returns:
        Boolean array of the same shape where True means PRIME or
        PROBABLY_PRIME.
    """
    numbers = np.asarray(numbers)
    if numbers.size == 0:
        return np.zeros(numbers.shape, dtype=bool)

    flat = [bool(check(int(n), method, rounds, rng)) for n in numbers.ravel()]
    return np.array(flat, dtype=bool).reshape(numbers.shape)
