"""Legendre symbol via quadratic reciprocity.

The routine never checks that the denominator is prime, so for composite
``n`` it computes the Jacobi symbol. A result of 0 means the reduction ended
on a nontrivial common factor of ``a`` and ``n``.
"""

from __future__ import annotations

from primality.core.bounds import U64_MAX, ensure_odd, ensure_range


def _reciprocity(a: int, n: int) -> int:
    sign = 1
    while a != 0:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                sign = -sign

        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            sign = -sign
        a %= n

    return sign if n == 1 else 0


def legendre_symbol_u64(a: int, n: int) -> int:
    """Symbol ``(a | n)`` for a 64-bit odd modulus.

    Args:
        a: Numerator in [2, n - 1].
        n: Odd modulus in [3, 2**64 - 1].

    Returns:
        -1, 0 or 1.

    Raises:
        ValueError: If n is even, n < 3, or a is out of range.
    """
    n = ensure_odd(ensure_range(n, 3, U64_MAX, "n"), "n")
    a = ensure_range(a, 2, n - 1, "a")
    return _reciprocity(a, n)


def legendre_symbol(a: int, n: int) -> int:
    """Symbol ``(a | n)`` for an arbitrary-precision odd modulus ``n > 1``.

    ``a`` may be any non-negative integer; it does not need to be reduced
    modulo ``n`` first.
    """
    n = ensure_odd(ensure_range(n, 3, None, "n"), "n")
    a = ensure_range(a, 0, None, "a")
    return _reciprocity(a, n)
