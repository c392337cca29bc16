"""Reference AKS-style coefficient test.

``n`` is prime exactly when every coefficient of ``(x - 1)**n - (x**n - 1)``
is divisible by ``n``, i.e. when n divides every binomial coefficient
C(n, i) for 0 < i < n. Python integers keep the coefficients exact, but the
work grows with n itself (not its bit length), so this is for demonstration
and cross-checking on small inputs only.

See https://en.wikipedia.org/wiki/AKS_primality_test and
https://rosettacode.org/wiki/AKS_test_for_primes
"""

from __future__ import annotations

from primality.core.bounds import ensure_range
from primality.core.result import Primality


def aks_reference(n: int) -> Primality:
    """Coefficient test for a non-negative integer."""
    n = ensure_range(n, 0, None)
    if n < 2:
        return Primality.ZERO_OR_ONE

    # Coefficients are symmetric, so checking up to n // 2 is enough.
    coefficient = 1
    for i in range(1, n // 2 + 1):
        coefficient = coefficient * (n - i + 1) // i
        if coefficient % n != 0:
            return Primality.COMPOSITE

    return Primality.PRIME
