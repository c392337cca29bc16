"""Modular multiplication and exponentiation.

The 64-bit routines keep the fixed-width contract: operands and modulus must
fit in an unsigned 64-bit word and every intermediate result is reduced back
into that width. Arbitrary-precision exponentiation is delegated to Python's
built-in three-argument ``pow``.
"""

from __future__ import annotations

from primality.core.bounds import U64_MAX, ensure_int, ensure_range


def modmul_u64(a: int, b: int, m: int) -> int:
    """Compute ``a * b mod m`` for unsigned 64-bit operands.

    A product that fits in 64 bits is reduced directly. Otherwise the
    double-width product is reduced and narrowed back.

    Raises:
        ArithmeticError: If the reduced product does not fit in 64 bits,
            which cannot happen for a 64-bit modulus.
    """
    product = a * b
    if product <= U64_MAX:
        return product % m

    result = product % m
    if result > U64_MAX:
        raise ArithmeticError(f"modular product {result} does not fit in 64 bits")
    return result


def modpow_u64(base: int, exponent: int, modulus: int) -> int:
    """Square-and-multiply ``base ** exponent mod modulus`` over 64-bit words.

    Args:
        base: Base in [0, 2**64 - 1].
        exponent: Exponent in [0, 2**64 - 1].
        modulus: Modulus in [1, 2**64 - 1].

    Returns:
        The residue. A modulus of 1 always yields 0 and an exponent of 0
        yields 1 otherwise.
    """
    base = ensure_range(base, 0, U64_MAX, "base")
    exponent = ensure_range(exponent, 0, U64_MAX, "exponent")
    modulus = ensure_range(modulus, 1, U64_MAX, "modulus")
    return _modpow_u64(base, exponent, modulus)


def _modpow_u64(base: int, exponent: int, modulus: int) -> int:
    # Unchecked core used on hot paths whose callers already validated inputs.
    if modulus == 1:
        return 0

    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = modmul_u64(result, base, modulus)
        exponent >>= 1
        base = modmul_u64(base, base, modulus)

    return result


def modpow(base: int, exponent: int, modulus: int) -> int:
    """Arbitrary-precision modular exponentiation.

    Raises:
        ValueError: If exponent is negative or modulus is not positive.
    """
    base = ensure_int(base, "base")
    exponent = ensure_range(exponent, 0, None, "exponent")
    modulus = ensure_range(modulus, 1, None, "modulus")
    return pow(base, exponent, modulus)
