"""Integer domain limits and input validation shared by the tests."""

from __future__ import annotations

import numpy as np

U16_MAX = 2**16 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


def ensure_int(value, name: str = "n") -> int:
    """Return ``value`` as a Python int.

    Accepts Python and NumPy integers. Booleans and everything else are
    rejected.

    Raises:
        TypeError: If value is not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def ensure_range(value, low: int, high: int | None = None, name: str = "n") -> int:
    """Validate that ``low <= value <= high`` and return it as an int.

    Args:
        value: Integer to check.
        low: Inclusive lower bound.
        high: Inclusive upper bound, or None for no upper bound.
        name: Argument name used in the error message.

    Raises:
        TypeError: If value is not an integer.
        ValueError: If value falls outside the range.
    """
    value = ensure_int(value, name)
    if value < low or (high is not None and value > high):
        upper = "inf" if high is None else str(high)
        raise ValueError(f"{name} must be in [{low}, {upper}], got {value}")
    return value


def ensure_odd(value: int, name: str = "n") -> int:
    """Raise ValueError if value is even."""
    if value % 2 == 0:
        raise ValueError(f"{name} must be odd, got {value}")
    return value


def ensure_rounds(k) -> int:
    """Validate a probabilistic round count (k > 0)."""
    k = ensure_int(k, "k")
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    return k
