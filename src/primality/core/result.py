"""Outcome vocabulary shared by every primality test."""

from __future__ import annotations

from enum import Enum


class Primality(Enum):
    """Result of a primality test.

    Members:
        ZERO_OR_ONE: Input was 0 or 1, which are neither prime nor composite.
        PRIME: Proven prime by an exhaustive or deterministic method.
        COMPOSITE: Proven composite.
        PROBABLY_PRIME: Passed every probabilistic round. Not a proof.

    ``bool(result)`` is True for PRIME and PROBABLY_PRIME only. This collapses
    the proof-level distinction, so callers that care about certainty should
    compare against the members directly or use ``is_certain``.
    """

    ZERO_OR_ONE = "zero_or_one"
    PRIME = "prime"
    COMPOSITE = "composite"
    PROBABLY_PRIME = "probably_prime"

    def __bool__(self) -> bool:
        return self is Primality.PRIME or self is Primality.PROBABLY_PRIME

    @property
    def is_certain(self) -> bool:
        """True when the outcome is a proof rather than a probabilistic verdict."""
        return self is not Primality.PROBABLY_PRIME

    @classmethod
    def from_bool(cls, flag: bool) -> Primality:
        """Map a plain yes/no answer onto PRIME or COMPOSITE."""
        return cls.PRIME if flag else cls.COMPOSITE

    def __str__(self) -> str:
        return self.value.replace("_", " ")
