"""Randomness source used by the probabilistic tests."""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Anything that draws a uniform integer from a closed range.

    ``random.Random`` and ``random.SystemRandom`` both qualify. The stated
    false-positive bounds of the probabilistic tests only hold for an
    unbiased source.
    """

    def randint(self, a: int, b: int) -> int:
        ...


# SystemRandom reads OS entropy and holds no state, so one instance can be
# shared across threads.
_SYSTEM_RANDOM = random.SystemRandom()


def resolve_rng(rng: RandomSource | None = None) -> RandomSource:
    """Return ``rng`` or the process-wide system source when it is None."""
    if rng is None:
        return _SYSTEM_RANDOM
    if not isinstance(rng, RandomSource):
        raise TypeError(f"rng must provide randint(a, b), got {type(rng).__name__}")
    return rng


def seeded_rng(seed: int | None) -> RandomSource:
    """Reproducible source for a seed, or the system source for None."""
    if seed is None:
        return _SYSTEM_RANDOM
    return random.Random(seed)
