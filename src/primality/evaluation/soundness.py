"""Empirical check of the per-round error bounds of the probabilistic tests.

A single round must expose a composite with probability at least 3/4 for
Miller-Rabin and at least 1/2 for Solovay-Strassen. We run many one-round
trials on a known composite and use a one-sided binomial test to decide
whether the observed detection rate is consistent with that bound.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any

from scipy.stats import binomtest
from tqdm import tqdm

from primality.algorithms.miller_rabin import miller_rabin
from primality.algorithms.solovay_strassen import solovay_strassen
from primality.algorithms.trial_division import trial_division
from primality.core.bounds import ensure_odd, ensure_range
from primality.core.random_source import RandomSource, resolve_rng
from primality.core.result import Primality

# Minimum probability that one round reports COMPOSITE for a composite input.
DETECTION_BOUNDS = {
    'miller-rabin': 0.75,
    'solovay-strassen': 0.5,
}

_TESTS = {
    'miller-rabin': miller_rabin,
    'solovay-strassen': solovay_strassen,
}


@dataclass
class SoundnessResult:
    """Result of a soundness estimate.

    Attributes:
        n: Composite that was tested.
        test: Test name.
        trials: Number of one-round runs.
        detections: Runs that reported COMPOSITE.
        bound: Required per-round detection probability.
        p_value: One-sided binomial p-value for "rate is below the bound".
        alpha: Significance level.
    """
    n: int
    test: str
    trials: int
    detections: int
    bound: float
    p_value: float
    alpha: float

    @property
    def detection_rate(self) -> float:
        return self.detections / self.trials

    @property
    def consistent(self) -> bool:
        """True unless the data show the rate is significantly below the bound."""
        return self.p_value >= self.alpha

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d['detection_rate'] = self.detection_rate
        d['consistent'] = self.consistent
        return d


def estimate_error_rate(
    n: int,
    test: str = 'solovay-strassen',
    trials: int = 2000,
    rng: RandomSource | None = None,
    alpha: float = 0.01,
    progress: bool = False,
) -> SoundnessResult:
    """Estimate how often one round of ``test`` exposes the composite ``n``.

    Args:
        n: Odd composite greater than 4.
        test: ``miller-rabin`` or ``solovay-strassen``.
        trials: Number of independent one-round runs.
        rng: Randomness source.
        alpha: Significance level for the binomial test.
        progress: Show a progress bar.

    Raises:
        ValueError: If n is not an odd composite above 4, the test name is
            unknown, or trials < 1.
    """
    if test not in _TESTS:
        raise ValueError(f"Unknown test {test!r}, expected one of {', '.join(_TESTS)}")
    if trials < 1:
        raise ValueError(f"trials must be >= 1, got {trials}")

    n = ensure_odd(ensure_range(n, 5, None))
    if trial_division(n) is not Primality.COMPOSITE:
        raise ValueError(f"n must be composite, got prime {n}")

    run = _TESTS[test]
    rng = resolve_rng(rng)

    detections = 0
    for _ in tqdm(range(trials), desc=f"{test} n={n}", disable=not progress):
        if run(n, 1, rng) is Primality.COMPOSITE:
            detections += 1

    bound = DETECTION_BOUNDS[test]
    p_value = binomtest(detections, trials, p=bound, alternative='less').pvalue

    return SoundnessResult(
        n=n,
        test=test,
        trials=trials,
        detections=detections,
        bound=bound,
        p_value=float(p_value),
        alpha=alpha,
    )
