"""Cross-validation of every test against the small-prime table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from tqdm import tqdm

from primality.algorithms.miller_rabin import miller_rabin, miller_rabin_u64
from primality.algorithms.solovay_strassen import solovay_strassen, solovay_strassen_u64
from primality.algorithms.trial_division import trial_division_u64
from primality.core.random_source import RandomSource, resolve_rng
from primality.core.sieve import TABLE_LIMIT, query_small_prime


@dataclass
class Disagreement:
    """A value on which the tests did not all give the same answer."""
    n: int
    verdicts: dict[str, bool]


@dataclass
class AgreementReport:
    """Outcome of a cross-validation sweep.

    Attributes:
        start: First value checked.
        stop: End of the sweep (exclusive).
        rounds: Rounds used by the probabilistic tests.
        checked: Number of odd values tested.
        primes: How many of them the table reports prime.
        disagreements: Values where at least one test differed.
    """
    start: int
    stop: int
    rounds: int
    checked: int = 0
    primes: int = 0
    disagreements: list[Disagreement] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.disagreements

    def to_dict(self) -> dict[str, Any]:
        return {
            'start': self.start,
            'stop': self.stop,
            'rounds': self.rounds,
            'checked': self.checked,
            'primes': self.primes,
            'disagreements': [
                {'n': d.n, 'verdicts': dict(d.verdicts)} for d in self.disagreements
            ],
        }


def _verdict_functions(rounds: int, rng: RandomSource) -> dict[str, Callable[[int], bool]]:
    return {
        'table': query_small_prime,
        'trial_division': lambda n: bool(trial_division_u64(n)),
        'miller_rabin_u64': lambda n: bool(miller_rabin_u64(n)),
        'miller_rabin': lambda n: bool(miller_rabin(n, rounds, rng)),
        'solovay_strassen_u64': lambda n: bool(solovay_strassen_u64(n, rounds, rng)),
        'solovay_strassen': lambda n: bool(solovay_strassen(n, rounds, rng)),
    }


def cross_validate(
    start: int = 5,
    stop: int = TABLE_LIMIT,
    rounds: int = 20,
    rng: RandomSource | None = None,
    progress: bool = False,
) -> AgreementReport:
    """Compare every test on each odd n in [start, stop).

    Args:
        start: First value, at least 5.
        stop: End of the range (exclusive), at most 65536.
        rounds: Rounds for the probabilistic tests. Each one can wrongly
            accept a composite with small probability, so keep this well
            above 4 for full-range sweeps.
        rng: Randomness source for the probabilistic tests.
        progress: Show a progress bar.

    Returns:
        AgreementReport listing any disagreements.
    """
    if start < 5:
        raise ValueError(f"start must be >= 5, got {start}")
    if stop > TABLE_LIMIT + 1:
        raise ValueError(f"stop must be <= {TABLE_LIMIT + 1}, got {stop}")
    if start > stop:
        raise ValueError(f"start ({start}) must be <= stop ({stop})")

    tests = _verdict_functions(rounds, resolve_rng(rng))
    report = AgreementReport(start=start, stop=stop, rounds=rounds)

    first = start if start % 2 else start + 1
    for n in tqdm(range(first, stop, 2), desc="Cross-validating", disable=not progress):
        verdicts = {name: test(n) for name, test in tests.items()}
        report.checked += 1
        if verdicts['table']:
            report.primes += 1
        if len(set(verdicts.values())) > 1:
            report.disagreements.append(Disagreement(n=n, verdicts=verdicts))

    return report
