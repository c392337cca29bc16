"""Configuration for command-line runs."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from primality.checker import DEFAULT_ROUNDS, METHODS
from primality.core.random_source import RandomSource, seeded_rng


@dataclass
class CheckConfig:
    """Settings shared by the CLI subcommands.

    Attributes:
        method: Test used by ``check`` (see ``primality.checker.METHODS``).
        rounds: Rounds for probabilistic tests.
        seed: Seed for a reproducible random source. None uses OS entropy.
        sweep_start: First value of a cross-validation sweep.
        sweep_stop: End (exclusive) of a cross-validation sweep.
        trials: Trials for soundness estimation.
        alpha: Significance level for soundness estimation.
    """

    method: str = "auto"
    rounds: int = DEFAULT_ROUNDS
    seed: int | None = None
    sweep_start: int = 5
    sweep_stop: int = 65535
    trials: int = 2000
    alpha: float = 0.01

    def __post_init__(self):
        if self.method not in METHODS:
            raise ValueError(f"Unknown method {self.method!r}, expected one of {', '.join(METHODS)}")
        if self.rounds < 1:
            raise ValueError(f"rounds must be >= 1, got {self.rounds}")
        if self.trials < 1:
            raise ValueError(f"trials must be >= 1, got {self.trials}")
        if not (0.0 < self.alpha < 1.0):
            raise ValueError(f"alpha must be in (0, 1), got {self.alpha}")

    def rng(self) -> RandomSource:
        """Random source for this configuration."""
        return seeded_rng(self.seed)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> CheckConfig:
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in names})

    @classmethod
    def load(cls, path: str | Path) -> CheckConfig:
        """Read a configuration from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def save(self, path: str | Path) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    def merged(self, **overrides: Any) -> CheckConfig:
        """Copy with every non-None override applied."""
        values = self.to_dict()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return CheckConfig.from_dict(values)
