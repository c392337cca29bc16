"""Tests for CheckConfig."""

import random

import pytest

from primality.config import CheckConfig


class TestCheckConfig:
    """Tests for CheckConfig."""

    def test_defaults(self):
        """Defaults match the documented values."""
        config = CheckConfig()
        assert config.method == "auto"
        assert config.rounds == 20
        assert config.seed is None

    def test_invalid_values(self):
        """Bad settings raise ValueError."""
        with pytest.raises(ValueError):
            CheckConfig(method="fermat")
        with pytest.raises(ValueError):
            CheckConfig(rounds=0)
        with pytest.raises(ValueError):
            CheckConfig(alpha=1.5)

    def test_from_dict_ignores_unknown_keys(self):
        """Unknown keys are dropped."""
        config = CheckConfig.from_dict({"rounds": 5, "colour": "blue"})
        assert config.rounds == 5

    def test_save_and_load(self, tmp_path):
        """A saved config loads back unchanged."""
        path = tmp_path / "config.json"
        config = CheckConfig(method="solovay-strassen", rounds=7, seed=3)
        config.save(path)
        assert CheckConfig.load(path) == config

    def test_merged_skips_none(self):
        """None overrides leave values untouched."""
        config = CheckConfig(rounds=7).merged(rounds=None, seed=11)
        assert config.rounds == 7
        assert config.seed == 11

    def test_seeded_rng_is_reproducible(self):
        """Same seed gives the same draws."""
        a = CheckConfig(seed=42).rng()
        b = CheckConfig(seed=42).rng()
        assert isinstance(a, random.Random)
        assert [a.randint(0, 10**6) for _ in range(5)] == [b.randint(0, 10**6) for _ in range(5)]

    def test_unseeded_rng_is_system(self):
        """No seed gives the system source."""
        assert isinstance(CheckConfig().rng(), random.SystemRandom)
