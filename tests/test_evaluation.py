"""Tests for the evaluation tools."""

import random

import pytest

from primality.evaluation import (
    DETECTION_BOUNDS,
    AgreementReport,
    cross_validate,
    estimate_error_rate,
)


class TestCrossValidate:
    """Tests for cross_validate."""

    def test_full_table_range(self):
        """Every test agrees on every odd n in [5, 65535)."""
        report = cross_validate(5, 65535, rounds=20, rng=random.Random(0))
        assert report.ok, report.disagreements[:5]
        assert report.checked == (65535 - 5) // 2
        # 6542 primes below 2**16, minus 2 and 3
        assert report.primes == 6540

    def test_small_range(self):
        """Counts are right on a short range."""
        report = cross_validate(5, 30, rounds=10, rng=random.Random(1))
        assert report.checked == 13  # 5, 7, ..., 29
        assert report.primes == 8   # 5, 7, 11, 13, 17, 19, 23, 29

    def test_even_start(self):
        """An even start begins at the next odd value."""
        report = cross_validate(6, 10, rounds=5, rng=random.Random(2))
        assert report.checked == 2  # 7, 9

    def test_flags_disagreement(self, monkeypatch):
        """A wrong table entry is reported."""
        from primality.evaluation import agreement

        real = agreement.query_small_prime
        monkeypatch.setattr(agreement, "query_small_prime", lambda n: real(n) or n == 9)

        report = cross_validate(5, 12, rounds=5, rng=random.Random(3))
        assert not report.ok
        assert [d.n for d in report.disagreements] == [9]
        assert report.disagreements[0].verdicts['table'] is True
        assert report.disagreements[0].verdicts['trial_division'] is False

    def test_to_dict(self):
        """Report serializes to plain data."""
        report = AgreementReport(start=5, stop=7, rounds=1, checked=1, primes=1)
        d = report.to_dict()
        assert d['checked'] == 1
        assert d['disagreements'] == []

    def test_invalid_range(self):
        """Ranges outside the table are rejected."""
        with pytest.raises(ValueError):
            cross_validate(3, 100)
        with pytest.raises(ValueError):
            cross_validate(5, 70000)
        with pytest.raises(ValueError):
            cross_validate(100, 50)


class TestEstimateErrorRate:
    """Tests for estimate_error_rate."""

    def test_solovay_strassen_bound(self):
        """Solovay-Strassen meets its 1/2 bound on a Carmichael number."""
        result = estimate_error_rate(1729, 'solovay-strassen', trials=1000, rng=random.Random(4))
        assert result.bound == DETECTION_BOUNDS['solovay-strassen'] == 0.5
        assert result.detection_rate > 0.5
        assert result.consistent

    def test_miller_rabin_bound(self):
        """Miller-Rabin meets its 3/4 bound on a strong pseudoprime to base 2."""
        result = estimate_error_rate(2047, 'miller-rabin', trials=1000, rng=random.Random(5))
        assert result.bound == 0.75
        assert result.detection_rate > 0.75
        assert result.consistent

    def test_to_dict(self):
        """Derived fields are included."""
        result = estimate_error_rate(15, 'miller-rabin', trials=50, rng=random.Random(6))
        d = result.to_dict()
        assert d['trials'] == 50
        assert d['detection_rate'] == result.detection_rate
        assert d['consistent'] is True

    def test_rejects_prime(self):
        """Primes cannot be used."""
        with pytest.raises(ValueError):
            estimate_error_rate(97)

    def test_rejects_bad_arguments(self):
        """Unknown tests, even n and zero trials are rejected."""
        with pytest.raises(ValueError):
            estimate_error_rate(15, 'fermat')
        with pytest.raises(ValueError):
            estimate_error_rate(16)
        with pytest.raises(ValueError):
            estimate_error_rate(15, trials=0)
