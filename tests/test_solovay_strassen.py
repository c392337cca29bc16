"""Tests for Solovay-Strassen."""

import random

import pytest

from primality import Primality
from primality.algorithms.solovay_strassen import solovay_strassen_u64, solovay_strassen
from primality.core.sieve import query_small_prime

SMALL_ODD_PRIMES = [
    5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41,
    43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
]


@pytest.fixture(params=[solovay_strassen_u64, solovay_strassen], ids=["u64", "arbitrary"])
def variant(request):
    return request.param


class TestSolovayStrassen:
    """Tests shared by both variants."""

    def test_fixed_outcomes(self, variant):
        """0 and 1 are ZERO_OR_ONE; 2, 3 and 5 are PROBABLY_PRIME."""
        assert variant(0, 3) is Primality.ZERO_OR_ONE
        assert variant(1, 3) is Primality.ZERO_OR_ONE
        for n in [2, 3, 5]:
            assert variant(n, 3) is Primality.PROBABLY_PRIME

    def test_known_values(self, variant):
        """7 and 11 pass; 9 and 15 fail."""
        rng = random.Random(7)
        assert variant(7, 3, rng) is Primality.PROBABLY_PRIME
        assert variant(9, 3, rng) is Primality.COMPOSITE
        assert variant(11, 3, rng) is Primality.PROBABLY_PRIME
        assert variant(15, 3, rng) is Primality.COMPOSITE

    def test_nine_is_always_composite(self, variant):
        """Every base in [2, 7] exposes 9."""
        rng = random.Random(9)
        for _ in range(200):
            assert variant(9, 1, rng) is Primality.COMPOSITE

    def test_small_primes(self, variant):
        """Primes never fail a round."""
        rng = random.Random(11)
        for p in SMALL_ODD_PRIMES:
            assert variant(p, 8, rng) is Primality.PROBABLY_PRIME

    def test_matches_table(self, variant):
        """Agrees with the lookup table for odd n in [5, 65535)."""
        rng = random.Random(13)
        for n in range(5, 65535, 2):
            assert bool(variant(n, 20, rng)) == query_small_prime(n), f"n={n}"

    def test_never_returns_prime(self, variant):
        """The strongest answer is PROBABLY_PRIME."""
        assert variant(65521, 10, random.Random(17)) is Primality.PROBABLY_PRIME

    def test_preconditions(self, variant):
        """Even n other than 0 and 2, and k < 1, are rejected."""
        with pytest.raises(ValueError):
            variant(4, 3)
        with pytest.raises(ValueError):
            variant(100, 3)
        with pytest.raises(ValueError):
            variant(97, 0)
        with pytest.raises(ValueError):
            variant(-7, 3)


class TestSolovayStrassenU64:
    """Tests specific to the 64-bit variant."""

    def test_largest_u64_prime(self):
        """2**64 - 59 passes."""
        rng = random.Random(19)
        assert solovay_strassen_u64(18446744073709551557, 10, rng) is Primality.PROBABLY_PRIME

    def test_out_of_range(self):
        """Values above 64 bits are rejected."""
        with pytest.raises(ValueError):
            solovay_strassen_u64(2**64 + 1, 3)


class TestSolovayStrassenArbitrary:
    """Tests specific to the arbitrary-precision variant."""

    def test_mersenne_prime(self):
        """2**127 - 1 passes."""
        rng = random.Random(23)
        assert solovay_strassen(2**127 - 1, 10, rng) is Primality.PROBABLY_PRIME

    def test_large_composite(self):
        """Product of two Mersenne primes fails."""
        rng = random.Random(29)
        assert solovay_strassen((2**61 - 1) * (2**89 - 1), 10, rng) is Primality.COMPOSITE

    def test_bases_in_range(self):
        """Bases are drawn from [2, n - 2]."""
        class Recorder(random.Random):
            def __init__(self):
                super().__init__(31)
                self.calls = []

            def randint(self, a, b):
                self.calls.append((a, b))
                return super().randint(a, b)

        rng = Recorder()
        solovay_strassen(101, 4, rng)
        assert rng.calls == [(2, 99)] * 4


class TestSoundness:
    """Statistical check of the 1/2 per-round bound."""

    def test_detection_rate_on_carmichael(self):
        """A single round catches 1729 at least half the time."""
        rng = random.Random(37)
        trials = 2000
        detected = sum(
            solovay_strassen(1729, 1, rng) is Primality.COMPOSITE for _ in range(trials)
        )
        assert detected / trials > 0.5
