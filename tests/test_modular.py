"""Tests for modular arithmetic."""

import pytest

from primality.core.bounds import U64_MAX
from primality.core.modular import modmul_u64, modpow_u64, modpow


class TestModmul:
    """Tests for modmul_u64."""

    def test_small_product(self):
        """Products that fit in 64 bits are reduced directly."""
        assert modmul_u64(7, 9, 10) == 3

    def test_overflowing_product(self):
        """Products wider than 64 bits are reduced correctly."""
        a = U64_MAX - 1
        b = U64_MAX - 2
        assert modmul_u64(a, b, U64_MAX) == (a * b) % U64_MAX

    def test_result_fits_width(self):
        """Result is always below the modulus."""
        m = 18446744073709551557
        assert modmul_u64(U64_MAX, U64_MAX, m) < m


class TestModpowU64:
    """Tests for modpow_u64."""

    def test_known_values(self):
        """Test against hand-computed powers."""
        assert modpow_u64(2, 10, 1000) == 24
        assert modpow_u64(3, 4, 5) == 1

    def test_modulus_one(self):
        """Every integer is 0 mod 1."""
        assert modpow_u64(12345, 678, 1) == 0
        assert modpow_u64(0, 0, 1) == 0

    def test_zero_exponent(self):
        """Exponent 0 gives 1."""
        assert modpow_u64(5, 0, 7) == 1

    def test_base_larger_than_modulus(self):
        """Base is reduced before exponentiation."""
        assert modpow_u64(17, 3, 5) == pow(17, 3, 5)

    def test_matches_builtin_near_limit(self):
        """Test against Python's pow on full-width operands."""
        n = U64_MAX
        d = n - 1
        while d % 2 == 0:
            d //= 2
        assert modpow_u64(n - 2, d, n) == pow(n - 2, d, n)

    def test_fermat_on_largest_u64_prime(self):
        """Fermat's little theorem holds for 2**64 - 59."""
        p = 18446744073709551557
        assert modpow_u64(2, p - 1, p) == 1

    def test_invalid_inputs(self):
        """Out-of-range operands raise ValueError."""
        with pytest.raises(ValueError):
            modpow_u64(2, 3, 0)
        with pytest.raises(ValueError):
            modpow_u64(2, -1, 7)
        with pytest.raises(ValueError):
            modpow_u64(U64_MAX + 1, 2, 7)


class TestModpow:
    """Tests for arbitrary-precision modpow."""

    def test_large_modulus(self):
        """Works past 64 bits."""
        m = 2**127 - 1
        assert modpow(3, m - 1, m) == 1

    def test_modulus_one(self):
        """Every integer is 0 mod 1."""
        assert modpow(9, 9, 1) == 0

    def test_type_error(self):
        """Non-integers are rejected."""
        with pytest.raises(TypeError):
            modpow(2.0, 3, 5)
