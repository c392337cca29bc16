"""Numeric primitives shared by the primality tests."""

from primality.core.result import Primality
from primality.core.bounds import U16_MAX, U64_MAX, U128_MAX
from primality.core.modular import modmul_u64, modpow_u64, modpow
from primality.core.legendre import legendre_symbol_u64, legendre_symbol
from primality.core.witnesses import WITNESS_TABLE, select_witnesses
from primality.core.random_source import RandomSource, resolve_rng, seeded_rng
from primality.core.sieve import (
    prime_sieve_mask,
    query_small_prime,
    small_prime_table,
)

__all__ = [
    "Primality",
    "U16_MAX",
    "U64_MAX",
    "U128_MAX",
    "modmul_u64",
    "modpow_u64",
    "modpow",
    "legendre_symbol_u64",
    "legendre_symbol",
    "WITNESS_TABLE",
    "select_witnesses",
    "RandomSource",
    "resolve_rng",
    "seeded_rng",
    "prime_sieve_mask",
    "query_small_prime",
    "small_prime_table",
]
