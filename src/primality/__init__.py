"""primality - deterministic and probabilistic primality tests."""

__version__ = "0.1.0"

from primality.core.result import Primality
from primality.core.sieve import query_small_prime
from primality.algorithms.trial_division import (
    trial_division_u64,
    trial_division_u128,
    trial_division,
)
from primality.algorithms.miller_rabin import miller_rabin_u64, miller_rabin
from primality.algorithms.solovay_strassen import solovay_strassen_u64, solovay_strassen
from primality.algorithms.aks import aks_reference
from primality.checker import check, primality_array

__all__ = [
    "Primality",
    "query_small_prime",
    "trial_division_u64",
    "trial_division_u128",
    "trial_division",
    "miller_rabin_u64",
    "miller_rabin",
    "solovay_strassen_u64",
    "solovay_strassen",
    "aks_reference",
    "check",
    "primality_array",
]
