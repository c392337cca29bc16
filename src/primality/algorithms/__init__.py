"""Primality test algorithms."""

from primality.algorithms.trial_division import (
    trial_division_u64,
    trial_division_u128,
    trial_division,
)
from primality.algorithms.miller_rabin import miller_rabin_u64, miller_rabin
from primality.algorithms.solovay_strassen import solovay_strassen_u64, solovay_strassen
from primality.algorithms.aks import aks_reference

__all__ = [
    "trial_division_u64",
    "trial_division_u128",
    "trial_division",
    "miller_rabin_u64",
    "miller_rabin",
    "solovay_strassen_u64",
    "solovay_strassen",
    "aks_reference",
]
