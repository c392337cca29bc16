"""Tools for checking the tests against each other and against their bounds.

This module provides tools to:
1. Cross-validate every test against the small-prime table
2. Estimate per-round detection rates of the probabilistic tests
"""

from primality.evaluation.agreement import (
    AgreementReport,
    Disagreement,
    cross_validate,
)
from primality.evaluation.soundness import (
    DETECTION_BOUNDS,
    SoundnessResult,
    estimate_error_rate,
)

__all__ = [
    # Agreement
    "AgreementReport",
    "Disagreement",
    "cross_validate",
    # Soundness
    "DETECTION_BOUNDS",
    "SoundnessResult",
    "estimate_error_rate",
]
