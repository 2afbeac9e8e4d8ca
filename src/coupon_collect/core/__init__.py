"""
coupon_collect Core Package

Shared data models and the error taxonomy. Everything else in the package
builds on these types:

1. **Exact Values Only**
   - Weights, probabilities and frequencies are Fractions/ints, never floats.

2. **Calculated, Never Stored**
   - Pack size of a composition and probabilities of a population are
     always derived from their parts.

3. **Immutable Outcomes**
   - Compositions and outcomes are frozen dataclasses.
"""

from .errors import (
    ConfigurationError,
    ContractViolation,
    CouponCollectError,
    PopulationFrozenError,
)
from .models import Composition, TransitionOutcome, WeightedPopulation

__all__ = [
    "Composition",
    "ConfigurationError",
    "ContractViolation",
    "CouponCollectError",
    "PopulationFrozenError",
    "TransitionOutcome",
    "WeightedPopulation",
]
