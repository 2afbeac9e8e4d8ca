"""
Module: probability

Purpose:
    Exact multinomial probabilities for one pack opening. Turns a
    WeightedPopulation into the full set of TransitionOutcomes.

Key Functions:
    - frequency(): Multinomial coefficient of a composition
    - probability(): Exact probability of a composition
    - compute_distribution(): Every outcome of one pack

Key Classes:
    - DistributionConfig: Evaluation settings
    - TransitionDistribution: Immutable outcome container

Dependencies:
    - coupon_collect.core: Models and errors
    - coupon_collect.enumeration: Composition enumeration
"""

from .config import DistributionConfig
from .engine import TransitionDistribution, compute_distribution
from .frequency import check_composition, frequency, probability

__all__ = [
    "DistributionConfig",
    "TransitionDistribution",
    "check_composition",
    "compute_distribution",
    "frequency",
    "probability",
]
