"""
Module: core.errors

Purpose:
    Error taxonomy for the draw-distribution core.

    Two kinds of failure exist and they are kept apart on purpose:

    1. **Configuration errors** - the caller supplied a population that
       admits no distribution (zero total weight). Recoverable, catchable
       via CouponCollectError.
    2. **Contract violations** - the caller misused the API (negative weight,
       malformed composition, defining kinds after finalization). These
       subclass AssertionError and are raised explicitly so they still fire
       under ``python -O``.

Key Classes:
    - CouponCollectError: Base of recoverable errors
    - ConfigurationError: Population admits no probability distribution
    - ContractViolation: Programming error in the caller
    - PopulationFrozenError: Population mutated after finalization

Used By:
    - core.models.population
    - probability.frequency
    - probability.engine
"""

from __future__ import annotations


class CouponCollectError(Exception):
    """Base class for recoverable errors raised by coupon_collect."""
    pass


class ConfigurationError(CouponCollectError):
    """
    Raised when a population cannot be normalized into probabilities.

    Attributes:
        total_weight: The offending total weight (zero)
        kind_count: Number of kinds defined when the error was raised
    """

    def __init__(self, message: str, *, total_weight=None, kind_count: int = 0):
        super().__init__(message)
        self.total_weight = total_weight
        self.kind_count = kind_count


class ContractViolation(AssertionError):
    """Caller broke an API precondition; not meant to be caught and retried."""
    pass


class PopulationFrozenError(ContractViolation):
    """A kind was defined after the population was finalized."""
    pass
