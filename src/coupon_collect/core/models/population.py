"""
Module: population

Purpose:
    Provides WeightedPopulation - the per-kind relative weights and the
    pack size for one pack type. Weights are stored as exact rationals and
    normalized into probabilities on demand.

Key Functions:
    - WeightedPopulation.define_kind(weight): Append a kind
    - WeightedPopulation.probabilities(): Exact normalized weights
    - WeightedPopulation.from_weights(pack_size, weights): Build in one call
    - WeightedPopulation.compositions(): Fresh enumerator for this population
    - WeightedPopulation.distribution(): Full single-draw distribution

Dependencies:
    - fractions (std)
    - decimal (std)
    - ..errors

Used By:
    - probability.engine.compute_distribution
    - probability.frequency.probability

Lifecycle:
    Built with define_kind() calls, then finalized. Finalization happens
    on the first compositions()/distribution() call or explicitly via
    finalize(). Kinds cannot be added afterwards.
"""

from __future__ import annotations

import logging
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple, Union

from ..errors import ConfigurationError, ContractViolation, PopulationFrozenError

if TYPE_CHECKING:
    from ...enumeration.enumerator import CompositionEnumerator
    from ...probability.config import DistributionConfig
    from ...probability.engine import TransitionDistribution

logger = logging.getLogger(__name__)

WeightLike = Union[int, Fraction, Decimal, str]


def to_exact_weight(weight: WeightLike) -> Fraction:
    """
    Convert a weight to an exact Fraction.

    Floats are refused: a binary float is rarely the rational the caller
    meant, so the caller has to spell it as a Fraction, Decimal or string.

    Raises:
        TypeError: For floats, bools and non-numeric types
        ValueError: For strings that do not parse as a rational, and for
            infinite or NaN Decimals
    """
    if isinstance(weight, bool) or isinstance(weight, float):
        raise TypeError(
            f"Weights must be exact (int, Fraction, Decimal or str), got {weight!r}"
        )
    if isinstance(weight, (numbers.Rational, Decimal, str)):
        try:
            return Fraction(weight)
        except OverflowError:
            raise ValueError(f"Weight must be finite: {weight!r}") from None
    raise TypeError(f"Unsupported weight type: {type(weight).__name__}")


class WeightedPopulation:
    """
    Relative weights of K item kinds, drawn G at a time.

    Kind indices are assigned in definition order and index every other
    structure (compositions, probabilities, outcomes).

    Attributes:
        pack_size: Items drawn per pack (G), fixed at construction

    Invariants:
        - pack_size >= 1
        - every weight >= 0
        - probabilities() sums to exactly 1

    Example:
        >>> pop = WeightedPopulation(3)
        >>> pop.define_kind(1)
        0
        >>> pop.define_kind(1)
        1
        >>> pop.probabilities()
        (Fraction(1, 2), Fraction(1, 2))
    """

    def __init__(self, pack_size: int):
        if isinstance(pack_size, bool) or not isinstance(pack_size, int):
            raise TypeError(f"pack_size must be an int: {pack_size!r}")
        if pack_size < 1:
            raise ValueError(f"pack_size must be positive: {pack_size}")
        self._pack_size = pack_size
        self._weights: List[Fraction] = []
        self._finalized = False

    @classmethod
    def from_weights(cls, pack_size: int, weights: Iterable[WeightLike]) -> WeightedPopulation:
        """
        Build a population from an iterable of weights in kind order.

        Example:
            >>> WeightedPopulation.from_weights(3, [1, 1]).kind_count
            2
        """
        population = cls(pack_size)
        for weight in weights:
            population.define_kind(weight)
        return population

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def define_kind(self, weight: WeightLike) -> int:
        """
        Append a new kind with the given relative weight.

        Args:
            weight: Exact non-negative relative weight

        Returns:
            The index assigned to the new kind

        Raises:
            ContractViolation: If weight is negative
            PopulationFrozenError: If the population is already finalized
        """
        if self._finalized:
            raise PopulationFrozenError(
                f"Cannot define kind {len(self._weights)}: population is finalized"
            )
        exact = to_exact_weight(weight)
        if exact < 0:
            raise ContractViolation(f"Kind weight cannot be negative: {exact}")
        self._weights.append(exact)
        index = len(self._weights) - 1
        logger.debug(f"Defined kind {index} with weight {exact}")
        return index

    def finalize(self) -> WeightedPopulation:
        """Freeze the population; further define_kind() calls fail."""
        if not self._finalized:
            self._finalized = True
            logger.debug(
                f"Finalized population: {self.kind_count} kinds, pack size {self._pack_size}"
            )
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def pack_size(self) -> int:
        return self._pack_size

    @property
    def kind_count(self) -> int:
        return len(self._weights)

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    @property
    def weights(self) -> Tuple[Fraction, ...]:
        """Raw relative weights in kind order."""
        return tuple(self._weights)

    @property
    def total_weight(self) -> Fraction:
        return sum(self._weights, Fraction(0))

    def probabilities(self) -> Tuple[Fraction, ...]:
        """
        Normalize weights into exact probabilities.

        Returns:
            Tuple of K Fractions summing to exactly 1

        Raises:
            ConfigurationError: If the total weight is zero (or no kinds exist)
        """
        total = self.total_weight
        if total == 0:
            raise ConfigurationError(
                f"Total weight of {self.kind_count} kinds is zero; "
                "no probability distribution is defined",
                total_weight=total,
                kind_count=self.kind_count,
            )
        return tuple(w / total for w in self._weights)

    # ─────────────────────────────────────────────────────────────────────────
    # Enumeration & distribution
    # ─────────────────────────────────────────────────────────────────────────

    def compositions(self) -> CompositionEnumerator:
        """
        Fresh enumerator over every pack composition of this population.

        Finalizes the population.
        """
        from ...enumeration.enumerator import CompositionEnumerator

        if self.kind_count == 0:
            raise ConfigurationError("Population has no kinds to enumerate", kind_count=0)
        self.finalize()
        return CompositionEnumerator(self.kind_count, self._pack_size)

    def distribution(self, config: Optional[DistributionConfig] = None) -> TransitionDistribution:
        """
        Exact single-draw distribution of this population.

        Finalizes the population. See probability.engine.compute_distribution.
        """
        from ...probability.engine import compute_distribution

        return compute_distribution(self, config)

    def __repr__(self) -> str:
        weights = ", ".join(str(w) for w in self._weights)
        return f"WeightedPopulation(pack_size={self._pack_size}, weights=[{weights}])"
