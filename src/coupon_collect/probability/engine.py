"""
Module: probability.engine

Purpose:
    Assemble the complete single-draw distribution of a population: one
    TransitionOutcome per composition, with exact probabilities summing
    to 1.

Key Functions:
    - compute_distribution(): Main entry point

Key Classes:
    - TransitionDistribution: Immutable container of all outcomes

Algorithm:
    1. Normalize the population's weights (fails on zero total weight)
    2. Snapshot K and G and start a fresh CompositionEnumerator
    3. Map each composition to (frequency, probability), inline or on a
       process pool in fixed-size chunks
    4. Assemble outcomes in enumeration order, optionally verify the total

Dependencies:
    - concurrent.futures: Optional process pool evaluation
    - numpy: Float export for numeric consumers
    - coupon_collect.enumeration: CompositionEnumerator
    - probability.frequency: frequency / probability

Used By:
    - core.models.population.WeightedPopulation.distribution
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ProcessPoolExecutor
from dataclasses import dataclass
from fractions import Fraction
from functools import cached_property
from itertools import islice
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from coupon_collect.core.errors import ContractViolation
from coupon_collect.core.models import (
    Composition,
    TransitionOutcome,
    WeightedPopulation,
    as_composition,
)

from .config import DistributionConfig
from .frequency import _weight_product, frequency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionDistribution:
    """
    Every possible outcome of opening one pack, with exact probabilities.

    Outcomes are mutually exclusive and exhaustive, stored in enumeration
    order. Lookups by composition go through a lazily built index.

    Attributes:
        pack_size: Items per pack (G)
        kind_count: Number of kinds (K)
        outcomes: One TransitionOutcome per composition

    Invariants:
        - len(outcomes) == C(G+K-1, K-1)
        - sum of outcome probabilities == 1 exactly

    Example:
        >>> dist = WeightedPopulation.from_weights(3, [1, 1]).distribution()
        >>> dist.probability_of((2, 1))
        Fraction(3, 8)
    """

    pack_size: int
    kind_count: int
    outcomes: Tuple[TransitionOutcome, ...]

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @cached_property
    def total(self) -> Fraction:
        """Exact sum of all outcome probabilities."""
        return sum((o.probability for o in self.outcomes), Fraction(0))

    @cached_property
    def _index(self) -> Dict[Tuple[int, ...], TransitionOutcome]:
        return {o.composition.parts: o for o in self.outcomes}

    @property
    def compositions(self) -> Tuple[Composition, ...]:
        return tuple(o.composition for o in self.outcomes)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def outcome_for(self, composition: Composition | Iterable[int]) -> TransitionOutcome:
        """
        Outcome for a composition.

        Raises:
            KeyError: If the composition is not part of this distribution
        """
        parts = as_composition(composition).parts
        try:
            return self._index[parts]
        except KeyError:
            raise KeyError(
                f"{parts} is not a composition of {self.pack_size} into {self.kind_count} kinds"
            ) from None

    def probability_of(self, composition: Composition | Iterable[int]) -> Fraction:
        """Exact probability of a composition (KeyError if not in the distribution)."""
        return self.outcome_for(composition).probability

    def as_dict(self) -> Dict[Composition, Fraction]:
        """Mapping of composition to probability, in enumeration order."""
        return {o.composition: o.probability for o in self.outcomes}

    def expected_counts(self) -> Tuple[Fraction, ...]:
        """
        Exact expected number of items of each kind in one pack.

        Equals pack_size * probabilities[i] for a well-formed distribution.
        """
        totals = [Fraction(0)] * self.kind_count
        for outcome in self.outcomes:
            for i, part in enumerate(outcome.composition.parts):
                if part:
                    totals[i] += outcome.probability * part
        return tuple(totals)

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Float export for numeric consumers.

        Returns:
            (compositions, probabilities): an int64 array of shape (N, K)
            and a float64 array of shape (N,), rows in enumeration order
        """
        compositions = np.array(
            [o.composition.parts for o in self.outcomes], dtype=np.int64
        ).reshape(len(self.outcomes), self.kind_count)
        probabilities = np.array(
            [float(o.probability) for o in self.outcomes], dtype=np.float64
        )
        return compositions, probabilities

    def __iter__(self) -> Iterator[TransitionOutcome]:
        return iter(self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __contains__(self, composition: object) -> bool:
        try:
            parts = as_composition(composition).parts  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        return parts in self._index


def _evaluate(
    composition: Composition,
    probabilities: Tuple[Fraction, ...],
    pack_size: int,
) -> TransitionOutcome:
    count = frequency(composition, pack_size)
    return TransitionOutcome(
        composition=composition,
        probability=count * _weight_product(composition, probabilities),
        frequency=count,
    )


def _evaluate_chunk(
    chunk: List[Composition],
    probabilities: Tuple[Fraction, ...],
    pack_size: int,
) -> List[TransitionOutcome]:
    return [_evaluate(c, probabilities, pack_size) for c in chunk]


def _chunked(items: Iterator[Composition], size: int) -> Iterator[List[Composition]]:
    while True:
        chunk = list(islice(items, size))
        if not chunk:
            return
        yield chunk


def compute_distribution(
    population: WeightedPopulation,
    config: Optional[DistributionConfig] = None,
) -> TransitionDistribution:
    """
    Compute the exact single-draw distribution of a population.

    Main entry point for the probability engine. Finalizes the population.

    Args:
        population: Kinds, weights and pack size
        config: Evaluation settings (defaults to DistributionConfig())

    Returns:
        TransitionDistribution with one outcome per composition

    Raises:
        ConfigurationError: If the population's total weight is zero
        ContractViolation: If verify_total is set and the total is not 1

    Example:
        >>> pop = WeightedPopulation.from_weights(1, [1, 1, 1])
        >>> [o.probability for o in compute_distribution(pop)]
        [Fraction(1, 3), Fraction(1, 3), Fraction(1, 3)]
    """
    config = config or DistributionConfig()

    probabilities = population.probabilities()
    enumerator = population.compositions()
    pack_size = enumerator.pack_size

    if enumerator.total >= config.warn_threshold:
        logger.warning(
            f"Distribution has {enumerator.total} compositions "
            f"({enumerator.kind_count} kinds, pack size {pack_size}); this may be slow"
        )

    if config.parallel:
        outcomes: List[TransitionOutcome] = []
        # Fraction arithmetic is CPU-bound, so chunks go to worker processes
        with ProcessPoolExecutor(max_workers=config.max_workers) as executor:
            futures: List[Future] = [
                executor.submit(_evaluate_chunk, chunk, probabilities, pack_size)
                for chunk in _chunked(enumerator, config.chunk_size)
            ]
            # Futures are kept in submission order, so assembly is deterministic
            for future in futures:
                outcomes.extend(future.result())
    else:
        outcomes = [_evaluate(c, probabilities, pack_size) for c in enumerator]

    distribution = TransitionDistribution(
        pack_size=pack_size,
        kind_count=enumerator.kind_count,
        outcomes=tuple(outcomes),
    )
    logger.debug(
        f"Computed distribution: {len(distribution)} outcomes, "
        f"{config.max_workers} worker(s)"
    )

    if config.verify_total and distribution.total != 1:
        raise ContractViolation(
            f"Distribution probabilities sum to {distribution.total}, expected 1"
        )
    return distribution
