"""
Module: probability.frequency

Purpose:
    Exact multinomial frequency and probability of a single composition.

Key Functions:
    - frequency(): Number of orderings of G labeled draws giving a composition
    - probability(): Multinomial pmf of a composition under given probabilities
    - check_composition(): Contract check shared by both

Dependencies:
    - fractions (std)
    - coupon_collect.core: Composition, WeightedPopulation, ContractViolation

Used By:
    - probability.engine.compute_distribution
"""

from __future__ import annotations

from fractions import Fraction
from typing import Iterable, Optional, Sequence, Tuple, Union

from coupon_collect.core.errors import ContractViolation
from coupon_collect.core.models import Composition, WeightedPopulation, as_composition

CompositionLike = Union[Composition, Iterable[int]]


def check_composition(
    composition: Composition,
    pack_size: int,
    kind_count: Optional[int] = None,
) -> None:
    """
    Reject compositions that cannot belong to this pack.

    Raises:
        ContractViolation: If the parts do not sum to pack_size, or the
            number of parts differs from kind_count (when given)
    """
    if kind_count is not None and composition.kind_count != kind_count:
        raise ContractViolation(
            f"{composition!r} has {composition.kind_count} parts, expected {kind_count}"
        )
    if composition.pack_size != pack_size:
        raise ContractViolation(
            f"{composition!r} sums to {composition.pack_size}, expected pack size {pack_size}"
        )


def frequency(composition: CompositionLike, pack_size: int) -> int:
    """
    Multinomial coefficient G! / (parts[0]! * ... * parts[K-1]!).

    Built up one item at a time - multiply by the running item count,
    divide by the running count within the current kind - so no factorial
    is ever formed and every intermediate value is a whole number.

    Args:
        composition: Per-kind counts
        pack_size: Configured pack size G

    Returns:
        The coefficient as an int

    Raises:
        ContractViolation: If the parts do not sum to pack_size

    Example:
        >>> frequency((2, 1), 3)
        3
    """
    composition = as_composition(composition)
    check_composition(composition, pack_size)

    value = Fraction(1)
    count = 0
    for part in composition.parts:
        for j in range(1, part + 1):
            value *= count + 1
            value /= j
            count += 1

    # After every step value is itself a multinomial coefficient
    assert value.denominator == 1, value
    return value.numerator


def _resolve_probabilities(
    source: Union[WeightedPopulation, Sequence[Fraction]],
    pack_size: Optional[int],
) -> Tuple[Tuple[Fraction, ...], int]:
    if isinstance(source, WeightedPopulation):
        if pack_size is not None and pack_size != source.pack_size:
            raise ContractViolation(
                f"pack_size {pack_size} disagrees with population pack size {source.pack_size}"
            )
        return source.probabilities(), source.pack_size

    if pack_size is None:
        raise TypeError("pack_size is required when passing raw probabilities")
    probabilities = tuple(source)
    for index, p in enumerate(probabilities):
        if not isinstance(p, (Fraction, int)) or isinstance(p, bool):
            raise TypeError(f"Probability {index} must be exact, got {p!r}")
        if p < 0:
            raise ContractViolation(f"Probability {index} cannot be negative: {p}")
    total = sum(probabilities, Fraction(0))
    if total != 1:
        raise ContractViolation(f"Probabilities sum to {total}, expected 1")
    return tuple(Fraction(p) for p in probabilities), pack_size


def probability(
    composition: CompositionLike,
    source: Union[WeightedPopulation, Sequence[Fraction]],
    pack_size: Optional[int] = None,
) -> Fraction:
    """
    Exact probability that one pack has exactly this composition.

    frequency(composition) * prod(p_i ** parts[i])

    Args:
        composition: Per-kind counts
        source: A WeightedPopulation, or its already-normalized probabilities
        pack_size: Required with raw probabilities; checked against the
            population otherwise

    Returns:
        Exact probability as a Fraction

    Raises:
        ContractViolation: Wrong number of parts or wrong part sum, or raw
            probabilities that are negative or do not sum to exactly 1
        ConfigurationError: Population with zero total weight

    Example:
        >>> probability((2, 1), [Fraction(1, 2), Fraction(1, 2)], 3)
        Fraction(3, 8)
    """
    composition = as_composition(composition)
    probabilities, pack_size = _resolve_probabilities(source, pack_size)
    check_composition(composition, pack_size, kind_count=len(probabilities))
    return _weighted_probability(composition, probabilities, pack_size)


def _weighted_probability(
    composition: Composition,
    probabilities: Tuple[Fraction, ...],
    pack_size: int,
) -> Fraction:
    """probability() minus argument handling; inputs already checked."""
    return frequency(composition, pack_size) * _weight_product(composition, probabilities)


def _weight_product(composition: Composition, probabilities: Tuple[Fraction, ...]) -> Fraction:
    """Probability of one particular ordering: prod(p_i ** parts[i])."""
    result = Fraction(1)
    for p, part in zip(probabilities, composition.parts):
        if part:
            result *= p ** part
    return result
