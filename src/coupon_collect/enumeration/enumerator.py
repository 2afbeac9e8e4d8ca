"""
Module: enumeration.enumerator

Purpose:
    Enumerate every weak composition of a pack size G into K kinds, each
    exactly once, without materializing the whole space.

Key Functions:
    - count_compositions(): C(G+K-1, K-1), the size of the space

Key Classes:
    - CompositionEnumerator: Lazy, single-pass iterator over compositions

Algorithm:
    Start at (G, 0, ..., 0). To advance, find the rightmost slot i <= K-2
    holding at least one item, move one unit from slot i to slot i+1 and
    sweep every item right of slot i+1 back into slot i+1. Stop after
    (0, ..., 0, G), when no such slot remains. Each step moves exactly one
    unit rightward across the i / i+1 boundary, so the walk is a strictly
    decreasing sequence in lexicographic order and visits every
    composition once.

Dependencies:
    - math (std)
    - coupon_collect.core.models: Composition

Used By:
    - core.models.population.WeightedPopulation.compositions
    - probability.engine.compute_distribution
"""

from __future__ import annotations

import logging
from math import comb
from typing import Iterator, List, Optional

from coupon_collect.core.models import Composition

logger = logging.getLogger(__name__)


def count_compositions(kind_count: int, pack_size: int) -> int:
    """
    Number of weak compositions of ``pack_size`` into ``kind_count`` parts.

    Example:
        >>> count_compositions(2, 3)
        4
        >>> count_compositions(3, 2)
        6
    """
    _validate_shape(kind_count, pack_size)
    return comb(pack_size + kind_count - 1, kind_count - 1)


def _validate_shape(kind_count: int, pack_size: int) -> None:
    for name, value in (("kind_count", kind_count), ("pack_size", pack_size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int: {value!r}")
    if kind_count < 1:
        raise ValueError(f"kind_count must be positive: {kind_count}")
    if pack_size < 0:
        raise ValueError(f"pack_size must be non-negative: {pack_size}")


class CompositionEnumerator:
    """
    Single-pass iterator over all compositions of a pack.

    K and G are captured at construction; the enumerator owns its cursor,
    so independent enumerators never interfere. Once exhausted it stays
    exhausted - build a new one to start over.

    Usage:
        for composition in CompositionEnumerator(kind_count=2, pack_size=3):
            ...

    Attributes:
        kind_count: Number of kinds (K)
        pack_size: Items per pack (G)
        total: Number of compositions this enumerator will yield
    """

    def __init__(self, kind_count: int, pack_size: int):
        _validate_shape(kind_count, pack_size)
        self.kind_count = kind_count
        self.pack_size = pack_size
        self.total = comb(pack_size + kind_count - 1, kind_count - 1)
        self._cursor: Optional[List[int]] = None
        self._exhausted = False
        self._emitted = 0

    @property
    def emitted(self) -> int:
        """How many compositions have been yielded so far."""
        return self._emitted

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> Iterator[Composition]:
        return self

    def __next__(self) -> Composition:
        if self._exhausted:
            raise StopIteration

        if self._cursor is None:
            first = Composition.single_kind(self.kind_count, self.pack_size)
            self._cursor = list(first.parts)
            self._emitted += 1
            logger.debug(
                f"Enumerating {self.total} compositions of {self.pack_size} "
                f"into {self.kind_count} kinds"
            )
            return first

        if not self._advance():
            self._exhausted = True
            self._cursor = None
            raise StopIteration

        self._emitted += 1
        return Composition(tuple(self._cursor))

    def _advance(self) -> bool:
        """Step the cursor to its successor; False once (0, ..., 0, G) is passed."""
        parts = self._cursor
        last = self.kind_count - 1

        i = last - 1
        while i >= 0 and parts[i] == 0:
            i -= 1
        if i < 0:
            return False

        tail = sum(parts[i + 1:])
        parts[i] -= 1
        parts[i + 1] = tail + 1
        for j in range(i + 2, self.kind_count):
            parts[j] = 0
        return True

    def __len__(self) -> int:
        """Compositions still to be yielded."""
        return self.total - self._emitted

    def __repr__(self) -> str:
        return (
            f"CompositionEnumerator(kind_count={self.kind_count}, "
            f"pack_size={self.pack_size}, emitted={self._emitted}/{self.total})"
        )
