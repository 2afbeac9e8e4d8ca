"""
Module: composition

Purpose:
    Provides the Composition and TransitionOutcome value types. A
    Composition records how many items of each kind one pack contained;
    a TransitionOutcome pairs a Composition with its exact draw probability.

Key Classes:
    - Composition: Per-kind item counts for one pack
    - TransitionOutcome: Composition + exact probability + frequency

Dependencies:
    - dataclasses (std)
    - fractions (std)

Used By:
    - enumeration.enumerator.CompositionEnumerator
    - probability.frequency
    - probability.engine.TransitionDistribution
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, Tuple


@dataclass(frozen=True, slots=True)
class Composition:
    """
    Counts of each kind in a single pack.

    ``parts[i]`` is the number of items of kind ``i``. The pack size is
    always calculated from the parts, never stored.

    Attributes:
        parts: Tuple of non-negative item counts, one per kind

    Invariants:
        - every part >= 0
        - at least one kind

    Example:
        >>> c = Composition((2, 1, 0))
        >>> c.pack_size
        3
        >>> c.kind_count
        3
    """

    parts: Tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate parts on construction."""
        if not isinstance(self.parts, tuple):
            # Accept any iterable but store a tuple so the value stays hashable
            object.__setattr__(self, "parts", tuple(self.parts))
        if not self.parts:
            raise ValueError("Composition needs at least one kind")
        for index, count in enumerate(self.parts):
            if not isinstance(count, int) or isinstance(count, bool):
                raise TypeError(f"Part {index} must be an int: {count!r}")
            if count < 0:
                raise ValueError(f"Part {index} cannot be negative: {count}")

    @classmethod
    def of(cls, *counts: int) -> Composition:
        """
        Build a composition from positional counts.

        Example:
            >>> Composition.of(3, 0)
            Composition(3, 0)
        """
        return cls(tuple(counts))

    @classmethod
    def single_kind(cls, kind_count: int, pack_size: int, kind: int = 0) -> Composition:
        """Composition where every item in the pack is ``kind``."""
        if not 0 <= kind < kind_count:
            raise ValueError(f"kind {kind} out of range for {kind_count} kinds")
        parts = [0] * kind_count
        parts[kind] = pack_size
        return cls(tuple(parts))

    @property
    def pack_size(self) -> int:
        """Total items in the pack (sum of parts)."""
        return sum(self.parts)

    @property
    def kind_count(self) -> int:
        """Number of kinds this composition covers."""
        return len(self.parts)

    def __iter__(self):
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __getitem__(self, index: int) -> int:
        return self.parts[index]

    def __repr__(self) -> str:
        return f"Composition({', '.join(str(p) for p in self.parts)})"


@dataclass(frozen=True, slots=True)
class TransitionOutcome:
    """
    One mutually exclusive outcome of opening a pack.

    Attributes:
        composition: Which kinds the pack contained
        probability: Exact probability of this composition
        frequency: Multinomial coefficient (orderings realising the composition)

    Invariants:
        - probability >= 0
        - frequency >= 1
    """

    composition: Composition
    probability: Fraction
    frequency: int

    def __post_init__(self) -> None:
        """Validate outcome on construction."""
        if not isinstance(self.probability, Fraction):
            raise TypeError(
                f"probability must be an exact Fraction, got {type(self.probability).__name__}"
            )
        if self.probability < 0:
            raise ValueError(f"probability cannot be negative: {self.probability}")
        if self.frequency < 1:
            raise ValueError(f"frequency must be positive: {self.frequency}")

    @property
    def parts(self) -> Tuple[int, ...]:
        """Shortcut to ``composition.parts``."""
        return self.composition.parts


def as_composition(value: Composition | Iterable[int]) -> Composition:
    """Coerce a tuple/list of counts to a Composition (pass-through otherwise)."""
    if isinstance(value, Composition):
        return value
    return Composition(tuple(value))
