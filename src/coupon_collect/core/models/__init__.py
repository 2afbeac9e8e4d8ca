"""
Core Models Package

Value types shared by enumeration and the probability engine.

Composition and TransitionOutcome are frozen dataclasses: they can be used
as dict keys, passed between threads, and are recomputed rather than
mutated. WeightedPopulation is the one builder-style object; it becomes
read-only once finalized.
"""

from .composition import Composition, TransitionOutcome, as_composition
from .population import WeightedPopulation, to_exact_weight

__all__ = [
    "Composition",
    "TransitionOutcome",
    "WeightedPopulation",
    "as_composition",
    "to_exact_weight",
]
