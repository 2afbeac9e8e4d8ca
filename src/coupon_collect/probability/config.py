"""
Module: probability.config

Purpose:
    Configuration dataclass for distribution assembly.
    Immutable configuration with validation on construction.

Key Classes:
    - DistributionConfig: How compute_distribution evaluates outcomes

Dependencies:
    - dataclasses (std)

Used By:
    - probability.engine.compute_distribution
    - core.models.population.WeightedPopulation.distribution
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DistributionConfig:
    """
    Configuration for distribution assembly (immutable).

    Attributes:
        max_workers: Worker processes used to evaluate outcome probabilities.
            1 evaluates inline in the calling process.
        chunk_size: Compositions handed to a worker at a time
        verify_total: Check the assembled probabilities sum to exactly 1
        warn_threshold: Log a warning when the composition space is at
            least this large

    Invariants:
        - max_workers >= 1
        - chunk_size >= 1
        - warn_threshold >= 1

    Example:
        >>> config = DistributionConfig(max_workers=4)
        >>> config.parallel
        True
    """

    max_workers: int = 1
    chunk_size: int = 64
    verify_total: bool = True
    warn_threshold: int = 1_000_000

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be positive: {self.max_workers}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive: {self.chunk_size}")
        if self.warn_threshold < 1:
            raise ValueError(f"warn_threshold must be positive: {self.warn_threshold}")

    @property
    def parallel(self) -> bool:
        """Whether outcomes are evaluated on a process pool."""
        return self.max_workers > 1
