"""
Tests for distribution assembly.

Covers the worked scenarios, the exact-total invariant, process-pool
evaluation, and the TransitionDistribution query surface.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from fractions import Fraction
from math import comb

import numpy as np
import pytest

from coupon_collect import (
    ConfigurationError,
    DistributionConfig,
    TransitionDistribution,
    WeightedPopulation,
    compute_distribution,
)
from coupon_collect.core.models import Composition
from coupon_collect.probability import engine


class TestComputeDistribution:
    """Tests for compute_distribution()."""

    def test_compute_when_fair_coin_three_items_then_binomial_distribution(self, fair_coin_pack):
        dist = compute_distribution(fair_coin_pack)

        assert [(o.parts, o.frequency, o.probability) for o in dist] == [
            ((3, 0), 1, Fraction(1, 8)),
            ((2, 1), 3, Fraction(3, 8)),
            ((1, 2), 3, Fraction(3, 8)),
            ((0, 3), 1, Fraction(1, 8)),
        ]
        assert dist.total == 1

    def test_compute_when_three_kinds_one_item_then_uniform(self, single_draw_three_kinds):
        dist = compute_distribution(single_draw_three_kinds)

        assert {o.parts for o in dist} == {(1, 0, 0), (0, 1, 0), (0, 0, 1)}
        assert all(o.frequency == 1 for o in dist)
        assert all(o.probability == Fraction(1, 3) for o in dist)

    def test_compute_when_uneven_weights_then_total_exactly_one(self, rarity_pack):
        dist = compute_distribution(rarity_pack)

        assert len(dist) == comb(5 + 4 - 1, 4 - 1)
        assert dist.total == 1
        assert all(isinstance(o.probability, Fraction) for o in dist)

    def test_compute_when_zero_total_weight_then_raises_configuration_error(self):
        pop = WeightedPopulation.from_weights(3, [0, 0, 0])
        with pytest.raises(ConfigurationError):
            compute_distribution(pop)

    def test_compute_when_pooled_then_matches_sequential(self, rarity_pack):
        """Pooled evaluation assembles outcomes in enumeration order."""
        sequential = compute_distribution(rarity_pack)
        pooled = compute_distribution(
            rarity_pack, DistributionConfig(max_workers=4, chunk_size=3)
        )
        assert pooled.outcomes == sequential.outcomes

    def test_compute_when_parallel_then_runs_on_process_pool(self, monkeypatch):
        """Chunks are evaluated in worker processes, not threads."""
        created = []

        class RecordingPool(ProcessPoolExecutor):
            def __init__(self, *args, **kwargs):
                super().__init__(*args, **kwargs)
                created.append(kwargs.get("max_workers"))

        monkeypatch.setattr(engine, "ProcessPoolExecutor", RecordingPool)
        pop = WeightedPopulation.from_weights(6, [1, 2, 3, 4])

        pooled = compute_distribution(pop, DistributionConfig(max_workers=2, chunk_size=5))
        sequential = compute_distribution(pop)

        assert created == [2]
        assert pooled.outcomes == sequential.outcomes
        assert pooled.total == 1

    def test_compute_when_large_space_then_logs_warning(self, fair_coin_pack, caplog):
        with caplog.at_level(logging.WARNING, logger="coupon_collect.probability.engine"):
            compute_distribution(fair_coin_pack, DistributionConfig(warn_threshold=2))
        assert "4 compositions" in caplog.text

    def test_compute_when_verify_disabled_then_still_exact(self, fair_coin_pack):
        dist = compute_distribution(fair_coin_pack, DistributionConfig(verify_total=False))
        assert dist.total == 1


class TestTransitionDistribution:
    """Tests for TransitionDistribution queries."""

    @pytest.fixture
    def dist(self, fair_coin_pack) -> TransitionDistribution:
        return fair_coin_pack.distribution()

    def test_probability_of_when_known_composition_then_returns_probability(self, dist):
        assert dist.probability_of((2, 1)) == Fraction(3, 8)
        assert dist.probability_of(Composition.of(0, 3)) == Fraction(1, 8)

    def test_probability_of_when_wrong_sum_then_raises_key_error(self, dist):
        with pytest.raises(KeyError, match="not a composition of 3"):
            dist.probability_of((1, 1))

    def test_contains_when_checked_then_matches_membership(self, dist):
        assert (3, 0) in dist
        assert Composition.of(1, 2) in dist
        assert [2, 1] in dist
        assert (2, 2) not in dist
        assert [1, -2] not in dist
        assert 5 not in dist
        assert "3,0" not in dist

    def test_as_dict_when_called_then_keyed_by_composition(self, dist):
        mapping = dist.as_dict()
        assert list(mapping) == list(dist.compositions)
        assert mapping[Composition.of(1, 2)] == Fraction(3, 8)

    def test_expected_counts_when_computed_then_pack_size_times_probability(self, rarity_pack):
        dist = rarity_pack.distribution()
        expected = tuple(5 * p for p in rarity_pack.probabilities())
        assert dist.expected_counts() == expected

    def test_to_arrays_when_called_then_numpy_shapes_and_values(self, dist):
        compositions, probabilities = dist.to_arrays()

        assert compositions.dtype == np.int64
        assert compositions.shape == (4, 2)
        assert probabilities.shape == (4,)
        np.testing.assert_array_equal(compositions[1], [2, 1])
        np.testing.assert_allclose(probabilities, [0.125, 0.375, 0.375, 0.125])
        assert probabilities.sum() == pytest.approx(1.0)

    def test_distribution_when_frozen_then_immutable(self, dist):
        with pytest.raises(AttributeError):
            dist.pack_size = 4  # type: ignore
