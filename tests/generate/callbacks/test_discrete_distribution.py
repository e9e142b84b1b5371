"""
Unit tests for DiscreteDistribution.
"""

import numpy as np
import pytest

from assembly_toolkit.core.models import Section
from assembly_toolkit.generate.callbacks import DiscreteDistribution


class TestDiscreteDistribution:
    """Tests for normalization and drawing."""

    def test_probabilities_when_weighted_then_normalized(self):
        dist = DiscreteDistribution([1.0, 3.0])
        assert dist.probabilities.tolist() == pytest.approx([0.25, 0.75])
        assert dist.probabilities.sum() == pytest.approx(1.0)

    def test_probabilities_when_all_zero_then_uniform(self):
        dist = DiscreteDistribution([0.0, 0.0, 0.0, 0.0])
        assert dist.probabilities.tolist() == pytest.approx([0.25] * 4)

    def test_probabilities_when_weights_near_float_max_then_still_normalized(self):
        """Summing two weights near the float maximum would overflow."""
        dist = DiscreteDistribution([1e308, 1e308, 5e307])
        assert dist.probabilities.tolist() == pytest.approx([0.4, 0.4, 0.2])
        assert dist.draw(np.random.default_rng(0), exclude={0, 1}) == 2

    def test_remaining_when_excluded_then_renormalized(self):
        dist = DiscreteDistribution([1.0, 3.0, 4.0])
        assert dist.remaining({2}).tolist() == pytest.approx([0.25, 0.75, 0.0])

    def test_remaining_when_only_zero_weights_left_then_uniform_over_them(self):
        dist = DiscreteDistribution([0.0, 2.0, 0.0])
        assert dist.remaining({1}).tolist() == pytest.approx([0.5, 0.0, 0.5])

    def test_draw_when_all_excluded_then_none(self):
        dist = DiscreteDistribution([1.0, 1.0])
        assert dist.draw(np.random.default_rng(0), exclude={0, 1}) is None
        assert DiscreteDistribution([]).draw(np.random.default_rng(0)) is None

    def test_draw_when_one_left_then_returns_it(self):
        dist = DiscreteDistribution([5.0, 1.0, 1.0])
        assert dist.draw(np.random.default_rng(0), exclude={0, 2}) == 1

    def test_draw_when_repeated_then_follows_weights(self):
        # Arrange
        dist = DiscreteDistribution([1.0, 3.0])
        rng = np.random.default_rng(1234)

        # Act
        draws = [dist.draw(rng) for _ in range(4000)]

        # Assert
        assert draws.count(1) / len(draws) == pytest.approx(0.75, abs=0.05)

    @pytest.mark.parametrize(
        "weights",
        [[1.0, -1.0], [1.0, float("nan")], [[1.0], [2.0]]],
        ids=["negative", "nan", "two_dimensional"],
    )
    def test_init_when_invalid_weights_then_raises_error(self, weights):
        with pytest.raises(ValueError, match="weights must be"):
            DiscreteDistribution(weights)

    def test_from_sections_when_weight_absent_then_default(self, c1):
        sections = [Section.build("A", [c1], {"weight": 2.0}), Section.build("B", [c1])]
        dist = DiscreteDistribution.from_sections(sections, "weight", default=2.0)
        assert dist.probabilities.tolist() == pytest.approx([0.5, 0.5])
        assert len(dist) == 2
