"""
Unit tests for fitness-proportional selection.

Tests cover:
- Weight validation
- Selection frequencies follow fitness ratios
- Zero-weight genomes and the zero-fitness policies
- Determinism under a fixed seed
- Independence of drawn copies
"""

import numpy as np
import pytest

from src.evolution.core.exceptions import InvalidFitnessError, ZeroFitnessError
from src.evolution.core.genome import ParameterGenome
from src.evolution.core.selection import FitnessProportionalSelector, validate_weights


# Chi-square critical value, 1 degree of freedom, p = 0.001
CHI2_CRITICAL_1DF = 10.828


class TestWeightValidation:
    """Test suite for fitness weight validation."""

    def test_valid_weights(self):
        weights = validate_weights([0.0, 1.0, 2.5], 3)

        assert weights.dtype == float
        assert weights.tolist() == [0.0, 1.0, 2.5]

    def test_length_mismatch(self):
        with pytest.raises(InvalidFitnessError):
            validate_weights([1.0, 2.0], 3)

    def test_negative_weight(self):
        with pytest.raises(InvalidFitnessError) as excinfo:
            validate_weights([1.0, -0.5, 2.0], 3)

        assert excinfo.value.index == 1
        assert isinstance(excinfo.value, ValueError)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
    def test_non_finite_weight(self, bad):
        with pytest.raises(InvalidFitnessError) as excinfo:
            validate_weights([1.0, 1.0, bad], 3)

        assert excinfo.value.index == 2


class TestFitnessProportionalSelector:
    """Test suite for roulette-wheel resampling."""

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValueError):
            FitnessProportionalSelector(zero_fitness_policy="renormalize")

    def test_probabilities_proportional_to_weights(self):
        selector = FitnessProportionalSelector(rng=np.random.default_rng(0))

        np.testing.assert_allclose(selector.probabilities([1.0, 3.0], 2), [0.25, 0.75])

    def test_selection_respects_weights(self):
        """A 99:1 fitness ratio selects the fitter genome ~99% of the time."""
        selector = FitnessProportionalSelector(rng=np.random.default_rng(2024))
        draws = 100_000

        indices = selector.rng.choice(2, size=draws, p=selector.probabilities([99.0, 1.0], 2))
        observed = np.bincount(indices, minlength=2)
        expected = np.array([0.99, 0.01]) * draws
        chi_square = float(np.sum((observed - expected) ** 2 / expected))

        assert chi_square < CHI2_CRITICAL_1DF

    def test_select_indices_respects_weights(self):
        """Repeated generation-sized draws follow the same 99:1 ratio."""
        selector = FitnessProportionalSelector(rng=np.random.default_rng(99))
        counts = np.zeros(2)
        for _ in range(20_000):
            counts += np.bincount(selector.select_indices([99.0, 1.0], 2), minlength=2)

        total = counts.sum()
        expected = np.array([0.99, 0.01]) * total
        chi_square = float(np.sum((counts - expected) ** 2 / expected))

        assert chi_square < CHI2_CRITICAL_1DF

    def test_zero_weight_genome_never_drawn(self):
        selector = FitnessProportionalSelector(rng=np.random.default_rng(3))
        population = [ParameterGenome(m=0.0), ParameterGenome(m=1.0)]

        for _ in range(200):
            selected = selector.select(population, [0.0, 1.0])
            assert all(genome.m == 1.0 for genome in selected)

    def test_all_zero_weights_uniform(self):
        selector = FitnessProportionalSelector(rng=np.random.default_rng(4))

        assert selector.probabilities([0.0, 0.0, 0.0, 0.0], 4).tolist() == [0.25] * 4

        indices = selector.select_indices([0.0] * 4, 4)
        assert len(indices) == 4

    def test_huge_finite_weights(self):
        selector = FitnessProportionalSelector(rng=np.random.default_rng(12))

        np.testing.assert_allclose(selector.probabilities([1e308, 1e308], 2), [0.5, 0.5])
        np.testing.assert_allclose(selector.probabilities([1e308, 0.0, 5e307], 3),
                                   [2 / 3, 0.0, 1 / 3])
        assert len(selector.select_indices([1e308, 1e308], 2)) == 2

    def test_all_zero_weights_error_policy(self):
        selector = FitnessProportionalSelector(
            rng=np.random.default_rng(5),
            zero_fitness_policy="error"
        )

        with pytest.raises(ZeroFitnessError):
            selector.select([ParameterGenome(m=0.0)], [0.0])

    def test_select_preserves_length(self, small_population):
        selector = FitnessProportionalSelector(rng=np.random.default_rng(6))
        weights = np.arange(1, len(small_population) + 1, dtype=float)

        assert len(selector.select(small_population, weights)) == len(small_population)

    def test_single_genome_reproduces_itself(self):
        selector = FitnessProportionalSelector(rng=np.random.default_rng(8))
        genome = ParameterGenome(m=3.0, b=1.0)

        assert selector.select([genome], [0.7]) == [genome]

    def test_deterministic_under_seed(self, small_population):
        weights = np.linspace(0.1, 1.0, len(small_population))
        first = FitnessProportionalSelector(rng=np.random.default_rng(42))
        second = FitnessProportionalSelector(rng=np.random.default_rng(42))

        for _ in range(5):
            assert (first.select_indices(weights, len(weights)).tolist()
                    == second.select_indices(weights, len(weights)).tolist())

    def test_drawn_copies_are_independent(self):
        selector = FitnessProportionalSelector(rng=np.random.default_rng(10))
        source = ParameterGenome(m=1.0, b=1.0)

        selected = selector.select([source, ParameterGenome(m=2.0, b=2.0)], [1.0, 0.0])
        assert selected[0] == selected[1] == source

        selected[0].m = 50.0

        assert selected[1].m == 1.0
        assert source.m == 1.0
        assert selected[0] is not source
