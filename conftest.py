"""
PyTest configuration and fixtures for the evolution engine.

This module provides shared test fixtures: seeded random generators,
small populations, simple evaluators and a synthetic power-law dataset.
"""

import os
import sys

import numpy as np
import pytest
import logfire

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.evolution.core.config import create_test_config
from src.evolution.core.genome import Genome, ParameterGenome
from src.evolution.core.population import Population
from src.evolution.fitness.base import FitnessEvaluator


# Keep Logfire local during tests
logfire.configure(send_to_logfire=False, console=False)


class ConstantFitness(FitnessEvaluator):
    """Scores every genome the same."""

    def __init__(self, value: float = 1.0):
        super().__init__()
        self.value = value
        self.calls = 0

    def evaluate(self, genome: Genome) -> float:
        self.calls += 1
        return self.value


class PeakFitness(FitnessEvaluator):
    """Unimodal landscape peaking at ``target``."""

    def __init__(self, target):
        super().__init__()
        self.target = np.asarray(target, dtype=float)

    def evaluate(self, genome: Genome) -> float:
        distance = float(np.sum((genome.to_vector() - self.target) ** 2))
        return 1.0 / (1.0 + distance)


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(12345)


@pytest.fixture
def test_config():
    """Small, seeded, sequential engine configuration."""
    return create_test_config()


@pytest.fixture
def zero_genome():
    """Slope/intercept genome at the origin."""
    return ParameterGenome(m=0.0, b=0.0)


@pytest.fixture
def small_population(rng):
    """Random slope/intercept population of ten genomes."""
    return Population.random(10, ("m", "b"), scale=1.0, rng=rng)


@pytest.fixture
def constant_fitness():
    return ConstantFitness(1.0)


@pytest.fixture
def peak_fitness():
    return PeakFitness([2.0, -1.0])


@pytest.fixture
def power_law_data():
    """Noise-free samples of y = 10**0.5 * x**1.5."""
    x = np.linspace(1.0, 100.0, 25)
    y = 10.0 ** 0.5 * x ** 1.5
    return x, y


# Test markers
pytest.mark.slow = pytest.mark.slow
pytest.mark.unit = pytest.mark.unit
