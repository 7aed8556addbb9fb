"""
Base classes for fitness evaluation in the evolution engine.

This module provides the evaluator abstraction the engine consumes, an
adapter for plain functions, and the metrics container evaluators can use
to report a score breakdown.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Callable, Optional
from dataclasses import dataclass, field

from src.evolution.core.genome import Genome


@dataclass
class FitnessMetrics:
    """Fitness score with a detailed breakdown."""
    score: float
    details: Dict[str, Any] = field(default_factory=dict)


class FitnessEvaluator(ABC):
    """
    Abstract base class for fitness evaluators.

    An evaluator maps a genome to a non-negative, finite score where higher
    is better. It must not modify the genome.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize evaluator with optional configuration.

        Args:
            config: Configuration parameters for the evaluator
        """
        self.config = config or {}

    @abstractmethod
    def evaluate(self, genome: Genome) -> float:
        """
        Evaluate a genome and return its fitness score.

        Args:
            genome: The genome to evaluate

        Returns:
            Non-negative fitness score
        """
        pass

    def calculate_metrics(self, genome: Genome) -> FitnessMetrics:
        """
        Calculate detailed metrics for a genome.

        Args:
            genome: The genome to analyze

        Returns:
            Fitness metrics; the default carries only the score
        """
        return FitnessMetrics(score=self.evaluate(genome))

    def __call__(self, genome: Genome) -> float:
        return self.evaluate(genome)


class FunctionFitness(FitnessEvaluator):
    """Adapts a plain ``fn(genome) -> float`` callable."""

    def __init__(self, fn: Callable[[Genome], float]):
        super().__init__()
        self.fn = fn

    def evaluate(self, genome: Genome) -> float:
        return self.fn(genome)


def as_fitness_evaluator(fitness: Any) -> FitnessEvaluator:
    """Return ``fitness`` as a FitnessEvaluator, wrapping plain callables."""
    if isinstance(fitness, FitnessEvaluator):
        return fitness
    if callable(fitness):
        return FunctionFitness(fitness)
    raise TypeError(f"Expected a FitnessEvaluator or callable, got {type(fitness).__name__}")
