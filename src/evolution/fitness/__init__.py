"""
Fitness evaluators for the evolution engine.

This module provides the evaluator base class the engine consumes and the
power-law evaluator used for fitting a slope and intercept to measurements.
"""

from src.evolution.fitness.base import (
    FitnessEvaluator,
    FitnessMetrics,
    FunctionFitness,
    as_fitness_evaluator
)

from src.evolution.fitness.power_law import PowerLawFitness

__all__ = [
    # Base classes
    "FitnessEvaluator",
    "FitnessMetrics",
    "FunctionFitness",
    "as_fitness_evaluator",

    # Power law
    "PowerLawFitness",
]
