"""
Evolution - a genetic algorithm engine.

This module implements fitness-proportional evolution of fixed-size
populations of real-valued genomes. Fitness evaluation and mutation are
pluggable strategy objects, so the engine has no knowledge of the problem
being optimized.
"""

from src.evolution.core.config import (
    EvolutionConfig,
    EvolutionParameters,
    SelectionConfig,
    LoggingConfig,
    ParallelizationConfig,
    create_default_config,
    create_test_config
)
from src.evolution.core.exceptions import (
    EvolutionError,
    InvalidInvocationError,
    InvalidFitnessError,
    ZeroFitnessError
)
from src.evolution.core.genome import Genome, ParameterGenome
from src.evolution.core.population import Population
from src.evolution.core.selection import SelectionStrategy, FitnessProportionalSelector
from src.evolution.core.mutation import (
    MutationOperator,
    GaussianMutation,
    FunctionMutation,
    gaussian_mutation
)
from src.evolution.core.engine import EvolutionEngine, GenerationStats, evolve
from src.evolution.fitness import (
    FitnessEvaluator,
    FitnessMetrics,
    FunctionFitness,
    PowerLawFitness
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "EvolutionConfig",
    "EvolutionParameters",
    "SelectionConfig",
    "LoggingConfig",
    "ParallelizationConfig",
    "create_default_config",
    "create_test_config",
    # Errors
    "EvolutionError",
    "InvalidInvocationError",
    "InvalidFitnessError",
    "ZeroFitnessError",
    # Genomes and populations
    "Genome",
    "ParameterGenome",
    "Population",
    # Operators
    "SelectionStrategy",
    "FitnessProportionalSelector",
    "MutationOperator",
    "GaussianMutation",
    "FunctionMutation",
    "gaussian_mutation",
    # Engine
    "EvolutionEngine",
    "GenerationStats",
    "evolve",
    # Fitness
    "FitnessEvaluator",
    "FitnessMetrics",
    "FunctionFitness",
    "PowerLawFitness",
]
