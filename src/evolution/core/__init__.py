"""
Evolution Core Module - Genetic Algorithm Components.

This module contains the core components of the evolution engine, including
configuration, genome representation, population management, selection,
mutation and the generational loop.
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

from src.evolution.core.genome import (
    Genome,
    ParameterGenome
)

from src.evolution.core.population import Population

from src.evolution.core.selection import (
    SelectionStrategy,
    FitnessProportionalSelector,
    validate_weights
)

from src.evolution.core.mutation import (
    MutationOperator,
    GaussianMutation,
    FunctionMutation,
    gaussian_mutation,
    as_mutation_operator
)

from src.evolution.core.engine import (
    EvolutionEngine,
    GenerationStats,
    evolve
)

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

    # Genome representation
    "Genome",
    "ParameterGenome",

    # Population management
    "Population",

    # Selection
    "SelectionStrategy",
    "FitnessProportionalSelector",
    "validate_weights",

    # Mutation
    "MutationOperator",
    "GaussianMutation",
    "FunctionMutation",
    "gaussian_mutation",
    "as_mutation_operator",

    # Engine
    "EvolutionEngine",
    "GenerationStats",
    "evolve"
]
