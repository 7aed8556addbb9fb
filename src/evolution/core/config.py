"""
Evolution Configuration Module.

This module defines configuration classes for the evolution engine,
including evolution parameters, selection policy, logging and parallel
evaluation settings.
"""

from typing import Optional, Dict, Any, Literal
from pydantic import BaseModel, Field, ConfigDict
import os


class EvolutionParameters(BaseModel):
    """Parameters controlling the generational loop."""

    model_config = ConfigDict(validate_assignment=True)

    population_size: int = Field(
        default=100,
        ge=1,
        le=100000,
        description="Number of genomes in the population"
    )
    generations: int = Field(
        default=50,
        ge=0,
        description="Number of generations to run"
    )


class SelectionConfig(BaseModel):
    """Configuration for fitness-proportional selection."""

    model_config = ConfigDict(validate_assignment=True)

    zero_fitness_policy: Literal["uniform", "error"] = Field(
        default="uniform",
        description="What to do when every genome scores zero"
    )


class LoggingConfig(BaseModel):
    """Configuration for logging and monitoring."""

    model_config = ConfigDict(validate_assignment=True)

    enable_logging: bool = Field(
        default=True,
        description="Enable per-generation progress logging"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_interval: int = Field(
        default=10,
        ge=1,
        description="Generations between progress logs"
    )
    metrics_export: bool = Field(
        default=True,
        description="Emit progress events to Logfire"
    )


class ParallelizationConfig(BaseModel):
    """Configuration for parallel fitness evaluation."""

    model_config = ConfigDict(validate_assignment=True)

    enable_parallel: bool = Field(
        default=False,
        description="Evaluate fitness on a thread pool"
    )
    num_workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Number of worker threads (None for auto)"
    )


class EvolutionConfig(BaseModel):
    """Main configuration class for the evolution engine."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid'
    )

    evolution: EvolutionParameters = Field(
        default_factory=EvolutionParameters,
        description="Evolution parameters"
    )
    selection: SelectionConfig = Field(
        default_factory=SelectionConfig,
        description="Selection configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging and monitoring configuration"
    )
    parallelization: ParallelizationConfig = Field(
        default_factory=ParallelizationConfig,
        description="Parallel evaluation configuration"
    )

    random_seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducibility"
    )

    @classmethod
    def from_env(cls) -> "EvolutionConfig":
        """Create configuration from environment variables."""
        config_dict: Dict[str, Any] = {}

        if pop_size := os.getenv("EVOLUTION_POPULATION_SIZE"):
            config_dict.setdefault("evolution", {})["population_size"] = int(pop_size)
        if generations := os.getenv("EVOLUTION_GENERATIONS"):
            config_dict.setdefault("evolution", {})["generations"] = int(generations)
        if policy := os.getenv("EVOLUTION_ZERO_FITNESS_POLICY"):
            config_dict.setdefault("selection", {})["zero_fitness_policy"] = policy.lower()
        if num_workers := os.getenv("EVOLUTION_NUM_WORKERS"):
            config_dict.setdefault("parallelization", {})["num_workers"] = int(num_workers)
            config_dict["parallelization"]["enable_parallel"] = True
        if random_seed := os.getenv("EVOLUTION_RANDOM_SEED"):
            config_dict["random_seed"] = int(random_seed)

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()

    def save(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            f.write(self.model_dump_json(indent=2))

    @classmethod
    def load(cls, filepath: str) -> "EvolutionConfig":
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            return cls.model_validate_json(f.read())


def create_default_config() -> EvolutionConfig:
    """Create a default configuration suitable for most use cases."""
    return EvolutionConfig()


def create_test_config() -> EvolutionConfig:
    """Create a configuration suitable for testing (small, seeded, sequential)."""
    return EvolutionConfig(
        evolution=EvolutionParameters(
            population_size=20,
            generations=10
        ),
        logging=LoggingConfig(
            log_interval=1,
            metrics_export=False
        ),
        parallelization=ParallelizationConfig(
            enable_parallel=False
        ),
        random_seed=42
    )
