"""
Evolution Engine.

This module implements the generational loop: evaluate every genome, resample
the population in proportion to fitness, then mutate every resampled genome
in place. The loop runs for a fixed number of generations with no early
termination.
"""

import logging
import multiprocessing
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, List, MutableSequence, Optional

import logfire
import numpy as np

from src.evolution.core.config import EvolutionConfig
from src.evolution.core.exceptions import EvolutionError, InvalidInvocationError
from src.evolution.core.genome import Genome
from src.evolution.core.mutation import MutationOperator, as_mutation_operator
from src.evolution.core.population import Population
from src.evolution.core.selection import (
    FitnessProportionalSelector,
    SelectionStrategy,
    validate_weights
)
from src.evolution.fitness.base import FitnessEvaluator, as_fitness_evaluator


@dataclass
class GenerationStats:
    """Fitness summary of one evaluated generation."""
    generation: int
    best: float
    worst: float
    mean: float
    std: float

    @classmethod
    def from_weights(cls, generation: int, weights: np.ndarray) -> "GenerationStats":
        peak = float(weights.max())
        scaled = weights / peak if peak > 0 else weights
        scale = peak if peak > 0 else 1.0
        return cls(
            generation=generation,
            best=peak,
            worst=float(weights.min()),
            mean=float(scaled.mean()) * scale,
            std=float(scaled.std()) * scale
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class EvolutionEngine:
    """
    Runs fitness-proportional evolution over a fixed-size population.

    The fitness evaluator and mutation operator are injected at construction.
    Selection draws from a single numpy ``Generator``; with a seed (from the
    config or an explicit ``rng``) two runs over equal inputs produce equal
    populations, provided the mutation operator is seeded too.
    """

    def __init__(
        self,
        fitness: Any,
        mutation: Any,
        config: Optional[EvolutionConfig] = None,
        selector: Optional[SelectionStrategy] = None,
        rng: Optional[np.random.Generator] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the evolution engine.

        Args:
            fitness: FitnessEvaluator, or a callable mapping a genome to a score
            mutation: MutationOperator, or a callable mutating a genome in place
            config: Engine configuration
            selector: Selection strategy (fitness-proportional by default)
            rng: Random generator used by the default selector
            logger: Optional logger instance
        """
        self.config = config or EvolutionConfig()
        self.fitness: FitnessEvaluator = as_fitness_evaluator(fitness)
        self.mutation: MutationOperator = as_mutation_operator(mutation)
        self.logger = logger or self._setup_logger()

        self.rng = rng if rng is not None else np.random.default_rng(self.config.random_seed)
        self.selector = selector or FitnessProportionalSelector(
            rng=self.rng,
            zero_fitness_policy=self.config.selection.zero_fitness_policy
        )

        # State tracking
        self.history: List[GenerationStats] = []
        self.best_genome: Optional[Genome] = None
        self.best_fitness: Optional[float] = None
        self.total_evaluations = 0
        self._executor: Optional[ThreadPoolExecutor] = None

    def _setup_logger(self) -> logging.Logger:
        """Setup default logger."""
        logger = logging.getLogger("evolution.engine")
        # A level set on the "evolution" parent by configure_observability wins
        if logging.getLogger("evolution").level == logging.NOTSET:
            logger.setLevel(getattr(logging, self.config.logging.log_level))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def evolve(
        self,
        population: MutableSequence[Genome],
        generations: Optional[int] = None
    ) -> MutableSequence[Genome]:
        """
        Run the generational loop.

        Args:
            population: Non-empty population, replaced in place every generation
            generations: Number of generations (defaults to the configured count)

        Returns:
            The same population object, holding the final generation
        """
        if generations is None:
            generations = self.config.evolution.generations
        self._validate_invocation(population, generations)

        if generations == 0:
            return population

        with logfire.span("Evolution run",
                          population_size=len(population),
                          generations=generations):
            start_time = datetime.now()
            self.logger.info(
                f"Starting evolution: {generations} generations, population size {len(population)}"
            )

            generation = 0
            self._executor = self._create_executor()
            try:
                for generation in range(generations):
                    with logfire.span("Generation", generation=generation):
                        self.step(population)
                        self._log_progress(generation)
            except Exception as e:
                self.logger.error(f"Evolution aborted at generation {generation}: {e}")
                raise
            finally:
                if self._executor:
                    self._executor.shutdown(wait=True)
                    self._executor = None

            elapsed_time = datetime.now() - start_time
            self.logger.info(f"Evolution completed in {elapsed_time}")

        return population

    def step(self, population: MutableSequence[Genome]) -> np.ndarray:
        """
        Run one generation: evaluate, select, mutate, replace.

        Returns:
            Fitness weights of the generation that was evaluated
        """
        weights = self.evaluate(population)
        self._record(population, weights)

        offspring = self.selector.select(population, weights)
        if len(offspring) != len(population):
            raise EvolutionError(
                f"Selector returned {len(offspring)} genomes for a population of {len(population)}"
            )

        for genome in offspring:
            self.mutation.mutate(genome)

        if isinstance(population, Population):
            population.replace(offspring)
        else:
            population[:] = offspring

        return weights

    def evaluate(self, population: MutableSequence[Genome]) -> np.ndarray:
        """Evaluate every genome, returning weights in population order."""
        if self._executor:
            scores = list(self._executor.map(self.fitness.evaluate, population))
        else:
            scores = [self.fitness.evaluate(genome) for genome in population]

        self.total_evaluations += len(scores)
        return validate_weights(scores, len(population))

    def _create_executor(self) -> Optional[ThreadPoolExecutor]:
        settings = self.config.parallelization
        if not settings.enable_parallel:
            return None
        num_workers = settings.num_workers or multiprocessing.cpu_count()
        return ThreadPoolExecutor(max_workers=num_workers)

    def _validate_invocation(self, population: MutableSequence[Genome], generations: Any) -> None:
        if isinstance(generations, bool) or not isinstance(generations, (int, np.integer)):
            raise InvalidInvocationError(
                f"generations must be an integer, got {type(generations).__name__}"
            )
        if generations < 0:
            raise InvalidInvocationError(f"generations must be non-negative, got {generations}")
        if len(population) == 0:
            raise InvalidInvocationError("Cannot evolve an empty population")

    def _record(self, population: MutableSequence[Genome], weights: np.ndarray) -> None:
        stats = GenerationStats.from_weights(len(self.history), weights)
        self.history.append(stats)

        best_index = int(np.argmax(weights))
        if self.best_fitness is None or weights[best_index] > self.best_fitness:
            self.best_fitness = float(weights[best_index])
            self.best_genome = population[best_index].clone()

    def _log_progress(self, generation: int) -> None:
        """Log evolution progress."""
        logging_config = self.config.logging
        if not logging_config.enable_logging or generation % logging_config.log_interval != 0:
            return

        stats = self.history[-1]
        self.logger.info(
            f"Generation {generation}: "
            f"Best: {stats.best:.4f}, "
            f"Avg: {stats.mean:.4f}, "
            f"Std: {stats.std:.4f}"
        )

        if logging_config.metrics_export:
            logfire.info("Evolution progress",
                         evolution_generation=generation,
                         best_fitness=stats.best,
                         avg_fitness=stats.mean,
                         worst_fitness=stats.worst,
                         fitness_std=stats.std,
                         total_evaluations=self.total_evaluations)


def evolve(
    population: MutableSequence[Genome],
    fitness: Any,
    mutate: Any,
    generations: int,
    *,
    rng: Optional[np.random.Generator] = None,
    config: Optional[EvolutionConfig] = None,
    selector: Optional[SelectionStrategy] = None
) -> MutableSequence[Genome]:
    """
    Evolve ``population`` in place for exactly ``generations`` generations.

    Args:
        population: Non-empty population of genomes of one type
        fitness: FitnessEvaluator or callable returning a non-negative score
        mutate: MutationOperator or callable mutating a genome in place
        generations: Non-negative generation count; 0 is a no-op
        rng: Random generator for selection
        config: Engine configuration
        selector: Selection strategy override

    Returns:
        ``population``, holding the final generation
    """
    engine = EvolutionEngine(fitness, mutate, config=config, selector=selector, rng=rng)
    return engine.evolve(population, generations)
