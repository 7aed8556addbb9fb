"""
Selection strategies for the Evolution Engine.

The engine draws the next generation by fitness-proportional resampling with
replacement. Every draw is cloned so that two draws of the same source genome
never share state.
"""

from abc import ABC, abstractmethod
from typing import List, Literal, Optional, Sequence

import numpy as np

from src.evolution.core.exceptions import InvalidFitnessError, ZeroFitnessError
from src.evolution.core.genome import Genome


def validate_weights(weights: Sequence[float], size: int) -> np.ndarray:
    """
    Check fitness weights and return them as a float array.

    Args:
        weights: One fitness score per genome, in population order
        size: Population size the weights must match

    Returns:
        The weights as a 1-D float array

    Raises:
        InvalidFitnessError: On a length mismatch or a negative or non-finite score
    """
    array = np.asarray(weights, dtype=float)
    if array.ndim != 1 or array.shape[0] != size:
        raise InvalidFitnessError(
            f"Expected {size} fitness values, got shape {array.shape}"
        )

    non_finite = np.flatnonzero(~np.isfinite(array))
    if non_finite.size:
        index = int(non_finite[0])
        raise InvalidFitnessError(
            f"Fitness of genome {index} is not finite: {array[index]}", index=index
        )

    negative = np.flatnonzero(array < 0)
    if negative.size:
        index = int(negative[0])
        raise InvalidFitnessError(
            f"Fitness of genome {index} is negative: {array[index]}", index=index
        )

    return array


class SelectionStrategy(ABC):
    """Chooses the source genomes of the next generation."""

    @abstractmethod
    def select(self, population: Sequence[Genome], weights: Sequence[float]) -> List[Genome]:
        """
        Draw a new generation from ``population``.

        Args:
            population: Current generation
            weights: Fitness of each genome, aligned by index

        Returns:
            A list of independent genomes with the same length as ``population``
        """


class FitnessProportionalSelector(SelectionStrategy):
    """
    Roulette-wheel resampling with replacement.

    Each of the ``len(population)`` draws independently picks genome ``i``
    with probability ``weights[i] / sum(weights)``. Zero-weight genomes are
    never drawn unless every weight is zero, in which case
    ``zero_fitness_policy`` decides: ``"uniform"`` resamples uniformly and
    ``"error"`` raises ``ZeroFitnessError``.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        zero_fitness_policy: Literal["uniform", "error"] = "uniform"
    ):
        if zero_fitness_policy not in ("uniform", "error"):
            raise ValueError(f"Unknown zero fitness policy: {zero_fitness_policy}")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.zero_fitness_policy = zero_fitness_policy

    def probabilities(self, weights: Sequence[float], size: int) -> np.ndarray:
        """Return the selection probability of each genome."""
        array = validate_weights(weights, size)
        peak = array.max()

        if peak == 0:
            if self.zero_fitness_policy == "error":
                raise ZeroFitnessError("Every genome has zero fitness")
            return np.full(size, 1.0 / size)

        # Scale by the peak first so the sum stays finite for huge weights
        scaled = array / peak
        return scaled / scaled.sum()

    def select_indices(self, weights: Sequence[float], size: int) -> np.ndarray:
        """Draw ``size`` source indices with replacement."""
        p = self.probabilities(weights, size)
        return self.rng.choice(size, size=size, replace=True, p=p)

    def select(self, population: Sequence[Genome], weights: Sequence[float]) -> List[Genome]:
        indices = self.select_indices(weights, len(population))
        return [population[int(i)].clone() for i in indices]
