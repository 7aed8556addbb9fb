"""
Mutation operators for the Evolution Engine.

A mutation operator perturbs one genome in place and returns nothing. The
engine applies it to every genome drawn by selection.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

import numpy as np

from src.evolution.core.genome import Genome


class MutationOperator(ABC):
    """Perturbs a genome in place."""

    @abstractmethod
    def mutate(self, genome: Genome) -> None:
        """
        Mutate ``genome`` in place.

        Args:
            genome: Genome to perturb; its type and arity must not change
        """

    def __call__(self, genome: Genome) -> None:
        self.mutate(genome)


class GaussianMutation(MutationOperator):
    """
    Replace each gene with a draw from a normal distribution centred on it.

    ``scales[i]`` is the standard deviation used for gene ``i``. A scale of
    zero leaves that gene untouched.
    """

    def __init__(self, scales: Sequence[float], rng: Optional[np.random.Generator] = None):
        scales = np.asarray(scales, dtype=float)
        if scales.ndim != 1 or scales.size == 0:
            raise ValueError("scales must be a non-empty sequence with one entry per gene")
        if not np.all(np.isfinite(scales)) or np.any(scales < 0):
            raise ValueError(f"scales must be finite and non-negative, got {scales.tolist()}")
        self.scales = scales
        self.rng = rng if rng is not None else np.random.default_rng()

    def mutate(self, genome: Genome) -> None:
        if genome.arity != self.scales.size:
            raise ValueError(
                f"Genome has {genome.arity} genes but {self.scales.size} scales were given"
            )
        genome.update(self.rng.normal(genome.to_vector(), self.scales))

    def __repr__(self) -> str:
        return f"GaussianMutation(scales={self.scales.tolist()})"


class FunctionMutation(MutationOperator):
    """Adapts a plain ``fn(genome) -> None`` callable."""

    def __init__(self, fn: Callable[[Genome], Any]):
        self.fn = fn

    def mutate(self, genome: Genome) -> None:
        self.fn(genome)


def gaussian_mutation(
    scales: Sequence[float],
    rng: Optional[np.random.Generator] = None
) -> GaussianMutation:
    """Build a Gaussian mutation operator with one standard deviation per gene."""
    return GaussianMutation(scales, rng=rng)


def as_mutation_operator(mutate: Any) -> MutationOperator:
    """Return ``mutate`` as a MutationOperator, wrapping plain callables."""
    if isinstance(mutate, MutationOperator):
        return mutate
    if callable(mutate):
        return FunctionMutation(mutate)
    raise TypeError(f"Expected a MutationOperator or callable, got {type(mutate).__name__}")
