"""
Population Management for the Evolution Engine.

This module manages fixed-size populations of genomes throughout the
evolution process, including initialization, generation replacement,
diversity tracking and snapshots.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Union
from datetime import datetime
import json

import numpy as np

from src.evolution.core.exceptions import InvalidInvocationError
from src.evolution.core.genome import Genome, ParameterGenome


class Population:
    """
    An ordered, fixed-size collection of genomes of one concrete type.

    The length is fixed at construction. Every generation replaces the
    contents but never the size.
    """

    def __init__(self, genomes: Iterable[Genome], generation: int = 0):
        """Initialize population from an iterable of genomes."""
        genomes = list(genomes)
        _check_genomes(genomes)
        self._genomes: List[Genome] = genomes
        self.generation = generation

    @classmethod
    def zeros(cls, size: int, names: Sequence[str]) -> "Population":
        """Create a population of all-zero parameter genomes."""
        return cls(ParameterGenome.zeros(names) for _ in range(size))

    @classmethod
    def random(
        cls,
        size: int,
        names: Sequence[str],
        scale: Any = 1.0,
        rng: Optional[np.random.Generator] = None
    ) -> "Population":
        """Create a population of genomes drawn from N(0, scale)."""
        rng = rng if rng is not None else np.random.default_rng()
        return cls(ParameterGenome.random(names, scale, rng) for _ in range(size))

    @classmethod
    def from_seed(cls, seed: Genome, size: int) -> "Population":
        """Create a population of independent copies of one genome."""
        return cls(seed.clone() for _ in range(size))

    @property
    def genomes(self) -> List[Genome]:
        return list(self._genomes)

    def __len__(self) -> int:
        return len(self._genomes)

    def __iter__(self) -> Iterator[Genome]:
        return iter(self._genomes)

    def __getitem__(self, index: Union[int, slice]) -> Union[Genome, List[Genome]]:
        return self._genomes[index]

    def __setitem__(self, index: Union[int, slice], value: Any) -> None:
        if isinstance(index, slice):
            updated = list(self._genomes)
            updated[index] = list(value)
            if len(updated) != len(self._genomes):
                raise InvalidInvocationError(
                    f"Population size is fixed at {len(self._genomes)}, "
                    f"assignment would make it {len(updated)}"
                )
            _check_genomes(updated)
            self._genomes = updated
        else:
            _check_genomes([self._genomes[0], value])
            self._genomes[index] = value

    def replace(self, genomes: Iterable[Genome]) -> None:
        """Replace the current generation with the next one."""
        self[:] = genomes
        self.generation += 1

    def calculate_diversity(self) -> Dict[str, Any]:
        """Calculate per-gene mean and standard deviation across the population."""
        matrix = np.stack([genome.to_vector() for genome in self._genomes])
        gene_std = matrix.std(axis=0)
        return {
            "gene_mean": matrix.mean(axis=0).tolist(),
            "gene_std": gene_std.tolist(),
            "mean_gene_std": float(gene_std.mean()),
        }

    def save_snapshot(self, filepath: str) -> None:
        """Save population snapshot to a JSON file."""
        snapshot = {
            "generation": self.generation,
            "genomes": [genome.to_dict() for genome in self._genomes],
            "saved_at": datetime.now().isoformat(),
        }

        with open(filepath, 'w') as f:
            json.dump(snapshot, f, indent=2)

    @classmethod
    def load_snapshot(cls, filepath: str) -> "Population":
        """Load a population of parameter genomes from a snapshot file."""
        with open(filepath, 'r') as f:
            snapshot = json.load(f)

        return cls(
            (ParameterGenome.from_dict(data) for data in snapshot["genomes"]),
            generation=snapshot.get("generation", 0)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Population):
            return NotImplemented
        return self._genomes == other._genomes

    __hash__ = None

    def __repr__(self) -> str:
        return f"Population(size={len(self)}, generation={self.generation})"


def _check_genomes(genomes: List[Any]) -> None:
    if not genomes:
        raise InvalidInvocationError("Population must contain at least one genome")
    genome_type = type(genomes[0])
    if not isinstance(genomes[0], Genome):
        raise InvalidInvocationError(f"Expected Genome instances, got {genome_type.__name__}")
    for genome in genomes[1:]:
        if type(genome) is not genome_type:
            raise InvalidInvocationError(
                f"Population mixes {genome_type.__name__} and {type(genome).__name__}"
            )
