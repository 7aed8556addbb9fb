"""
Genome Representation for the Evolution Engine.

This module defines the genome abstraction used by the engine and a concrete
genome made of named real-valued parameters, including the zero and random
constructors used to seed a population.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

import numpy as np


class Genome(ABC):
    """
    A candidate solution: an ordered, fixed-arity record of real parameters.

    Genomes are mutable value objects. The engine never shares a genome
    between two population slots; it calls ``clone`` on every selection draw.
    """

    @property
    @abstractmethod
    def arity(self) -> int:
        """Number of genes."""

    @abstractmethod
    def to_vector(self) -> np.ndarray:
        """Return a copy of the gene values as a float array."""

    @abstractmethod
    def update(self, values: Iterable[float]) -> None:
        """Overwrite every gene in place. The arity must not change."""

    @abstractmethod
    def clone(self) -> "Genome":
        """Return an independent copy of this genome."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert genome to a JSON-friendly dictionary."""
        return {"values": self.to_vector().tolist()}


class ParameterGenome(Genome):
    """
    Genome of named real-valued parameters.

    Parameters keep the order they were given in::

        genome = ParameterGenome(m=0.0, b=1.5)
        genome.m = 2.0
        genome["b"]         # 1.5
        genome.to_vector()  # array([2. , 1.5])
    """

    def __init__(self, **params: float):
        if not params:
            raise ValueError("A genome needs at least one parameter")
        for name in params:
            _check_gene_name(name)
        self.params: Dict[str, float] = {name: float(value) for name, value in params.items()}

    @classmethod
    def from_vector(cls, names: Sequence[str], values: Iterable[float]) -> "ParameterGenome":
        """Create a genome from parameter names and a matching value sequence."""
        names = tuple(names)
        values = [float(v) for v in values]
        if len(names) != len(values):
            raise ValueError(
                f"Got {len(values)} values for {len(names)} parameters {names}"
            )
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate parameter names: {names}")
        return cls(**dict(zip(names, values)))

    @classmethod
    def zeros(cls, names: Sequence[str]) -> "ParameterGenome":
        """Create a genome with every parameter set to zero."""
        return cls.from_vector(names, [0.0] * len(tuple(names)))

    @classmethod
    def random(
        cls,
        names: Sequence[str],
        scale: Any = 1.0,
        rng: Optional[np.random.Generator] = None
    ) -> "ParameterGenome":
        """Create a genome with parameters drawn from N(0, scale)."""
        names = tuple(names)
        rng = rng if rng is not None else np.random.default_rng()
        scale = np.broadcast_to(np.asarray(scale, dtype=float), (len(names),))
        return cls.from_vector(names, rng.normal(0.0, scale))

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self.params)

    @property
    def arity(self) -> int:
        return len(self.params)

    def to_vector(self) -> np.ndarray:
        return np.fromiter(self.params.values(), dtype=float, count=len(self.params))

    def update(self, values: Iterable[float]) -> None:
        values = [float(v) for v in values]
        if len(values) != len(self.params):
            raise ValueError(
                f"Expected {len(self.params)} values, got {len(values)}"
            )
        for name, value in zip(self.params, values):
            self.params[name] = value

    def clone(self) -> "ParameterGenome":
        return type(self)(**self.params)

    def to_dict(self) -> Dict[str, Any]:
        return {"params": dict(self.params)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParameterGenome":
        """Create genome from dictionary representation."""
        return cls(**data["params"])

    def __getattr__(self, name: str) -> float:
        # Only reached when normal lookup fails
        params = self.__dict__.get("params")
        if params is not None and name in params:
            return params[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        params = self.__dict__.get("params")
        if params is not None and name in params:
            params[name] = float(value)
        else:
            super().__setattr__(name, value)

    def __getitem__(self, name: str) -> float:
        return self.params[name]

    def __setitem__(self, name: str, value: float) -> None:
        if name not in self.params:
            raise KeyError(name)
        self.params[name] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterGenome):
            return NotImplemented
        return list(self.params.items()) == list(other.params.items())

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in self.params.items())
        return f"{type(self).__name__}({body})"


def _check_gene_name(name: str) -> None:
    if not name.isidentifier() or name.startswith("_"):
        raise ValueError(f"Invalid parameter name: {name!r}")
    if name == "params" or hasattr(ParameterGenome, name):
        raise ValueError(f"Parameter name {name!r} shadows a genome attribute")
