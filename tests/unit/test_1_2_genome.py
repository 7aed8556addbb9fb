"""
Unit tests for genome representation.

Tests cover:
- Parameter genome construction and named access
- Zero and random constructors
- Vector conversion and in-place updates
- Cloning and equality
- Serialization
"""

import numpy as np
import pytest

from src.evolution.core.genome import Genome, ParameterGenome


class TestParameterGenome:
    """Test suite for named-parameter genomes."""

    def test_genome_creation(self):
        genome = ParameterGenome(m=1.5, b=-2)

        assert isinstance(genome, Genome)
        assert genome.names == ("m", "b")
        assert genome.arity == 2
        assert genome.m == 1.5
        assert genome["b"] == -2.0
        assert isinstance(genome.b, float)

    def test_empty_genome_rejected(self):
        with pytest.raises(ValueError):
            ParameterGenome()

    @pytest.mark.parametrize("name", ["_hidden", "clone", "params", "arity"])
    def test_reserved_names_rejected(self, name):
        with pytest.raises(ValueError):
            ParameterGenome(**{name: 1.0})

    def test_attribute_assignment_mutates_in_place(self):
        genome = ParameterGenome(m=0.0, b=0.0)
        genome.m = 3
        genome["b"] = 4

        assert genome.to_vector().tolist() == [3.0, 4.0]

    def test_unknown_gene(self):
        genome = ParameterGenome(m=0.0)

        with pytest.raises(AttributeError):
            genome.b
        with pytest.raises(KeyError):
            genome["b"] = 1.0

    def test_zeros_constructor(self):
        genome = ParameterGenome.zeros(["m", "b"])

        assert genome == ParameterGenome(m=0.0, b=0.0)

    def test_from_vector(self):
        genome = ParameterGenome.from_vector(("a", "b", "c"), [1, 2, 3])
        assert genome.to_vector().tolist() == [1.0, 2.0, 3.0]

        with pytest.raises(ValueError):
            ParameterGenome.from_vector(("a", "b"), [1.0])
        with pytest.raises(ValueError):
            ParameterGenome.from_vector(("a", "a"), [1.0, 2.0])

    def test_random_constructor_is_seedable(self):
        first = ParameterGenome.random(("m", "b"), scale=[1.0, 10.0], rng=np.random.default_rng(7))
        second = ParameterGenome.random(("m", "b"), scale=[1.0, 10.0], rng=np.random.default_rng(7))

        assert first == second
        assert first != ParameterGenome.zeros(("m", "b"))

    def test_update_preserves_arity(self):
        genome = ParameterGenome(m=0.0, b=0.0)
        genome.update(np.array([0.5, 0.25]))

        assert genome.m == 0.5
        assert genome.b == 0.25

        with pytest.raises(ValueError):
            genome.update([1.0, 2.0, 3.0])
        assert genome.arity == 2

    def test_to_vector_is_a_copy(self):
        genome = ParameterGenome(m=1.0, b=2.0)
        vector = genome.to_vector()
        vector[0] = 99.0

        assert genome.m == 1.0

    def test_clone_is_independent(self):
        genome = ParameterGenome(m=1.0, b=2.0)
        copy = genome.clone()

        assert copy == genome
        assert copy is not genome

        copy.m = 5.0
        assert genome.m == 1.0

    def test_equality_depends_on_names_and_order(self):
        assert ParameterGenome(m=1.0, b=2.0) == ParameterGenome(m=1.0, b=2.0)
        assert ParameterGenome(m=1.0, b=2.0) != ParameterGenome(b=2.0, m=1.0)
        assert ParameterGenome(m=1.0) != ParameterGenome(n=1.0)

    def test_genome_is_not_hashable(self):
        with pytest.raises(TypeError):
            hash(ParameterGenome(m=1.0))

    def test_serialization(self):
        genome = ParameterGenome(m=1.25, b=-0.5)
        data = genome.to_dict()
        loaded = ParameterGenome.from_dict(data)

        assert data == {"params": {"m": 1.25, "b": -0.5}}
        assert loaded == genome

    def test_repr(self):
        assert repr(ParameterGenome(m=1.0, b=0.0)) == "ParameterGenome(m=1.0, b=0.0)"
