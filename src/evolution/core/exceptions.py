"""
Exceptions raised by the evolution engine.

Validation failures derive from ``ValueError`` as well as ``EvolutionError`` so
callers can catch either.
"""


class EvolutionError(Exception):
    """Base class for all evolution engine errors."""


class InvalidInvocationError(EvolutionError, ValueError):
    """Raised when the engine is called with arguments it cannot run on."""


class InvalidFitnessError(EvolutionError, ValueError):
    """Raised when a fitness evaluator returns a negative or non-finite score."""

    def __init__(self, message: str, index: int = -1):
        super().__init__(message)
        self.index = index


class ZeroFitnessError(EvolutionError, ValueError):
    """Raised when every weight is zero and the zero-fitness policy is ``error``."""
