"""
Evolution Engine - Source Package

This package contains a generic genetic algorithm engine together with its
configuration and observability setup.
"""

__version__ = "1.0.0"

# Package-level imports for convenience
from src.core.config import settings

__all__ = [
    "settings",
    "__version__",
]
