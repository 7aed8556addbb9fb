"""
Core functionality for the evolution engine.

This package contains application settings and observability setup shared
by the rest of the project.
"""

from src.core.config import settings, Settings
from src.core.observability import configure_observability

__all__ = [
    "settings",
    "Settings",
    "configure_observability",
]
