"""
Observability setup for the evolution engine.

Configures Logfire and the standard library logging hierarchy from the
application settings. Nothing is sent to Logfire unless a token is set.
"""

import logging
from typing import Optional

import logfire

from src.core.config import Settings, settings as default_settings


def configure_observability(settings: Optional[Settings] = None) -> None:
    """Configure Logfire and the ``evolution`` logger."""
    settings = settings or default_settings

    logfire.configure(**settings.get_logfire_settings())

    logger = logging.getLogger("evolution")
    logger.setLevel(getattr(logging, settings.log_level))

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        version=settings.app_version
    )
