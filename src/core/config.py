"""
Core configuration module for the evolution engine.

This module manages application-level settings using Pydantic Settings,
providing type-safe configuration with environment variable support.
"""

from typing import Dict, Any, Literal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = "Evolution Engine"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Logfire settings
    logfire_token: str = ""
    logfire_service_name: str = Field(default="evolution-engine")
    logfire_environment: str = "development"
    logfire_console: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lower-case level names from the environment."""
        if isinstance(v, str):
            return v.upper()
        return v

    def get_logfire_settings(self) -> Dict[str, Any]:
        """Get Logfire configuration."""
        return {
            "token": self.logfire_token or None,
            "service_name": self.logfire_service_name,
            "environment": self.logfire_environment,
            "send_to_logfire": "if-token-present",
            "console": None if self.logfire_console else False,
        }

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


# Create global settings instance
settings = Settings()
