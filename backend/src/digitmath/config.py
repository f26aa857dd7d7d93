"""
Application configuration loaded from environment variables.

All configuration is validated at startup to fail fast on misconfiguration.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with validation.

    All settings are loaded from environment variables with the same name.
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Server
    debug: bool = Field(
        default=False,
        description="Enable debug mode with detailed error messages",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level for the web application",
    )

    # Arithmetic
    default_factorial_n: int = Field(
        default=100,
        ge=0,
        description="Argument used by the factorial CLI when none is given",
    )
    max_factorial_n: int | None = Field(
        default=None,
        ge=0,
        description="Largest n accepted by the web surfaces (unbounded when unset)",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once and cached for subsequent calls.
    """
    return Settings()
