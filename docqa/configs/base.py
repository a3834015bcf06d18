"""
Base configuration settings.

Provides common configuration inherited by all specific config modules.
Handles environment detection, shared defaults and required-value checks.

Dependencies: pydantic_settings, docqa.core.exceptions
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

from docqa.core.exceptions import ConfigurationError


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


def require_setting(value: str | None, env_name: str) -> str:
    """
    Return a required configuration value or fail at boot.

    Args:
        value: Loaded setting value
        env_name: Environment variable backing the setting (used in the error)

    Returns:
        str: The non-blank value

    Raises:
        ConfigurationError: When the value is missing or blank
    """
    if value is None or not str(value).strip():
        raise ConfigurationError(
            f"{env_name} is not configured",
            setting=env_name,
        )
    return value
