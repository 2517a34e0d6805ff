"""
Package settings module.

This module provides the environment-driven settings that decide where Redis
configuration is read from and how the package logs.
"""

# Standard Library Imports
import logging
from functools import lru_cache

# Third-Party Imports
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from redis_extensions.core.config.configuration import Configuration

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings using Pydantic for validation and environment variable loading."""

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    REDIS_LOG_LEVEL: str = Field(
        default="WARNING",
        description="Level for the redis-py client loggers",
    )

    # Configuration Sources
    SETTINGS_FILE: str | None = Field(
        default=None,
        description="Optional appsettings-style JSON file merged under environment variables",
    )
    REDIS_SECTION: str = Field(
        default="Redis",
        description="Configuration section bound to the Redis options",
    )
    ENV_SEPARATOR: str = "__"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", "REDIS_LOG_LEVEL")
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    def load_configuration(self) -> Configuration:
        """
        Load the full configuration tree.

        The JSON settings file (if any) is read first and environment variables
        override it key by key.

        Returns:
            The merged configuration
        """
        sources: list[Configuration] = []
        if self.SETTINGS_FILE:
            sources.append(Configuration.from_json_file(self.SETTINGS_FILE))
        sources.append(Configuration.from_env(separator=self.ENV_SEPARATOR))
        logger.debug("Loaded configuration from %d source(s)", len(sources))
        return Configuration.merge(*sources)

    def redis_section(self) -> Configuration:
        """Return the configuration section holding the Redis options."""
        return self.load_configuration().get_section(self.REDIS_SECTION)


@lru_cache
def get_settings() -> Settings:
    """
    Return the cached settings instance.

    Returns:
        Settings: The cached settings instance
    """
    return Settings()
