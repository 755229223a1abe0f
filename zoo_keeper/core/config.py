"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.
Only runtime concerns live here (environment, logging, metadata); business
constants such as the per-animal salary are in ``zoo_keeper.core.constants``.

Usage:
    from zoo_keeper.core.config import settings

    if settings.use_json_logs:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from zoo_keeper.core.enums import Environment

VALID_LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


class Settings(BaseSettings):
    """
    Application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (forces DEBUG log level)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    app_name: str = Field(
        default="Zoo Keeper",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (case-insensitive).

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
        return level

    @property
    def effective_log_level(self) -> str:
        """Log level actually applied (DEBUG when debug mode is on)."""
        return "DEBUG" if self.debug else self.log_level

    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """True if environment is CI."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """
        Whether logs should be rendered as JSON.

        Returns:
            bool: False only for local development.
        """
        return not self.is_development


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
