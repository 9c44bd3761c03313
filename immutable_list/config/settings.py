"""Configuration management using Pydantic Settings.

Settings are loaded from the environment (prefix ``IMMUTABLE_LIST_``,
nested groups separated by ``__``) and from an optional ``.env`` file.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels, files, and debugging options
- RandomConfig: Seed for the ambient random source used by shuffle/random
"""

from pathlib import Path

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "WARNING"
    file_level: str = "DEBUG"
    log_file: Path | None = None
    real_time_debug: bool = True

    @field_validator("console_level", "file_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        return value.upper()


class RandomConfig(BaseModel):
    """Ambient random source configuration."""

    # None seeds from system entropy
    seed: int | None = None


class Settings(BaseSettings):
    """Main library settings with environment variable support.

    Examples:
        IMMUTABLE_LIST_LOGGING__CONSOLE_LEVEL=DEBUG
        IMMUTABLE_LIST_LOGGING__LOG_FILE=logs/immutable_list.log
        IMMUTABLE_LIST_RANDOM__SEED=42
    """

    model_config = SettingsConfigDict(
        env_prefix="IMMUTABLE_LIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    random: RandomConfig = RandomConfig()


# Singleton instance for library use
settings = Settings()
