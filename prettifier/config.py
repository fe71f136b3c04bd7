"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- PRETTIFIER_IO_ENCODING=latin-1
- PRETTIFIER_LOG_LEVEL=DEBUG
- PRETTIFIER_CLI_COLOR=false
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IOConfig(BaseSettings):
    """File reading and writing configuration.

    Environment variables prefixed with PRETTIFIER_IO_.
    """

    model_config = SettingsConfigDict(env_prefix="PRETTIFIER_IO_")

    encoding: str = "utf-8"
    newline: str = "\n"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PRETTIFIER_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PRETTIFIER_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


class CLIConfig(BaseSettings):
    """Command-line presentation settings.

    Environment variables prefixed with PRETTIFIER_CLI_.
    """

    model_config = SettingsConfigDict(env_prefix="PRETTIFIER_CLI_")

    color: bool = True


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.io.encoding)
        print(config.observability.level)

    Environment variables prefixed with PRETTIFIER_.
    """

    model_config = SettingsConfigDict(env_prefix="PRETTIFIER_")

    io: IOConfig = Field(default_factory=IOConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    cli: CLIConfig = Field(default_factory=CLIConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
