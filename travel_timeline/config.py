"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration.
The storage backend is selected here once, at startup, and handed to
the container; nothing else reads it from global state.

Configuration can be overridden via environment variables:
- TRAVEL_STORAGE_BACKEND=database
- TRAVEL_STORAGE_DATA_DIR=/path/to/data
- TRAVEL_STORAGE_DATABASE_URL=sqlite:////tmp/travels.db
- TRAVEL_TIMELINE_SEED_SAMPLE_DATA=false
- TRAVEL_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseSettings):
    """Persistence configuration.

    Environment variables prefixed with TRAVEL_STORAGE_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_STORAGE_")

    backend: Literal["local", "database", "memory"] = "local"
    data_dir: Path = Field(default_factory=lambda: Path.home() / ".travel_timeline")
    database_url: Optional[str] = None

    @property
    def resolved_database_url(self) -> str:
        """Database URL, defaulting to a SQLite file in the data dir."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.data_dir / 'travel_timeline.db'}"


class TimelineConfig(BaseSettings):
    """Timeline behaviour configuration.

    Environment variables prefixed with TRAVEL_TIMELINE_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_TIMELINE_")

    seed_sample_data: bool = True
    home_country: str = "United Kingdom"
    home_city: str = "London"
    home_flag_code: str = "gb"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TRAVEL_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.storage.backend)
        print(config.timeline.home_city)

    Environment variables prefixed with TRAVEL_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVEL_")

    storage: StorageConfig = Field(default_factory=StorageConfig)
    timeline: TimelineConfig = Field(default_factory=TimelineConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: ObservabilityConfig) -> None:
    """Apply the logging configuration to the root logger."""
    logging.basicConfig(level=config.level.upper(), format=config.format)
