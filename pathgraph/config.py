"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for the settings of the
collaborators around the graph core: the sample city map, the
interactive shell and logging.

Configuration can be overridden via environment variables:
- PG_MAP_DIRECTION=undirected
- PG_SHELL_SHOW_DISTANCE=true
- PG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import Direction, Weighting


class MapConfig(BaseSettings):
    """Sample map configuration.

    Environment variables prefixed with PG_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="PG_MAP_")

    direction: Literal["directed", "undirected"] = "directed"
    weighting: Literal["weighted", "unweighted"] = "weighted"

    @property
    def direction_mode(self) -> Direction:
        """Direction enum member for the configured direction."""
        return Direction[self.direction.upper()]

    @property
    def weighting_mode(self) -> Weighting:
        """Weighting enum member for the configured weighting."""
        return Weighting[self.weighting.upper()]


class ShellConfig(BaseSettings):
    """Interactive shell configuration.

    Environment variables prefixed with PG_SHELL_.
    """

    model_config = SettingsConfigDict(env_prefix="PG_SHELL_")

    exit_prefixes: str = "EQ"  # Case-insensitive first letters that end the session
    path_separator: str = " -> "
    show_dump: bool = True
    show_banner: bool = True
    show_distance: bool = False


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with PG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PG_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.map.direction)
        print(config.shell.path_separator)

    Environment variables prefixed with PG_.
    """

    model_config = SettingsConfigDict(env_prefix="PG_")

    map: MapConfig = Field(default_factory=MapConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)
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
