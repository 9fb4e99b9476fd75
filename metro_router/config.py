"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
- where the reference network CSV files live
- the time-mode cost constants
- logging settings

Configuration can be overridden via environment variables:
- METRO_GRAPH_DATA_DIR=/path/to/data
- METRO_ROUTING_DWELL_SECONDS=90
- METRO_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Network data configuration.

    Environment variables prefixed with METRO_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    stations_file: str = "stations.csv"
    edges_file: str = "edges.csv"
    separator: str = "~"

    @property
    def stations_path(self) -> Path:
        """Full path to stations CSV file."""
        return self.data_dir / self.stations_file

    @property
    def edges_path(self) -> Path:
        """Full path to edges CSV file."""
        return self.data_dir / self.edges_file


class RoutingConfig(BaseSettings):
    """Cost model configuration.

    Environment variables prefixed with METRO_ROUTING_.
    Time cost of an edge is dwell_seconds + seconds_per_unit * weight.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_ROUTING_")

    dwell_seconds: int = Field(default=120, ge=0)
    seconds_per_unit: int = Field(default=40, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with METRO_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.stations_path)
        print(config.routing.dwell_seconds)

    Environment variables prefixed with METRO_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
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
