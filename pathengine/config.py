"""Centralized configuration using Pydantic Settings.

One sub-config per concern, each overridable via environment variables:
- PATHENGINE_GRAPH_DATA_DIR=/path/to/data
- PATHENGINE_ENGINE_TIMEOUT_SECONDS=2.5
- PATHENGINE_CACHE_MAX_SIZE=4096
- PATHENGINE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with PATHENGINE_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHENGINE_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    vertices_file: str = "vertices.csv"
    edges_file: str = "edges.csv"

    @property
    def vertices_path(self) -> Path:
        """Full path to the vertices CSV file."""
        return self.data_dir / self.vertices_file

    @property
    def edges_path(self) -> Path:
        """Full path to the edges CSV file."""
        return self.data_dir / self.edges_file


class EngineConfig(BaseSettings):
    """Shortest-path engine configuration.

    Environment variables prefixed with PATHENGINE_ENGINE_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHENGINE_ENGINE_")

    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    check_interval: int = Field(default=256, ge=1)


class CacheConfig(BaseSettings):
    """Query result cache configuration.

    Environment variables prefixed with PATHENGINE_CACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHENGINE_CACHE_")

    enabled: bool = True
    max_size: Optional[int] = Field(default=1024, ge=1)
    ttl_seconds: Optional[float] = Field(default=None, gt=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PATHENGINE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHENGINE_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.edges_path)
        print(config.engine.timeout_seconds)

    Environment variables prefixed with PATHENGINE_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHENGINE_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


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
