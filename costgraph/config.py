"""Library configuration using Pydantic Settings.

Settings can be overridden via environment variables:
- COSTGRAPH_MAX_SHORTEST_PATHS=100
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphSettings(BaseSettings):
    """Graph query configuration.

    Environment variables prefixed with COSTGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="COSTGRAPH_")

    # Default cap on enumerated tied-optimal paths, None for no cap
    max_shortest_paths: Optional[int] = Field(default=None, ge=1)


@lru_cache(maxsize=1)
def get_config() -> GraphSettings:
    """Get the singleton library configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return GraphSettings()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
