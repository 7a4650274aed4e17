"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
where card files live, how itineraries are rendered and how logging
is set up.

Configuration can be overridden via environment variables:
- TSR_CARDS_DATA_DIR=/path/to/data
- TSR_RENDER_DEFAULT_RENDERER=html
- TSR_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CardsConfig(BaseSettings):
    """Card file configuration.

    Environment variables prefixed with TSR_CARDS_.
    """

    model_config = SettingsConfigDict(env_prefix="TSR_CARDS_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    cards_file: str = "cards.json"
    encoding: str = "utf-8"

    @property
    def cards_path(self) -> Path:
        """Full path to the cards JSON file."""
        return self.data_dir / self.cards_file


class RenderingConfig(BaseSettings):
    """Itinerary rendering configuration.

    Environment variables prefixed with TSR_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="TSR_RENDER_")

    default_renderer: Literal["text", "html"] = "text"
    taxi_service: str = "Yandex.Taxi"
    html_container_id: str = "itinerary"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TSR_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TSR_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.rendering.default_renderer)
        print(config.cards.cards_path)

    Environment variables prefixed with TSR_.
    """

    model_config = SettingsConfigDict(env_prefix="TSR_")

    cards: CardsConfig = Field(default_factory=CardsConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


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
