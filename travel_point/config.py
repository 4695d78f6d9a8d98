"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for the municipality
vocabulary, reference data locations and result conventions.

Configuration can be overridden via environment variables:
- TPR_DATA_DATA_DIR=/path/to/data
- TPR_MATCH_MUNICIPALITY_PREFIX=天草市
- TPR_RESOLVE_EMPTY_HOUSE_NUMBER_AS_ZERO=false
- TPR_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReferenceDataConfig(BaseSettings):
    """Reference data configuration.

    Environment variables prefixed with TPR_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="TPR_DATA_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    town_ranges_file: str = "town_ranges.csv"
    facilities_file: str = "facilities.csv"

    @property
    def town_ranges_path(self) -> Path:
        """Full path to the town range CSV file."""
        return self.data_dir / self.town_ranges_file

    @property
    def facilities_path(self) -> Path:
        """Full path to the facility CSV file."""
        return self.data_dir / self.facilities_file


class MatchingConfig(BaseSettings):
    """Town matching configuration.

    Environment variables prefixed with TPR_MATCH_.
    """

    model_config = SettingsConfigDict(env_prefix="TPR_MATCH_")

    municipality_prefix: str = "天草市"
    town_suffix: str = "町"
    catch_all_town: str = "東・浄南・太田町以外"
    excluded_towns: tuple[str, ...] = ("東町", "浄南町", "太田町")

    # Only used to build "did you mean" hints for TownNotFound errors
    suggestion_cutoff: float = Field(default=60.0, ge=0.0, le=100.0)
    max_suggestions: int = Field(default=3, ge=0)


class ResolutionConfig(BaseSettings):
    """Result shaping configuration.

    Environment variables prefixed with TPR_RESOLVE_.
    """

    model_config = SettingsConfigDict(env_prefix="TPR_RESOLVE_")

    error_marker: str = "エラー:"
    empty_house_number_as_zero: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TPR_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TPR_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.matching.municipality_prefix)
        print(config.data.town_ranges_path)

    Environment variables prefixed with TPR_.
    """

    model_config = SettingsConfigDict(env_prefix="TPR_")

    data: ReferenceDataConfig = Field(default_factory=ReferenceDataConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
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
