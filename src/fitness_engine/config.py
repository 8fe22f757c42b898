"""Configuration settings for the fitness engine."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


# __file__ = src/fitness_engine/config.py
PACKAGE_ROOT = Path(__file__).parent
PROJECT_ROOT = PACKAGE_ROOT.parent.parent


class Settings(BaseSettings):
    """Settings loaded from FITNESS_ENGINE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FITNESS_ENGINE_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Registry cache lifetimes
    exercise_cache_ttl_seconds: float = 3600
    alias_cache_ttl_seconds: float = 86400

    # Reject registries that break the one-claim-per-name rule instead of
    # skipping the offending records
    strict_registry: bool = False

    # Optional JSON export used instead of the built-in exercise table
    registry_path: Optional[Path] = None

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
