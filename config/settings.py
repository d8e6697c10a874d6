"""Centralised configuration handling for SubSpend."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIME_RANGE = "30days"
DEFAULT_TOP_LIMIT = 5
DEFAULT_RENEWAL_WINDOW_DAYS = 7


class Settings(BaseSettings):
    """Engine settings sourced from ``SUBSPEND_*`` environment variables."""

    top_subscriptions_limit: int = DEFAULT_TOP_LIMIT
    default_time_range: str = DEFAULT_TIME_RANGE
    renewal_window_days: int = DEFAULT_RENEWAL_WINDOW_DAYS
    skip_invalid_records: bool = False
    log_level: str = "WARNING"
    data_path: Path | None = None

    model_config = SettingsConfigDict(env_prefix="SUBSPEND_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
