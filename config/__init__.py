"""Application configuration utilities."""

from .settings import (
    DEFAULT_RENEWAL_WINDOW_DAYS,
    DEFAULT_TIME_RANGE,
    DEFAULT_TOP_LIMIT,
    Settings,
    get_settings,
)

__all__ = [
    "DEFAULT_RENEWAL_WINDOW_DAYS",
    "DEFAULT_TIME_RANGE",
    "DEFAULT_TOP_LIMIT",
    "Settings",
    "get_settings",
]
