"""
Configuration module for News Sleuth.

Provides Pydantic-based settings management with YAML file support
and environment variable overrides.
"""

from news_sleuth.config.settings import (
    Settings,
    FetcherSettings,
    ExtractionSettings,
    LoggingSettings,
)
from news_sleuth.config.loader import load_config, get_settings, reset_settings

__all__ = [
    "Settings",
    "FetcherSettings",
    "ExtractionSettings",
    "LoggingSettings",
    "load_config",
    "get_settings",
    "reset_settings",
]
