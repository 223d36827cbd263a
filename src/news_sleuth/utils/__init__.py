"""
Utilities module for News Sleuth.

Provides logging setup and in-memory metrics.
"""

from news_sleuth.utils.logging import setup_logging, get_logger, get_logger_with_context
from news_sleuth.utils.metrics import (
    Metrics,
    TimingStats,
    record_extraction,
    time_fetch,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "get_logger_with_context",
    # Metrics
    "Metrics",
    "TimingStats",
    "record_extraction",
    "time_fetch",
]
