"""
Core module for News Sleuth.

Contains the exception hierarchy used throughout the application.
"""

from news_sleuth.core.exceptions import (
    NewsSleuthError,
    RetryableError,
    ConfigurationError,
    FetchError,
    TransientFetchError,
    ExtractionError,
    ContentExtractionError,
    is_retryable,
    get_retry_delay,
)

__all__ = [
    # Base
    "NewsSleuthError",
    "RetryableError",
    "ConfigurationError",
    # Fetch
    "FetchError",
    "TransientFetchError",
    # Extraction
    "ExtractionError",
    "ContentExtractionError",
    # Helpers
    "is_retryable",
    "get_retry_delay",
]
