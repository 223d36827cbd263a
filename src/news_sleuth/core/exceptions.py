"""
Custom exceptions for News Sleuth.

All exceptions inherit from NewsSleuthError. The extractor raises them
internally and converts them to typed results at its boundary, so they
only escape from configuration loading and direct use of the fetcher.

Exception Hierarchy:
    NewsSleuthError (base)
    ├── ConfigurationError
    ├── FetchError
    │   └── TransientFetchError (retryable)
    └── ExtractionError
        └── ContentExtractionError
"""

from typing import Any


class NewsSleuthError(Exception):
    """
    Base exception for all News Sleuth errors.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary with additional context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(
                f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details!r})"


class RetryableError(NewsSleuthError):
    """
    Marker class for errors that may succeed if attempted again.

    Attributes:
        retry_after: Suggested delay in seconds before retry (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, details)
        self.retry_after = retry_after


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(NewsSleuthError):
    """
    Error in configuration loading or validation.

    Raised when:
    - Configuration file is missing or malformed
    - Configuration file does not contain a mapping
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)
        self.path = path


# =============================================================================
# Fetch Errors
# =============================================================================


class FetchError(NewsSleuthError):
    """
    Error retrieving a page over HTTP.

    Raised directly for failures that repeating the request will not
    fix, such as a 404 or 410 status. Transient failures raise
    TransientFetchError instead. The extractor never retries either.

    Attributes:
        url: Requested URL
        status_code: HTTP status, when a response was received
        retry_after: Delay the server asked for, in seconds
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
        retry_after: float | None = None,
    ) -> None:
        details = details or {}
        if url:
            details["url"] = url
        if status_code:
            details["status_code"] = status_code
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code
        self.retry_after = retry_after


class TransientFetchError(FetchError, RetryableError):
    """
    Fetch failure that may succeed if attempted again.

    Raised when:
    - The connection fails or times out
    - The server answers 429 or a 5xx status
    """

    pass


# =============================================================================
# Extraction Errors
# =============================================================================


class ExtractionError(NewsSleuthError):
    """Base error for content extraction operations."""

    pass


class ContentExtractionError(ExtractionError):
    """
    Error isolating article text from a fetched page.

    Raised when the page parsed but no usable text remained after
    cleanup and fallback.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if url:
            details["url"] = url
        super().__init__(message, details)
        self.url = url


# =============================================================================
# Utility Functions
# =============================================================================


def is_retryable(error: Exception) -> bool:
    """
    Check if an error is retryable.

    Args:
        error: The exception to check

    Returns:
        True if the error indicates a retryable condition
    """
    return isinstance(error, RetryableError)


def get_retry_delay(error: Exception, default: float = 5.0) -> float:
    """
    Get the recommended retry delay for an error.

    Args:
        error: The exception to check
        default: Default delay if not specified by error

    Returns:
        Recommended delay in seconds before retry
    """
    if isinstance(error, RetryableError) and error.retry_after is not None:
        return error.retry_after
    return default
