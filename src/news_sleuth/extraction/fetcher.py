"""
Fetch a news article URL and extract its text.

Performs exactly one GET per call, with no retries and no caching.
Every failure, including cancellation, comes back as an
ExtractionFailure rather than an exception.
"""

import asyncio
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

import httpx

from news_sleuth.config.settings import Settings
from news_sleuth.core.exceptions import (
    ContentExtractionError,
    FetchError,
    TransientFetchError,
)
from news_sleuth.extraction.content_extractor import ArticleContentExtractor
from news_sleuth.extraction.models import (
    NO_CONTENT_MESSAGE,
    ErrorKind,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
)
from news_sleuth.utils.logging import get_logger, get_logger_with_context
from news_sleuth.utils.metrics import record_extraction, time_fetch

logger = get_logger(__name__)

CANCELLED_MESSAGE = "Request was cancelled."


def _clear_cancel_request() -> None:
    """Withdraw the pending cancel request on the current task, if any."""
    task = asyncio.current_task()
    if task is not None and hasattr(task, "uncancel"):
        task.uncancel()


def parse_retry_after(value: str | None) -> float | None:
    """
    Parse a Retry-After header into seconds.

    Accepts both delta-seconds ("120") and HTTP-date forms. Dates in the
    past give 0.0; unparseable values give None.
    """
    if not value:
        return None
    value = value.strip()
    if value.isdigit():
        return float(value)
    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=timezone.utc)
    return max(0.0, (retry_at - datetime.now(timezone.utc)).total_seconds())


class ArticleFetcher:
    """
    Retrieves article pages over HTTP and extracts their main text.

    A shared httpx.AsyncClient may be injected; otherwise a short-lived
    client is opened for each fetch. Instances hold no per-request state
    and can serve concurrent calls.

    Example:
        >>> fetcher = ArticleFetcher()
        >>> result = await fetcher.fetch("https://example.com/news/story")
        >>> if result.ok:
        ...     print(result.text[:80])
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize article fetcher.

        Args:
            settings: Application settings. Defaults to Settings().
            client: Optional shared HTTP client
        """
        self.settings = settings or Settings()
        self.client = client
        self.extractor = ArticleContentExtractor(self.settings.extraction)

    async def fetch(self, url: str) -> ExtractionResult:
        """
        Fetch a page and extract its article text.

        Args:
            url: Absolute http(s) URL of the article

        Cancelling the awaiting task also yields an ExtractionFailure. The
        cancel request is withdrawn from the task (Python 3.11+) so code
        running after this call in the same task is not cancelled again.

        Returns:
            ExtractionSuccess with the text, or ExtractionFailure
        """
        log = get_logger_with_context(__name__, url=url)

        try:
            html = await self.fetch_html(url)
            text = self.extractor.extract(html, url)
            if not text:
                raise ContentExtractionError(NO_CONTENT_MESSAGE, url=url)
            result: ExtractionResult = ExtractionSuccess(text=text)
            log.info(f"Extracted {len(text)} characters")
        except FetchError as e:
            log.warning(f"Fetch failed: {e.message}")
            result = ExtractionFailure(ErrorKind.FETCH_FAILED, e.message)
        except ContentExtractionError as e:
            log.warning("No article content found")
            result = ExtractionFailure(ErrorKind.NO_CONTENT_FOUND, e.message)
        except asyncio.CancelledError:
            log.info("Fetch cancelled")
            _clear_cancel_request()
            result = ExtractionFailure(ErrorKind.FETCH_FAILED, CANCELLED_MESSAGE)
        except Exception as e:
            log.exception("Unexpected error during extraction")
            result = ExtractionFailure(ErrorKind.UNEXPECTED_ERROR, str(e) or type(e).__name__)

        record_extraction(result.ok, None if result.ok else result.reason.value)
        return result

    async def fetch_html(self, url: str) -> str:
        """
        GET a URL and return the response body as text.

        Args:
            url: URL to fetch

        Returns:
            Decoded response body

        Raises:
            TransientFetchError: On timeout, transport failure, 429 or 5xx
            FetchError: On any other failure or non-2xx status
        """
        if self.client is not None:
            return await self._get(self.client, url)

        async with self._create_client() as client:
            return await self._get(client, url)

    def _create_client(self) -> httpx.AsyncClient:
        """Create a client configured from fetcher settings."""
        fetcher_settings = self.settings.fetcher
        return httpx.AsyncClient(
            timeout=fetcher_settings.timeout_seconds,
            follow_redirects=fetcher_settings.follow_redirects,
            verify=fetcher_settings.verify_ssl,
        )

    async def _get(self, client: httpx.AsyncClient, url: str) -> str:
        """Issue the GET and translate transport errors into FetchError."""
        fetcher_settings = self.settings.fetcher
        headers = {"User-Agent": fetcher_settings.user_agent}

        try:
            with time_fetch():
                response = await client.get(
                    url,
                    headers=headers,
                    timeout=fetcher_settings.timeout_seconds,
                    follow_redirects=fetcher_settings.follow_redirects,
                )
        except httpx.TimeoutException as e:
            raise TransientFetchError(
                f"Request timed out after {fetcher_settings.timeout_seconds:g}s",
                url=url,
            ) from e
        except httpx.TransportError as e:
            raise TransientFetchError(str(e) or type(e).__name__, url=url) from e
        except httpx.HTTPError as e:
            raise FetchError(str(e) or type(e).__name__, url=url) from e

        if not response.is_success:
            status = response.status_code
            message = f"{status} {response.reason_phrase}"
            if status == 429 or status >= 500:
                raise TransientFetchError(
                    message,
                    url=url,
                    status_code=status,
                    retry_after=parse_retry_after(response.headers.get("Retry-After")),
                )
            raise FetchError(message, url=url, status_code=status)

        logger.debug(f"Fetched {url} ({response.status_code}, {len(response.content)} bytes)")
        return response.text


async def fetch_article_content(
    url: str,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> ExtractionResult:
    """
    Fetch a URL and extract its article text.

    Args:
        url: Absolute http(s) URL of the article
        settings: Application settings
        client: Optional shared HTTP client

    Returns:
        ExtractionSuccess or ExtractionFailure
    """
    return await ArticleFetcher(settings, client).fetch(url)
