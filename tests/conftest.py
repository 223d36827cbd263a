"""
Shared pytest fixtures for News Sleuth tests.

Provides reusable fixtures for:
- Global state isolation (settings, logging, metrics)
- Sample article pages
- Mock HTTP transports serving canned responses
"""

import tempfile
from pathlib import Path
from typing import Callable, Generator

import httpx
import pytest

from news_sleuth.config import Settings
from news_sleuth.config.loader import get_default_config_path, reset_settings
from news_sleuth.utils.logging import reset_logging
from news_sleuth.utils.metrics import Metrics


ARTICLE_URL = "https://news.example.com/2024/05/story.html"


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset process-wide state before and after each test."""
    reset_settings()
    reset_logging()
    Metrics.reset()
    get_default_config_path.cache_clear()
    yield
    reset_settings()
    reset_logging()
    Metrics.reset()
    get_default_config_path.cache_clear()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a short timeout and console logging disabled."""
    return Settings(
        fetcher={"timeout_seconds": 2.0},
        logging={"log_to_console": False},
    )


@pytest.fixture
def article_url() -> str:
    return ARTICLE_URL


@pytest.fixture
def short_article_html() -> str:
    """The nav/article/footer page whose article is under 200 characters."""
    return (
        "<html><body><nav>Menu</nav><article><p>First paragraph.</p>"
        "<p>Second paragraph.</p></article><footer>Copyright</footer></body></html>"
    )


@pytest.fixture
def sample_article_html() -> str:
    """A realistic news page with boilerplate around a long article."""
    return """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <title>City Council Approves New Transit Plan</title>
        <style>body { font-family: serif; }</style>
        <script>window.analytics = {track: function() {}};</script>
    </head>
    <body>
        <header>
            <div class="masthead"><p>The Daily Example</p><p>Subscribe today</p></div>
        </header>
        <nav>
            <a href="/world">World</a>
            <a href="/politics">Politics</a>
        </nav>
        <main>
            <article>
                <h1>City Council Approves New Transit Plan</h1>
                <p>The city council voted seven to two on Tuesday to approve a
                transit plan that adds three bus rapid transit corridors over the
                next five years.</p>
                <p>Supporters said the plan would cut average commute times across
                the eastern districts, while opponents questioned how the city
                would pay for the new stations.</p>
                <p>The first corridor is expected to open in the spring of next
                year, according to the transportation department.</p>
            </article>
        </main>
        <aside><p>Related: Bike lanes expand downtown</p><p>Most read</p></aside>
        <footer><p>&copy; 2024 The Daily Example</p></footer>
        <script>console.log('tracking pixel');</script>
    </body>
    </html>
    """


@pytest.fixture
def html_transport() -> Callable[..., httpx.MockTransport]:
    """
    Factory for a mock transport serving one canned response.

    Requests seen by the transport are appended to the returned
    transport's ``requests`` list.
    """

    def _make(body: str = "", status_code: int = 200, headers: dict | None = None) -> httpx.MockTransport:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            response_headers = {"Content-Type": "text/html; charset=utf-8"}
            response_headers.update(headers or {})
            return httpx.Response(status_code, text=body, headers=response_headers)

        transport = httpx.MockTransport(handler)
        transport.requests = seen
        return transport

    return _make
