"""
Language-model tool wrapper around the article fetcher.

The analysis flow calls the fetcher as a tool: it passes a URL and
receives {"textContent": ..., "error": ...} back, with the error
message phrased for the end user.
"""

from typing import Any

import httpx
from pydantic import BaseModel, Field, ValidationError

from news_sleuth.config.settings import Settings
from news_sleuth.extraction.fetcher import fetch_article_content
from news_sleuth.extraction.models import (
    ErrorKind,
    ExtractionFailure,
    ExtractionResult,
    FetchRequest,
)

TOOL_NAME = "getArticleContentFromUrl"
TOOL_DESCRIPTION = (
    "Fetches the text content of a news article from a given URL. "
    "Use this tool ONLY when you have a specific articleUrl."
)

_ERROR_PREFIXES = {
    ErrorKind.FETCH_FAILED: "Failed to fetch URL: ",
    ErrorKind.NO_CONTENT_FOUND: "",
    ErrorKind.UNEXPECTED_ERROR: "An unexpected error occurred: ",
}


class ArticleContentPayload(BaseModel):
    """Tool output handed back to the analysis flow."""

    textContent: str = Field(description="The extracted text content of the article.")
    error: str | None = Field(
        default=None,
        description="An error message if fetching failed.",
    )


def describe_failure(failure: ExtractionFailure) -> str:
    """Render a failure as the message shown to the end user."""
    return f"{_ERROR_PREFIXES[failure.reason]}{failure.detail}"


def to_tool_payload(result: ExtractionResult) -> ArticleContentPayload:
    """Convert an extraction result into the tool payload."""
    if isinstance(result, ExtractionFailure):
        return ArticleContentPayload(textContent="", error=describe_failure(result))
    return ArticleContentPayload(textContent=result.text)


def tool_definition() -> dict[str, Any]:
    """JSON-schema tool declaration for function-calling model APIs."""
    return {
        "name": TOOL_NAME,
        "description": TOOL_DESCRIPTION,
        "input_schema": FetchRequest.model_json_schema(),
        "output_schema": ArticleContentPayload.model_json_schema(),
    }


async def get_article_content_from_url(
    url: str,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> ArticleContentPayload:
    """
    Tool entry point: validate the URL, fetch it and build the payload.

    Invalid URLs are reported in the payload and never reach the network.
    """
    try:
        request = FetchRequest(url=url)
    except ValidationError as e:
        message = e.errors()[0]["msg"] if e.errors() else str(e)
        return ArticleContentPayload(textContent="", error=f"Invalid URL: {message}")

    result = await fetch_article_content(request.url, settings=settings, client=client)
    return to_tool_payload(result)
