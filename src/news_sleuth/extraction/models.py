"""
Request and result types for article content extraction.

An extraction always yields exactly one of ExtractionSuccess or
ExtractionFailure; failures are data, never exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator


class ErrorKind(str, Enum):
    """Reasons an extraction can fail."""

    FETCH_FAILED = "fetch_failed"
    NO_CONTENT_FOUND = "no_content_found"
    UNEXPECTED_ERROR = "unexpected_error"


NO_CONTENT_MESSAGE = "Could not extract meaningful text content from the page."


class FetchRequest(BaseModel):
    """
    A single article fetch, as requested by the analysis flow.

    The URL must be absolute http(s); anything else is rejected here,
    before the extractor is invoked.
    """

    url: str = Field(description="The URL of the news article to fetch.")

    model_config = {"frozen": True}

    @field_validator("url")
    @classmethod
    def require_absolute_url(cls, v: str) -> str:
        v = v.strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"URL must be an absolute http(s) URL: {v!r}")
        return v


@dataclass(frozen=True)
class ExtractionSuccess:
    """Cleaned article text; never empty."""

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("ExtractionSuccess requires non-empty text")

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ExtractionFailure:
    """Why no article text could be produced."""

    reason: ErrorKind
    detail: str

    @property
    def ok(self) -> bool:
        return False


ExtractionResult = Union[ExtractionSuccess, ExtractionFailure]
