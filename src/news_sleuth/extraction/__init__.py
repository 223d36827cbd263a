"""
Extraction module for News Sleuth.

Provides article content extraction including:
- HTTP fetching with a browser user agent
- Boilerplate removal and main content detection
- Whitespace normalization
- The tool payload consumed by the analysis flow
"""

from news_sleuth.extraction.models import (
    ErrorKind,
    FetchRequest,
    ExtractionSuccess,
    ExtractionFailure,
    ExtractionResult,
)
from news_sleuth.extraction.content_extractor import (
    ArticleContentExtractor,
    normalize_text,
)
from news_sleuth.extraction.fetcher import (
    ArticleFetcher,
    fetch_article_content,
)
from news_sleuth.extraction.tool import (
    ArticleContentPayload,
    get_article_content_from_url,
    to_tool_payload,
    tool_definition,
)

__all__ = [
    # Models
    "ErrorKind",
    "FetchRequest",
    "ExtractionSuccess",
    "ExtractionFailure",
    "ExtractionResult",
    # Content extraction
    "ArticleContentExtractor",
    "normalize_text",
    # Fetching
    "ArticleFetcher",
    "fetch_article_content",
    # Tool
    "ArticleContentPayload",
    "get_article_content_from_url",
    "to_tool_payload",
    "tool_definition",
]
