"""
News Sleuth - article content extraction for credibility analysis.

Turns a news article URL into clean text that a language model can
analyze, reporting failures as data rather than exceptions.
"""

from news_sleuth.config import Settings, load_config
from news_sleuth.utils.logging import setup_logging, get_logger
from news_sleuth.core.exceptions import NewsSleuthError
from news_sleuth.extraction import (
    ArticleContentExtractor,
    ArticleFetcher,
    ErrorKind,
    ExtractionFailure,
    ExtractionSuccess,
    fetch_article_content,
    get_article_content_from_url,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "load_config",
    "setup_logging",
    "get_logger",
    "NewsSleuthError",
    "ArticleContentExtractor",
    "ArticleFetcher",
    "ErrorKind",
    "ExtractionFailure",
    "ExtractionSuccess",
    "fetch_article_content",
    "get_article_content_from_url",
]
