"""
CLI module for News Sleuth.

Provides command-line interface using Typer:
- fetch: Extract article text from a URL
- config: Configuration management
"""

from news_sleuth.cli.main import app

__all__ = ["app"]
