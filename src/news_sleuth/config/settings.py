"""
Pydantic settings models for News Sleuth.

Defaults reproduce the behaviour of the hosted article fetcher: a
desktop Chrome user agent, a two-paragraph container threshold and a
200-character plausibility floor.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class FetcherSettings(BaseModel):
    """Outbound HTTP fetch configuration."""

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent header sent with every request",
    )
    timeout_seconds: float = Field(
        default=20.0,
        gt=0.0,
        le=300.0,
        description="Upper bound on the whole request, in seconds",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Whether to follow HTTP redirects",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify TLS certificates",
    )


class ExtractionSettings(BaseModel):
    """Main-content heuristic configuration."""

    removed_tags: list[str] = Field(
        default_factory=lambda: ["script", "style", "nav", "header", "footer", "aside"],
        description="Tags stripped from the document before scoring",
    )
    candidate_tags: list[str] = Field(
        default_factory=lambda: ["div", "main", "article", "section"],
        min_length=1,
        description="Container tags scored by paragraph count",
    )
    min_paragraphs: int = Field(
        default=2,
        ge=1,
        le=100,
        description="Paragraphs a container needs before it is preferred over the body",
    )
    min_text_length: int = Field(
        default=200,
        ge=0,
        le=100000,
        description="Shorter container text triggers a retry against the whole body",
    )

    @field_validator("removed_tags", "candidate_tags")
    @classmethod
    def lowercase_tags(cls, v: list[str]) -> list[str]:
        """Normalize tag names to lowercase."""
        return [tag.strip().lower() for tag in v if tag.strip()]


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum logging level",
    )
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        description="Log message format string",
    )
    date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date format for log timestamps",
    )
    file_path: Path | None = Field(
        default=None,
        description="Path to log file. None means console only.",
    )
    max_file_size_mb: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum log file size before rotation",
    )
    backup_count: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Number of backup log files to keep",
    )
    log_to_console: bool = Field(
        default=True,
        description="Whether to output logs to console",
    )

    @field_validator("file_path", mode="before")
    @classmethod
    def convert_file_path(cls, v: str | Path | None) -> Path | None:
        """Convert string paths to Path objects."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class Settings(BaseModel):
    """
    Root configuration model containing all subsystem settings.

    Settings are loaded from YAML with environment variable overrides.
    """

    fetcher: FetcherSettings = Field(
        default_factory=FetcherSettings,
        description="HTTP fetch settings",
    )
    extraction: ExtractionSettings = Field(
        default_factory=ExtractionSettings,
        description="Content extraction heuristic settings",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    model_config = {
        "extra": "forbid",
        "validate_default": True,
    }
