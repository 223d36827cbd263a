"""
Tests for extraction request and result types.
"""

import dataclasses

import pytest
from pydantic import ValidationError

from news_sleuth.extraction import (
    ErrorKind,
    ExtractionFailure,
    ExtractionSuccess,
    FetchRequest,
)


class TestFetchRequest:
    """Tests for FetchRequest validation."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://news.example.com/story",
            "http://example.org/a?b=c#d",
        ],
    )
    def test_accepts_absolute_urls(self, url):
        assert FetchRequest(url=url).url == url

    def test_strips_whitespace(self):
        assert FetchRequest(url="  https://example.com/x \n").url == "https://example.com/x"

    @pytest.mark.parametrize(
        "url",
        ["", "example.com/story", "/story", "ftp://example.com/story", "https://"],
    )
    def test_rejects_invalid_urls(self, url):
        with pytest.raises(ValidationError):
            FetchRequest(url=url)


class TestExtractionResult:
    """Tests for the result variants."""

    def test_success(self):
        result = ExtractionSuccess(text="Article")

        assert result.ok is True
        assert result.text == "Article"

    def test_success_requires_text(self):
        with pytest.raises(ValueError):
            ExtractionSuccess(text="")

    def test_failure(self):
        result = ExtractionFailure(ErrorKind.NO_CONTENT_FOUND, "nothing")

        assert result.ok is False
        assert result.reason is ErrorKind.NO_CONTENT_FOUND
        assert result.detail == "nothing"

    def test_results_are_immutable(self):
        result = ExtractionSuccess(text="Article")

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.text = "changed"

    def test_error_kind_values(self):
        assert {kind.value for kind in ErrorKind} == {
            "fetch_failed",
            "no_content_found",
            "unexpected_error",
        }
