"""
Main content extraction for news article pages.

Strips boilerplate markup, picks the container holding the most
paragraphs, and falls back to the whole body when no container looks
like an article or its text is implausibly short.
"""

import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup, CData, NavigableString, Tag

from news_sleuth.config.settings import ExtractionSettings
from news_sleuth.utils.logging import get_logger

logger = get_logger(__name__)

# Attributes holding references that are resolved against the page URL
_REFERENCE_ATTRIBUTES = ("href", "src")

# Elements whose boundaries separate words in rendered text
_BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "br", "caption", "dd",
    "div", "dl", "dt", "figcaption", "figure", "footer", "form", "h1",
    "h2", "h3", "h4", "h5", "h6", "header", "hr", "li", "main", "nav",
    "ol", "p", "pre", "section", "table", "tbody", "td", "tfoot", "th",
    "thead", "tr", "ul",
})

_MULTI_WHITESPACE = re.compile(r"\s\s+")
_BLANK_LINES = re.compile(r"\n\s*\n")


def normalize_text(text: str) -> str:
    """
    Collapse whitespace in extracted page text.

    Runs of two or more whitespace characters become a single space,
    blank-line runs become a single newline, and the ends are trimmed.
    """
    text = _MULTI_WHITESPACE.sub(" ", text)
    text = _BLANK_LINES.sub("\n", text)
    return text.strip()


class ArticleContentExtractor:
    """
    Extracts the article body text from an HTML document.

    Works on an HTML string only; fetching is the caller's job. Each
    call builds and owns its own parse tree.

    Example:
        >>> extractor = ArticleContentExtractor()
        >>> extractor.extract("<article><p>One.</p><p>Two.</p></article>")
        'One. Two.'
    """

    def __init__(self, settings: ExtractionSettings | None = None) -> None:
        """
        Initialize content extractor.

        Args:
            settings: Heuristic configuration. Defaults to ExtractionSettings().
        """
        self.settings = settings or ExtractionSettings()

    def parse(self, html: str, base_url: str = "") -> BeautifulSoup:
        """
        Parse HTML into a tree, resolving relative references.

        Args:
            html: Raw HTML content
            base_url: URL the page was fetched from

        Returns:
            Parsed document
        """
        soup = BeautifulSoup(html, "html.parser")
        if base_url:
            for attr in _REFERENCE_ATTRIBUTES:
                for element in soup.find_all(attrs={attr: True}):
                    element[attr] = urljoin(base_url, element[attr])
        return soup

    def strip_boilerplate(self, soup: BeautifulSoup) -> int:
        """
        Remove denylisted elements (scripts, navigation, footers...) in place.

        Returns:
            Number of elements removed
        """
        if not self.settings.removed_tags:
            return 0

        removed = 0
        for element in soup.find_all(self.settings.removed_tags):
            # A parent removed earlier in this pass already took it out
            if element.decomposed:
                continue
            element.decompose()
            removed += 1
        return removed

    def find_main_content(self, soup: BeautifulSoup) -> tuple[Tag, int]:
        """
        Find the container most likely to hold the article body.

        Scans candidate containers in document order and keeps the first
        one with the highest descendant paragraph count. When the best
        count is below the threshold, the body is used instead.

        Args:
            soup: Parsed document with boilerplate already removed

        Returns:
            Tuple of (content root, paragraph count of best candidate)
        """
        body = self._body(soup)

        best_element: Tag | None = None
        max_paragraphs = 0

        for container in body.find_all(self.settings.candidate_tags):
            paragraph_count = len(container.find_all("p"))
            if paragraph_count > max_paragraphs:
                max_paragraphs = paragraph_count
                best_element = container

        if best_element is None or max_paragraphs < self.settings.min_paragraphs:
            logger.debug(
                f"No container with {self.settings.min_paragraphs}+ paragraphs "
                f"(best={max_paragraphs}), using body"
            )
            return body, max_paragraphs

        logger.debug(f"Selected <{best_element.name}> with {max_paragraphs} paragraphs")
        return best_element, max_paragraphs

    def extract(self, html: str, url: str = "") -> str:
        """
        Extract normalized article text from HTML.

        Args:
            html: HTML content
            url: Page URL, used to resolve relative references

        Returns:
            Normalized text, possibly empty when the page has none
        """
        soup = self.parse(html, url)
        self.strip_boilerplate(soup)

        root, _ = self.find_main_content(soup)
        text = self._text_of(root)

        if len(text) < self.settings.min_text_length:
            body = self._body(soup)
            if root is not body:
                logger.debug(
                    f"Container text too short ({len(text)} chars), retrying with body"
                )
            text = self._text_of(body)

        return text

    def _body(self, soup: BeautifulSoup) -> Tag:
        """Get the document body, or the whole document for fragments."""
        body = soup.body
        return body if body is not None else soup

    def _text_of(self, element: Tag) -> str:
        """
        Get the normalized text content of an element.

        Text nodes are concatenated as-is so inline markup inside a word
        (``Mc<b>Donald</b>'s``) leaves it intact. A space is inserted at
        the start and end of block-level elements only.
        """
        parts: list[str] = []
        stack = [(iter(element.children), False)]

        while stack:
            children, is_block = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                if is_block:
                    parts.append(" ")
                continue

            if isinstance(child, Tag):
                block = child.name in _BLOCK_TAGS
                if block:
                    parts.append(" ")
                stack.append((iter(child.children), block))
            elif type(child) in (NavigableString, CData):
                parts.append(str(child))

        return normalize_text("".join(parts))
