"""Markdown rendering of converted BeautifulSoup trees."""

from __future__ import annotations

import logging
import re
from typing import Optional, Union
from urllib.parse import urljoin

import html2text
from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

logger = logging.getLogger(__name__)

ABSOLUTE_PREFIXES = ("#", "http://", "https://", "//", "mailto:", "tel:")


class HtmlToMarkdown:
    """
    Converts HTML content or BeautifulSoup nodes to clean Markdown.

    Uses html2text with settings suited for documentation pages.

    Example:
        converter = HtmlToMarkdown()
        soup = DomToSoupConverter().convert(page_document)
        markdown = converter.convert(soup, "https://docs.example.com/page")
        part = converter.convert_selection(soup, ".highlight")
    """

    def __init__(
        self,
        body_width: int = 0,
        inline_links: bool = True,
        wrap_links: bool = False,
        ignore_images: bool = False,
        ignore_tables: bool = False,
        protect_links: bool = True,
        unicode_snob: bool = True,
        escape_snob: bool = True,
        mark_code: bool = True,
    ):
        """
        Initialize the Markdown converter.

        Args:
            body_width: Max line width (0 = no wrapping)
            inline_links: Use inline [text](url) vs reference style
            wrap_links: Wrap long links
            ignore_images: Skip image conversion
            ignore_tables: Skip table conversion
            protect_links: Prevent link mangling
            unicode_snob: Use Unicode chars where possible
            escape_snob: Escape special Markdown chars
            mark_code: Mark code blocks with backticks
        """
        self._options = {
            "body_width": body_width,
            "inline_links": inline_links,
            "wrap_links": wrap_links,
            "protect_links": protect_links,
            "ignore_images": ignore_images,
            "ignore_tables": ignore_tables,
            "unicode_snob": unicode_snob,
            "escape_snob": escape_snob,
            "mark_code": mark_code,
            "default_image_alt": "",
            "single_line_break": False,
        }

    def _new_handler(self) -> html2text.HTML2Text:
        # HTML2Text keeps parser state, so every conversion gets its own
        handler = html2text.HTML2Text()
        for name, value in self._options.items():
            setattr(handler, name, value)
        return handler

    def _clean_output(self, markdown: str) -> str:
        """Clean up the converted Markdown."""
        markdown = re.sub(r"\n{3,}", "\n\n", markdown)
        markdown = "\n".join(line.rstrip() for line in markdown.split("\n"))
        return markdown.strip() + "\n"

    def _resolve_links(self, html: str, base_url: str) -> str:
        """Convert relative href/src attributes to absolute URLs on a copy."""
        soup = BeautifulSoup(html, "html.parser")

        for tag in soup.find_all(href=True):
            href = tag["href"]
            if not href.startswith(ABSOLUTE_PREFIXES):
                tag["href"] = urljoin(base_url, href)

        for tag in soup.find_all(src=True):
            src = tag["src"]
            if not src.startswith(ABSOLUTE_PREFIXES + ("data:",)):
                tag["src"] = urljoin(base_url, src)

        return str(soup)

    def _fix_relative_links(self, markdown: str, base_url: str) -> str:
        """Ensure all links are absolute, keeping html2text's <url> wrapping."""

        def replace_link(match: re.Match[str]) -> str:
            text = match.group(1)
            target = match.group(2)
            wrapped = target.startswith("<") and target.endswith(">")
            url = target[1:-1] if wrapped else target

            if url.startswith(ABSOLUTE_PREFIXES):
                result: str = match.group(0)
                return result

            absolute_url = urljoin(base_url, url)
            if wrapped:
                absolute_url = f"<{absolute_url}>"
            return f"[{text}]({absolute_url})"

        return re.sub(r"\[([^\]]+)\]\((<[^>]+>|[^)]+)\)", replace_link, markdown)

    def convert(self, content: Union[str, PageElement], url: Optional[str] = None) -> str:
        """
        Convert HTML or a BeautifulSoup node to Markdown.

        Args:
            content: HTML string, or a node of a converted tree
            url: Optional source URL for resolving relative links

        Returns:
            Markdown string
        """
        html = str(content)
        try:
            # Links must be absolute before html2text wraps them as <url>
            source = self._resolve_links(html, url) if url else html
            markdown = self._new_handler().handle(source)
            markdown = self._clean_output(markdown)
            if url:
                markdown = self._fix_relative_links(markdown, url)
            return markdown

        except Exception as e:
            logger.error(f"Failed to convert HTML to Markdown: {e}")
            if isinstance(content, Tag):
                text: str = content.get_text(separator="\n")
            else:
                text = BeautifulSoup(html, "html.parser").get_text(separator="\n")
            return text.strip() + "\n"

    def convert_selection(
        self,
        document: Tag,
        selector: str,
        url: Optional[str] = None,
    ) -> Optional[str]:
        """
        Convert the first element matching a CSS selector to Markdown.

        Select from a whole converted page (convert() on the document, or
        convert_whole_tree()) so that selectors relying on ancestors match.

        Args:
            document: Converted document or element to select from
            selector: CSS selector
            url: Optional source URL for resolving relative links

        Returns:
            Markdown string, or None if nothing matches
        """
        element = document.select_one(selector)
        if element is None:
            logger.debug(f"Selector {selector!r} matched nothing")
            return None
        return self.convert(element, url)
