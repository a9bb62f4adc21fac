"""Conversions compared against BeautifulSoup parsing the same markup."""

import pytest
from bs4 import BeautifulSoup
from dom_helpers import parse_dom

from domsoup import DomToSoupConverter, assert_nodes_equal, compare_nodes

PAGES = {
    "empty": "<html></html>",
    "body_with_text": "<html><body>HtmlUnit</body></html>",
    "body_with_paragraph": "<html><body><p>HtmlUnit</p></body></html>",
    "body_with_title": "<html><body><h1>HtmlUnit</h1></body></html>",
    "uppercase_tags": "<HTML><BODY><H1>HtmlUnit</H1></BODY></HTML>",
    "mixedcase_tags": "<HTML><BodY><h1>HtmlUnit</H1></BODY></html>",
    "attributes": "<html id='t1'><body id='t2' class='x y'>HtmlUnit</body></html>",
    "doctype_and_comment": (
        "<!DOCTYPE html><html><head><title>T</title></head>"
        "<body><!-- note --><ul><li id='a'>1</li><li>2</li></ul></body></html>"
    ),
    "inline_markup": (
        '<html><body><p><a href="/docs" title="Docs">Docs</a> and <b>bold</b> text</p>'
        "</body></html>"
    ),
}


def _reference(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html5lib", multi_valued_attributes=None)


class TestReferenceParse:
    """The converted tree matches BeautifulSoup's own html5lib parse."""

    @pytest.mark.parametrize("html", PAGES.values(), ids=PAGES.keys())
    def test_matches_reference(self, html):
        """Test structural equality with the reference parse."""
        converted = DomToSoupConverter().convert(parse_dom(html))

        assert_nodes_equal(_reference(html), converted, html)

    def test_detects_differences(self):
        """Test that a different document is reported as different."""
        converted = DomToSoupConverter().convert(parse_dom("<html><body>HtmlUnit</body></html>"))

        differences = compare_nodes(_reference("<html><body>Jsoup</body></html>"), converted)

        assert len(differences) == 1
        assert "content differs" in differences[0]
