"""Tests for target node construction."""

import pytest
from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import Declaration, Script, XMLProcessingInstruction

from domsoup import SoupNodeFactory, root_of
from domsoup.nodes import create_tree_builder


class TestSoupNodeFactory:
    """Tests for SoupNodeFactory."""

    def test_builds_attached_tree(self):
        """Test element, attribute and append primitives."""
        factory = SoupNodeFactory()
        document = factory.document()
        body = factory.element("body")
        factory.set_attribute(body, "class", "x y")
        factory.append(document, body)
        factory.append(body, factory.text("Hello"))

        assert str(document) == '<body class="x y">Hello</body>'
        assert body.parent is document

    def test_document_starts_empty(self):
        """Test that a new document has no children."""
        assert SoupNodeFactory().document().contents == []

    def test_declarations(self):
        """Test both declaration flavours."""
        factory = SoupNodeFactory()

        assert type(factory.declaration("xml", comment_like=False)) is XMLProcessingInstruction
        assert type(factory.declaration("foo bar", comment_like=True)) is Declaration

    def test_doctype_omits_empty_identifiers(self):
        """Test doctype rendering with and without identifiers."""
        factory = SoupNodeFactory()

        assert factory.doctype("html", "", "") == "html"
        assert factory.doctype("html", "", "about:legacy-compat") == (
            'html SYSTEM "about:legacy-compat"'
        )

    def test_string_container_lookup(self):
        """Test string class selection for container tags."""
        factory = SoupNodeFactory()

        assert factory.string_container("script") is Script
        assert factory.string_container("p") is None
        assert factory.string_container("p", Script) is Script
        assert SoupNodeFactory(string_containers=False).string_container("script") is None

    def test_text_with_container(self):
        """Test text creation with a string class."""
        assert type(SoupNodeFactory().text("x = 1", Script)) is Script


class TestHelpers:
    """Tests for module helpers."""

    def test_unknown_builder(self):
        """Test that unknown features raise FeatureNotFound."""
        with pytest.raises(FeatureNotFound):
            create_tree_builder("no-such-builder")

    def test_builder_keeps_attribute_strings(self):
        """Test that builders never split attribute values."""
        assert create_tree_builder("html.parser").cdata_list_attributes is None

    def test_root_of(self):
        """Test walking up to the root."""
        soup = BeautifulSoup("<div><p><b>x</b></p></div>", "html.parser")

        assert root_of(soup.find("b")) is soup
