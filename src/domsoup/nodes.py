"""Construction primitives for BeautifulSoup target trees."""

import logging
from typing import Dict, Optional, Type

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.builder import TreeBuilder, builder_registry
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    Tag,
    XMLProcessingInstruction,
)

logger = logging.getLogger(__name__)


def create_tree_builder(features: str) -> TreeBuilder:
    """
    Instantiate a BeautifulSoup tree builder for the given feature.

    Attribute values are never split into lists, so ``class="x y"`` stays
    a plain string on the target element.

    Raises:
        FeatureNotFound: If no installed tree builder provides the feature
    """
    builder_class = builder_registry.lookup(features)
    if builder_class is None:
        raise FeatureNotFound(
            f"Couldn't find a tree builder with the features you requested: {features}"
        )
    return builder_class(multi_valued_attributes=None)


def root_of(node: PageElement) -> PageElement:
    """Follow parent links up to the top of a target tree."""
    while node.parent is not None:
        node = node.parent
    return node


class SoupNodeFactory:
    """
    Creates detached BeautifulSoup nodes sharing one tree builder.

    A factory belongs to a single conversion call; the builder it owns
    decides which tags are void elements and which tags hold special
    string classes (script, style, ...).

    Example:
        factory = SoupNodeFactory("html.parser")
        body = factory.element("body")
        factory.set_attribute(body, "id", "main")
        factory.append(body, factory.text("Hello"))
    """

    def __init__(self, features: str = "html.parser", string_containers: bool = True):
        self.builder = create_tree_builder(features)
        self._string_containers = string_containers

    def document(self) -> BeautifulSoup:
        soup = BeautifulSoup("", builder=self.builder)
        # html5lib adds an html/head/body skeleton even for empty markup
        soup.clear()
        return soup

    def element(self, name: str, attrs: Optional[Dict[str, str]] = None) -> Tag:
        # Attributes go in at construction so the builder sees them, e.g.
        # for the charset substitution on <meta> tags
        return Tag(builder=self.builder, name=name, attrs=attrs)

    def set_attribute(self, element: Tag, name: str, value: str) -> None:
        element[name] = value

    def append(self, parent: Tag, child: PageElement) -> None:
        parent.append(child)

    def string_container(
        self,
        tag_name: str,
        inherited: Optional[Type[NavigableString]] = None,
    ) -> Optional[Type[NavigableString]]:
        """
        Return the string class for text nested inside ``tag_name``.

        Text keeps the class of the closest enclosing container tag, the
        same way bs4's own parsers assign them.
        """
        if not self._string_containers:
            return None
        return self.builder.string_containers.get(tag_name, inherited)

    def text(
        self,
        value: str,
        container: Optional[Type[NavigableString]] = None,
    ) -> NavigableString:
        return (container or NavigableString)(value)

    def comment(self, value: str) -> Comment:
        return Comment(value)

    def data(self, value: str) -> CData:
        return CData(value)

    def declaration(self, content: str, comment_like: bool) -> PageElement:
        """
        Create a declaration node.

        Comment-like declarations become bs4 Declaration nodes, the others
        XML processing instructions.
        """
        if comment_like:
            return Declaration(content)
        return XMLProcessingInstruction(content)

    def doctype(self, name: str, public_id: str, system_id: str) -> Doctype:
        # Empty identifiers are left out of the rendered declaration
        return Doctype.for_name_and_ids(name, public_id or None, system_id or None)
