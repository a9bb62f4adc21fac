"""Conversion of W3C DOM trees into BeautifulSoup trees."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Type, cast
from xml.dom import Node

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, Tag

from .config import ConverterConfig
from .nodes import SoupNodeFactory, create_tree_builder
from .protocols import SourceDocumentType, SourceNode

logger = logging.getLogger(__name__)


class _Tracker:
    """Remembers the target node built for one particular source node."""

    __slots__ = ("wanted", "found")

    def __init__(self, wanted: Optional[SourceNode] = None):
        self.wanted = wanted
        self.found: Optional[PageElement] = None

    def track(self, source: SourceNode, target: PageElement) -> None:
        # Identity, not equality: structurally equal siblings are distinct
        if self.wanted is not None and source is self.wanted:
            self.found = target


class DomToSoupConverter:
    """
    Converts W3C DOM nodes into detached BeautifulSoup nodes.

    The source tree is only read. Every call builds a new target tree, so
    one converter can be shared between threads.

    Example:
        converter = DomToSoupConverter()
        soup = converter.convert(dom_document)
        body = converter.convert_whole_tree(dom_body)
        body.parent.name  # 'html'
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        """
        Initialize the converter.

        Args:
            config: Converter configuration (uses defaults if None)

        Raises:
            FeatureNotFound: If the configured tree builder is not installed
        """
        self.config = config or ConverterConfig()
        # Fail early on an unknown builder feature
        create_tree_builder(self.config.features)

    def _factory(self) -> SoupNodeFactory:
        return SoupNodeFactory(self.config.features, self.config.string_containers)

    def convert(self, node: Optional[SourceNode]) -> Optional[PageElement]:
        """
        Convert a node and its subtree.

        Only the subtree rooted at ``node`` is converted, so the result has
        no parent. Use convert_whole_tree() when the result must be
        navigable towards its ancestors and siblings.

        Args:
            node: DOM node to convert

        Returns:
            The equivalent BeautifulSoup node, or None if node is None or of
            an unsupported kind
        """
        if node is None:
            return None
        return self._convert(node, self._factory(), _Tracker())

    def convert_whole_tree(self, node: Optional[SourceNode]) -> Optional[PageElement]:
        """
        Convert the entire tree containing a node.

        Conversion starts at the root of the DOM tree, and the target node
        built for ``node`` is returned. It is attached inside the complete
        target tree, so parents, siblings and the root are reachable.

        Args:
            node: DOM node of interest

        Returns:
            The BeautifulSoup node corresponding to ``node``, or None if node
            is None or of an unsupported kind
        """
        if node is None:
            return None

        root = node
        while root.parentNode is not None:
            root = root.parentNode

        tracker = _Tracker(node)
        self._convert(root, self._factory(), tracker)
        if tracker.found is None:
            logger.debug(f"No target node built for {node.nodeName!r} (type {node.nodeType})")
        return tracker.found

    def convert_document(self, document: Optional[SourceNode]) -> Optional[BeautifulSoup]:
        """Convert a DOM document; returns None unless the result is a document."""
        if document is None:
            return None
        converted = self.convert(document)
        return converted if isinstance(converted, BeautifulSoup) else None

    def convert_element(self, element: Optional[SourceNode]) -> Optional[Tag]:
        """Convert a DOM element; returns None unless the result is an element."""
        if element is None:
            return None
        converted = self.convert(element)
        if isinstance(converted, Tag) and not isinstance(converted, BeautifulSoup):
            return converted
        return None

    def _convert(
        self,
        node: SourceNode,
        factory: SoupNodeFactory,
        tracker: _Tracker,
        container: Optional[Type[NavigableString]] = None,
    ) -> Optional[PageElement]:
        """Build the target node for one source node, recursing into children."""
        node_type = node.nodeType
        target: PageElement

        if node_type == Node.ELEMENT_NODE:
            tag_name = node.nodeName.lower()
            element = factory.element(tag_name, self._attributes(node))
            tracker.track(node, element)
            return self._fill(
                node, element, factory, tracker, factory.string_container(tag_name, container)
            )

        if node_type == Node.DOCUMENT_NODE:
            document = factory.document()
            tracker.track(node, document)
            return self._fill(node, document, factory, tracker, container)

        if node_type == Node.TEXT_NODE:
            target = factory.text(node.nodeValue or "", container)
        elif node_type == Node.COMMENT_NODE:
            target = factory.comment(node.nodeValue or "")
        elif node_type == Node.CDATA_SECTION_NODE:
            target = factory.data(node.nodeValue or "")
        elif node_type == Node.PROCESSING_INSTRUCTION_NODE:
            target = self._processing_instruction(node, factory)
        elif node_type == Node.DOCUMENT_TYPE_NODE:
            doctype = cast(SourceDocumentType, node)
            target = factory.doctype(
                doctype.name or "",
                doctype.publicId or "",
                doctype.systemId or "",
            )
        else:
            logger.debug(f"Skipping unsupported node {node.nodeName!r} (type {node_type})")
            return None

        tracker.track(node, target)
        return target

    def _fill(
        self,
        node: SourceNode,
        target: Tag,
        factory: SoupNodeFactory,
        tracker: _Tracker,
        container: Optional[Type[NavigableString]],
    ) -> Tag:
        """Append the converted children of ``node`` to ``target``."""
        for child in node.childNodes:
            converted = self._convert(child, factory, tracker, container)
            if converted is not None:
                factory.append(target, converted)

        return target

    @staticmethod
    def _attributes(node: SourceNode) -> Dict[str, str]:
        """Attribute names and values of ``node`` in source order."""
        attributes = node.attributes
        if attributes is None:
            return {}
        pairs = (attributes.item(index) for index in range(attributes.length))
        return {attr.nodeName: attr.nodeValue for attr in pairs}

    @staticmethod
    def _processing_instruction(node: SourceNode, factory: SoupNodeFactory) -> PageElement:
        target = node.nodeName
        if target == "xml":
            return factory.declaration("xml", comment_like=False)
        # Other instructions fall back to a comment-like declaration
        return factory.declaration(f"{target} {node.nodeValue or ''}", comment_like=True)


_default_converter: Optional[DomToSoupConverter] = None


def _get_default_converter() -> DomToSoupConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = DomToSoupConverter()
    return _default_converter


def convert(node: Optional[SourceNode]) -> Optional[PageElement]:
    """Convert a DOM node and its subtree with the default configuration."""
    return _get_default_converter().convert(node)


def convert_whole_tree(node: Optional[SourceNode]) -> Optional[PageElement]:
    """Convert the whole DOM tree of a node with the default configuration."""
    return _get_default_converter().convert_whole_tree(node)
