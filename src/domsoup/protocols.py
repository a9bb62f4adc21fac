"""Protocol definitions for the W3C DOM source tree."""

from typing import Any, Iterable, Optional, Protocol


class SourceAttributes(Protocol):
    """
    Ordered attribute collection of a source element (a DOM NamedNodeMap).

    Items are attribute nodes exposing ``nodeName`` and ``nodeValue``.
    """

    @property
    def length(self) -> int: ...

    def item(self, index: int) -> Any: ...


class SourceNode(Protocol):
    """
    Node of a source tree following the Python DOM binding.

    xml.dom.minidom nodes and the html5lib "dom" tree builder both satisfy
    this protocol.
    """

    nodeType: int
    nodeName: str
    nodeValue: Optional[str]
    attributes: Optional[SourceAttributes]
    childNodes: Iterable["SourceNode"]
    parentNode: Optional["SourceNode"]


class SourceDocumentType(SourceNode, Protocol):
    """Document type declaration node."""

    name: Optional[str]
    publicId: Optional[str]
    systemId: Optional[str]
