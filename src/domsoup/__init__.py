"""
domsoup - Convert W3C DOM trees into BeautifulSoup trees.

Usage:
    from xml.dom import minidom
    from domsoup import DomToSoupConverter

    document = minidom.parseString("<html><body id='main'>Hello</body></html>")
    converter = DomToSoupConverter()

    soup = converter.convert(document)
    body = converter.convert_whole_tree(document.getElementsByTagName("body")[0])
    body.parent.name  # 'html'
"""

__version__ = "1.0.0"

from .config import ConverterConfig
from .converter import DomToSoupConverter, convert, convert_whole_tree
from .logging_config import setup_logging
from .markdown import HtmlToMarkdown
from .nodes import SoupNodeFactory, root_of
from .testing import assert_nodes_equal, compare_nodes

__all__ = [
    "__version__",
    # Conversion
    "DomToSoupConverter",
    "convert",
    "convert_whole_tree",
    # Config
    "ConverterConfig",
    # Target nodes
    "SoupNodeFactory",
    "root_of",
    # Markdown
    "HtmlToMarkdown",
    # Comparison
    "compare_nodes",
    "assert_nodes_equal",
    # Logging
    "setup_logging",
]
