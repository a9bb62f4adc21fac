from xml.dom import Node

import pytest

from dom_helpers import FakeNode


@pytest.fixture
def fake_tree():
    """Document whose body mixes supported nodes and an entity reference."""
    body = FakeNode(
        Node.ELEMENT_NODE,
        "BODY",
        attributes=[("id", "t2")],
        children=[
            FakeNode(Node.TEXT_NODE, "#text", "before"),
            FakeNode(
                Node.ENTITY_REFERENCE_NODE,
                "nbsp",
                children=[FakeNode(Node.TEXT_NODE, "#text", "\xa0")],
            ),
            FakeNode(Node.TEXT_NODE, "#text", "after"),
        ],
    )
    html = FakeNode(Node.ELEMENT_NODE, "HTML", attributes=[("id", "t1")], children=[body])
    return FakeNode(Node.DOCUMENT_NODE, "#document", children=[html])
