"""Deep comparison of BeautifulSoup trees for use in tests."""

from typing import Any, List, Optional

from bs4.element import NavigableString, PageElement, Tag


def _describe(node: PageElement) -> str:
    if isinstance(node, Tag):
        return node.name
    return type(node).__name__


def _attribute_value(value: Any) -> str:
    # Builders with multi-valued attributes store class="x y" as a list
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def _compare_tags(expected: Tag, actual: Tag, path: str, differences: List[str]) -> None:
    if expected.name != actual.name:
        differences.append(
            f"{path}: Different tag names - expected '{expected.name}' but was '{actual.name}'"
        )

    if len(expected.attrs) != len(actual.attrs):
        differences.append(
            f"{path}: Different number of attributes - expected {len(expected.attrs)} "
            f"but was {len(actual.attrs)}"
        )

    for key, value in expected.attrs.items():
        if key not in actual.attrs:
            differences.append(f"{path}: Missing attribute '{key}'")
            continue
        expected_value = _attribute_value(value)
        actual_value = _attribute_value(actual.attrs[key])
        if expected_value != actual_value:
            differences.append(
                f"{path}: Attribute '{key}' expected '{expected_value}' but was '{actual_value}'"
            )

    for key, value in actual.attrs.items():
        if key not in expected.attrs:
            differences.append(
                f"{path}: Unexpected attribute '{key}' with value '{_attribute_value(value)}'"
            )


def _compare(
    expected: Optional[PageElement],
    actual: Optional[PageElement],
    path: str,
    differences: List[str],
) -> None:
    if expected is None and actual is None:
        return
    if expected is None:
        differences.append(f"{path}: Expected node is None, but actual is {type(actual).__name__}")
        return
    if actual is None:
        differences.append(f"{path}: Actual node is None, but expected is {type(expected).__name__}")
        return

    if type(expected) is not type(actual):
        differences.append(
            f"{path}: Different node types - expected {type(expected).__name__} "
            f"but was {type(actual).__name__}"
        )
        return

    if isinstance(expected, NavigableString):
        if str(expected) != str(actual):
            differences.append(
                f"{path}: {type(expected).__name__} content differs - "
                f"expected {str(expected)!r} but was {str(actual)!r}"
            )
        return

    if not isinstance(expected, Tag) or not isinstance(actual, Tag):
        return
    _compare_tags(expected, actual, path, differences)

    expected_children = expected.contents
    actual_children = actual.contents
    if len(expected_children) != len(actual_children):
        differences.append(
            f"{path}: Different number of children - expected {len(expected_children)} "
            f"but was {len(actual_children)}"
        )

    for index, (expected_child, actual_child) in enumerate(zip(expected_children, actual_children)):
        _compare(expected_child, actual_child, f"{path}/[{index}]/{_describe(expected_child)}", differences)


def compare_nodes(expected: Optional[PageElement], actual: Optional[PageElement]) -> List[str]:
    """
    Compare two BeautifulSoup trees node by node.

    Node classes must match exactly. Tags are compared by name and by their
    attribute names and values, strings by content, and children pairwise
    in document order.

    Returns:
        Human-readable differences, empty when the trees are equal
    """
    differences: List[str] = []
    _compare(expected, actual, "", differences)
    return differences


def assert_nodes_equal(
    expected: Optional[PageElement],
    actual: Optional[PageElement],
    message: Optional[str] = None,
) -> None:
    """
    Assert that two BeautifulSoup trees are deeply equal.

    Raises:
        AssertionError: Listing every difference found
    """
    differences = compare_nodes(expected, actual)
    if differences:
        prefix = f"{message} ==> " if message else ""
        raise AssertionError(prefix + "Nodes are not equal:\n" + "\n".join(differences))
