"""Conversion of XML documents into plain dict/list trees."""

import xml.etree.ElementTree as ET
from typing import Any

# Keys used for attributes and mixed text, matching the xml2js convention
ATTR_KEY = "$"
TEXT_KEY = "_"


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def element_to_node(element: ET.Element) -> Any:
    """
    Convert an element into a generic tree node.

    A child tag that appears once becomes a bare node, a repeated child tag
    becomes a list in document order. An element holding only text becomes
    that string.

    Args:
        element: Element to convert

    Returns:
        String or dictionary node
    """
    text = (element.text or "").strip()
    attributes = {local_name(key): value for key, value in element.attrib.items()}
    children = list(element)

    if not attributes and not children:
        return text

    node: dict[str, Any] = {}
    if attributes:
        node[ATTR_KEY] = attributes
    if text:
        node[TEXT_KEY] = text

    for child in children:
        key = local_name(child.tag)
        value = element_to_node(child)
        if key not in node:
            node[key] = value
        elif isinstance(node[key], list):
            node[key].append(value)
        else:
            node[key] = [node[key], value]

    return node


def parse_xml_tree(xml: str | bytes) -> dict[str, Any]:
    """
    Parse an XML document into a generic tree keyed by the root element name.

    Args:
        xml: XML document text

    Returns:
        Dictionary with a single key, the root element's local name

    Raises:
        ET.ParseError: If the document is not well-formed
    """
    root = ET.fromstring(xml)
    return {local_name(root.tag): element_to_node(root)}


def as_list(value: Any) -> list:
    """Coerce a tree value into a list of 0..n entries."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def text_of(node: Any) -> str | None:
    """
    Get the text value of a tree node.

    Returns:
        The text of a bare string node or the mixed text of a dict node,
        None if the node carries no text
    """
    if isinstance(node, str):
        return node
    if isinstance(node, dict):
        return node.get(TEXT_KEY)
    return None


def attributes_of(node: Any) -> dict[str, str]:
    """Get the attribute mapping of a tree node (empty if it has none)."""
    if isinstance(node, dict):
        return node.get(ATTR_KEY, {})
    return {}
