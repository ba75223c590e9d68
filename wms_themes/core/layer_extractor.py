"""Extraction of selectable layers from a parsed capabilities tree."""

import logging
from typing import Any

from wms_themes.core.config import CAPABILITIES_ROOT
from wms_themes.models.layer import LayerNode
from wms_themes.utils.xml_tree import as_list, text_of

logger = logging.getLogger(__name__)


def find_root_layer(tree: dict[str, Any]) -> dict[str, Any]:
    """
    Locate the root service layer of a capabilities tree.

    Args:
        tree: Parsed capabilities tree

    Returns:
        Root ``Layer`` node

    Raises:
        ValueError: If the document has no Capability/Layer element
    """
    capabilities = tree.get(CAPABILITIES_ROOT)
    if not isinstance(capabilities, dict):
        raise ValueError(f"Not a WMS capabilities document: missing {CAPABILITIES_ROOT} root")

    capability = capabilities.get("Capability")
    layers = as_list(capability.get("Layer")) if isinstance(capability, dict) else []
    if not layers or not isinstance(layers[0], dict):
        raise ValueError("Capabilities document has no root layer")

    return layers[0]


def extract_layers(tree: dict[str, Any]) -> list[LayerNode]:
    """
    Extract the named child layers of the root service layer.

    Only the direct children of the root layer are inspected; groups nested
    deeper are not descended into. Children without a name are not
    selectable and are skipped. Order and duplicates are kept.

    Args:
        tree: Parsed capabilities tree

    Returns:
        List of layers in document order
    """
    root = find_root_layer(tree)
    layers = []

    for child in as_list(root.get("Layer")):
        if not isinstance(child, dict):
            continue

        name = text_of(child.get("Name"))
        if not name:
            logger.debug(f"Skipping unnamed layer: {text_of(child.get('Title'))!r}")
            continue

        title = text_of(child.get("Title")) or name
        crs = [value for value in (text_of(c) for c in as_list(child.get("CRS"))) if value]
        layers.append(LayerNode(name=name, title=title, crs=crs))

    return layers
