"""Resolution of the service extent from a parsed capabilities tree."""

import logging
import math
from typing import Any

from wms_themes.core.config import GEOGRAPHIC_CRS
from wms_themes.core.layer_extractor import find_root_layer
from wms_themes.models.extent import ExtentInfo
from wms_themes.utils.xml_tree import as_list, attributes_of, text_of

logger = logging.getLogger(__name__)


def _to_finite(value: Any) -> float | None:
    """Parse a value as a finite float, None if it is not one."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _parse_bounds(values: list[Any]) -> tuple[float, float, float, float] | None:
    numbers = [_to_finite(value) for value in values]
    if any(number is None for number in numbers):
        return None
    return tuple(numbers)


def extent_from_bounding_boxes(root_layer: dict[str, Any]) -> ExtentInfo | None:
    """
    Use the first BoundingBox whose coordinates are all finite numbers.

    Args:
        root_layer: Root service layer node

    Returns:
        ExtentInfo in the bounding box CRS, or None if no box is usable
    """
    for index, node in enumerate(as_list(root_layer.get("BoundingBox"))):
        attrs = attributes_of(node)
        bounds = _parse_bounds([attrs.get("minx"), attrs.get("miny"), attrs.get("maxx"), attrs.get("maxy")])
        if bounds is None:
            logger.debug(f"Ignoring BoundingBox #{index}: non-numeric coordinates {attrs}")
            continue

        # WMS 1.3.0 uses CRS, older documents SRS
        crs = attrs.get("CRS") or attrs.get("SRS")
        return ExtentInfo.from_bounds(bounds, crs)

    return None


def extent_from_geographic_box(root_layer: dict[str, Any]) -> ExtentInfo | None:
    """
    Use the EX_GeographicBoundingBox of the root layer.

    Args:
        root_layer: Root service layer node

    Returns:
        ExtentInfo in EPSG:4326, or None if the box is missing or invalid
    """
    # First geographic box only; the element may be repeated
    geo_box = next(iter(as_list(root_layer.get("EX_GeographicBoundingBox"))), None)
    if not isinstance(geo_box, dict):
        return None

    bounds = _parse_bounds(
        [
            text_of(geo_box.get("westBoundLongitude")),
            text_of(geo_box.get("southBoundLatitude")),
            text_of(geo_box.get("eastBoundLongitude")),
            text_of(geo_box.get("northBoundLatitude")),
        ]
    )
    if bounds is None:
        logger.debug("Ignoring EX_GeographicBoundingBox: non-numeric bounds")
        return None

    return ExtentInfo.from_bounds(bounds, GEOGRAPHIC_CRS)


def resolve_extent(tree: dict[str, Any]) -> ExtentInfo | None:
    """
    Resolve the extent of the root service layer.

    BoundingBox elements are tried first (first valid one wins, no CRS is
    preferred), then the geographic bounding box.

    Args:
        tree: Parsed capabilities tree

    Returns:
        ExtentInfo, or None if the document declares no usable extent
    """
    root_layer = find_root_layer(tree)

    extent_info = extent_from_bounding_boxes(root_layer) or extent_from_geographic_box(root_layer)
    if extent_info is None:
        logger.warning("No valid extent found in capabilities; theme will use the client default view")
    else:
        logger.info(f"Resolved extent {list(extent_info.extent)} ({extent_info.map_crs or 'no CRS'})")

    return extent_info
