"""Data model for resolved service extents."""

import math
from dataclasses import dataclass

Bounds = tuple[float, float, float, float]


def _check_finite(bounds: Bounds) -> None:
    if len(bounds) != 4:
        raise ValueError(f"Bounds must have 4 values, got {len(bounds)}")
    if not all(math.isfinite(value) for value in bounds):
        raise ValueError(f"Bounds must be finite numbers: {bounds}")


@dataclass(frozen=True)
class BoundingBox:
    """Extent expressed in a specific coordinate reference system."""

    crs: str
    bounds: Bounds

    def __post_init__(self):
        _check_finite(self.bounds)

    def to_dict(self) -> dict:
        return {"crs": self.crs, "bounds": list(self.bounds)}


@dataclass(frozen=True)
class ExtentInfo:
    """
    Spatial extent of a map service.

    ``extent`` is ordered as (min_x, min_y, max_x, max_y). When a bounding box
    is attached its bounds equal the extent.
    """

    extent: Bounds
    map_crs: str | None = None
    bbox: BoundingBox | None = None

    def __post_init__(self):
        _check_finite(self.extent)
        if self.bbox is not None and tuple(self.bbox.bounds) != tuple(self.extent):
            raise ValueError("Bounding box bounds must equal the extent")

    @property
    def center(self) -> tuple[float, float]:
        """
        Midpoint of the extent.

        Returns:
            Tuple of (x, y)
        """
        min_x, min_y, max_x, max_y = self.extent
        # Halve before adding: the sum of two finite bounds may overflow
        return (min_x / 2 + max_x / 2, min_y / 2 + max_y / 2)

    @classmethod
    def from_bounds(cls, bounds: Bounds, crs: str | None = None) -> "ExtentInfo":
        """
        Create an extent, attaching a bounding box when the CRS is known.

        Args:
            bounds: (min_x, min_y, max_x, max_y)
            crs: Coordinate reference system identifier, if known

        Returns:
            ExtentInfo instance
        """
        bounds = tuple(bounds)
        bbox = BoundingBox(crs=crs, bounds=bounds) if crs else None
        return cls(extent=bounds, map_crs=crs, bbox=bbox)
