"""Data model for QWC2 theme entries."""

from dataclasses import dataclass, field

from wms_themes.core.config import IMAGE_FORMAT, TILED, TRANSPARENT, WMS_VERSION
from wms_themes.models.extent import ExtentInfo


@dataclass
class Sublayer:
    """One selectable layer of a theme."""

    name: str
    title: str
    visibility: bool = False
    crs: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        result = {
            "name": self.name,
            "title": self.title,
            "visibility": self.visibility,
        }
        # Only written when the capabilities declared CRS values for the layer
        if self.crs:
            result["crs"] = list(self.crs)
        return result


@dataclass
class ThemeEntry:
    """Client-facing descriptor of one map project."""

    id: str
    name: str
    title: str
    abstract: str
    url: str
    sublayers: list[Sublayer] = field(default_factory=list)
    default: bool = True
    extent_info: ExtentInfo | None = None
    version: str = WMS_VERSION
    format: str = IMAGE_FORMAT
    transparent: bool = TRANSPARENT
    tiled: bool = TILED

    def to_dict(self) -> dict:
        """
        Convert the entry to its JSON representation.

        Extent related keys are left out entirely when no extent is known,
        and mapCrs/initialBbox are left out when the extent has no CRS.

        Returns:
            Dictionary with camelCase keys as read by the web client
        """
        result = {
            "id": self.id,
            "name": self.name,
            "title": self.title,
            "abstract": self.abstract,
            "url": self.url,
            "version": self.version,
            "format": self.format,
            "transparent": self.transparent,
            "tiled": self.tiled,
            "sublayers": [sublayer.to_dict() for sublayer in self.sublayers],
            "default": self.default,
        }

        if self.extent_info is not None:
            result["extent"] = list(self.extent_info.extent)
            if self.extent_info.map_crs:
                result["mapCrs"] = self.extent_info.map_crs
            result["center"] = list(self.extent_info.center)
            if self.extent_info.bbox is not None:
                result["initialBbox"] = self.extent_info.bbox.to_dict()

        return result

    def to_summary(self) -> dict:
        """Minimal record stored in themesConfig.json."""
        return {"id": self.id, "name": self.name, "default": self.default}
