"""Data model for capabilities layers."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LayerNode:
    """A named, selectable layer found in a capabilities document."""

    name: str
    title: str
    crs: list[str] = field(default_factory=list)
