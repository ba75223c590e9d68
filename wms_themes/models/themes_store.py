"""Data models for the persisted theme stores."""

from dataclasses import dataclass, field
from typing import Any


def matches_key(record: Any, key: str) -> bool:
    """
    Check whether a stored record belongs to a theme key.

    A record matches when its ``id`` or its ``name`` equals the key exactly.
    """
    if not isinstance(record, dict):
        return False
    return record.get("id") == key or record.get("name") == key


@dataclass
class ThemesStore:
    """Canonical content of themes.json."""

    items: list[dict] = field(default_factory=list)
    subdirs: list = field(default_factory=list)
    background_layers: list = field(default_factory=list)

    def remove(self, key: str) -> int:
        """
        Drop every item matching a theme key.

        Returns:
            Number of removed items
        """
        kept = [item for item in self.items if not matches_key(item, key)]
        removed = len(self.items) - len(kept)
        self.items = kept
        return removed

    def to_dict(self) -> dict:
        return {
            "themes": {
                "items": self.items,
                "subdirs": self.subdirs,
                "backgroundLayers": self.background_layers,
            }
        }


@dataclass
class ThemesConfigStore:
    """Canonical content of themesConfig.json."""

    themes: list[dict] = field(default_factory=list)

    def remove(self, key: str) -> int:
        """
        Drop every summary matching a theme key.

        Returns:
            Number of removed summaries
        """
        kept = [theme for theme in self.themes if not matches_key(theme, key)]
        removed = len(self.themes) - len(kept)
        self.themes = kept
        return removed

    def to_dict(self) -> dict:
        return {"themes": self.themes}
