"""Normalization of the on-disk layouts of themes.json and themesConfig.json.

themes.json has been written in several layouts over time:

- a bare list of theme records
- ``{"themes": [...]}``, a list wrapped under ``themes``
- ``{"themes": {"items": [...], "subdirs": [...], "backgroundLayers": [...]}}``

All of them are reduced to one canonical ThemesStore.
"""

import logging
from enum import Enum
from typing import Any

from wms_themes.models.themes_store import ThemesConfigStore, ThemesStore

logger = logging.getLogger(__name__)


class StoreShape(Enum):
    """Layout of a themes.json document."""

    BARE_SEQUENCE = "bare_sequence"
    WRAPPED_SEQUENCE = "wrapped_sequence"
    CANONICAL = "canonical"
    EMPTY = "empty"


def detect_shape(document: Any) -> StoreShape:
    """
    Detect the layout of a themes.json document.

    Args:
        document: Decoded JSON document

    Returns:
        StoreShape of the document (EMPTY for anything unrecognized)
    """
    if isinstance(document, list):
        return StoreShape.BARE_SEQUENCE
    if isinstance(document, dict):
        themes = document.get("themes")
        if isinstance(themes, list):
            return StoreShape.WRAPPED_SEQUENCE
        if isinstance(themes, dict):
            return StoreShape.CANONICAL
    return StoreShape.EMPTY


def _records(value: Any) -> list[dict]:
    """Keep only the dict records of a sequence."""
    if not isinstance(value, list):
        return []
    return [record for record in value if isinstance(record, dict)]


def _sequence(value: Any) -> list:
    return list(value) if isinstance(value, list) else []


def normalize_themes_document(document: Any) -> ThemesStore:
    """
    Reduce any known themes.json layout to a canonical ThemesStore.

    Unknown top-level keys are dropped, missing subdirs/backgroundLayers
    default to empty lists. Normalizing the serialized result again yields
    an equal store.

    Args:
        document: Decoded JSON document

    Returns:
        Canonical ThemesStore
    """
    shape = detect_shape(document)
    logger.debug(f"themes.json layout: {shape.value}")

    if shape is StoreShape.BARE_SEQUENCE:
        return ThemesStore(items=_records(document))

    if shape is StoreShape.WRAPPED_SEQUENCE:
        return ThemesStore(items=_records(document["themes"]))

    if shape is StoreShape.CANONICAL:
        themes = document["themes"]
        return ThemesStore(
            items=_records(themes.get("items")),
            subdirs=_sequence(themes.get("subdirs")),
            background_layers=_sequence(themes.get("backgroundLayers")),
        )

    return ThemesStore()


def normalize_themes_config_document(document: Any) -> ThemesConfigStore:
    """
    Reduce a themesConfig.json document to a canonical ThemesConfigStore.

    Accepts a bare list or a list wrapped under ``themes``; anything else
    yields an empty store.

    Args:
        document: Decoded JSON document

    Returns:
        Canonical ThemesConfigStore
    """
    if isinstance(document, list):
        return ThemesConfigStore(themes=_records(document))
    if isinstance(document, dict):
        return ThemesConfigStore(themes=_records(document.get("themes")))
    return ThemesConfigStore()
