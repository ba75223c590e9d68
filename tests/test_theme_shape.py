"""Tests for themes.json layout normalization."""

import pytest

from wms_themes.core.theme_shape import (
    StoreShape,
    detect_shape,
    normalize_themes_config_document,
    normalize_themes_document,
)
from wms_themes.models.themes_store import ThemesStore

CANONICAL = {
    "themes": {
        "items": [{"id": "a", "title": "A"}],
        "subdirs": [{"title": "Group", "items": []}],
        "backgroundLayers": [{"name": "osm"}],
    }
}


@pytest.mark.parametrize(
    "document,expected",
    [
        ([{"name": "a"}], StoreShape.BARE_SEQUENCE),
        ({"themes": [{"name": "a"}]}, StoreShape.WRAPPED_SEQUENCE),
        (CANONICAL, StoreShape.CANONICAL),
        ({}, StoreShape.EMPTY),
        (None, StoreShape.EMPTY),
        ({"themes": "broken"}, StoreShape.EMPTY),
    ],
)
def test_detect_shape(document, expected):
    """Test layout detection."""
    assert detect_shape(document) is expected


def test_bare_sequence():
    """Test that a bare list becomes the items."""
    store = normalize_themes_document([{"name": "a"}, {"name": "b"}])

    assert store == ThemesStore(items=[{"name": "a"}, {"name": "b"}])


def test_wrapped_sequence_drops_unknown_keys():
    """Test that a wrapped list becomes the items and other keys are dropped."""
    store = normalize_themes_document({"themes": [{"name": "a"}], "defaultScales": [1000]})

    assert store.to_dict() == {"themes": {"items": [{"name": "a"}], "subdirs": [], "backgroundLayers": []}}


def test_canonical_defaults():
    """Test that missing subdirs/backgroundLayers default to empty lists."""
    store = normalize_themes_document({"themes": {"items": [{"id": "a"}]}})

    assert store.subdirs == []
    assert store.background_layers == []


def test_non_record_items_dropped():
    """Test that items which are not objects are discarded."""
    store = normalize_themes_document({"themes": {"items": [{"id": "a"}, "junk", None]}})

    assert store.items == [{"id": "a"}]


def test_canonical_round_trip():
    """Test that a canonical document is returned unchanged."""
    assert normalize_themes_document(CANONICAL).to_dict() == CANONICAL


@pytest.mark.parametrize(
    "document",
    [
        [{"name": "a"}],
        {"themes": [{"name": "a"}], "extra": True},
        CANONICAL,
        {"themes": {"items": "nope", "subdirs": None}},
        {},
    ],
)
def test_normalization_is_idempotent(document):
    """Test that normalizing a normalized store changes nothing."""
    once = normalize_themes_document(document)
    twice = normalize_themes_document(once.to_dict())

    assert twice == once


def test_themes_config_shapes():
    """Test themesConfig.json normalization."""
    assert normalize_themes_config_document({"themes": [{"id": "a"}]}).themes == [{"id": "a"}]
    assert normalize_themes_config_document([{"id": "a"}]).themes == [{"id": "a"}]
    assert normalize_themes_config_document({"themes": {"items": []}}).themes == []
    assert normalize_themes_config_document({}).to_dict() == {"themes": []}
