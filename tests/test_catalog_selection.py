# tests/test_catalog_selection.py

"""Tests for the component catalog and the selection model."""

from pathlib import Path

import pytest

from langpack.core.catalog import Catalog, default_catalog
from langpack.core.exceptions import (
    CatalogError,
    EmptySelectionError,
    ImmutableComponentError,
    UnknownComponentError,
)
from langpack.core.selection import Selection

# --------------------------------------------------------------------------- #
# Catalog
# --------------------------------------------------------------------------- #
def test_default_catalog_lists_required_first():
    catalog = default_catalog()
    components = catalog.list_components()

    assert components[0].id == "id"
    assert components[0].required is True
    assert sum(1 for c in components if c.required) == 1
    assert catalog.ids()[:3] == ["id", "zh", "ja"]


def test_required_entries_move_to_front_keeping_order():
    catalog = Catalog.from_dicts([
        {"id": "zh", "displayName": "Chinese"},
        {"id": "fr", "displayName": "French", "required": True},
        {"id": "es", "displayName": "Spanish"},
    ])
    assert catalog.ids() == ["fr", "zh", "es"]


def test_duplicate_ids_rejected():
    with pytest.raises(CatalogError) as exc:
        Catalog.from_dicts([
            {"id": "zh", "displayName": "Chinese"},
            {"id": "zh", "displayName": "Chinese again"},
        ])
    assert "duplicate" in str(exc.value)


@pytest.mark.parametrize("bad_id", ["en", "ZH", "chinese", "z", ""])
def test_invalid_component_ids_rejected(bad_id: str):
    with pytest.raises(CatalogError):
        Catalog.from_dicts([{"id": bad_id, "displayName": "X"}])


def test_unknown_component():
    catalog = default_catalog()
    with pytest.raises(UnknownComponentError) as exc:
        catalog.get("xx")
    assert exc.value.component_id == "xx"
    assert "zh" in str(exc.value)


def test_catalog_from_yaml(tmp_path: Path):
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "components:\n"
        "  - id: zh\n"
        "    displayName: Chinese\n"
        "    sizeEstimate: ~110 MB\n"
        "  - id: ja\n"
        "    displayName: Japanese\n",
        encoding="utf-8",
    )
    catalog = Catalog.from_yaml(path)
    assert catalog.ids() == ["zh", "ja"]
    assert catalog.get("zh").size_estimate == "~110 MB"


def test_catalog_from_yaml_without_components(tmp_path: Path):
    path = tmp_path / "catalog.yaml"
    path.write_text("languages: [zh]\n", encoding="utf-8")
    with pytest.raises(CatalogError):
        Catalog.from_yaml(path)

# --------------------------------------------------------------------------- #
# Selection
# --------------------------------------------------------------------------- #
def test_defaults_follow_catalog_flags():
    selection = Selection(default_catalog())
    assert selection.selected_ids() == ["id", "zh", "ja", "es", "ar"]


def test_required_component_always_selected():
    selection = Selection(default_catalog(), defaults=False)
    assert selection.selected_ids() == ["id"]

    with pytest.raises(ImmutableComponentError) as exc:
        selection.toggle("id", False)
    assert exc.value.component_id == "id"
    assert selection.is_selected("id")


def test_toggling_required_on_is_allowed():
    selection = Selection(default_catalog(), defaults=False)
    selection.toggle("id", True)
    assert selection.is_selected("id")


def test_selected_ids_follow_catalog_order_not_selection_order():
    selection = Selection(default_catalog(), defaults=False)
    selection.select(["es", "zh"])
    assert selection.selected_ids() == ["id", "zh", "es"]


def test_deselect_optional():
    selection = Selection(default_catalog())
    selection.deselect(["ja", "ar"])
    assert selection.selected_ids() == ["id", "zh", "es"]


def test_toggle_unknown_component():
    selection = Selection(default_catalog())
    with pytest.raises(UnknownComponentError):
        selection.toggle("xx", True)


def test_validate_fails_only_when_everything_is_deselected():
    catalog = Catalog.from_dicts([
        {"id": "zh", "displayName": "Chinese"},
        {"id": "es", "displayName": "Spanish", "defaultSelected": True},
    ])
    selection = Selection(catalog)
    selection.validate()

    selection.toggle("es", False)
    # not validated on toggle
    assert selection.selected_ids() == []
    with pytest.raises(EmptySelectionError):
        selection.validate()
    with pytest.raises(EmptySelectionError):
        selection.snapshot()

    selection.toggle("zh", True)
    assert [c.id for c in selection.snapshot()] == ["zh"]


def test_catalog_with_required_component_always_validates():
    selection = Selection(default_catalog(), defaults=False)
    selection.validate()
    assert [c.id for c in selection.snapshot()] == ["id"]
