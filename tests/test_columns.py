"""Tests for ColumnsHandler persistence and visibility."""

from unittest.mock import MagicMock

import pytest

from backoffice_ui.columns import Column, ColumnsHandler
from backoffice_ui.models.entities import get_entity

DEFAULTS = [
    Column("number", "Number"),
    Column("vendor", "Vendor"),
    Column("notes", "Notes", visible=False, sortable=False),
]


def test_defaults_without_saved_state(disk_cache):
    handler = ColumnsHandler("po_columns", DEFAULTS, cache=disk_cache)

    assert [c.key for c in handler.visible_columns] == ["number", "vendor"]
    assert handler.visible_count == 2


def test_save_persists_and_closes_dialog(disk_cache):
    handler = ColumnsHandler("po_columns", DEFAULTS, cache=disk_cache)
    handler.open_manage()
    handler.toggle("vendor")
    handler.set_visible("notes", True)

    handler.save()

    assert handler.manage_open is False
    reloaded = ColumnsHandler("po_columns", DEFAULTS, cache=disk_cache)
    assert [c.key for c in reloaded.visible_columns] == ["number", "notes"]


def test_saved_state_merges_by_key(disk_cache):
    disk_cache.set("po_columns", {"number": False, "removed": True})
    columns = DEFAULTS + [Column("status", "Status")]

    handler = ColumnsHandler("po_columns", columns, cache=disk_cache)

    visible = {c.key: c.visible for c in handler.columns}
    assert visible == {"number": False, "vendor": True, "notes": False, "status": True}


def test_unsaved_toggles_are_not_persisted(disk_cache):
    handler = ColumnsHandler("po_columns", DEFAULTS, cache=disk_cache)
    handler.toggle("number")
    handler.close_manage()

    reloaded = ColumnsHandler("po_columns", DEFAULTS, cache=disk_cache)
    assert reloaded.visible_count == 2


def test_load_failure_falls_back_to_defaults():
    cache = MagicMock()
    cache.get.side_effect = OSError("disk gone")

    handler = ColumnsHandler("po_columns", DEFAULTS, cache=cache)

    assert handler.visible_count == 2


def test_accepts_entity_column_specs(disk_cache):
    entity = get_entity("purchase_orders")

    handler = ColumnsHandler("purchase_orders_columns", entity.columns, cache=disk_cache)

    assert "dueDate" not in [c.key for c in handler.visible_columns]
    assert len(handler.columns) == len(entity.columns)


def test_unknown_key_raises(disk_cache):
    handler = ColumnsHandler("po_columns", DEFAULTS, cache=disk_cache)

    with pytest.raises(KeyError):
        handler.toggle("missing")


def test_columns_are_copies(disk_cache):
    handler = ColumnsHandler("po_columns", DEFAULTS, cache=disk_cache)

    handler.columns[0].visible = False

    assert handler.visible_count == 2
    assert DEFAULTS[0].visible is True
