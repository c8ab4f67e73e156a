"""Tests for the disk cache, JSON log rendering and path helpers."""

from dataclasses import dataclass

from backoffice_ui.lib import logs, objects, paths
from backoffice_ui.lib.caches import DiskCache


def test_cache_round_trip_records_write_time(disk_cache):
    disk_cache.set("po_columns", {"number": True})

    entry = disk_cache.get("po_columns")

    assert entry.value == {"number": True}
    assert entry.stored_at > 0
    assert disk_cache.get("missing") is None


def test_namespaces_do_not_collide(tmp_path):
    columns = DiskCache(tmp_path / "prefs", namespace="columns")
    filters = DiskCache(tmp_path / "prefs", namespace="filters")
    try:
        columns.set("invoices", ["a"])
        filters.set("invoices", ["b"])

        assert columns.get("invoices").value == ["a"]
        assert filters.get("invoices").value == ["b"]
    finally:
        columns.close()
        filters.close()


def test_to_json_handles_dataclasses_and_truncates():
    @dataclass
    class Point:
        x: int

    assert objects.to_json({"p": Point(1)}) == '{"p":{"x":1}}'
    assert objects.to_json("x" * 50, max_length=10).startswith('"xxxxxxxxx...')


def test_cache_dir_honors_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("BACKOFFICE_UI_CACHE_DIR", str(tmp_path))

    assert paths.cache_dir("prefs") == tmp_path / "prefs"


def test_cache_dir_defaults_to_temp(monkeypatch):
    monkeypatch.delenv("BACKOFFICE_UI_CACHE_DIR", raising=False)

    assert paths.cache_dir("prefs") == paths.temp_dir() / "prefs"


def test_logger_names_are_package_scoped():
    assert logs.logger("/some/path/controller.py").name == "backoffice_ui.controller"
