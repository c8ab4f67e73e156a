"""
Column visibility for entity lists.

Each list keeps its visible columns under a storage key in a DiskCache,
so the choice survives restarts. Saved visibility is merged onto the
entity's default columns by key: columns added since the last save keep
their default, and saved keys that no longer exist are ignored.
"""

from dataclasses import asdict, dataclass
from functools import cache
from typing import Sequence

from backoffice_ui.lib import logs, paths
from backoffice_ui.lib.caches import DiskCache
from backoffice_ui.models.entities import ColumnSpec

LOG = logs.logger(__file__)

_CACHE_NAME = "backoffice_ui"


@dataclass
class Column:
    """A table column and whether it is shown."""

    key: str
    label: str
    visible: bool = True
    sortable: bool = True

    @classmethod
    def from_spec(cls, spec: ColumnSpec) -> "Column":
        return cls(spec.key, spec.label, spec.visible, spec.sortable)

    def to_dict(self) -> dict:
        return asdict(self)


@cache
def default_cache() -> DiskCache:
    """Return the shared column preference cache."""
    return DiskCache(paths.cache_dir(_CACHE_NAME), namespace="columns")


class ColumnsHandler:
    """
    Column visibility state with a manage-columns dialog flag.

    Attributes:
        storage_key: Cache key the visibility map is saved under.
        manage_open: True while the manage-columns dialog is shown.
    """

    def __init__(
        self,
        storage_key: str,
        columns: Sequence[Column | ColumnSpec],
        cache: DiskCache | None = None,
    ) -> None:
        self.storage_key = storage_key
        self.manage_open = False
        self._cache = cache if cache is not None else default_cache()
        self._columns = [
            Column.from_spec(c) if isinstance(c, ColumnSpec) else Column(**asdict(c))
            for c in columns
        ]
        self._apply_saved()

    @property
    def columns(self) -> list[Column]:
        return [Column(**asdict(c)) for c in self._columns]

    @property
    def visible_columns(self) -> list[Column]:
        return [c for c in self.columns if c.visible]

    @property
    def visible_count(self) -> int:
        return sum(1 for c in self._columns if c.visible)

    def toggle(self, key: str) -> None:
        column = self._find(key)
        column.visible = not column.visible

    def set_visible(self, key: str, checked: bool) -> None:
        self._find(key).visible = bool(checked)

    def open_manage(self) -> None:
        self.manage_open = True

    def close_manage(self) -> None:
        self.manage_open = False

    def save(self) -> None:
        """Persist the visibility map and close the manage dialog."""
        visibility = {c.key: c.visible for c in self._columns}
        self._cache.set(self.storage_key, visibility)
        LOG.info("Saved columns for %s: %s visible", self.storage_key, self.visible_count)
        self.close_manage()

    def _find(self, key: str) -> Column:
        for column in self._columns:
            if column.key == key:
                return column
        raise KeyError(f"Unknown column: {key}")

    def _apply_saved(self) -> None:
        try:
            entry = self._cache.get(self.storage_key)
        except Exception as exc:
            LOG.warning(
                "Could not load saved columns for %s, using defaults: %s",
                self.storage_key,
                exc,
            )
            return
        if entry is None or not isinstance(entry.value, dict):
            return
        for column in self._columns:
            saved = entry.value.get(column.key)
            if isinstance(saved, bool):
                column.visible = saved
