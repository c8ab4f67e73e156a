"""
Record page and action result models.

Entity records themselves stay plain JSON dictionaries: the list
controller only relies on their `_id` and the entity's search fields.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from backoffice_ui.models.common import PaginationState

Record = dict[str, Any]


@dataclass(slots=True)
class RecordPage:
    """Represents a single page of entity records."""

    items: Sequence[Record]
    total: int
    page: int
    page_size: int

    @property
    def has_more(self) -> bool:
        """Return True when additional pages are available."""
        if len(self.items) < self.page_size:
            return False
        return self.page * self.page_size < self.total

    @property
    def pagination(self) -> PaginationState:
        return PaginationState(current=self.page, page_size=self.page_size, total=self.total)


@dataclass(slots=True)
class ActionResult:
    """Outcome of a write action reported by the backend."""

    success: bool
    message: str | None = None
    data: Any = field(default=None)


def record_id(record: Mapping[str, Any]) -> str:
    """Return the identifier of a record (`_id`, falling back to `id`)."""
    value = record.get("_id", record.get("id"))
    return str(value) if value is not None else ""
