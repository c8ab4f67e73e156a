"""
Common state models for the back-office list UI.

This module defines the state objects shared by the list controller,
the services and the Reflex state:

- Pagination, sort and search mode values
- The immutable ListSnapshot handed to the view layer
- Notification messages emitted through the notifier port

Models that cross into Reflex vars include to_dict/from_dict methods for
JSON serialization.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SortDirection(str, Enum):
    """Sort order understood by the list endpoints."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "str | SortDirection") -> "SortDirection":
        """Return the direction for a raw value, raising ValueError if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown sort direction: {value!r}") from exc

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SearchMode(str, Enum):
    """Where search terms are applied."""

    LOCAL = "local"
    SERVER = "server"


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass
class PaginationState:
    """
    Tracks pagination state for a paged list.

    Attributes:
        current: Current page number (1-indexed).
        page_size: Number of items per page.
        total: Total number of items available.
    """

    current: int = 1
    page_size: int = 10
    total: int = 0

    @property
    def offset(self) -> int:
        """Number of records before the current page."""
        return (self.current - 1) * self.page_size

    @property
    def has_more(self) -> bool:
        """Whether pages exist after the current one."""
        return self.current * self.page_size < self.total

    @property
    def page_count(self) -> int:
        if self.total <= 0:
            return 1
        return (self.total + self.page_size - 1) // self.page_size

    def to_dict(self) -> dict:
        """Serialize using the wire names the backend returns."""
        return {"current": self.current, "pageSize": self.page_size, "total": self.total}

    @classmethod
    def from_dict(cls, data: dict | None) -> "PaginationState":
        """Deserialize from wire or snake_case names."""
        if not data:
            return cls()
        return cls(
            current=int(data.get("current", data.get("page", 1)) or 1),
            page_size=int(data.get("pageSize", data.get("page_size", 10)) or 10),
            total=int(data.get("total", 0) or 0),
        )


@dataclass(frozen=True)
class ListSnapshot:
    """
    Read-only view of a list controller's state.

    Attributes:
        records: Records currently displayed.
        pagination: Current pagination state.
        sort_by: Active sort column, empty for server default ordering.
        sort_direction: Active sort direction.
        search_term: Active search term.
        searching: True while a search pass runs.
        loading: True while a page fetch is in flight.
        entity_filter: Active status tab.
        filters: Active server-side filter values.
    """

    records: tuple[dict, ...] = ()
    pagination: PaginationState = field(default_factory=PaginationState)
    sort_by: str = ""
    sort_direction: SortDirection = SortDirection.ASC
    search_term: str = ""
    searching: bool = False
    loading: bool = False
    entity_filter: str = "ALL"
    filters: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "records": [dict(r) for r in self.records],
            "pagination": self.pagination.to_dict(),
            "sort_by": self.sort_by,
            "sort_direction": self.sort_direction.value,
            "search_term": self.search_term,
            "searching": self.searching,
            "loading": self.loading,
            "entity_filter": self.entity_filter,
            "filters": dict(self.filters),
        }


@dataclass
class Notification:
    """A user-facing message emitted by a controller or action."""

    kind: NotificationKind = NotificationKind.INFO
    message: str = ""

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "message": self.message}

    @classmethod
    def from_dict(cls, data: dict) -> "Notification":
        return cls(
            kind=NotificationKind(data.get("kind", NotificationKind.INFO.value)),
            message=data.get("message", ""),
        )
