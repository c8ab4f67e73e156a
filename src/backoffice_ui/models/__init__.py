"""
Data models for the back-office list UI.

This package provides:
- List state models (PaginationState, ListSnapshot, Notification)
- Record page and action result models
- The entity registry describing each list screen

All models use Python dataclasses.
"""

from backoffice_ui.models.common import (
    ListSnapshot,
    Notification,
    NotificationKind,
    PaginationState,
    SearchMode,
    SortDirection,
)
from backoffice_ui.models.entities import (
    ENTITIES,
    ColumnSpec,
    Endpoint,
    EntityConfig,
    get_entity,
)
from backoffice_ui.models.records import ActionResult, Record, RecordPage, record_id

__all__ = [
    "ActionResult",
    "ColumnSpec",
    "ENTITIES",
    "Endpoint",
    "EntityConfig",
    "ListSnapshot",
    "Notification",
    "NotificationKind",
    "PaginationState",
    "Record",
    "RecordPage",
    "SearchMode",
    "SortDirection",
    "get_entity",
    "record_id",
]
