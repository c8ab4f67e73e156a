"""Shared pytest fixtures for backoffice_ui tests."""

from typing import Any, Mapping

import pytest

from backoffice_ui.controller import ListDataController
from backoffice_ui.lib.caches import DiskCache
from backoffice_ui.models.common import SortDirection
from backoffice_ui.models.entities import get_entity
from backoffice_ui.models.records import ActionResult, RecordPage
from backoffice_ui.notifications import CollectingNotifier
from backoffice_ui.services.list_service import ListService


class FakeListService(ListService):
    """Scripted ListService recording every call it receives."""

    def __init__(self, entity, records=None, total=None):
        super().__init__(entity)
        self.records = list(records or [])
        self.total = total
        self.calls: list[dict] = []
        self.error: Exception | None = None
        self.on_list = None
        self.action_calls: list[tuple] = []
        self.action_result = ActionResult(success=True, message="ok")
        self.action_error: Exception | None = None

    def list_records(
        self,
        entity_filter: str = "ALL",
        page: int = 1,
        page_size: int = 10,
        filters: Mapping[str, Any] | None = None,
        sort_by: str = "",
        sort_direction: SortDirection = SortDirection.ASC,
    ) -> RecordPage:
        self.calls.append(
            {
                "entity_filter": entity_filter,
                "page": page,
                "page_size": page_size,
                "filters": dict(filters or {}),
                "sort_by": sort_by,
                "sort_direction": sort_direction,
            }
        )
        if self.on_list is not None:
            self.on_list(len(self.calls))
        if self.error is not None:
            raise self.error
        start = (page - 1) * page_size
        items = self.records[start : start + page_size]
        total = len(self.records) if self.total is None else self.total
        return RecordPage(items=items, total=total, page=page, page_size=page_size)

    def delete_record(self, record_id):
        return self._action("delete", record_id)

    def clone_record(self, record_id):
        self._action("clone", record_id)
        return {"_id": f"{record_id}-copy"}

    def convert_record(self, record_id, options=None):
        return self._action("convert", record_id, dict(options or {}))

    def print_or_download(self, record_id):
        self._action("print", record_id)
        return f"/docs/{record_id}.pdf"

    def _action(self, name, record_id, *extra):
        self.action_calls.append((name, record_id, *extra))
        if self.action_error is not None:
            raise self.action_error
        return self.action_result


def make_records(count: int, vendor_for=None) -> list[dict]:
    """Build purchase order records; vendor_for(i) picks the vendor name."""
    return [
        {
            "_id": f"po-{i}",
            "purchaseOrderId": f"PO-{1000 + i}",
            "vendorInfo": {
                "vendor_name": vendor_for(i) if vendor_for else f"Vendor {i}",
                "phone": f"555-01{i:02d}",
            },
            "referenceNo": f"REF-{i}",
            "notes": "",
        }
        for i in range(1, count + 1)
    ]


@pytest.fixture
def entity():
    return get_entity("purchase_orders")


@pytest.fixture
def notifier():
    return CollectingNotifier()


@pytest.fixture
def service(entity):
    return FakeListService(entity, make_records(25))


@pytest.fixture
def controller(service, entity, notifier):
    return ListDataController(service, entity, notifier)


@pytest.fixture
def disk_cache(tmp_path):
    cache = DiskCache(tmp_path / "columns")
    yield cache
    cache.close()
