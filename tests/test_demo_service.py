"""Tests for DemoListService and the service factory."""

import pytest

from backoffice_ui.data.demo_records import DEMO_RECORDS
from backoffice_ui.models.common import SortDirection
from backoffice_ui.models.entities import ENTITIES, get_entity
from backoffice_ui.services import DemoListService, ListServiceImpl, get_list_service


@pytest.fixture
def demo():
    return DemoListService(get_entity("purchase_orders"))


def test_every_entity_has_demo_records():
    assert set(DEMO_RECORDS) == set(ENTITIES)


def test_pages_are_sliced(demo):
    page = demo.list_records(page=2, page_size=5)

    assert page.total == 12
    assert [r["_id"] for r in page.items] == ["po-6", "po-7", "po-8", "po-9", "po-10"]
    assert page.has_more is True


def test_status_tab_filters(demo):
    page = demo.list_records(entity_filter="PENDING", page_size=50)

    assert page.total == 3
    assert {r["status"] for r in page.items} == {"PENDING"}


def test_search_filter_uses_entity_fields(demo):
    page = demo.list_records(filters={"search": "northwind"}, page_size=50)

    assert page.total == 3
    assert all(r["vendorInfo"]["vendor_name"] == "Northwind Traders" for r in page.items)


def test_vendor_and_date_filters(demo):
    page = demo.list_records(
        filters={"vendor": "v-1", "fromDate": "2025-01-15", "toDate": "2025-02-10"},
        page_size=50,
    )

    assert [r["_id"] for r in page.items] == ["po-4", "po-8"]


def test_sort_descending_by_amount(demo):
    page = demo.list_records(
        sort_by="TotalAmount", sort_direction=SortDirection.DESC, page_size=3
    )

    assert [r["_id"] for r in page.items] == ["po-12", "po-11", "po-10"]


def test_delete_removes_record(demo):
    demo.delete_record("po-1")

    assert demo.list_records(page_size=50).total == 11


def test_clone_adds_record_first(demo):
    clone = demo.clone_record("po-2")

    items = demo.list_records(page_size=50).items
    assert items[0]["_id"] == clone["_id"]
    assert clone["purchaseOrderId"] == "PO-1002"


def test_convert_marks_record(demo):
    result = demo.convert_record("po-3", {"warehouse": "main"})

    assert result.success is True
    assert result.data == {"source": "po-3", "warehouse": "main"}
    record = next(r for r in demo.list_records(page_size=50).items if r["_id"] == "po-3")
    assert record["status"] == "CONVERTED"


def test_missing_record_raises(demo):
    with pytest.raises(LookupError):
        demo.delete_record("nope")


def test_unsupported_actions_raise():
    service = DemoListService(get_entity("expenses"))

    with pytest.raises(NotImplementedError):
        service.convert_record("ex-1")
    with pytest.raises(NotImplementedError):
        service.print_or_download("ex-1")


def test_instances_do_not_share_records():
    entity = get_entity("purchase_orders")
    first, second = DemoListService(entity), DemoListService(entity)

    first.delete_record("po-1")

    assert second.list_records(page_size=50).total == 12


def test_factory_resolves_kinds(monkeypatch):
    get_list_service.cache_clear()
    monkeypatch.delenv("BACKOFFICE_UI_SERVICE", raising=False)

    assert isinstance(get_list_service("quotations"), DemoListService)
    assert isinstance(get_list_service("quotations", "impl"), ListServiceImpl)
    assert get_list_service("quotations") is get_list_service("quotations")


def test_factory_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unknown list service kind"):
        get_list_service("quotations", "spark")


def test_factory_rejects_unknown_entity():
    with pytest.raises(ValueError, match="Unknown entity"):
        get_list_service("products", "demo")
