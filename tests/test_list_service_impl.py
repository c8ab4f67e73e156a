"""Tests for the REST-backed ListServiceImpl."""

from unittest.mock import patch

import pytest

from backoffice_ui.lib.clients import ApiError
from backoffice_ui.models.common import SortDirection
from backoffice_ui.models.entities import get_entity
from backoffice_ui.services.list_service_impl import ListServiceImpl

FETCH = "backoffice_ui.lib.clients.fetch_with_auth"


@pytest.fixture
def service():
    return ListServiceImpl(get_entity("purchase_orders"))


def test_list_records_sends_paging_sort_and_filters(service):
    body = {"code": 200, "data": [{"_id": "po-1"}], "totalRecords": 42}
    with patch(FETCH, return_value=body) as fetch:
        page = service.list_records(
            entity_filter="PENDING",
            page=3,
            page_size=20,
            filters={"vendor": ["v-1", "v-2"], "fromDate": "", "toDate": None},
            sort_by="purchaseOrderDate",
            sort_direction=SortDirection.DESC,
        )

    fetch.assert_called_once_with(
        "/purchase_orders/getAllData",
        params={
            "page": 3,
            "pageSize": 20,
            "skip": 40,
            "limit": 20,
            "status": "PENDING",
            "vendor": "v-1,v-2",
            "sortBy": "purchaseOrderDate",
            "sortDirection": "desc",
        },
    )
    assert page.total == 42
    assert page.page == 3
    assert page.items == [{"_id": "po-1"}]


def test_all_tab_and_no_sort_are_omitted(service):
    with patch(FETCH, return_value={"data": []}) as fetch:
        service.list_records()

    params = fetch.call_args.kwargs["params"]
    assert "status" not in params
    assert "sortBy" not in params


def test_total_falls_back_to_nested_pagination_then_item_count(service):
    with patch(FETCH, return_value={"data": [{}, {}], "pagination": {"total": 9}}):
        assert service.list_records().total == 9
    with patch(FETCH, return_value={"data": [{}, {}]}):
        assert service.list_records().total == 2


def test_records_with_dotted_keys_are_listed(service):
    record = {"_id": "po-1", "taxBreakup": {"5.0": 12, "18.0": 40}}
    body = {"data": [record], "totalRecords": 1}
    with patch(FETCH, return_value=body):
        page = service.list_records()

    assert page.items == [record]
    assert page.total == 1


def test_counterparty_aliases_are_normalized(service):
    body = {"data": [{"_id": "po-1", "vendorId": {"vendor_name": "Acme"}}]}
    with patch(FETCH, return_value=body):
        [record] = service.list_records().items

    assert record["vendorInfo"] == {"vendor_name": "Acme"}


def test_envelope_error_code_raises(service):
    body = {"code": 400, "message": ["vendor is invalid", "date is invalid"]}
    with patch(FETCH, return_value=body):
        with pytest.raises(ApiError, match="vendor is invalid, date is invalid"):
            service.list_records()


def test_non_list_data_raises(service):
    with patch(FETCH, return_value={"data": {"items": []}}):
        with pytest.raises(ApiError):
            service.list_records()


def test_delete_uses_entity_endpoint(service):
    with patch(FETCH, return_value={"code": 200, "message": "Deleted"}) as fetch:
        result = service.delete_record("po-7")

    fetch.assert_called_once_with(
        endpoint="/purchase_orders/po-7/softDelete",
        method="PATCH",
        params=None,
        json=None,
    )
    assert result.success is True
    assert result.message == "Deleted"


def test_convert_sends_id_and_options_in_body(service):
    with patch(FETCH, return_value={"code": 200, "data": {"_id": "pu-1"}}) as fetch:
        service.convert_record("po-7", {"warehouse": "main"})

    assert fetch.call_args.kwargs["json"] == {"_id": "po-7", "warehouse": "main"}


def test_clone_returns_cloned_record(service):
    with patch(FETCH, return_value={"data": {"_id": "po-8", "customerId": {"name": "X"}}}):
        clone = service.clone_record("po-7")

    assert clone["_id"] == "po-8"
    assert clone["customerInfo"] == {"name": "X"}


def test_clone_without_record_raises(service):
    with patch(FETCH, return_value={"code": 200}):
        with pytest.raises(ApiError, match="Invalid response format"):
            service.clone_record("po-7")


def test_print_reads_url_variants():
    service = ListServiceImpl(get_entity("invoices"))
    with patch(FETCH, return_value={"pdfUrl": "https://x/1.pdf"}) as fetch:
        assert service.print_or_download("in-1") == "https://x/1.pdf"
    assert fetch.call_args.kwargs["params"] == {"invoiceId": "in-1"}

    with patch(FETCH, return_value={"data": {"url": "https://x/2.pdf"}}):
        assert service.print_or_download("in-1") == "https://x/2.pdf"
    with patch(FETCH, return_value={"data": "https://x/3.pdf"}):
        assert service.print_or_download("in-1") == "https://x/3.pdf"
    with patch(FETCH, return_value={}):
        with pytest.raises(ApiError):
            service.print_or_download("in-1")


def test_missing_capability_raises_not_implemented():
    service = ListServiceImpl(get_entity("expenses"))

    with patch(FETCH) as fetch:
        with pytest.raises(NotImplementedError, match="Clone is not supported"):
            service.clone_record("ex-1")
    fetch.assert_not_called()
