"""
REST-backed implementation of ListService.

This module provides the production list service that:
- Reads paged entity lists from the backend's list endpoints
- Issues delete/clone/convert/print calls against the entity's endpoints
- Normalizes counterparty fields so search paths resolve consistently

The backend answers with an envelope of the form:

    {"code": 200, "data": [...], "totalRecords": 42, "message": "..."}

A `code` other than 200 is treated as a failure even on HTTP 200.
"""

from typing import Any, Mapping

from benedict import benedict

from backoffice_ui.lib import clients, logs
from backoffice_ui.lib.clients import ApiError
from backoffice_ui.models.common import SortDirection
from backoffice_ui.models.entities import Endpoint
from backoffice_ui.models.records import ActionResult, Record, RecordPage
from backoffice_ui.services.list_service import ListService

LOG = logs.logger(__file__)

# Nested objects the backend sometimes returns under a different key
_COUNTERPARTY_ALIASES = {
    "vendorInfo": ("vendorId", "vendorDetails"),
    "customerInfo": ("customerId", "customerDetails"),
}


def _normalize_record(record: Mapping[str, Any]) -> Record:
    """Copy a record, filling counterparty info objects from their aliases."""
    normalized = dict(record)
    for target, aliases in _COUNTERPARTY_ALIASES.items():
        if isinstance(normalized.get(target), dict):
            continue
        for alias in aliases:
            if isinstance(normalized.get(alias), dict):
                normalized[target] = normalized[alias]
                break
    return normalized


def _query_value(value: Any) -> Any:
    if isinstance(value, (list, tuple, set)):
        return ",".join(str(v) for v in value)
    return value


def _check_envelope(body: Mapping[str, Any], fallback: str) -> None:
    code = body.get("code")
    if code is not None and code != 200:
        message = body.get("message")
        if isinstance(message, list):
            message = ", ".join(str(m) for m in message)
        raise ApiError(message or fallback, status=code if isinstance(code, int) else None)


class ListServiceImpl(ListService):
    """
    Production list service talking to the REST backend.

    Required Environment Variables:
        BACKOFFICE_API_URL: Backend base URL

    Optional Environment Variables:
        BACKOFFICE_API_TOKEN: Bearer token
        BACKOFFICE_API_TIMEOUT: Request timeout in seconds
    """

    def list_records(
        self,
        entity_filter: str = "ALL",
        page: int = 1,
        page_size: int = 10,
        filters: Mapping[str, Any] | None = None,
        sort_by: str = "",
        sort_direction: SortDirection = SortDirection.ASC,
    ) -> RecordPage:
        """
        Fetch one page of records from the entity's list endpoint.

        Both page/pageSize and skip/limit are sent because the backend's
        list endpoints accept one or the other.
        """
        page = max(page, 1)
        page_size = max(page_size, 1)
        params = self._list_params(
            entity_filter, page, page_size, filters or {}, sort_by, sort_direction
        )
        LOG.info("Listing %s with params: %s", self.entity.plural, params)

        body = clients.fetch_with_auth(self.entity.list_path, params=params)
        _check_envelope(body, f"Failed to fetch {self.entity.plural}")

        data = body.get("data") or []
        if not isinstance(data, list):
            raise ApiError(f"Unexpected {self.entity.plural} payload from server")
        items = [_normalize_record(item) for item in data if isinstance(item, dict)]
        pagination = body.get("pagination")
        if not isinstance(pagination, dict):
            pagination = {}
        total = (
            body.get("totalRecords")
            or body.get("total")
            or pagination.get("total")
        )
        total = int(total) if total else len(items)

        return RecordPage(items=items, total=total, page=page, page_size=page_size)

    def delete_record(self, record_id: str) -> ActionResult:
        body = self._call(self.entity.delete, record_id, "delete")
        _check_envelope(body, f"Failed to delete {self.entity.label}")
        return ActionResult(success=True, message=body.get("message"), data=body.get("data"))

    def clone_record(self, record_id: str) -> Record:
        body = self._call(self.entity.clone, record_id, "clone")
        _check_envelope(body, f"Failed to clone {self.entity.label}")
        cloned = body.get("data") or body.get("clonedDebitNote")
        if not isinstance(cloned, dict):
            raise ApiError("Invalid response format from server")
        return _normalize_record(cloned)

    def convert_record(
        self, record_id: str, options: Mapping[str, Any] | None = None
    ) -> ActionResult:
        body = self._call(self.entity.convert, record_id, "convert", options)
        _check_envelope(body, f"Failed to convert {self.entity.label}")
        return ActionResult(success=True, message=body.get("message"), data=body.get("data"))

    def print_or_download(self, record_id: str) -> str:
        body = self._call(self.entity.print_download, record_id, "print")
        _check_envelope(body, f"Failed to print/download {self.entity.label}")
        data = body.get("data")
        if isinstance(data, str):
            url = data
        else:
            b = benedict(body, keypath_separator=None)
            url = (
                b.get("pdfUrl")
                or b.get(["data", "url"])
                or b.get(["data", "pdfUrl"])
            )
        if not url:
            raise ApiError(f"No document URL returned for {self.entity.label}")
        return str(url)

    def _call(
        self,
        endpoint: Endpoint | None,
        record_id: str,
        action: str,
        options: Mapping[str, Any] | None = None,
    ) -> dict:
        if endpoint is None:
            raise NotImplementedError(
                f"{action.capitalize()} is not supported for {self.entity.plural}"
            )
        request = endpoint.request(record_id, dict(options) if options else None)
        LOG.info("%s %s %s", action.capitalize(), self.entity.label, record_id)
        return clients.fetch_with_auth(**request)

    @staticmethod
    def _list_params(
        entity_filter: str,
        page: int,
        page_size: int,
        filters: Mapping[str, Any],
        sort_by: str,
        sort_direction: SortDirection,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "page": page,
            "pageSize": page_size,
            "skip": (page - 1) * page_size,
            "limit": page_size,
        }
        if entity_filter and entity_filter != "ALL":
            params["status"] = entity_filter
        for key, value in filters.items():
            if value in (None, "", [], ()):
                continue
            params[key] = _query_value(value)
        if sort_by:
            params["sortBy"] = sort_by
            params["sortDirection"] = SortDirection.parse(sort_direction).value
        return params
