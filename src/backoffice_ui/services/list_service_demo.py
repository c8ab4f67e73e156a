"""
Demo implementation of ListService using in-memory data.

This service is useful for:
- Local development without a backend
- Testing the list screens with realistic records
- Demonstrating the application without network dependencies

Write actions mutate the in-memory copy, so deletes and clones show up on
the next fetch exactly as they would against the real backend.
"""

import copy
import itertools
from typing import Any, Mapping, Sequence

from backoffice_ui.data.demo_records import DEMO_RECORDS
from backoffice_ui.lib import logs
from backoffice_ui.models.common import SortDirection
from backoffice_ui.models.entities import EntityConfig
from backoffice_ui.models.records import ActionResult, Record, RecordPage, record_id
from backoffice_ui.services.list_service import ListService
from backoffice_ui.utils import field_value, matches_query, parse_date, sort_records

LOG = logs.logger(__file__)

# Filter keys that address a nested counterparty id
_COUNTERPARTY_FILTERS = {
    "vendor": ("vendorInfo._id",),
    "customer": ("customerId._id", "customerInfo._id"),
}

_DATE_FILTERS = {"fromDate", "toDate"}


class DemoListService(ListService):
    """
    In-memory list service backed by demo records.

    Supports the same filtering, sorting and paging inputs as the REST
    service. Records are deep-copied on construction so instances never
    share state.
    """

    _clone_counter = itertools.count(1)

    def __init__(
        self, entity: EntityConfig, records: Sequence[Record] | None = None
    ) -> None:
        """
        Initialize with record data.

        Args:
            entity: Entity served by this instance.
            records: Custom record list, or None to use the entity's demo records.
        """
        super().__init__(entity)
        source = DEMO_RECORDS.get(entity.name, []) if records is None else records
        self._records: list[Record] = copy.deepcopy(list(source))
        self._date_field = _date_field(entity)

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
        Return a paginated slice of records matching the status and filters.

        Args:
            entity_filter: Status tab, "ALL" for every record.
            page: Page number (1-indexed).
            page_size: Number of items per page.
            filters: Filter values; "search" matches the entity's search fields.
            sort_by: Dotted field to sort by, empty to keep insertion order.
            sort_direction: Sort direction.

        Returns:
            RecordPage with matching records and pagination metadata.
        """
        page, page_size = max(page, 1), max(page_size, 1)
        filtered = self._apply_filters(entity_filter, filters or {})
        if sort_by:
            descending = SortDirection.parse(sort_direction) is SortDirection.DESC
            filtered = sort_records(filtered, sort_by, descending=descending)

        start = (page - 1) * page_size
        items = [copy.deepcopy(r) for r in filtered[start : start + page_size]]
        return RecordPage(items=items, total=len(filtered), page=page, page_size=page_size)

    def delete_record(self, record_id: str) -> ActionResult:
        record = self._find(record_id)
        self._records.remove(record)
        LOG.info("Demo deleted %s %s", self.entity.label, record_id)
        return ActionResult(success=True, message=f"{self.entity.label} deleted")

    def clone_record(self, record_id: str) -> Record:
        clone = copy.deepcopy(self._find(record_id))
        clone["_id"] = f"{record_id}-copy-{next(self._clone_counter)}"
        self._records.insert(0, clone)
        return copy.deepcopy(clone)

    def convert_record(
        self, record_id: str, options: Mapping[str, Any] | None = None
    ) -> ActionResult:
        if self.entity.convert is None:
            return super().convert_record(record_id, options)
        record = self._find(record_id)
        record["status"] = "CONVERTED"
        return ActionResult(
            success=True,
            message=f"Converted to {self.entity.convert_label}",
            data={"source": record_id, **dict(options or {})},
        )

    def print_or_download(self, record_id: str) -> str:
        if self.entity.print_download is None:
            return super().print_or_download(record_id)
        self._find(record_id)
        return f"/demo/{self.entity.name}/{record_id}.pdf"

    def _find(self, rid: str) -> Record:
        for record in self._records:
            if record_id(record) == rid:
                return record
        raise LookupError(f"{self.entity.label.capitalize()} not found: {rid}")

    def _apply_filters(
        self, entity_filter: str, filters: Mapping[str, Any]
    ) -> list[Record]:
        records = self._records
        if entity_filter and entity_filter != "ALL":
            records = [r for r in records if r.get("status") == entity_filter]
        for key, value in filters.items():
            if value in (None, "", [], ()):
                continue
            records = [r for r in records if self._matches(r, key, value)]
        return list(records)

    def _matches(self, record: Record, key: str, value: Any) -> bool:
        if key == "search":
            return matches_query(record, str(value), self.entity.search_fields)
        if key in _DATE_FILTERS:
            return self._in_date_range(record, key, value)
        paths = _COUNTERPARTY_FILTERS.get(key, (key,))
        wanted = {str(v) for v in value} if isinstance(value, (list, tuple, set)) else {str(value)}
        return any(str(field_value(record, path)) in wanted for path in paths)

    def _in_date_range(self, record: Record, key: str, value: Any) -> bool:
        bound = parse_date(str(value))
        if bound is None or not self._date_field:
            return True
        current = parse_date(field_value(record, self._date_field))
        if current is None:
            return False
        return current >= bound if key == "fromDate" else current <= bound


def _date_field(entity: EntityConfig) -> str:
    """Return the first column that holds the record's document date."""
    for column in entity.columns:
        if column.key.endswith(("Date", "_date")):
            return column.key
    return ""
