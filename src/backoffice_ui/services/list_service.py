"""
Abstract base class defining the entity list data access contract.

Every list screen talks to one ListService bound to an EntityConfig.
Implementations must provide list_records(); write actions default to
NotImplementedError so entities without a capability fail loudly.

Implementations:
- DemoListService: Static in-memory records for development/testing
- ListServiceImpl: REST backend via requests
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from backoffice_ui.models.common import SortDirection
from backoffice_ui.models.entities import EntityConfig
from backoffice_ui.models.records import ActionResult, Record, RecordPage


class ListService(ABC):
    """
    Abstract base class for paged entity data access.

    Attributes:
        entity: The entity this service serves.
    """

    def __init__(self, entity: EntityConfig) -> None:
        self.entity = entity

    @abstractmethod
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
        Return one page of records using the provided filters.

        Args:
            entity_filter: Status tab, "ALL" for no status restriction.
            page: Page number (1-indexed).
            page_size: Number of items per page.
            filters: Server-side filter values (vendor, fromDate, search...).
            sort_by: Field to sort by, empty for server default ordering.
            sort_direction: Sort direction.
        """

    def delete_record(self, record_id: str) -> ActionResult:
        """Delete (or soft-delete) a record."""
        raise NotImplementedError(f"Deleting {self.entity.plural} is not supported")

    def clone_record(self, record_id: str) -> Record:
        """Clone a record and return the new record."""
        raise NotImplementedError(f"Cloning {self.entity.plural} is not supported")

    def convert_record(
        self, record_id: str, options: Mapping[str, Any] | None = None
    ) -> ActionResult:
        """Convert a record into its follow-up document (e.g. an invoice)."""
        raise NotImplementedError(f"Converting {self.entity.plural} is not supported")

    def print_or_download(self, record_id: str) -> str:
        """Return the URL of a printable document for the record."""
        raise NotImplementedError(f"Printing {self.entity.plural} is not supported")
