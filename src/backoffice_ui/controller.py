"""
Generic list data controller shared by every entity list.

One ListDataController instance backs one mounted list screen. It owns:

- The current page of records and its pagination metadata
- Sort state (column and direction) and server-side filter state
- The active search term plus a copy of the last fetched page
  (the full-dataset cache) that local search filters without re-fetching

All mutation goes through the operations below. User-facing feedback is
sent through the injected Notifier; the view decides how it is rendered.

Every fetch takes a new request token. A response is applied only when it
belongs to the latest request and the controller has not been disposed,
so a slow earlier response can never overwrite a newer page.
"""

import dataclasses
import os
from typing import Any, Mapping, Sequence

from backoffice_ui.lib import logs
from backoffice_ui.models.common import (
    ListSnapshot,
    PaginationState,
    SearchMode,
    SortDirection,
)
from backoffice_ui.models.entities import EntityConfig
from backoffice_ui.models.records import Record, RecordPage
from backoffice_ui.notifications import LoggingNotifier, Notifier, notify_error
from backoffice_ui.services.list_service import ListService
from backoffice_ui.utils import coerce_int, matches_query

LOG = logs.logger(__file__)

DEFAULT_PAGE_SIZE = int(os.getenv("BACKOFFICE_UI_PAGE_SIZE", "10"))

_SEARCH_FILTER = "search"


def _clean_filters(values: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop filter entries without a value."""
    if not values:
        return {}
    return {k: v for k, v in values.items() if v not in (None, "", [], ())}


class ListDataController:
    """
    Paged, sortable, searchable view over one entity's records.

    Attributes:
        service: Paged-list capability for the entity.
        entity: Entity configuration (labels and search fields).
        search_mode: LOCAL filters the cached page, SERVER re-fetches with
            the term as the "search" filter.
    """

    def __init__(
        self,
        service: ListService,
        entity: EntityConfig,
        notifier: Notifier | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        search_mode: SearchMode = SearchMode.LOCAL,
    ) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.service = service
        self.entity = entity
        self.search_mode = search_mode
        self._notifier = notifier if notifier is not None else LoggingNotifier()

        self._records: list[Record] = []
        self._cache: list[Record] = []
        self._pagination = PaginationState(current=1, page_size=page_size, total=0)
        self._sort_by = ""
        self._sort_direction = SortDirection.ASC
        self._entity_filter = "ALL"
        self._filters: dict[str, Any] = {}
        self._search_term = ""
        self._searching = False
        self._loading = False

        self._token = 0
        self._initialized = False
        self._disposed = False

    # Read-only state

    @property
    def records(self) -> list[Record]:
        return list(self._records)

    @property
    def pagination(self) -> PaginationState:
        return dataclasses.replace(self._pagination)

    @property
    def sort_by(self) -> str:
        return self._sort_by

    @property
    def sort_direction(self) -> SortDirection:
        return self._sort_direction

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def searching(self) -> bool:
        return self._searching

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def entity_filter(self) -> str:
        return self._entity_filter

    @property
    def filters(self) -> dict[str, Any]:
        return dict(self._filters)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def snapshot(self) -> ListSnapshot:
        """Return an immutable copy of the current state."""
        return ListSnapshot(
            records=tuple(dict(r) for r in self._records),
            pagination=self.pagination,
            sort_by=self._sort_by,
            sort_direction=self._sort_direction,
            search_term=self._search_term,
            searching=self._searching,
            loading=self._loading,
            entity_filter=self._entity_filter,
            filters=dict(self._filters),
        )

    # Lifecycle

    def initialize(
        self,
        initial_records: Sequence[Record] | None = None,
        initial_pagination: PaginationState | Mapping[str, Any] | None = None,
    ) -> RecordPage | None:
        """
        Install server-rendered records or perform the first fetch.

        Called once by the owning view. Non-empty initial records are
        installed as-is (total defaults to their count) and no fetch
        happens; otherwise the first page is fetched immediately.
        """
        if self._initialized:
            LOG.warning("%s controller already initialized", self.entity.plural)
            return None
        self._initialized = True

        if not initial_records:
            return self.fetch_page()

        if isinstance(initial_pagination, PaginationState):
            pagination = dataclasses.replace(initial_pagination)
        elif initial_pagination:
            pagination = PaginationState.from_dict(dict(initial_pagination))
        else:
            pagination = dataclasses.replace(self._pagination)
        if pagination.total <= 0:
            pagination.total = len(initial_records)

        self._records = [dict(r) for r in initial_records]
        self._cache = list(self._records)
        self._pagination = pagination
        LOG.info(
            "Initialized %s with %s records", self.entity.plural, len(self._records)
        )
        return None

    def dispose(self) -> None:
        """Detach from the view; responses arriving later are discarded."""
        self._disposed = True
        self._loading = False

    # Fetching

    def fetch_page(
        self,
        page: int | None = None,
        page_size: int | None = None,
        sort_by: str | None = None,
        sort_direction: SortDirection | str | None = None,
        filters: Mapping[str, Any] | None = None,
        entity_filter: str | None = None,
    ) -> RecordPage:
        """
        Fetch one page and replace the controller state from it.

        Unspecified arguments default to the current state; sort_by=""
        explicitly requests server-default ordering.

        Raises:
            Exception: Whatever the service raised; prior state is kept and
                the error notification has already been sent.
        """
        page = self._pagination.current if page is None else page
        page_size = self._pagination.page_size if page_size is None else page_size
        sort_by = self._sort_by if sort_by is None else sort_by
        direction = (
            self._sort_direction
            if sort_direction is None
            else self._parse_direction(sort_direction)
        )
        filters = dict(self._filters) if filters is None else _clean_filters(filters)
        entity_filter = self._entity_filter if entity_filter is None else entity_filter

        self._token += 1
        token = self._token
        self._loading = True
        LOG.info(
            "Fetching %s page:%s page_size:%s sort:%s %s tab:%s filters:%s",
            self.entity.plural,
            page,
            page_size,
            sort_by or "-",
            direction.value,
            entity_filter,
            filters,
        )
        try:
            result = self.service.list_records(
                entity_filter=entity_filter,
                page=page,
                page_size=page_size,
                filters=filters,
                sort_by=sort_by,
                sort_direction=direction,
            )
        except Exception as exc:
            LOG.error("Error fetching %s: %s", self.entity.plural, exc, exc_info=True)
            notify_error(self._notifier, str(exc) or f"Failed to fetch {self.entity.plural}")
            raise
        finally:
            if token == self._token:
                self._loading = False

        if token != self._token or self._disposed:
            LOG.info(
                "Discarding %s response for request %s (latest:%s disposed:%s)",
                self.entity.plural,
                token,
                self._token,
                self._disposed,
            )
            return result

        items = [dict(r) for r in result.items]
        self._records = items
        self._cache = list(items)
        self._pagination = result.pagination
        self._sort_by = sort_by
        self._sort_direction = direction
        self._filters = filters
        self._entity_filter = entity_filter
        if self.search_mode is SearchMode.SERVER:
            self._search_term = str(filters.get(_SEARCH_FILTER, ""))
        else:
            self._search_term = ""
        return result

    def refresh(self) -> RecordPage:
        """Re-fetch the current page with the current state."""
        return self.fetch_page()

    def change_page(self, new_page_index: Any) -> RecordPage | None:
        """Fetch the page at a zero-based UI index; non-numeric input is ignored."""
        index = coerce_int(new_page_index)
        if index is None or index < 0:
            LOG.debug("Ignoring page index %r", new_page_index)
            return None
        return self.fetch_page(page=index + 1)

    def change_page_size(self, new_size: Any) -> RecordPage | None:
        """Fetch page 1 with a new page size; non-numeric input is ignored."""
        size = coerce_int(new_size)
        if size is None or size <= 0:
            LOG.debug("Ignoring page size %r", new_size)
            return None
        return self.fetch_page(page=1, page_size=size)

    def request_sort(
        self, column_key: str, explicit_direction: SortDirection | str | None = None
    ) -> tuple[str, SortDirection]:
        """
        Sort by a column and fetch page 1.

        Without an explicit direction, the active column flips between
        asc and desc while a newly selected column starts ascending.

        Returns:
            Tuple of (sort_by, sort_direction) that was requested.
        """
        if explicit_direction is not None:
            direction = self._parse_direction(explicit_direction)
        elif column_key == self._sort_by:
            direction = self._sort_direction.flipped()
        else:
            direction = SortDirection.ASC
        self.fetch_page(page=1, sort_by=column_key, sort_direction=direction)
        return column_key, direction

    def apply_filters(self, values: Mapping[str, Any]) -> RecordPage:
        """Fetch page 1 with a new set of server-side filters."""
        filters = _clean_filters(values)
        if self.search_mode is SearchMode.SERVER and self._search_term.strip():
            filters.setdefault(_SEARCH_FILTER, self._search_term)
        return self.fetch_page(page=1, filters=filters)

    def reset_filters(self) -> RecordPage:
        """Clear filters and sort, then fetch page 1."""
        return self.fetch_page(
            page=1, filters={}, sort_by="", sort_direction=SortDirection.ASC
        )

    def change_tab(self, tab: str) -> RecordPage:
        """Fetch page 1 for a status tab ("ALL" for no restriction)."""
        return self.fetch_page(page=1, entity_filter=tab or "ALL")

    # Search

    def search(self, term: str | None) -> None:
        """
        Filter records by a search term.

        In LOCAL mode the full-dataset cache (the last fetched page) is
        filtered in place; a blank term restores it. In SERVER mode the
        term is sent as the "search" filter and page 1 is fetched.
        Repeating the active term is a no-op. SERVER mode sends and
        compares the trimmed term.
        """
        term = term or ""
        if self.search_mode is SearchMode.SERVER:
            if term.strip() != self._search_term.strip():
                self._server_search(term.strip())
            return
        if term == self._search_term:
            return

        self._searching = True
        try:
            if term.strip():
                matched = [
                    r
                    for r in self._cache
                    if matches_query(r, term, self.entity.search_fields)
                ]
                self._records = matched
                self._pagination.total = len(matched)
                self._pagination.current = 1
            else:
                self._records = list(self._cache)
                self._pagination.total = len(self._cache)
            self._search_term = term
            LOG.info(
                "Searched %s for %r: %s of %s records",
                self.entity.plural,
                term,
                len(self._records),
                len(self._cache),
            )
        except Exception as exc:
            LOG.error("Error searching %s: %s", self.entity.plural, exc, exc_info=True)
            notify_error(self._notifier, str(exc) or f"Failed to search {self.entity.plural}")
        finally:
            self._searching = False

    def search_submit(self, term: str | None) -> None:
        self.search(term)

    def search_clear(self) -> None:
        self.search("")

    def _parse_direction(self, value: SortDirection | str) -> SortDirection:
        try:
            return SortDirection.parse(value)
        except ValueError as exc:
            LOG.error("Rejected sort for %s: %s", self.entity.plural, exc)
            notify_error(self._notifier, str(exc))
            raise

    def _server_search(self, term: str) -> None:
        filters = dict(self._filters)
        if term:
            filters[_SEARCH_FILTER] = term
        else:
            filters.pop(_SEARCH_FILTER, None)
        self._searching = True
        try:
            self.fetch_page(page=1, filters=filters)
        except Exception:
            # fetch_page has already logged and notified
            return
        finally:
            self._searching = False
