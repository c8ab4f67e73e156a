"""
Reflex state management for the back-office list UI.

This module contains the application state class that mirrors one
ListDataController per entity list into reactive vars, forwards UI events
to the controller, the actions handler and the columns handler, and turns
queued notifications into toasts.

Sessions live in a module-level SessionRegistry keyed by client token so
their services and caches are never serialized with the state.
"""

import os

import reflex as rx

from backoffice_ui.actions import ActionError
from backoffice_ui.lib import logs
from backoffice_ui.models.common import NotificationKind
from backoffice_ui.models.entities import ENTITIES
from backoffice_ui.sessions import ListSession, SessionRegistry
from backoffice_ui.utils import field_value

LOG = logs.logger(__file__)

# Configuration from environment
DEFAULT_ENTITY = os.getenv("BACKOFFICE_UI_ENTITY", "purchase_orders")
PAGE_SIZE_OPTIONS = ["10", "25", "50", "100"]

APP_TITLE = "Back Office"


_SESSIONS = SessionRegistry()


def _cell(record: dict, key: str) -> str:
    value = field_value(record, key)
    if value is None:
        return ""
    if isinstance(value, float):
        return f"{value:,.2f}"
    return str(value)


class ListState(rx.State):
    """
    Main application state for the entity lists.

    Handles listing, search, sort, pagination, column visibility and the
    delete/convert confirmation dialogs.
    """

    entity_name: str = DEFAULT_ENTITY
    entity_title: str = ""
    entity_label: str = ""
    statuses: list[str] = ["ALL"]
    can_clone: bool = False
    can_convert: bool = False
    can_print: bool = False

    # Each row is [record id, cell, cell, ...] for the visible columns
    rows: list[list[str]] = []
    columns: list[dict] = []
    visible_columns: list[dict] = []

    current: int = 1
    page_size: int = 10
    total: int = 0
    page_count: int = 1

    sort_by: str = ""
    sort_direction: str = "asc"
    entity_filter: str = "ALL"
    search_term: str = ""
    is_loading: bool = False

    manage_columns_open: bool = False
    dialog_action: str = ""
    dialog_record_id: str = ""

    @rx.var
    def result_summary(self) -> str:
        """Generate summary text for the current page."""
        base = f"{self.total} {self.entity_title.lower() or 'records'}"
        if self.search_term.strip():
            return f'{base} matching "{self.search_term.strip()}"'
        return base

    @rx.var
    def is_empty(self) -> bool:
        return not self.is_loading and len(self.rows) == 0

    @rx.var
    def entity_options(self) -> list[str]:
        return list(ENTITIES)

    @rx.var
    def page_size_options(self) -> list[str]:
        return PAGE_SIZE_OPTIONS

    @rx.event
    def on_load(self):
        """Event handler for initial page load."""
        self.is_loading = True
        try:
            _SESSIONS.load(self.router.session.client_token, self.entity_name)
        except Exception as e:
            LOG.error("Page load failed: %s", e, exc_info=True)
        return self._sync()

    @rx.event
    def select_entity(self, entity_name: str):
        """Switch the page to another entity list."""
        if entity_name not in ENTITIES:
            LOG.warning("Ignoring unknown entity: %s", entity_name)
            return
        self.entity_name = entity_name
        self.dialog_action = ""
        self.dialog_record_id = ""
        return self.on_load()

    @rx.event
    def search(self, query: str):
        self._session().controller.search(query)
        return self._sync()

    @rx.event
    def clear_search(self):
        self._session().controller.search_clear()
        return self._sync()

    @rx.event
    def change_page(self, page_index: int):
        return self._run(lambda s: s.controller.change_page(page_index))

    @rx.event
    def prev_page(self):
        return self.change_page(self.current - 2)

    @rx.event
    def next_page(self):
        return self.change_page(self.current)

    @rx.event
    def change_page_size(self, size: str):
        return self._run(lambda s: s.controller.change_page_size(size))

    @rx.event
    def sort(self, column_key: str):
        sortable = {c.key for c in self._session().columns.columns if c.sortable}
        if column_key not in sortable:
            return
        return self._run(lambda s: s.controller.request_sort(column_key))

    @rx.event
    def change_tab(self, tab: str):
        return self._run(lambda s: s.controller.change_tab(tab))

    @rx.event
    def refresh(self):
        return self._run(lambda s: s.controller.refresh())

    @rx.event
    def reset_filters(self):
        return self._run(lambda s: s.controller.reset_filters())

    @rx.event
    def toggle_column(self, key: str):
        self._session().columns.toggle(key)
        return self._sync()

    @rx.event
    def open_manage_columns(self):
        self._session().columns.open_manage()
        return self._sync()

    @rx.event
    def close_manage_columns(self):
        self._session().columns.close_manage()
        return self._sync()

    @rx.event
    def save_columns(self):
        try:
            self._session().columns.save()
        except Exception as e:
            LOG.error("Failed to save columns: %s", e, exc_info=True)
            return rx.toast.error("Could not save column preferences")
        return self._sync()

    @rx.event
    def open_delete(self, record_id: str):
        self._session().delete_dialog.open(record_id)
        return self._sync()

    @rx.event
    def open_convert(self, record_id: str):
        self._session().convert_dialog.open(record_id)
        return self._sync()

    @rx.event
    def close_dialog(self):
        session = self._session()
        session.delete_dialog.close()
        session.convert_dialog.close()
        return self._sync()

    @rx.event
    def confirm_dialog(self):
        session = self._session()
        dialog = (
            session.delete_dialog
            if self.dialog_action == "delete"
            else session.convert_dialog
        )
        dialog.confirm()
        return self._sync()

    @rx.event
    def clone(self, record_id: str):
        return self._run(lambda s: s.actions.clone(record_id))

    @rx.event
    def print_or_download(self, record_id: str):
        session = self._session()
        try:
            url = session.actions.print_or_download(record_id)
        except ActionError:
            return self._sync()
        return [rx.redirect(url, is_external=True), *self._sync()]

    def _run(self, operation):
        """Run a controller/action call; failures were already notified."""
        try:
            operation(self._session())
        except Exception as e:
            LOG.error("List operation failed: %s", e)
        return self._sync()

    def _session(self) -> ListSession:
        return _SESSIONS.get(self.router.session.client_token, self.entity_name)

    def _sync(self) -> list:
        """Mirror controller state into vars and return pending toasts."""
        session = self._session()
        entity = session.controller.entity
        snapshot = session.controller.snapshot()

        self.entity_title = entity.title
        self.entity_label = entity.label
        self.statuses = list(entity.statuses)
        self.can_clone = entity.clone is not None
        self.can_convert = entity.convert is not None
        self.can_print = entity.print_download is not None

        visible = session.columns.visible_columns
        self.columns = [c.to_dict() for c in session.columns.columns]
        self.visible_columns = [c.to_dict() for c in visible]
        self.rows = [
            [str(r.get("_id", r.get("id", "")))] + [_cell(r, c.key) for c in visible]
            for r in snapshot.records
        ]

        self.current = snapshot.pagination.current
        self.page_size = snapshot.pagination.page_size
        self.total = snapshot.pagination.total
        self.page_count = snapshot.pagination.page_count
        self.sort_by = snapshot.sort_by
        self.sort_direction = snapshot.sort_direction.value
        self.entity_filter = snapshot.entity_filter
        self.search_term = snapshot.search_term
        self.is_loading = snapshot.loading

        self.manage_columns_open = session.columns.manage_open
        if session.delete_dialog.is_open:
            self.dialog_action = "delete"
            self.dialog_record_id = session.delete_dialog.record_id
        elif session.convert_dialog.is_open:
            self.dialog_action = "convert"
            self.dialog_record_id = session.convert_dialog.record_id
        else:
            self.dialog_action = ""
            self.dialog_record_id = ""

        toasts = []
        for notification in session.notifier.drain():
            if notification.kind is NotificationKind.ERROR:
                toasts.append(rx.toast.error(notification.message))
            elif notification.kind is NotificationKind.SUCCESS:
                toasts.append(rx.toast.success(notification.message))
            else:
                toasts.append(rx.toast.info(notification.message))
        return toasts
