"""
Per-client list sessions for the Reflex host.

A session bundles the controller, handlers and dialogs behind one entity
list. Each browser client holds at most one session: switching entity
disposes the previous one, and the least recently used clients are
evicted once the registry is full.
"""

import os
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable

from backoffice_ui.actions import ActionsHandler, ConfirmDialog
from backoffice_ui.columns import ColumnsHandler
from backoffice_ui.controller import ListDataController
from backoffice_ui.lib import logs
from backoffice_ui.models.common import SearchMode
from backoffice_ui.models.entities import get_entity
from backoffice_ui.notifications import CollectingNotifier
from backoffice_ui.services import get_list_service

LOG = logs.logger(__file__)

MAX_SESSIONS = int(os.getenv("BACKOFFICE_UI_MAX_SESSIONS", "500"))
SERVER_SEARCH = os.getenv("BACKOFFICE_UI_SERVER_SEARCH", "false").lower() in {
    "1",
    "true",
    "yes",
}


@dataclass
class ListSession:
    """Controller, handlers and dialogs backing one entity list for one client."""

    entity_name: str
    controller: ListDataController
    actions: ActionsHandler
    columns: ColumnsHandler
    notifier: CollectingNotifier
    delete_dialog: ConfirmDialog
    convert_dialog: ConfirmDialog

    def dispose(self) -> None:
        self.delete_dialog.close()
        self.convert_dialog.close()
        self.controller.dispose()


def create_session(entity_name: str) -> ListSession:
    entity = get_entity(entity_name)
    service = get_list_service(entity_name)
    notifier = CollectingNotifier()
    controller = ListDataController(
        service,
        entity,
        notifier,
        search_mode=SearchMode.SERVER if SERVER_SEARCH else SearchMode.LOCAL,
    )
    actions = ActionsHandler(service, controller, notifier)
    return ListSession(
        entity_name=entity_name,
        controller=controller,
        actions=actions,
        columns=ColumnsHandler(f"{entity_name}_columns", entity.columns),
        notifier=notifier,
        delete_dialog=ConfirmDialog(actions.delete),
        convert_dialog=ConfirmDialog(actions.convert),
    )


class SessionRegistry:
    """
    Sessions keyed by client token, one active entity list per client.

    Attributes:
        max_sessions: Number of clients kept before the least recently
            used session is disposed.
    """

    def __init__(
        self,
        factory: Callable[[str], ListSession] = create_session,
        max_sessions: int = MAX_SESSIONS,
    ) -> None:
        if max_sessions <= 0:
            raise ValueError(f"max_sessions must be positive, got {max_sessions}")
        self.max_sessions = max_sessions
        self._factory = factory
        self._sessions: OrderedDict[str, ListSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, client_token: str, entity_name: str) -> ListSession:
        """Return the client's session for entity_name, replacing any other."""
        session, _ = self._acquire(client_token, entity_name)
        return session

    def load(self, client_token: str, entity_name: str) -> ListSession:
        """
        Return the client's session with fresh data.

        A new session runs its first fetch; an existing one re-fetches its
        current page so a reload never shows a stale page. Fetch errors
        propagate after the controller has notified them.
        """
        session, created = self._acquire(client_token, entity_name)
        if created:
            session.controller.initialize()
        else:
            session.controller.refresh()
        return session

    def drop(self, client_token: str) -> None:
        session = self._sessions.pop(client_token, None)
        if session is not None:
            session.dispose()

    def _acquire(self, client_token: str, entity_name: str) -> tuple[ListSession, bool]:
        session = self._sessions.get(client_token)
        if session is not None and session.entity_name == entity_name:
            self._sessions.move_to_end(client_token)
            return session, False

        if session is not None:
            LOG.info(
                "Client %s switched from %s to %s",
                client_token,
                session.entity_name,
                entity_name,
            )
            self.drop(client_token)

        LOG.info("Creating %s session for client %s", entity_name, client_token)
        session = self._factory(entity_name)
        self._sessions[client_token] = session
        while len(self._sessions) > self.max_sessions:
            evicted, old = self._sessions.popitem(last=False)
            LOG.info("Evicting %s session for client %s", old.entity_name, evicted)
            old.dispose()
        return session, True
