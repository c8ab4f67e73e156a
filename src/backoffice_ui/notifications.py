"""
Notification port for user-facing feedback.

Controllers and action handlers never render feedback themselves; they
call notify(kind, message) on an injected Notifier. The view layer decides
how messages appear (the Reflex state turns them into toasts).
"""

from typing import Protocol

from backoffice_ui.lib import logs
from backoffice_ui.models.common import Notification, NotificationKind

LOG = logs.logger(__file__)


class Notifier(Protocol):
    def notify(self, kind: NotificationKind, message: str) -> None: ...


class LoggingNotifier:
    """Notifier that only writes messages to the log."""

    def notify(self, kind: NotificationKind, message: str) -> None:
        if kind is NotificationKind.ERROR:
            LOG.error("Notification: %s", message)
        else:
            LOG.info("Notification (%s): %s", kind.value, message)


class CollectingNotifier:
    """
    Notifier that buffers messages until the view drains them.

    Used by the Reflex state, which converts drained notifications into
    toast events after each handler runs.
    """

    def __init__(self) -> None:
        self._pending: list[Notification] = []

    def notify(self, kind: NotificationKind, message: str) -> None:
        self._pending.append(Notification(kind=kind, message=message))

    @property
    def pending(self) -> list[Notification]:
        return list(self._pending)

    def drain(self) -> list[Notification]:
        """Return and clear all buffered notifications."""
        drained, self._pending = self._pending, []
        return drained


def notify_error(notifier: Notifier | None, message: str) -> None:
    if notifier is not None:
        notifier.notify(NotificationKind.ERROR, message)


def notify_success(notifier: Notifier | None, message: str) -> None:
    if notifier is not None:
        notifier.notify(NotificationKind.SUCCESS, message)
