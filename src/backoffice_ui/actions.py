"""
Write actions for entity lists.

ActionsHandler runs delete/clone/convert/print calls against an entity's
ListService with the standard flow:

    call service -> notify success -> refresh the current page -> return

Failures are logged, reported through the notifier and raised as
ActionError. ConfirmDialog wraps an action with the open/confirm/close
state of a confirmation dialog, which stays open when the action fails so
the user can retry or cancel.
"""

from typing import Any, Callable

from backoffice_ui.controller import ListDataController
from backoffice_ui.lib import logs
from backoffice_ui.models.records import ActionResult
from backoffice_ui.notifications import (
    LoggingNotifier,
    Notifier,
    notify_error,
    notify_success,
)
from backoffice_ui.services.list_service import ListService

LOG = logs.logger(__file__)


class ActionError(Exception):
    """Raised when a write action fails; the message is user-facing."""


class ActionsHandler:
    """
    Executes write actions for one entity list.

    Attributes:
        service: Service issuing the write calls.
        controller: Controller refreshed after each successful action.
    """

    def __init__(
        self,
        service: ListService,
        controller: ListDataController,
        notifier: Notifier | None = None,
    ) -> None:
        self.service = service
        self.controller = controller
        self._notifier = notifier if notifier is not None else LoggingNotifier()

    @property
    def label(self) -> str:
        return self.service.entity.label

    def delete(self, record_id: str) -> ActionResult:
        return self._execute(
            "delete",
            record_id,
            lambda: self.service.delete_record(record_id),
            f"{self.label.capitalize()} deleted successfully!",
        )

    def clone(self, record_id: str) -> dict:
        return self._execute(
            "clone",
            record_id,
            lambda: self.service.clone_record(record_id),
            f"{self.label.capitalize()} cloned successfully!",
        )

    def convert(self, record_id: str, **options: Any) -> ActionResult:
        target = self.service.entity.convert_label
        message = (
            f"{self.label.capitalize()} converted to {target} successfully!"
            if target
            else f"{self.label.capitalize()} converted successfully!"
        )
        return self._execute(
            "convert",
            record_id,
            lambda: self.service.convert_record(record_id, options or None),
            message,
        )

    def print_or_download(self, record_id: str) -> str:
        """Return the document URL for a record; no refresh is triggered."""
        self._check_id(record_id)
        try:
            return self.service.print_or_download(record_id)
        except Exception as exc:
            message = str(exc) or f"Failed to print {self.label}"
            LOG.error("Error printing %s %s: %s", self.label, record_id, exc, exc_info=True)
            notify_error(self._notifier, message)
            raise ActionError(message) from exc

    def _check_id(self, record_id: str) -> None:
        if not record_id:
            message = f"Invalid {self.label} selected"
            notify_error(self._notifier, message)
            raise ActionError(message)

    def _execute(
        self,
        verb: str,
        record_id: str,
        call: Callable[[], Any],
        success_message: str,
    ) -> Any:
        self._check_id(record_id)
        LOG.info("Executing %s on %s %s", verb, self.label, record_id)
        try:
            result = call()
        except Exception as exc:
            message = str(exc) or f"Failed to {verb} {self.label}"
            LOG.error(
                "Error executing %s on %s %s: %s",
                verb,
                self.label,
                record_id,
                exc,
                exc_info=True,
            )
            notify_error(self._notifier, message)
            raise ActionError(message) from exc

        if isinstance(result, ActionResult) and not result.success:
            message = result.message or f"Failed to {verb} {self.label}"
            LOG.warning("%s %s %s rejected: %s", verb, self.label, record_id, message)
            notify_error(self._notifier, message)
            raise ActionError(message)

        notify_success(self._notifier, success_message)
        try:
            self.controller.refresh()
        except Exception:
            # The controller has already logged and notified the fetch failure
            LOG.warning("Refresh after %s of %s %s failed", verb, self.label, record_id)
        return result


class ConfirmDialog:
    """
    Open/confirm/close state for a confirmation dialog around one action.

    The wrapped action is called as action(record_id, **options), e.g.
    ConfirmDialog(handler.delete) or ConfirmDialog(handler.convert).
    """

    def __init__(self, action: Callable[..., Any]) -> None:
        self.action = action
        self.is_open = False
        self.record_id = ""
        self.options: dict[str, Any] = {}
        self.result: Any = None

    def open(self, record_id: str, **options: Any) -> None:
        self.is_open = True
        self.record_id = record_id
        self.options = dict(options)
        self.result = None

    def update_options(self, **options: Any) -> None:
        self.options.update(options)

    def close(self) -> None:
        self.is_open = False
        self.record_id = ""
        self.options = {}

    def confirm(self) -> bool:
        """
        Run the action for the selected record.

        Returns:
            True when the action succeeded and the dialog closed, False when
            it failed and the dialog stays open.
        """
        if not self.is_open:
            LOG.warning("Confirm called on a closed dialog")
            return False
        try:
            self.result = self.action(self.record_id, **self.options)
        except ActionError as exc:
            LOG.info("Dialog stays open after failed action: %s", exc)
            return False
        self.close()
        return True
