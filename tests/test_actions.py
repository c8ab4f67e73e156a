"""Tests for ActionsHandler and ConfirmDialog."""

import pytest

from backoffice_ui.actions import ActionError, ActionsHandler, ConfirmDialog
from backoffice_ui.controller import ListDataController
from backoffice_ui.models.common import NotificationKind
from backoffice_ui.models.entities import get_entity
from backoffice_ui.models.records import ActionResult, RecordPage
from backoffice_ui.services.list_service import ListService


@pytest.fixture
def handler(service, controller, notifier):
    controller.fetch_page(page=2)
    notifier.drain()
    return ActionsHandler(service, controller, notifier)


def test_delete_notifies_and_refreshes(handler, service, notifier):
    calls = len(service.calls)

    result = handler.delete("po-3")

    assert result.success is True
    assert service.action_calls == [("delete", "po-3")]
    assert len(service.calls) == calls + 1
    assert service.calls[-1]["page"] == 2
    [notification] = notifier.drain()
    assert notification.kind is NotificationKind.SUCCESS
    assert notification.message == "Purchase order deleted successfully!"


def test_clone_returns_new_record(handler, notifier):
    assert handler.clone("po-1") == {"_id": "po-1-copy"}
    assert notifier.drain()[0].message == "Purchase order cloned successfully!"


def test_convert_passes_options(handler, service, notifier):
    handler.convert("po-1", warehouse="main")

    assert service.action_calls == [("convert", "po-1", {"warehouse": "main"})]
    assert notifier.drain()[0].message == (
        "Purchase order converted to purchase successfully!"
    )


def test_empty_id_is_rejected_without_calling_service(handler, service, notifier):
    with pytest.raises(ActionError, match="Invalid purchase order selected"):
        handler.delete("")

    assert service.action_calls == []
    assert notifier.drain()[0].kind is NotificationKind.ERROR


def test_service_failure_raises_action_error(handler, service, notifier):
    service.action_error = RuntimeError("Server said no")
    calls = len(service.calls)

    with pytest.raises(ActionError, match="Server said no"):
        handler.delete("po-3")

    assert len(service.calls) == calls
    [notification] = notifier.drain()
    assert notification.kind is NotificationKind.ERROR
    assert notification.message == "Server said no"


def test_unsuccessful_result_is_a_failure(handler, service, notifier):
    service.action_result = ActionResult(success=False, message="Already converted")

    with pytest.raises(ActionError, match="Already converted"):
        handler.convert("po-1")

    assert notifier.drain()[0].message == "Already converted"


def test_unsupported_capability_is_reported(notifier):
    class ListOnlyService(ListService):
        def list_records(self, *args, **kwargs):
            return RecordPage(items=[], total=0, page=1, page_size=10)

    entity = get_entity("expenses")
    service = ListOnlyService(entity)
    controller = ListDataController(service, entity, notifier)
    handler = ActionsHandler(service, controller, notifier)

    with pytest.raises(ActionError, match="Cloning expenses is not supported"):
        handler.clone("ex-1")


def test_refresh_failure_does_not_fail_action(handler, service, notifier):
    def fail_list(*args, **kwargs):
        raise ConnectionError("network down")

    service.list_records = fail_list

    result = handler.delete("po-3")

    assert result.success is True
    messages = [n.message for n in notifier.drain()]
    assert messages == ["Purchase order deleted successfully!", "network down"]


def test_print_returns_url_without_refresh(handler, service):
    calls = len(service.calls)

    assert handler.print_or_download("po-4") == "/docs/po-4.pdf"
    assert len(service.calls) == calls


def test_print_failure(handler, service, notifier):
    service.action_error = NotImplementedError("Printing purchases is not supported")

    with pytest.raises(ActionError):
        handler.print_or_download("po-4")

    assert notifier.drain()[0].kind is NotificationKind.ERROR


class TestConfirmDialog:
    def test_confirm_success_closes(self, handler, service):
        dialog = ConfirmDialog(handler.delete)
        dialog.open("po-2")

        assert dialog.confirm() is True
        assert dialog.is_open is False
        assert dialog.record_id == ""
        assert dialog.result.success is True
        assert service.action_calls == [("delete", "po-2")]

    def test_confirm_failure_stays_open(self, handler, service):
        service.action_error = RuntimeError("locked")
        dialog = ConfirmDialog(handler.delete)
        dialog.open("po-2")

        assert dialog.confirm() is False
        assert dialog.is_open is True
        assert dialog.record_id == "po-2"

    def test_options_are_forwarded(self, handler, service):
        dialog = ConfirmDialog(handler.convert)
        dialog.open("po-1", warehouse="main")
        dialog.update_options(notes="rush")

        dialog.confirm()

        assert service.action_calls == [
            ("convert", "po-1", {"warehouse": "main", "notes": "rush"})
        ]

    def test_confirm_on_closed_dialog_does_nothing(self, handler, service):
        dialog = ConfirmDialog(handler.delete)

        assert dialog.confirm() is False
        assert service.action_calls == []

    def test_close_resets(self, handler):
        dialog = ConfirmDialog(handler.convert)
        dialog.open("po-1", warehouse="main")

        dialog.close()

        assert (dialog.is_open, dialog.record_id, dialog.options) == (False, "", {})
