"""Tests for the notifier implementations."""

import logging

from backoffice_ui.controller import ListDataController
from backoffice_ui.models.common import Notification, NotificationKind
from backoffice_ui.notifications import (
    CollectingNotifier,
    LoggingNotifier,
    notify_error,
    notify_success,
)


def test_collecting_notifier_drains_in_order():
    notifier = CollectingNotifier()
    notify_success(notifier, "Saved")
    notify_error(notifier, "Failed")

    assert [n.kind for n in notifier.pending] == [
        NotificationKind.SUCCESS,
        NotificationKind.ERROR,
    ]
    drained = notifier.drain()

    assert [n.message for n in drained] == ["Saved", "Failed"]
    assert notifier.drain() == []


def test_helpers_accept_missing_notifier():
    notify_error(None, "ignored")
    notify_success(None, "ignored")


def test_logging_notifier_logs_errors(caplog):
    with caplog.at_level(logging.INFO, logger="backoffice_ui.notifications"):
        LoggingNotifier().notify(NotificationKind.ERROR, "network down")

    assert "network down" in caplog.text


def test_controller_defaults_to_logging_notifier(service, entity):
    controller = ListDataController(service, entity)

    assert isinstance(controller._notifier, LoggingNotifier)


def test_notification_round_trip():
    notification = Notification(NotificationKind.SUCCESS, "Done")

    assert Notification.from_dict(notification.to_dict()) == notification
