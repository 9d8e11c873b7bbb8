"""Notifier implementations."""

import logfire

from gatepass.domain.service.notifier import (
    Notification,
    NotificationLevel,
    Notifier,
)


class LogfireNotifier(Notifier):
    """Notifier that records notifications as Logfire events."""

    def notify(self, notification: Notification) -> None:
        if notification.level == NotificationLevel.ERROR:
            logfire.error(
                "Notification: {title}",
                title=notification.title,
                description=notification.description,
            )
        else:
            logfire.info(
                "Notification: {title}",
                title=notification.title,
                description=notification.description,
            )


class RecordingNotifier(Notifier):
    """Notifier keeping notifications in memory, for tests."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def errors(self) -> list[Notification]:
        return [n for n in self.notifications if n.level == NotificationLevel.ERROR]
