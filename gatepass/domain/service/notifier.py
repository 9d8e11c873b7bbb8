"""User-facing notification interface."""

from enum import Enum

from gatepass.domain.value.common import ValueObject


class NotificationLevel(str, Enum):
    """Severity of a transient notification."""

    SUCCESS = "success"
    ERROR = "error"


class Notification(ValueObject):
    """A transient user-facing notification (toast)."""

    level: NotificationLevel
    title: str
    description: str | None = None


class Notifier:
    """Generic notifier interface."""

    def notify(self, notification: Notification) -> None:
        """Show a notification to the user.

        Args:
            notification: Notification to show
        """
        raise NotImplementedError

    def success(self, title: str, description: str | None = None) -> None:
        self.notify(
            Notification(
                level=NotificationLevel.SUCCESS, title=title, description=description
            )
        )

    def error(self, title: str, description: str | None = None) -> None:
        self.notify(
            Notification(
                level=NotificationLevel.ERROR, title=title, description=description
            )
        )
