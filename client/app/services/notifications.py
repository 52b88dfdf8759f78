"""User-facing notifications (the snackbar/toast layer)."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Literal

from client.app.core.time import utc_now

logger = logging.getLogger(__name__)

NotificationLevel = Literal["success", "error", "info"]


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    level: NotificationLevel = "info"
    created_at: datetime = field(default_factory=utc_now)


class NotificationCenter:
    def __init__(self):
        self._history: List[Notification] = []
        self._subscribers: List[Callable[[Notification], None]] = []

    @property
    def history(self) -> List[Notification]:
        return list(self._history)

    def subscribe(self, callback: Callable[[Notification], None]) -> Callable[[], None]:
        """Register ``callback`` for every new notification; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def show(self, title: str, message: str, level: NotificationLevel = "info") -> Notification:
        notification = Notification(title=title, message=message, level=level)
        self._history.append(notification)
        log_level = logging.WARNING if level == "error" else logging.INFO
        logger.log(log_level, "%s: %s", title, message)
        for callback in list(self._subscribers):
            callback(notification)
        return notification

    def success(self, message: str) -> Notification:
        return self.show("Success", message, "success")

    def access_denied(self, action: str) -> Notification:
        return self.show("Access Denied", f"You don't have permission to {action}.", "error")
