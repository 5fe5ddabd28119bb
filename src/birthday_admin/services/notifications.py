"""Single-slot notification state."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from birthday_admin.domain.notifications import (
    Notification,
    NotificationKind,
    Severity,
)


@dataclass
class NotificationController:
    """Holds at most one visible notification.

    States are hidden (``current`` is None) and visible. Raising a new
    notification replaces the visible one and restarts its dismiss window.
    Expiry is evaluated lazily whenever the slot is read.
    """

    timeout_seconds: float = 6.0
    clock: Callable[[], float] = time.monotonic
    _current: Notification | None = field(default=None, init=False)
    _raised_at: float = field(default=0.0, init=False)

    @property
    def current(self) -> Notification | None:
        """Return the visible notification, or None once hidden or expired."""
        if self._current is None:
            return None
        if self.clock() - self._raised_at >= self.timeout_seconds:
            self._current = None
        return self._current

    def show(self, kind: NotificationKind) -> Notification:
        """Show the fixed notification for an operation outcome."""
        return self._raise(Notification.for_kind(kind))

    def show_message(self, message: str, severity: Severity) -> Notification:
        """Show an arbitrary message."""
        return self._raise(Notification(message=message, severity=severity))

    def dismiss(self) -> None:
        """Hide the current notification."""
        self._current = None

    def _raise(self, notification: Notification) -> Notification:
        self._current = notification
        self._raised_at = self.clock()
        return notification
