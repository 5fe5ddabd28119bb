"""Notification models shown after dashboard operations."""

from dataclasses import dataclass
from enum import Enum, StrEnum


class Severity(StrEnum):
    """Severity of a user-facing notification."""

    SUCCESS = "success"
    ERROR = "error"


class NotificationKind(Enum):
    """Outcome of a dashboard operation, mapped to a fixed message."""

    BIRTHDAY_ADDED = ("Birthday added successfully!", Severity.SUCCESS)
    BIRTHDAY_DELETED = ("Birthday deleted successfully", Severity.SUCCESS)
    FETCH_FAILED = ("Failed to fetch birthdays", Severity.ERROR)
    SUBMIT_FAILED = ("Failed to add birthday", Severity.ERROR)
    DELETE_FAILED = ("Failed to delete birthday", Severity.ERROR)

    @property
    def message(self) -> str:
        return self.value[0]

    @property
    def severity(self) -> Severity:
        return self.value[1]


@dataclass(frozen=True)
class Notification:
    """A visible notification payload."""

    message: str
    severity: Severity
    kind: NotificationKind | None = None

    @classmethod
    def for_kind(cls, kind: NotificationKind) -> "Notification":
        """Build the notification for an operation outcome."""
        return cls(message=kind.message, severity=kind.severity, kind=kind)
