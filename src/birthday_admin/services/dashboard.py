"""Dashboard session tying together records, draft and notifications."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from birthday_admin.adapters.birthday_api_client import BirthdayApiClient
from birthday_admin.domain.notifications import Notification
from birthday_admin.domain.records import (
    CLASS_LABELS,
    SECTION_LABELS,
    BirthdayRecord,
)
from birthday_admin.services.deletions import DeletionFlow
from birthday_admin.services.drafts import DraftController
from birthday_admin.services.notifications import NotificationController
from birthday_admin.services.records import RecordStore


@dataclass
class DashboardSession:
    """Owns the state containers rendered by the dashboard."""

    record_store: RecordStore
    drafts: DraftController
    deletions: DeletionFlow
    notifications: NotificationController
    _initial_load_started: bool = field(default=False, init=False)

    @classmethod
    def create(
        cls,
        client: BirthdayApiClient,
        notification_timeout_seconds: float = 6.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> "DashboardSession":
        """Wire a session whose components share one client and one slot."""
        notifications = NotificationController(
            timeout_seconds=notification_timeout_seconds, clock=clock
        )
        record_store = RecordStore(client=client, notifications=notifications)
        return cls(
            record_store=record_store,
            drafts=DraftController(
                client=client,
                record_store=record_store,
                notifications=notifications,
            ),
            deletions=DeletionFlow(
                client=client,
                record_store=record_store,
                notifications=notifications,
            ),
            notifications=notifications,
        )

    async def ensure_loaded(self) -> None:
        """Run the initial refresh the first time the dashboard is shown."""
        if self._initial_load_started:
            return
        self._initial_load_started = True
        await self.record_store.refresh()

    def snapshot(self) -> dict[str, object]:
        """Return a serializable view of the dashboard state."""
        return {
            "records": [_serialize_record(r) for r in self.record_store.records],
            "loading": self.record_store.loading,
            "draft": self.drafts.draft.to_payload(),
            "missing_fields": self.drafts.draft.missing_required(),
            "preview": self.drafts.preview,
            "notification": _serialize_notification(self.notifications.current),
            "notification_timeout_ms": int(self.notifications.timeout_seconds * 1000),
            "classes": list(CLASS_LABELS),
            "sections": list(SECTION_LABELS),
        }


def _serialize_record(record: BirthdayRecord) -> dict[str, object]:
    return {
        **record.model_dump(by_alias=True),
        "display_photo": record.display_photo,
        "class_and_section": record.class_and_section,
    }


def _serialize_notification(
    notification: Notification | None,
) -> dict[str, str] | None:
    if notification is None:
        return None
    return {
        "message": notification.message,
        "severity": notification.severity.value,
    }
