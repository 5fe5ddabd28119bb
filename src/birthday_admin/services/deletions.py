"""Deletion of birthday records."""

import logging
from dataclasses import dataclass

from birthday_admin.adapters.birthday_api_client import BirthdayApiClient
from birthday_admin.domain.notifications import NotificationKind
from birthday_admin.services.notifications import NotificationController
from birthday_admin.services.records import RecordStore

_logger = logging.getLogger(__name__)


@dataclass
class DeletionFlow:
    """Deletes records on the backend and refreshes the store afterwards."""

    client: BirthdayApiClient
    record_store: RecordStore
    notifications: NotificationController

    async def delete(self, birthday_id: str) -> bool:
        """Delete a birthday by id.

        Nothing is removed locally; the record disappears only when the
        scheduled refresh returns without it.
        """
        try:
            await self.client.delete_birthday(birthday_id)
        except Exception:
            _logger.exception(
                "Failed to delete birthday", extra={"birthday_id": birthday_id}
            )
            self.notifications.show(NotificationKind.DELETE_FAILED)
            return False
        self.record_store.schedule_refresh()
        self.notifications.show(NotificationKind.BIRTHDAY_DELETED)
        return True
