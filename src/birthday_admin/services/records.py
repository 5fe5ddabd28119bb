"""Client-side store of birthday records."""

import asyncio
import logging
from dataclasses import dataclass, field

from birthday_admin.adapters.birthday_api_client import BirthdayApiClient
from birthday_admin.domain.notifications import NotificationKind
from birthday_admin.domain.records import BirthdayRecord
from birthday_admin.services.notifications import NotificationController

_logger = logging.getLogger(__name__)


@dataclass
class RecordStore:
    """In-memory copy of the backend's birthday collection.

    The collection is only ever replaced as a whole by ``refresh``; nothing
    inserts or removes records locally.
    """

    client: BirthdayApiClient
    notifications: NotificationController
    records: tuple[BirthdayRecord, ...] = ()
    loading: bool = True
    _pending: set["asyncio.Task[bool]"] = field(
        default_factory=set, init=False, repr=False
    )

    async def refresh(self) -> bool:
        """Reload the full collection, keeping the old one on failure."""
        self.loading = True
        try:
            payload = await self.client.list_birthdays()
            records = tuple(BirthdayRecord.model_validate(item) for item in payload)
        except Exception:
            _logger.exception("Failed to fetch birthdays")
            self.notifications.show(NotificationKind.FETCH_FAILED)
            return False
        else:
            self.records = records
            _logger.info("Fetched birthdays: count=%s", len(records))
            return True
        finally:
            self.loading = False

    def schedule_refresh(self) -> "asyncio.Task[bool]":
        """Start a refresh in the background without waiting for it."""
        task = asyncio.get_running_loop().create_task(self.refresh())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def settle(self) -> None:
        """Wait until every scheduled refresh has finished.

        Refreshes are not sequenced; whichever finishes last wins.
        """
        while pending := [task for task in self._pending if not task.done()]:
            await asyncio.gather(*pending)
