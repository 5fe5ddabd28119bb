"""Draft (form) controller for composing a new birthday."""

import logging
from dataclasses import dataclass

from birthday_admin.adapters.birthday_api_client import BirthdayApiClient
from birthday_admin.domain.notifications import NotificationKind
from birthday_admin.domain.records import EMPTY_DRAFT, Draft
from birthday_admin.services.notifications import NotificationController
from birthday_admin.services.photos import PhotoFile, to_data_url
from birthday_admin.services.records import RecordStore

_logger = logging.getLogger(__name__)


@dataclass
class DraftController:
    """Owns the draft and its image preview.

    The file and URL photo inputs both write the draft's ``photo`` field;
    whichever write lands last is kept. File reads are not cancelled, so two
    overlapping reads race the same way.
    """

    client: BirthdayApiClient
    record_store: RecordStore
    notifications: NotificationController
    draft: Draft = EMPTY_DRAFT
    preview: str = ""

    def set_field(self, name: str, value: str) -> Draft:
        """Merge one form field, addressed by its wire name, into the draft."""
        self.draft = self.draft.with_field(name, value)
        return self.draft

    async def set_photo_from_file(self, file: PhotoFile) -> str:
        """Read an image into a data URL used for both preview and photo."""
        data_url = to_data_url(await file.read(), file.content_type)
        self.preview = data_url
        self.draft = self.draft.with_field("photo", data_url)
        return data_url

    def set_photo_from_url(self, value: str) -> Draft:
        """Overwrite the draft photo with a typed image URL."""
        return self.set_field("photo", value)

    def reset(self) -> None:
        """Clear the draft and the preview."""
        self.draft = EMPTY_DRAFT
        self.preview = ""

    async def submit(self) -> bool:
        """Create a birthday from the current draft.

        On success the store refresh is scheduled, not awaited. On failure
        the draft is kept so the user can retry.
        """
        try:
            await self.client.create_birthday(self.draft.to_payload())
        except Exception:
            _logger.exception("Failed to add birthday")
            self.notifications.show(NotificationKind.SUBMIT_FAILED)
            return False
        self.record_store.schedule_refresh()
        self.reset()
        self.notifications.show(NotificationKind.BIRTHDAY_ADDED)
        return True
