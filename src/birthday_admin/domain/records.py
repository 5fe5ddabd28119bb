"""Domain models for birthday records and the record draft."""

from dataclasses import dataclass, replace

from pydantic import BaseModel, ConfigDict, Field

CLASS_LABELS: tuple[str, ...] = ("CSE", "AIML", "ECE", "EEE")
SECTION_LABELS: tuple[str, ...] = ("A", "B", "C", "D")
PHOTO_PLACEHOLDER_URL = "https://via.placeholder.com/300x400?text=No+Image"


class BirthdayRecord(BaseModel):
    """Birthday record as returned by the backend."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    id: str = Field(alias="_id")
    name: str | None = None
    class_name: str | None = Field(default=None, alias="class")
    section: str | None = None
    hall_ticket_number: str | None = Field(default=None, alias="hallTicketNumber")
    photo: str | None = None
    birth_date: str | None = Field(default=None, alias="birthDate")

    @property
    def display_photo(self) -> str:
        """Photo to render on the record card."""
        return self.photo or PHOTO_PLACEHOLDER_URL

    @property
    def class_and_section(self) -> str:
        """Card subtitle, e.g. ``CSE - Section A``."""
        return f"{self.class_name or ''} - Section {self.section or ''}"


# Wire names used by the backend and the dashboard form, mapped to attributes.
_DRAFT_WIRE_FIELDS: dict[str, str] = {
    "name": "name",
    "class": "class_name",
    "section": "section",
    "hallTicketNumber": "hall_ticket_number",
    "photo": "photo",
    "birthDate": "birth_date",
}
DRAFT_FIELDS: tuple[str, ...] = tuple(_DRAFT_WIRE_FIELDS)
REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "class",
    "section",
    "hallTicketNumber",
    "birthDate",
)


@dataclass(frozen=True)
class Draft:
    """Unsaved form state for a record being created.

    The identifier is absent on purpose: the backend assigns it on create.
    """

    name: str = ""
    class_name: str = ""
    section: str = ""
    hall_ticket_number: str = ""
    photo: str = ""
    birth_date: str = ""

    def with_field(self, field_name: str, value: str) -> "Draft":
        """Return a copy with one field, addressed by its wire name, replaced."""
        attribute = _DRAFT_WIRE_FIELDS.get(field_name)
        if attribute is None:
            raise ValueError(f"Unknown draft field: {field_name}")
        return replace(self, **{attribute: value})

    def missing_required(self) -> list[str]:
        """Return wire names of required fields that are still empty."""
        payload = self.to_payload()
        return [name for name in REQUIRED_FIELDS if not payload[name].strip()]

    def to_payload(self) -> dict[str, str]:
        """Serialize the draft with the backend's field names."""
        return {
            wire: getattr(self, attribute)
            for wire, attribute in _DRAFT_WIRE_FIELDS.items()
        }


EMPTY_DRAFT = Draft()
