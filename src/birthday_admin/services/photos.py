"""Photo sources and data-URL encoding for the draft photo field."""

import asyncio
import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class PhotoFile(Protocol):
    """A selected image file that can be read asynchronously."""

    @property
    def content_type(self) -> str | None:
        """Declared MIME type of the file, if known."""

    async def read(self) -> bytes:
        """Return the file's bytes."""


@dataclass(frozen=True)
class UploadedPhoto:
    """Image bytes already received from the browser."""

    content: bytes
    content_type: str | None = None

    async def read(self) -> bytes:
        return self.content


@dataclass(frozen=True)
class LocalPhotoFile:
    """Image file on the local filesystem."""

    path: Path

    @property
    def content_type(self) -> str | None:
        guessed, _ = mimetypes.guess_type(self.path.name)
        return guessed

    async def read(self) -> bytes:
        """Read the file in a worker thread."""
        return await asyncio.to_thread(self.path.read_bytes)


def to_data_url(image_bytes: bytes, content_type: str | None = None) -> str:
    """Encode image bytes as a base64 data URL."""
    mime_type = _image_mime_type(content_type) or detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"


def _image_mime_type(content_type: str | None) -> str | None:
    if not content_type:
        return None
    mime_type = content_type.split(";", maxsplit=1)[0].strip().lower()
    return mime_type if mime_type.startswith("image/") else None
