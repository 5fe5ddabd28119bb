"""Tests for photo sources and data-URL encoding."""

import asyncio
from pathlib import Path

from birthday_admin.services.photos import (
    LocalPhotoFile,
    UploadedPhoto,
    detect_mime_type,
    to_data_url,
)


def test_to_data_url_prefers_declared_image_type() -> None:
    url = to_data_url(b"\x89PNG\r\n\x1a\nrest", "image/webp; charset=binary")

    assert url.startswith("data:image/webp;base64,")


def test_to_data_url_sniffs_when_type_is_not_an_image() -> None:
    url = to_data_url(b"\x89PNG\r\n\x1a\nrest", "application/octet-stream")

    assert url.startswith("data:image/png;base64,")


def test_to_data_url_defaults_to_jpeg() -> None:
    assert to_data_url(b"unknown").startswith("data:image/jpeg;base64,")


def test_detect_mime_type_signatures() -> None:
    assert detect_mime_type(b"\xff\xd8\xff\xe0") == "image/jpeg"
    assert detect_mime_type(b"GIF89a....") == "image/gif"
    assert detect_mime_type(b"RIFF\x00\x00\x00\x00WEBPVP8 ") == "image/webp"


def test_local_photo_file_reads_bytes(tmp_path: Path) -> None:
    path = tmp_path / "ann.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake")
    photo = LocalPhotoFile(path)

    content = asyncio.run(photo.read())

    assert content == b"\x89PNG\r\n\x1a\nfake"
    assert photo.content_type == "image/png"


def test_uploaded_photo_returns_content() -> None:
    photo = UploadedPhoto(content=b"bytes", content_type="image/jpeg")

    assert asyncio.run(photo.read()) == b"bytes"
