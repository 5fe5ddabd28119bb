"""Birthday backend REST client."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx


class BirthdayApiClient(Protocol):
    """Interface for the birthday backend's list, create and delete calls."""

    async def list_birthdays(self) -> list[dict[str, object]]:
        """Return the full birthday collection as raw API data."""

    async def create_birthday(self, payload: dict[str, str]) -> None:
        """Create one birthday from a draft payload."""

    async def delete_birthday(self, birthday_id: str) -> None:
        """Delete the birthday with the given identifier."""


@dataclass
class HttpxBirthdayApiClient(BirthdayApiClient):
    """HTTPX-backed birthday API client.

    Requests carry no credentials; the backend is reached unauthenticated.
    Non-2xx responses raise ``httpx.HTTPStatusError``.
    """

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float | None = None
    ) -> "HttpxBirthdayApiClient":
        """Create a client with a managed httpx session."""
        if timeout_seconds is None:
            http_client = httpx.AsyncClient()
        else:
            http_client = httpx.AsyncClient(timeout=timeout_seconds)
        return cls(base_url=base_url.rstrip("/"), http_client=http_client)

    async def list_birthdays(self) -> list[dict[str, object]]:
        """Fetch every birthday record."""
        response = await self.http_client.get(f"{self.base_url}/birthdays")
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise ValueError("Expected a JSON array of birthdays")
        return payload

    async def create_birthday(self, payload: dict[str, str]) -> None:
        """Create a birthday; the response body is ignored."""
        response = await self.http_client.post(
            f"{self.base_url}/birthdays", json=payload
        )
        response.raise_for_status()

    async def delete_birthday(self, birthday_id: str) -> None:
        """Delete a birthday by id; the response body is ignored."""
        url = f"{self.base_url}/birthdays/{quote(birthday_id, safe='')}"
        response = await self.http_client.delete(url)
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
