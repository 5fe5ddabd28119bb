"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import httpx
import pytest

from birthday_admin.adapters.birthday_api_client import BirthdayApiClient
from birthday_admin.config import Settings
from birthday_admin.containers import AppContainer
from birthday_admin.services.dashboard import DashboardSession

ANN_DRAFT = {
    "name": "Ann",
    "class": "CSE",
    "section": "A",
    "hallTicketNumber": "21A1",
    "photo": "",
    "birthDate": "2004-05-01",
}


def _backend_error(
    method: str, url: str, status_code: int
) -> httpx.HTTPStatusError:
    request = httpx.Request(method, url)
    return httpx.HTTPStatusError(
        f"{status_code} from backend",
        request=request,
        response=httpx.Response(status_code, request=request),
    )


@dataclass
class FakeBirthdayApiClient(BirthdayApiClient):
    """In-memory stand-in for the birthday backend."""

    birthdays: list[dict[str, object]] = field(default_factory=list)
    fail_list: bool = False
    fail_create: bool = False
    fail_delete: bool = False
    created: list[dict[str, str]] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    list_calls: int = 0
    list_gates: list[asyncio.Event] = field(default_factory=list)
    next_id: int = 1

    async def list_birthdays(self) -> list[dict[str, object]]:
        self.list_calls += 1
        snapshot = [dict(item) for item in self.birthdays]
        if self.list_gates:
            await self.list_gates.pop(0).wait()
        if self.fail_list:
            raise httpx.ConnectError("backend unreachable")
        return snapshot

    async def create_birthday(self, payload: dict[str, str]) -> None:
        if self.fail_create:
            raise httpx.ConnectError("backend unreachable")
        self.created.append(dict(payload))
        self.birthdays.append({"_id": f"id-{self.next_id}", **payload})
        self.next_id += 1

    async def delete_birthday(self, birthday_id: str) -> None:
        url = f"https://backend.test/api/birthdays/{birthday_id}"
        if self.fail_delete:
            raise _backend_error("DELETE", url, 500)
        remaining = [item for item in self.birthdays if item["_id"] != birthday_id]
        if len(remaining) == len(self.birthdays):
            raise _backend_error("DELETE", url, 404)
        self.birthdays = remaining
        self.deleted.append(birthday_id)


@dataclass
class FakeClock:
    """Manually advanced monotonic clock."""

    now: float = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def birthday(birthday_id: str, name: str, **overrides: object) -> dict[str, object]:
    """Build a backend birthday payload."""
    payload: dict[str, object] = {
        "_id": birthday_id,
        "name": name,
        "class": "ECE",
        "section": "B",
        "hallTicketNumber": f"HT-{birthday_id}",
        "photo": "",
        "birthDate": "2003-01-15T00:00:00.000Z",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        birthday_api_base_url="https://backend.test/api",
        notification_timeout_seconds=6.0,
    )


@pytest.fixture
def api_client() -> FakeBirthdayApiClient:
    return FakeBirthdayApiClient()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session(api_client: FakeBirthdayApiClient, clock: FakeClock) -> DashboardSession:
    return DashboardSession.create(api_client, clock=clock)


@pytest.fixture
def container(
    settings: Settings,
    api_client: FakeBirthdayApiClient,
    session: DashboardSession,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        api_client=api_client,
        dashboard=session,
        close_resources=close_resources,
    )
