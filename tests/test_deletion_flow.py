"""Tests for deleting birthdays."""

import asyncio

from birthday_admin.domain.notifications import Severity
from birthday_admin.services.dashboard import DashboardSession
from tests.conftest import FakeBirthdayApiClient, birthday


def _load(session: DashboardSession, api_client: FakeBirthdayApiClient) -> None:
    api_client.birthdays = [birthday("a1", "Ann"), birthday("b2", "Bob")]
    asyncio.run(session.record_store.refresh())


def test_delete_existing_record_disappears_after_refresh(
    session: DashboardSession, api_client: FakeBirthdayApiClient
) -> None:
    _load(session, api_client)

    async def run() -> bool:
        ok = await session.deletions.delete("a1")
        await session.record_store.settle()
        return ok

    ok = asyncio.run(run())

    assert ok is True
    assert api_client.deleted == ["a1"]
    assert "a1" not in [record.id for record in session.record_store.records]
    assert [record.id for record in session.record_store.records] == ["b2"]
    notification = session.notifications.current
    assert notification is not None
    assert notification.message == "Birthday deleted successfully"
    assert notification.severity is Severity.SUCCESS


def test_delete_is_not_optimistic(
    session: DashboardSession, api_client: FakeBirthdayApiClient
) -> None:
    _load(session, api_client)

    async def run() -> int:
        await session.deletions.delete("a1")
        count = len(session.record_store.records)
        await session.record_store.settle()
        return count

    assert asyncio.run(run()) == 2


def test_delete_unknown_id_leaves_collection_unchanged(
    session: DashboardSession, api_client: FakeBirthdayApiClient
) -> None:
    _load(session, api_client)
    before = session.record_store.records
    calls_before = api_client.list_calls

    ok = asyncio.run(session.deletions.delete("missing"))

    assert ok is False
    assert session.record_store.records == before
    assert api_client.list_calls == calls_before
    notification = session.notifications.current
    assert notification is not None
    assert notification.message == "Failed to delete birthday"
    assert notification.severity is Severity.ERROR


def test_delete_backend_error_keeps_record_visible(
    session: DashboardSession, api_client: FakeBirthdayApiClient
) -> None:
    _load(session, api_client)
    api_client.fail_delete = True

    asyncio.run(session.deletions.delete("a1"))

    assert "a1" in [record.id for record in session.record_store.records]
