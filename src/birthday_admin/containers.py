"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from birthday_admin.adapters.birthday_api_client import (
    BirthdayApiClient,
    HttpxBirthdayApiClient,
)
from birthday_admin.config import Settings
from birthday_admin.services.dashboard import DashboardSession


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    api_client: BirthdayApiClient
    dashboard: DashboardSession
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    api_client = HttpxBirthdayApiClient.create(
        base_url=resolved_settings.birthday_api_base_url,
        timeout_seconds=resolved_settings.request_timeout_seconds,
    )
    dashboard = DashboardSession.create(
        api_client,
        notification_timeout_seconds=resolved_settings.notification_timeout_seconds,
    )

    async def close_resources() -> None:
        await api_client.close()

    return AppContainer(
        settings=resolved_settings,
        api_client=api_client,
        dashboard=dashboard,
        close_resources=close_resources,
    )
