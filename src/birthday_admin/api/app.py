"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from birthday_admin.api.dashboard import router as dashboard_router
from birthday_admin.app_logging import configure_logging
from birthday_admin.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Birthday dashboard starting: backend=%s",
            container.settings.birthday_api_base_url,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan, title="Birthday Admin Dashboard")
    app.state.container = container

    app.include_router(dashboard_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
