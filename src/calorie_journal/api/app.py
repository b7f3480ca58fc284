"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI, Request

from calorie_journal.api.entries import router as entries_router
from calorie_journal.api.goals import router as goals_router
from calorie_journal.api.payloads import summary_payload
from calorie_journal.app_logging import configure_logging
from calorie_journal.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = app.state.container.settings
        logger.info(
            "Calorie journal starting (storage=%s, timezone=%s)",
            settings.storage_backend,
            settings.timezone,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(entries_router)
    app.include_router(goals_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/summary")
    async def day_summary(
        request: Request, day: date | None = None
    ) -> dict[str, object]:
        """Return totals, per-meal totals and goal progress for a day."""
        state_container: AppContainer = request.app.state.container
        summary, entries = state_container.summary_service.get_day_with_entries(day)
        return summary_payload(summary, entries)

    return app
