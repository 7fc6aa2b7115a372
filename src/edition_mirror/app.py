"""FastAPI application factory and process entry point."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from edition_mirror.config import load_settings
from edition_mirror.drive.client import DriveGateway
from edition_mirror.logging import configure_logging
from edition_mirror.routes import editions_router, status_router
from edition_mirror.services.editions import EditionQueries
from edition_mirror.sync.engine import SyncEngine
from edition_mirror.sync.scheduler import RefreshScheduler

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Warm the edition cache before serving, and tear everything down on exit."""
    settings = app.state.settings

    if not settings.drive.folder_id:
        logger.warning("DRIVE_FOLDER_ID is not set — discovery will fail until it is configured")

    gateway = DriveGateway(settings.drive)
    engine = SyncEngine(
        gateway,
        folder_id=settings.drive.folder_id,
        list_timeout=settings.refresh.list_timeout_seconds,
    )
    scheduler = RefreshScheduler(engine, settings.refresh.interval_seconds)

    app.state.gateway = gateway
    app.state.engine = engine
    app.state.queries = EditionQueries(engine)
    app.state.scheduler = scheduler
    app.state.start_time = time.monotonic()

    await scheduler.start()
    logger.info("Edition mirror ready — editions=%d", len(engine.snapshot))

    try:
        yield
    finally:
        logger.info("Edition mirror shutting down")
        await scheduler.stop()
        await gateway.close()


def create_app() -> FastAPI:
    settings = load_settings()
    configure_logging(settings.app.log_level)

    app = FastAPI(title="Edition Mirror", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.allowed_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(editions_router)
    app.include_router(status_router)
    return app


def main() -> None:
    """Run the API server."""
    uvicorn.run(create_app(), host="0.0.0.0", port=3001)  # noqa: S104


if __name__ == "__main__":
    main()
