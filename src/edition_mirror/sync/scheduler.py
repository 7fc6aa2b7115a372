"""Periodic refresh scheduler — warms the cache at startup, then refreshes on a timer."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from edition_mirror.sync.engine import SyncEngine

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Runs one refresh before the app serves traffic, then one per interval.

    The loop runs as a background task within the FastAPI lifespan. A failed
    cycle is logged and the loop carries on with the next tick.
    """

    def __init__(self, engine: SyncEngine, interval_seconds: float) -> None:
        self._engine = engine
        self._interval = interval_seconds
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Warm the cache, then start the periodic refresh task."""
        if self._running:
            return
        self._running = True

        try:
            await self._engine.refresh()
        except Exception:  # noqa: BLE001
            logger.exception("Initial refresh failed — serving an empty cache until the next tick")

        if not self._running or self._task is not None:
            # stopped during warm-up, or another start() already scheduled the loop
            return
        self._task = asyncio.create_task(self._refresh_loop())
        logger.info("Auto-refresh scheduled every %.0f minutes", self._interval / 60)

    async def stop(self) -> None:
        """Cancel the periodic refresh task."""
        self._running = False
        if self._task and not self._task.done():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
        self._task = None
        logger.info("Auto-refresh stopped")

    async def _refresh_loop(self) -> None:
        while self._running:
            await asyncio.sleep(self._interval)
            try:
                await self._engine.refresh()
            except Exception:  # noqa: BLE001
                logger.exception("Auto-refresh failed")
