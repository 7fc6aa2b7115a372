"""Sync engine — one discovery cycle at a time, published as an atomic snapshot.

A cycle lists the Drive folder, parses edition filenames, keeps the newest
``MAX_RETAINED`` editions, deletes the rest from Drive, then publishes the
kept set. Concurrent ``refresh()`` calls made while a cycle is running join
that cycle's task instead of starting another one.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from edition_mirror.discovery.parser import parse_edition
from edition_mirror.discovery.retention import delete_excess, sort_editions, split_retained
from edition_mirror.drive.errors import DriveListError
from edition_mirror.models.snapshot import Snapshot

if TYPE_CHECKING:
    from collections.abc import Callable

    from edition_mirror.models.edition import RemoteFile

logger = logging.getLogger(__name__)


class RemoteStore(Protocol):
    """The two Drive capabilities a discovery cycle needs."""

    async def list_files(self, folder_id: str | None = None) -> list[RemoteFile]: ...

    async def delete_file(self, file_id: str) -> bool: ...


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass
class RefreshState:
    """Mutable state owned by a single SyncEngine."""

    snapshot: Snapshot = field(default_factory=Snapshot)
    in_flight: asyncio.Task[Snapshot] | None = None
    cycles_completed: int = 0
    cycles_failed: int = 0
    # Excess editions whose delete failed in the latest cycle
    pending_deletions: int = 0
    last_error: str | None = None


class SyncEngine:
    """Owns the published snapshot and coalesces refresh requests."""

    def __init__(
        self,
        store: RemoteStore,
        *,
        folder_id: str | None = None,
        list_timeout: float | None = None,
        state: RefreshState | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._folder_id = folder_id
        self._list_timeout = list_timeout
        self._state = state or RefreshState()
        self._clock = clock

    @property
    def snapshot(self) -> Snapshot:
        return self._state.snapshot

    @property
    def state(self) -> RefreshState:
        return self._state

    @property
    def is_refreshing(self) -> bool:
        task = self._state.in_flight
        return task is not None and not task.done()

    async def refresh(self) -> Snapshot:
        """Run a discovery cycle, or join the one already running.

        Every caller that joins a cycle gets that cycle's snapshot, or its
        ``DriveListError``. Cancelling one caller does not cancel the cycle.
        """
        task = self._state.in_flight
        if task is None or task.done():
            task = asyncio.create_task(self._run_cycle())
            self._state.in_flight = task
        else:
            logger.debug("Refresh already in progress — joining current cycle")
        return await asyncio.shield(task)

    async def _list(self) -> list[RemoteFile]:
        try:
            async with asyncio.timeout(self._list_timeout):
                return await self._store.list_files(self._folder_id)
        except TimeoutError as exc:
            msg = f"Drive list timed out after {self._list_timeout}s"
            raise DriveListError(msg) from exc

    async def _run_cycle(self) -> Snapshot:
        started_at = time.monotonic()
        logger.info("Refreshing editions cache from Google Drive")
        try:
            try:
                files = await self._list()
            except DriveListError as exc:
                self._state.cycles_failed += 1
                self._state.last_error = str(exc)
                logger.error("Refresh failed — keeping previous snapshot: %s", exc)  # noqa: TRY400
                raise

            parsed = [edition for edition in map(parse_edition, files) if edition is not None]
            split = split_retained(sort_editions(parsed))

            report = await delete_excess(self._store, split.excess)

            snapshot = Snapshot(editions=split.keep, refreshed_at=self._clock())
            self._state.snapshot = snapshot
            self._state.pending_deletions = len(report.failed)
            self._state.cycles_completed += 1
            self._state.last_error = None

            logger.info(
                "Cache loaded — editions=%d listed=%d deleted=%d delete_failures=%d "
                "duration_ms=%.0f",
                len(snapshot),
                len(files),
                len(report.deleted),
                len(report.failed),
                (time.monotonic() - started_at) * 1000,
            )
            return snapshot
        finally:
            self._state.in_flight = None
