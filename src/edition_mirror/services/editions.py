"""Read-only queries over the currently published snapshot.

Each call reads the snapshot once, at call time, and never waits on or
starts a refresh.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from edition_mirror.discovery.parser import normalize_date
from edition_mirror.models.snapshot import EditionPage, SnapshotMetadata

if TYPE_CHECKING:
    import datetime

    from edition_mirror.models.edition import Edition
    from edition_mirror.sync.engine import SyncEngine

DEFAULT_PAGE_SIZE = 12


class EditionQueries:
    """Query façade backed by a SyncEngine's current snapshot."""

    def __init__(self, engine: SyncEngine) -> None:
        self._engine = engine

    def list_all(self) -> tuple[Edition, ...]:
        return self._engine.snapshot.editions

    def page(self, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> EditionPage:
        """Slice the snapshot into 1-based pages. Out-of-range pages are empty."""
        editions = self._engine.snapshot.editions
        page = max(page, 1)
        page_size = max(page_size, 1)
        start = (page - 1) * page_size
        return EditionPage(
            editions=list(editions[start : start + page_size]),
            total=len(editions),
            page=page,
            page_size=page_size,
        )

    def latest(self) -> Edition | None:
        """Return the newest edition by filename date, or None when there is no data."""
        editions = self._engine.snapshot.editions
        return editions[0] if editions else None

    def by_date(self, value: str | datetime.date) -> Edition | None:
        """Look up an edition by ``YYYY-MM-DD`` or ``DD-MM-YYYY``."""
        wanted = normalize_date(value)
        if wanted is None:
            return None
        return next((e for e in self._engine.snapshot.editions if e.date == wanted), None)

    def month(self, year: int, month: int) -> list[Edition]:
        """Editions within a calendar month (1-based), newest first."""
        return [
            e
            for e in self._engine.snapshot.editions
            if e.date.year == year and e.date.month == month
        ]

    def metadata(self) -> SnapshotMetadata:
        snapshot = self._engine.snapshot
        return SnapshotMetadata(
            last_refreshed_at=snapshot.refreshed_at,
            count=len(snapshot),
        )
