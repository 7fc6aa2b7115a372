"""Retention policy — keep the newest editions, retire the rest from Drive."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from edition_mirror.models.snapshot import MAX_RETAINED

if TYPE_CHECKING:
    import datetime
    from collections.abc import Iterable, Sequence

    from edition_mirror.models.edition import Edition

logger = logging.getLogger(__name__)


class FileDeleter(Protocol):
    """Anything that can delete a remote file by id, reporting success."""

    async def delete_file(self, file_id: str) -> bool: ...


@dataclass(frozen=True)
class RetentionSplit:
    keep: tuple[Edition, ...]
    excess: tuple[Edition, ...]


@dataclass
class DeletionReport:
    deleted: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.deleted) + len(self.failed)


def sort_editions(editions: Iterable[Edition]) -> list[Edition]:
    """Order editions newest first.

    The sort is stable, so files sharing a date stay in listing order.
    """
    return sorted(editions, key=lambda e: e.date, reverse=True)


def split_retained(editions: Sequence[Edition]) -> RetentionSplit:
    """Split a newest-first list into the newest MAX_RETAINED dates and the remainder.

    The first edition seen for a date is the one kept. Later editions for the
    same date go to ``excess`` with everything past the cap, in list order.
    """
    keep: list[Edition] = []
    excess: list[Edition] = []
    seen: set[datetime.date] = set()
    for edition in editions:
        if edition.date in seen:
            logger.warning(
                "Duplicate edition marked for deletion — date=%s file_id=%s",
                edition.iso_date,
                edition.file_id,
            )
            excess.append(edition)
            continue
        seen.add(edition.date)
        if len(keep) < MAX_RETAINED:
            keep.append(edition)
        else:
            excess.append(edition)
    return RetentionSplit(keep=tuple(keep), excess=tuple(excess))


async def delete_excess(deleter: FileDeleter, excess: Sequence[Edition]) -> DeletionReport:
    """Delete excess editions one at a time; failures are logged, never raised."""
    report = DeletionReport()
    if not excess:
        return report

    logger.info(
        "Enforcing max %d editions — deleting %d old PDFs from Drive",
        MAX_RETAINED,
        len(excess),
    )
    for edition in excess:
        try:
            deleted = await deleter.delete_file(edition.file_id)
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error deleting file_id=%s", edition.file_id)
            deleted = False

        if deleted:
            report.deleted.append(edition.file_id)
        else:
            report.failed.append(edition.file_id)
            logger.error(
                "Failed to retire edition — date=%s file_id=%s",
                edition.iso_date,
                edition.file_id,
            )

    if report.failed:
        logger.error(
            "Retention incomplete — %d of %d old PDFs remain in Drive",
            len(report.failed),
            report.attempted,
        )
    return report
