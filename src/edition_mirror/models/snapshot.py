"""Snapshot model — the published, read-only view of the mirrored editions."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from edition_mirror.models.edition import Edition

MAX_RETAINED = 30


class Snapshot(BaseModel):
    """An immutable, newest-first collection of at most ``MAX_RETAINED`` editions.

    A snapshot is replaced wholesale on every successful refresh; the editions
    and ``refreshed_at`` always change together.
    """

    model_config = ConfigDict(frozen=True)

    editions: tuple[Edition, ...] = ()
    refreshed_at: datetime | None = None

    @model_validator(mode="after")
    def _check_order(self) -> Snapshot:
        if len(self.editions) > MAX_RETAINED:
            msg = f"snapshot holds {len(self.editions)} editions, limit is {MAX_RETAINED}"
            raise ValueError(msg)
        for newer, older in zip(self.editions, self.editions[1:], strict=False):
            if newer.date <= older.date:
                msg = f"editions out of order: {newer.iso_date} before {older.iso_date}"
                raise ValueError(msg)
        return self

    def __len__(self) -> int:
        return len(self.editions)

    @property
    def is_empty(self) -> bool:
        return not self.editions


class SnapshotMetadata(BaseModel):
    """Summary of the current snapshot exposed to API consumers."""

    last_refreshed_at: datetime | None
    count: int
    max_retained: int = MAX_RETAINED


class EditionPage(BaseModel):
    """One page of the snapshot, newest first."""

    editions: list[Edition] = Field(default_factory=list)
    total: int
    page: int
    page_size: int
