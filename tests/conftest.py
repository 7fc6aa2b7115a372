"""Shared fixtures: an in-memory Drive folder and edition builders."""

from __future__ import annotations

import asyncio
from datetime import UTC, date, datetime, timedelta

import pytest

from edition_mirror.models.edition import Edition, RemoteFile

FIXED_NOW = datetime(2026, 2, 5, 8, 30, tzinfo=UTC)


class FakeStore:
    """Drive stand-in that records every list and delete call."""

    def __init__(
        self,
        names: list[str] | None = None,
        *,
        list_delay: float = 0.0,
        delete_result: bool = True,
    ) -> None:
        self.files = [RemoteFile(id=f"id-{name}", name=name) for name in names or []]
        self.list_delay = list_delay
        self.list_error: Exception | None = None
        self.delete_result = delete_result
        self.delete_error: Exception | None = None
        self.list_calls = 0
        self.delete_calls: list[str] = []

    async def list_files(self, folder_id: str | None = None) -> list[RemoteFile]:  # noqa: ARG002
        self.list_calls += 1
        if self.list_delay:
            await asyncio.sleep(self.list_delay)
        if self.list_error is not None:
            raise self.list_error
        return list(self.files)

    async def delete_file(self, file_id: str) -> bool:
        self.delete_calls.append(file_id)
        if self.delete_error is not None:
            raise self.delete_error
        return self.delete_result


def daily_names(start: date, end: date, *, skip: set[date] | None = None) -> list[str]:
    """Return ``DD-MM-YYYY.pdf`` names for every day from start to end inclusive."""
    names = []
    current = start
    while current <= end:
        if not skip or current not in skip:
            names.append(current.strftime("%d-%m-%Y.pdf"))
        current += timedelta(days=1)
    return names


def make_edition(iso: str, file_id: str | None = None) -> Edition:
    edition_date = date.fromisoformat(iso)
    return Edition.from_file(file_id or f"id-{iso}", edition_date)


@pytest.fixture
def fake_store() -> type[FakeStore]:
    return FakeStore


@pytest.fixture
def names_between():
    return daily_names


@pytest.fixture
def edition():
    return make_edition


@pytest.fixture
def clock():
    return lambda: FIXED_NOW
