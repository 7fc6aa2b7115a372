"""Tests for app factory wiring and lifespan."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from edition_mirror.app import create_app
from edition_mirror.config import AppConfig, DriveConfig, RefreshConfig, Settings
from edition_mirror.drive.errors import DriveListError
from edition_mirror.models.edition import RemoteFile


def _settings() -> Settings:
    return Settings(
        drive=DriveConfig(
            api_key="k",
            folder_id="folder-1",
            service_account_json="",
            credentials_file="",
            timeout_seconds=5,
        ),
        refresh=RefreshConfig(interval_ms=3_600_000, list_timeout_seconds=5),
        app=AppConfig(env="test", log_level="INFO", cors_origins="*"),
    )


def _gateway(files: list[RemoteFile]) -> MagicMock:
    gateway = MagicMock()
    gateway.list_files = AsyncMock(return_value=files)
    gateway.delete_file = AsyncMock(return_value=True)
    gateway.close = AsyncMock()
    gateway.can_delete = False
    return gateway


@pytest.mark.unit
def test_lifespan_warms_cache_before_serving() -> None:
    """The first refresh completes before requests are accepted."""
    gateway = _gateway([RemoteFile(id="a", name="05-02-2026.pdf")])

    with (
        patch("edition_mirror.app.load_settings", return_value=_settings()),
        patch("edition_mirror.app.configure_logging"),
        patch("edition_mirror.app.DriveGateway", return_value=gateway) as gateway_cls,
    ):
        app = create_app()
        with TestClient(app) as client:
            body = client.get("/api/papers/today").json()
            assert body["data"]["displayDate"] == "05-02-2026"
            assert app.state.scheduler.running is True

    gateway_cls.assert_called_once_with(_settings().drive)
    gateway.list_files.assert_awaited_once_with("folder-1")
    gateway.close.assert_awaited_once()


@pytest.mark.unit
def test_lifespan_starts_with_empty_cache_when_first_refresh_fails() -> None:
    """A failed initial listing still lets the app start."""
    gateway = _gateway([])
    gateway.list_files.side_effect = DriveListError("down")

    with (
        patch("edition_mirror.app.load_settings", return_value=_settings()),
        patch("edition_mirror.app.configure_logging"),
        patch("edition_mirror.app.DriveGateway", return_value=gateway),
    ):
        app = create_app()
        with TestClient(app) as client:
            assert client.get("/api/papers/today").json() == {"success": True, "data": None}
            assert client.get("/health").json()["status"] == "degraded"

    gateway.close.assert_awaited_once()


@pytest.mark.unit
def test_main_runs_uvicorn() -> None:
    with (
        patch("edition_mirror.app.create_app") as create,
        patch("edition_mirror.app.uvicorn.run") as run,
    ):
        from edition_mirror.app import main  # noqa: PLC0415

        main()

    run.assert_called_once_with(create.return_value, host="0.0.0.0", port=3001)  # noqa: S104
