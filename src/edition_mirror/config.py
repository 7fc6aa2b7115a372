"""Environment-driven configuration for the edition mirror."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

_DEFAULT_REFRESH_INTERVAL_MS = 30 * 60 * 1000


def _env(key: str, default: str = "") -> str:
    """Read an environment variable, falling back to a default."""
    return os.environ.get(key, default)


def _env_int(key: str, default: int) -> int:
    raw = _env(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_positive_int(key: str, default: int) -> int:
    value = _env_int(key, default)
    return value if value > 0 else default


def _refresh_interval_ms() -> int:
    # PAPERS_REFRESH_INTERVAL_MS is the name used by older deployments
    legacy = _env_positive_int("PAPERS_REFRESH_INTERVAL_MS", _DEFAULT_REFRESH_INTERVAL_MS)
    return _env_positive_int("REFRESH_INTERVAL_MS", legacy)


@dataclass(frozen=True)
class DriveConfig:
    """Google Drive folder and credential material.

    Listing only needs ``api_key``. Deleting requires a service account,
    supplied either inline (``service_account_json``) or as a file path
    (``credentials_file``). Without one, deletes fail and everything else works.
    """

    api_key: str = field(default_factory=lambda: _env("DRIVE_API_KEY"))
    folder_id: str = field(default_factory=lambda: _env("DRIVE_FOLDER_ID"))
    service_account_json: str = field(
        default_factory=lambda: _env("GOOGLE_SERVICE_ACCOUNT_JSON")
    )
    credentials_file: str = field(
        default_factory=lambda: _env("GOOGLE_APPLICATION_CREDENTIALS")
    )
    timeout_seconds: float = field(
        default_factory=lambda: float(_env_int("DRIVE_REQUEST_TIMEOUT_SECONDS", 30))
    )


@dataclass(frozen=True)
class RefreshConfig:
    interval_ms: int = field(default_factory=_refresh_interval_ms)
    list_timeout_seconds: float = field(
        default_factory=lambda: float(_env_positive_int("LIST_TIMEOUT_SECONDS", 60))
    )

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    cors_origins: str = field(default_factory=lambda: _env("CORS_ORIGINS", "*"))

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    """Top-level settings composed of per-concern sub-configs."""

    drive: DriveConfig = field(default_factory=DriveConfig)
    refresh: RefreshConfig = field(default_factory=RefreshConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Load ``.env`` (if present) and build settings from the environment."""
    load_dotenv()
    return Settings()
