"""Service-account credentials for Drive deletes.

Listing works with a plain API key, but deleting files requires an OAuth
token with the full Drive scope. The token comes from a service account
supplied either as inline JSON or as a key file on disk.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING

import google.auth.exceptions
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from edition_mirror.drive.errors import CredentialsUnavailableError

if TYPE_CHECKING:
    from edition_mirror.config import DriveConfig

logger = logging.getLogger(__name__)

DRIVE_SCOPES = ("https://www.googleapis.com/auth/drive",)


class DeleteCredentials:
    """Lazily refreshed bearer token for Drive delete calls.

    When no usable service account is configured the instance is disabled and
    every ``access_token()`` call raises ``CredentialsUnavailableError``.
    """

    def __init__(self, credentials: service_account.Credentials | None) -> None:
        self._credentials = credentials
        self._lock = asyncio.Lock()

    @classmethod
    def from_config(cls, config: DriveConfig) -> DeleteCredentials:
        try:
            if config.service_account_json:
                info = json.loads(config.service_account_json)
                credentials = service_account.Credentials.from_service_account_info(
                    info, scopes=DRIVE_SCOPES
                )
            elif config.credentials_file:
                credentials = service_account.Credentials.from_service_account_file(
                    config.credentials_file, scopes=DRIVE_SCOPES
                )
            else:
                logger.warning(
                    "No service account configured — retention deletes will fail. "
                    "Set GOOGLE_APPLICATION_CREDENTIALS or GOOGLE_SERVICE_ACCOUNT_JSON."
                )
                return cls(None)
        except (ValueError, KeyError, OSError):
            logger.exception("Invalid service account credentials — retention deletes will fail")
            return cls(None)
        return cls(credentials)

    @property
    def enabled(self) -> bool:
        return self._credentials is not None

    async def access_token(self) -> str:
        """Return a valid bearer token, refreshing it off the event loop if needed."""
        if self._credentials is None:
            msg = "Drive delete credentials are not configured"
            raise CredentialsUnavailableError(msg)

        async with self._lock:
            if not self._credentials.valid:
                try:
                    await asyncio.to_thread(self._credentials.refresh, Request())
                except google.auth.exceptions.GoogleAuthError as exc:
                    msg = f"Failed to refresh Drive delete credentials: {exc}"
                    raise CredentialsUnavailableError(msg) from exc
            token = self._credentials.token

        if not token:
            msg = "Drive delete credentials produced an empty token"
            raise CredentialsUnavailableError(msg)
        return token
