"""Async Google Drive v3 gateway — folder listing, deletes, and content passthrough."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import httpx

from edition_mirror.drive.credentials import DeleteCredentials
from edition_mirror.drive.errors import (
    CredentialsUnavailableError,
    DriveFetchError,
    DriveListError,
)
from edition_mirror.models.edition import RemoteFile

if TYPE_CHECKING:
    from edition_mirror.config import DriveConfig

logger = logging.getLogger(__name__)

DRIVE_FILES_URL = "https://www.googleapis.com/drive/v3/files"
_PAGE_SIZE = 1000


class DriveGateway:
    """Thin async wrapper over the Drive REST API.

    ``list_files`` uses the API key and raises ``DriveListError`` on any
    failure. ``delete_file`` uses service-account credentials and reports
    failure by returning ``False``; it never raises.
    """

    def __init__(
        self,
        config: DriveConfig,
        *,
        credentials: DeleteCredentials | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._credentials = credentials or DeleteCredentials.from_config(config)
        self._client = client or httpx.AsyncClient(timeout=config.timeout_seconds)
        self._timeout = config.timeout_seconds

    @property
    def can_delete(self) -> bool:
        return self._credentials.enabled

    async def list_files(self, folder_id: str | None = None) -> list[RemoteFile]:
        """List every non-trashed PDF directly inside ``folder_id``."""
        folder = folder_id or self._config.folder_id
        params: dict[str, Any] = {
            "key": self._config.api_key,
            "q": f"'{folder}' in parents and mimeType='application/pdf' and trashed=false",
            "fields": "nextPageToken, files(id,name)",
            "pageSize": _PAGE_SIZE,
        }

        files: list[RemoteFile] = []
        while True:
            try:
                response = await self._client.get(DRIVE_FILES_URL, params=params)
                response.raise_for_status()
                payload = response.json()
            except httpx.HTTPStatusError as exc:
                msg = f"Drive list failed — folder={folder} status={exc.response.status_code}"
                raise DriveListError(msg) from exc
            except (httpx.HTTPError, ValueError) as exc:
                msg = f"Drive list failed — folder={folder}: {exc}"
                raise DriveListError(msg) from exc

            items = payload.get("files", []) if isinstance(payload, dict) else None
            if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
                msg = f"Drive list failed — folder={folder}: unexpected response shape"
                raise DriveListError(msg)

            files.extend(
                RemoteFile(id=item["id"], name=item["name"])
                for item in items
                if isinstance(item.get("id"), str)
                and isinstance(item.get("name"), str)
                and item["id"]
                and item["name"]
            )

            token = payload.get("nextPageToken")
            if not token:
                break
            params["pageToken"] = token

        logger.debug("Drive list complete — folder=%s files=%d", folder, len(files))
        return files

    async def delete_file(self, file_id: str) -> bool:
        """Permanently delete one file. Returns True on success."""
        try:
            async with asyncio.timeout(self._timeout):
                token = await self._credentials.access_token()
                response = await self._client.delete(
                    f"{DRIVE_FILES_URL}/{file_id}",
                    headers={"Authorization": f"Bearer {token}"},
                )
                response.raise_for_status()
        except CredentialsUnavailableError as exc:
            logger.error("Drive delete skipped — file_id=%s: %s", file_id, exc)  # noqa: TRY400
            return False
        except httpx.HTTPStatusError as exc:
            logger.error(  # noqa: TRY400
                "Drive delete rejected — file_id=%s status=%d",
                file_id,
                exc.response.status_code,
            )
            return False
        except (httpx.HTTPError, TimeoutError):
            logger.exception("Drive delete failed — file_id=%s", file_id)
            return False

        logger.info("Deleted old PDF from Drive — file_id=%s", file_id)
        return True

    async def fetch_content(self, url: str) -> bytes:
        """Download raw bytes for an edition. Not cached."""
        try:
            response = await self._client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            msg = f"Failed to fetch edition content from {url}: {exc}"
            raise DriveFetchError(msg) from exc
        return response.content

    async def close(self) -> None:
        await self._client.aclose()
