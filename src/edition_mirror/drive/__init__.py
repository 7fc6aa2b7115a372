"""Google Drive access — the remote store behind the edition mirror."""

from edition_mirror.drive.client import DriveGateway
from edition_mirror.drive.credentials import DeleteCredentials
from edition_mirror.drive.errors import (
    CredentialsUnavailableError,
    DriveError,
    DriveFetchError,
    DriveListError,
)

__all__ = [
    "CredentialsUnavailableError",
    "DeleteCredentials",
    "DriveError",
    "DriveFetchError",
    "DriveGateway",
    "DriveListError",
]
