"""Exceptions raised by the Drive gateway."""

from __future__ import annotations


class DriveError(Exception):
    """Base class for Drive gateway failures."""


class DriveListError(DriveError):
    """Listing the folder failed; the current discovery cycle cannot continue."""


class DriveFetchError(DriveError):
    """Downloading an edition's bytes failed."""


class CredentialsUnavailableError(DriveError):
    """Delete credentials are missing, invalid, or could not produce a token."""
