"""Data models for discovered editions and published snapshots."""

from edition_mirror.models.edition import Edition, RemoteFile
from edition_mirror.models.snapshot import MAX_RETAINED, EditionPage, Snapshot, SnapshotMetadata

__all__ = [
    "MAX_RETAINED",
    "Edition",
    "EditionPage",
    "RemoteFile",
    "Snapshot",
    "SnapshotMetadata",
]
