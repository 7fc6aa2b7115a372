"""Cache synchronisation — discovery cycles and their schedule."""

from edition_mirror.sync.engine import RefreshState, RemoteStore, SyncEngine
from edition_mirror.sync.scheduler import RefreshScheduler

__all__ = ["RefreshScheduler", "RefreshState", "RemoteStore", "SyncEngine"]
