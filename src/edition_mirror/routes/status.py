"""Status route — cache freshness and retention health."""

from __future__ import annotations

import time
from typing import Any

from fastapi import APIRouter, Request

router = APIRouter(tags=["status"])


@router.get("/health")
async def health(request: Request) -> dict[str, Any]:
    """Report cache freshness, refresh counters, and outstanding retention deletes."""
    engine = request.app.state.engine
    gateway = request.app.state.gateway
    meta = request.app.state.queries.metadata()
    state = engine.state

    return {
        "status": "ok" if meta.last_refreshed_at else "degraded",
        "editions": meta.count,
        "maxRetained": meta.max_retained,
        "lastRefreshedAt": meta.last_refreshed_at.isoformat() if meta.last_refreshed_at else None,
        "refreshing": engine.is_refreshing,
        "cyclesCompleted": state.cycles_completed,
        "cyclesFailed": state.cycles_failed,
        "pendingDeletions": state.pending_deletions,
        "lastError": state.last_error,
        "deletesEnabled": gateway.can_delete,
        "uptimeSeconds": round(time.monotonic() - request.app.state.start_time),
    }
