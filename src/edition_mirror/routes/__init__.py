"""HTTP routers."""

from edition_mirror.routes.editions import router as editions_router
from edition_mirror.routes.status import router as status_router

__all__ = ["editions_router", "status_router"]
