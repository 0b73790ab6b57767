"""Routes package."""

from community_connectors.api.routes.connectors import router as connectors_router
from community_connectors.api.routes.health import router as health_router

__all__ = [
    "connectors_router",
    "health_router",
]
