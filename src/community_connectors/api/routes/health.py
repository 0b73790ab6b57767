"""Health and metrics API routes."""

from fastapi import APIRouter, Response

from community_connectors import __version__
from community_connectors.api.schemas import HealthResponseSchema
from community_connectors.connectors.registry import connector_names
from community_connectors.observability import get_metrics

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponseSchema)
async def health_check():
    """Health check endpoint."""
    return HealthResponseSchema(
        status="healthy",
        version=__version__,
        connectors=connector_names(),
    )


@router.get("/metrics")
async def metrics():
    """Get Prometheus metrics."""
    data, content_type = get_metrics()
    return Response(content=data, media_type=content_type)
