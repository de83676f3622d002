"""Health check endpoints for the signfolio API."""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, HTTPException

from signfolio import __version__
from signfolio.api.dependencies import get_notion_client
from signfolio.api.models import HealthCheckResponse
from signfolio.collectors.notion.client import NotionClient
from signfolio.config.settings import Settings, get_settings, missing_notion_settings

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    summary="Health Check",
    description="Report whether the content source is configured.",
)
async def health_check(
    settings: Settings = Depends(get_settings),
) -> HealthCheckResponse:
    """Configuration-only health check; makes no Notion request."""
    missing = missing_notion_settings(settings)
    return HealthCheckResponse(
        status="degraded" if missing else "healthy",
        version=__version__,
        environment=settings.app_env,
        notion_configured=not missing,
        missing_settings=missing,
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/health/live",
    summary="Liveness Check",
    description="Simple liveness check for container orchestration.",
)
async def liveness() -> dict:
    return {"status": "alive", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get(
    "/health/ready",
    summary="Readiness Check",
    description="Check that Notion accepts the configured credentials.",
)
async def readiness(
    client: NotionClient = Depends(get_notion_client),
) -> dict:
    """
    Readiness probe.

    Returns 200 only if a one-row Notion query succeeds.
    """
    if not await client.health_check():
        raise HTTPException(
            status_code=503,
            detail="Service not ready: content source unavailable",
        )

    return {"status": "ready", "timestamp": datetime.now(timezone.utc).isoformat()}
