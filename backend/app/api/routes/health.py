"""Health check endpoint."""

from __future__ import annotations

import structlog
from fastapi import APIRouter

from app.api.deps import Portal
from app.core.environment import get_environment_info, to_dict
from app.models.schemas import HealthResponse

logger = structlog.get_logger()
router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(portal: Portal) -> HealthResponse:
    """Service health check.

    The only backing store is in memory, so this reports ``degraded``
    only if the seed users have somehow vanished.
    """
    env_info = get_environment_info()
    store_ok = bool(portal.store.users)
    if not store_ok:
        logger.error("health_check_store_empty")
    return HealthResponse(
        status="healthy" if store_ok else "degraded",
        version=env_info.version,
        environment=to_dict(env_info),
    )
