"""
Health check endpoints for the orchestrator.

- /health, /health/live: liveness, no dependencies touched
- /health/db: connectivity of the configured SQL store
- /health/ready: storage reachable and schema in place

In in-memory mode there is no database, so the DB checks report the
storage mode instead of querying the fallback engine.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from reservation_engine.api.dependencies import get_session
from reservation_engine.config import Settings, get_settings
from reservation_engine.infrastructure.db.tables import resources

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "reservation-engine"
STORAGE_IN_MEMORY = "in_memory"
STORAGE_SQL = "sql"


def _storage_mode(settings: Settings) -> str:
    return STORAGE_IN_MEMORY if settings.use_in_memory else STORAGE_SQL


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "service": SERVICE_NAME, "storage": _storage_mode(settings)}


@router.get("/health/live")
async def health_check_live():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/db")
async def health_check_db(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    """Returns 503 when the SQL store does not answer ``SELECT 1``."""
    if session is None:
        return {"status": "skipped", "component": "database", "storage": STORAGE_IN_MEMORY}

    try:
        await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("Database health check failed", exc_info=e)
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "component": "database",
                "storage": _storage_mode(settings),
                "error": "Database connection failed",
            },
        )
    return {"status": "healthy", "component": "database", "storage": _storage_mode(settings)}


@router.get("/health/ready")
async def health_check_ready(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    """
    SQL mode also verifies that the schema exists by counting the resource
    catalog; an empty catalog is still ready.
    """
    health_status = {"status": "ready", "storage": _storage_mode(settings), "checks": {}}
    if session is None:
        health_status["checks"]["database"] = "not_configured"
        return health_status

    try:
        resource_count = await session.scalar(select(func.count()).select_from(resources))
    except Exception as e:
        logger.error("Readiness check: database unhealthy", exc_info=e)
        health_status["status"] = "not_ready"
        health_status["checks"]["database"] = "unhealthy"
        return JSONResponse(status_code=503, content=health_status)

    health_status["checks"]["database"] = "healthy"
    health_status["checks"]["resources"] = resource_count
    return health_status
