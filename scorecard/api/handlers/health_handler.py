"""
Health Check Handler

/live answers as long as the process serves requests. /ready also needs
both stores a rating mutation touches: the database holding the records
and Redis holding the per-key locks.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from scorecard.config.settings import settings
from scorecard.shared.adapters.redis_adapter import get_redis_adapter
from scorecard.shared.db import ping_db
from scorecard.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check():
    """Ready only when ratings can be read and locked."""
    checks = {
        "database": await ping_db(),
        "redis": await get_redis_adapter().ping(),
    }
    ready = all(checks.values())
    return JSONResponse(
        status_code=200 if ready else 503,
        content={"status": "ready" if ready else "unavailable", "checks": checks},
    )


@router.get("/live")
async def liveness_check():
    return {"status": "alive"}
