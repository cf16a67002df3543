"""
Notedeck Backend — Health Check Route

GET /health runs `SELECT 1` on a request-scoped session.

    200  {"status": "healthy",   "database": "connected", ...}
    503  {"status": "unhealthy", "database": "disconnected", ...}

Public and not logged by the access log; load balancers poll it.
"""

import logging
import time

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app import __version__
from app.database import get_db_session
from app.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_started_at = time.monotonic()


@router.get("/health", response_model=HealthResponse, summary="Service health check")
async def health_check(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> HealthResponse:
    probe_started = time.perf_counter()
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Health probe failed: %s", str(e))
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(
            status="unhealthy",
            version=__version__,
            database="disconnected",
            uptime_seconds=round(time.monotonic() - _started_at, 2),
        )

    return HealthResponse(
        status="healthy",
        version=__version__,
        database="connected",
        uptime_seconds=round(time.monotonic() - _started_at, 2),
        database_latency_ms=round((time.perf_counter() - probe_started) * 1000, 2),
    )
