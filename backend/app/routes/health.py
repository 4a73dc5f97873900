"""
Rural Sports Backend: Health Check Route
=========================================

What:  GET /health for container probes and the frontend's DB status badge.
How:   SELECT 1 against the database, then the Gemini circuit breaker state
       and a model-list probe.

Status levels:
    - healthy:   database and Gemini reachable
    - degraded:  database fine, Gemini unavailable or circuit open
                 (only consultation is affected)
    - unhealthy: database unreachable
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app import __version__
from app.database import engine
from app.schemas.base import HealthResponse
from app.services.gemini_service import CircuitBreaker, gemini_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Reports database connectivity, Gemini availability and uptime.",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    gemini_status = "available"
    overall = "healthy"

    # ── Check Database ────────────────────────────────────────────────────
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    # ── Check Gemini API ──────────────────────────────────────────────────
    if gemini_service.circuit_breaker.state == CircuitBreaker.OPEN:
        gemini_status = "circuit_open"
    elif not await gemini_service.health_check():
        gemini_status = "unavailable"

    if gemini_status != "available" and overall == "healthy":
        overall = "degraded"

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        gemini=gemini_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
