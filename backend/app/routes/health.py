"""
FAQDesk Backend: Health Check Route
=====================================

What:  Health check endpoint for monitoring and load balancer health checks.
How:   Runs `SELECT 1` against the store and reports the result.
Who:   Called by container health checks and monitoring systems.

Status levels:
    - healthy:   store reachable (HTTP 200)
    - unhealthy: store unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Response
from sqlalchemy import text

from app import __version__
from app.schemas.faq import HealthResponse
from app.services.faq_service import STORE_ERRORS, describe_store_failure

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    """
    Check the store with a trivial query.

    Opens and releases its own connection from the engine, independent of the
    per-request session used by the FAQ routes.
    """
    from app.database import engine

    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except STORE_ERRORS as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", describe_store_failure(e))

    if overall != "healthy":
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
