"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from invoice_dashboard import __version__
from invoice_dashboard.application.dto.responses import HealthResponse, ProviderHealthResponse

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Returns service status and uptime.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def database_health() -> HealthResponse:
    """Check that the invoice database answers a trivial query."""
    from invoice_dashboard.infrastructure.storage.sqlite import get_connection

    start = time.time()
    try:
        async with get_connection() as conn:
            await conn.execute("SELECT 1")
        db_status = ProviderHealthResponse(
            name="sqlite",
            available=True,
            latency_ms=(time.time() - start) * 1000,
        )
    except Exception as e:
        db_status = ProviderHealthResponse(name="sqlite", available=False, error=str(e))

    return HealthResponse(
        status="healthy" if db_status.available else "degraded",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        database=db_status,
    )
