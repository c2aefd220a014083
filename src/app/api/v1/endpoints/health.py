"""Health check endpoint for load balancers and liveness probes."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter

from app.api.dependencies import AppSettings
from app.database import check_database_health
from app.schemas import HealthResponse, HealthStatus


router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Report service status and database connectivity.",
)
def health_check(settings: AppSettings) -> HealthResponse:
    database = check_database_health()
    return HealthResponse(
        status=HealthStatus.HEALTHY if database == "healthy" else HealthStatus.DEGRADED,
        version=settings.app.version,
        database=database,
        timestamp=datetime.now(UTC),
    )
