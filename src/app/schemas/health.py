"""Health check schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from app.schemas.base import APIResponse
from app.schemas.enums import HealthStatus


class HealthResponse(APIResponse):
    """Service health status."""

    status: HealthStatus = Field(..., description="Overall service health status")
    version: str = Field(..., description="Service version")
    database: str = Field(..., description="Database connectivity status")
    timestamp: datetime = Field(..., description="Health check timestamp")
