"""Health and monitoring models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import Field

from .base import ApiModel


class ServiceStatus(StrEnum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class MonitorStatus(ApiModel):
    """System health snapshot returned by ``/health/``."""

    checked_at: datetime
    status: ServiceStatus
    version: str


class CheckHealth(ApiModel):
    """Options for an explicit health check (sent as a POST body)."""

    timeout: int | None = Field(None, ge=0, description="Check timeout in milliseconds")
    use_cache: bool | None = Field(None, description="Return cached results if available")
