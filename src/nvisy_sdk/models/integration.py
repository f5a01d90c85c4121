"""Integration models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any
from uuid import UUID

from pydantic import Field

from .base import ApiModel


class IntegrationType(StrEnum):
    """Functional category of a workspace integration."""

    STORAGE = "storage"
    COMMUNICATION = "communication"
    BUSINESS = "business"
    ANALYTICS = "analytics"
    AUTOMATION = "automation"
    CUSTOM = "custom"
    INDUSTRY = "industry"


class IntegrationStatus(StrEnum):
    """Synchronization status of an integration."""

    PENDING = "pending"
    RUNNING = "running"
    CANCELLED = "cancelled"


class Integration(ApiModel):
    """A third-party connector configured for a workspace."""

    integration_id: UUID
    workspace_id: UUID
    integration_name: str
    description: str
    integration_type: IntegrationType
    is_active: bool
    sync_status: IntegrationStatus | None = None
    last_sync_at: datetime | None = None
    created_by: UUID
    created_at: datetime
    updated_at: datetime


class IntegrationsPage(ApiModel):
    items: list[Integration]
    next_cursor: str | None = None
    total: int | None = None


class CreateIntegration(ApiModel):
    """Request payload for creating a workspace integration."""

    integration_name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    integration_type: IntegrationType
    credentials: dict[str, Any] | None = None
    is_active: bool | None = None
    metadata: dict[str, Any] | None = None


class UpdateIntegration(ApiModel):
    """Sparse update for an integration."""

    integration_name: str | None = None
    description: str | None = None
    integration_type: IntegrationType | None = None
    credentials: dict[str, Any] | None = None
    is_active: bool | None = None
    metadata: dict[str, Any] | None = None
