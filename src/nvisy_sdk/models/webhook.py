"""Webhook models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any
from uuid import UUID

from pydantic import Field

from .base import ApiModel


class WebhookEvent(StrEnum):
    """Event types that trigger a webhook delivery."""

    DOCUMENT_CREATED = "document_created"
    DOCUMENT_UPDATED = "document_updated"
    DOCUMENT_DELETED = "document_deleted"
    FILE_CREATED = "file_created"
    FILE_UPDATED = "file_updated"
    FILE_DELETED = "file_deleted"
    MEMBER_ADDED = "member_added"
    MEMBER_DELETED = "member_deleted"
    MEMBER_UPDATED = "member_updated"
    INTEGRATION_CREATED = "integration_created"
    INTEGRATION_UPDATED = "integration_updated"
    INTEGRATION_DELETED = "integration_deleted"
    INTEGRATION_SYNCED = "integration_synced"
    INTEGRATION_DESYNCED = "integration_desynced"


class WebhookStatus(StrEnum):
    ACTIVE = "active"
    PAUSED = "paused"
    DISABLED = "disabled"


class WebhookType(StrEnum):
    """Origin of a webhook: user provided or created by an integration."""

    PROVIDED = "provided"
    INTEGRATION = "integration"


class Webhook(ApiModel):
    """An event subscription for a workspace."""

    webhook_id: UUID
    workspace_id: UUID
    display_name: str
    description: str
    url: str
    events: list[WebhookEvent]
    headers: dict[str, str] = Field(default_factory=dict)
    status: WebhookStatus
    webhook_type: WebhookType
    integration_id: UUID | None = Field(
        None, description="Present for integration-created webhooks"
    )
    last_triggered_at: datetime | None = None
    created_by: UUID
    created_at: datetime
    updated_at: datetime


class WebhooksPage(ApiModel):
    items: list[Webhook]
    next_cursor: str | None = None
    total: int | None = None


class CreateWebhook(ApiModel):
    """Request payload for creating a workspace webhook."""

    display_name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., max_length=500)
    url: str = Field(..., min_length=1)
    events: list[WebhookEvent]
    headers: dict[str, str] | None = None
    status: WebhookStatus | None = None


class UpdateWebhook(ApiModel):
    """Sparse update for a webhook."""

    display_name: str | None = None
    description: str | None = None
    url: str | None = None
    events: list[WebhookEvent] | None = None
    headers: dict[str, str] | None = None
    status: WebhookStatus | None = None


class TestWebhook(ApiModel):
    """Optional custom payload sent by a webhook test delivery."""

    payload: dict[str, Any] | None = None


class WebhookResult(ApiModel):
    """Outcome of a webhook delivery attempt."""

    status_code: int
    response_time_ms: int
