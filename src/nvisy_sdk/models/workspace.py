"""Workspace models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any
from uuid import UUID

from pydantic import Field

from .base import ApiModel


class WorkspaceRole(StrEnum):
    """Role of a member in a workspace."""

    OWNER = "owner"
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


class Workspace(ApiModel):
    """A collaboration container as returned by the API.

    This is the source of truth for the workspace resource schema.
    """

    workspace_id: UUID = Field(description="Unique workspace identifier")
    display_name: str = Field(description="Display name", examples=["Legal Review"])
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    enable_comments: bool = Field(description="Whether comments are enabled")
    require_approval: bool = Field(description="Whether processed files need approval")
    member_role: WorkspaceRole = Field(description="Role of the calling member")
    created_by: UUID
    created_at: datetime
    updated_at: datetime


class CreateWorkspace(ApiModel):
    """Request body for creating a workspace."""

    display_name: str = Field(..., min_length=1)
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    enable_comments: bool = True
    require_approval: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the API; an empty ``tags`` list is left out."""
        payload = super().to_payload()
        if not self.tags:
            payload.pop("tags", None)
        return payload


class UpdateWorkspace(ApiModel):
    """Sparse update for a workspace; ``None`` leaves a field unchanged."""

    display_name: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    enable_comments: bool | None = None
    require_approval: bool | None = None


class WorkspacesPage(ApiModel):
    """Cursor-paginated list of workspaces."""

    items: list[Workspace]
    next_cursor: str | None = None
    has_more: bool = False


class NotificationEvent(StrEnum):
    """Events a workspace member can be notified about."""

    COMMENT_ADDED = "comment_added"
    COMMENT_REPLY = "comment_reply"
    FILE_COMPLETED = "file_completed"
    FILE_FAILED = "file_failed"
    MEMBER_JOINED = "member_joined"
    MEMBER_LEFT = "member_left"


class NotificationSettings(ApiModel):
    """Notification settings of the calling member for a workspace."""

    email_enabled: bool
    in_app_enabled: bool
    events: list[NotificationEvent] = Field(default_factory=list)


class UpdateNotificationSettings(ApiModel):
    email_enabled: bool | None = None
    in_app_enabled: bool | None = None
    events: list[NotificationEvent] | None = None
