"""Workspaces API service."""

from __future__ import annotations

from loguru import logger
from pydantic import BaseModel, Field

from ..http import HttpCore
from ..models import (
    CreateWorkspace,
    NotificationSettings,
    UpdateNotificationSettings,
    UpdateWorkspace,
    Workspace,
    WorkspacesPage,
)
from ..models.base import ResourceId


class ListWorkspacesOptions(BaseModel):
    """Cursor pagination for :meth:`WorkspacesService.list_workspaces`."""

    after: str | None = Field(None, description="Opaque cursor from a previous page")
    limit: int | None = Field(None, ge=1)

    def to_params(self) -> dict[str, str | int]:
        return self.model_dump(exclude_none=True)


class WorkspacesService(HttpCore):
    """Workspace CRUD and notification settings."""

    async def list_workspaces(
        self, options: ListWorkspacesOptions | None = None
    ) -> WorkspacesPage:
        """List workspaces visible to the caller, one cursor page at a time."""
        opts = options or ListWorkspacesOptions()
        request = self.build_request("GET", "/workspaces/", params=opts.to_params())
        return await self.send_json(request, WorkspacesPage)

    async def get_workspace(self, workspace_id: ResourceId) -> Workspace:
        request = self.build_request("GET", f"/workspaces/{workspace_id}/")
        return await self.send_json(request, Workspace)

    async def create_workspace(self, request: CreateWorkspace) -> Workspace:
        http_request = self.build_request("POST", "/workspaces/", json=request.to_payload())
        workspace = await self.send_json(http_request, Workspace)
        logger.info(f"Created workspace {workspace.workspace_id} ({workspace.display_name})")
        return workspace

    async def update_workspace(
        self, workspace_id: ResourceId, update: UpdateWorkspace
    ) -> Workspace:
        """Apply a sparse update; fields left as ``None`` are not sent."""
        request = self.build_request(
            "PATCH", f"/workspaces/{workspace_id}/", json=update.to_payload()
        )
        return await self.send_json(request, Workspace)

    async def delete_workspace(self, workspace_id: ResourceId) -> None:
        """Delete a workspace. The server keeps soft-deleted data for its retention window."""
        await self.send_delete(self.build_request("DELETE", f"/workspaces/{workspace_id}/"))
        logger.info(f"Deleted workspace {workspace_id}")

    async def get_notification_settings(self, workspace_id: ResourceId) -> NotificationSettings:
        request = self.build_request("GET", f"/workspaces/{workspace_id}/notifications")
        return await self.send_json(request, NotificationSettings)

    async def update_notification_settings(
        self, workspace_id: ResourceId, update: UpdateNotificationSettings
    ) -> NotificationSettings:
        request = self.build_request(
            "PATCH", f"/workspaces/{workspace_id}/notifications", json=update.to_payload()
        )
        return await self.send_json(request, NotificationSettings)
