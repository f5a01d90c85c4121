"""Integrations API service."""

from __future__ import annotations

from loguru import logger
from pydantic import BaseModel, Field

from ..http import HttpCore
from ..models import CreateIntegration, Integration, IntegrationsPage, UpdateIntegration
from ..models.base import ResourceId


class ListIntegrationsOptions(BaseModel):
    after: str | None = Field(None, description="Opaque cursor from a previous page")
    limit: int | None = Field(None, ge=1)

    def to_params(self) -> dict[str, str | int]:
        return self.model_dump(exclude_none=True)


class IntegrationsService(HttpCore):
    """Third-party connector management for workspaces."""

    async def list_integrations(
        self, workspace_id: ResourceId, options: ListIntegrationsOptions | None = None
    ) -> IntegrationsPage:
        opts = options or ListIntegrationsOptions()
        request = self.build_request(
            "GET", f"/workspaces/{workspace_id}/integrations/", params=opts.to_params()
        )
        return await self.send_json(request, IntegrationsPage)

    async def get_integration(self, integration_id: ResourceId) -> Integration:
        request = self.build_request("GET", f"/integrations/{integration_id}/")
        return await self.send_json(request, Integration)

    async def create_integration(
        self, workspace_id: ResourceId, request: CreateIntegration
    ) -> Integration:
        http_request = self.build_request(
            "POST", f"/workspaces/{workspace_id}/integrations/", json=request.to_payload()
        )
        integration = await self.send_json(http_request, Integration)
        logger.info(
            f"Created {integration.integration_type.value} integration "
            f"{integration.integration_id} in workspace {workspace_id}"
        )
        return integration

    async def update_integration(
        self, integration_id: ResourceId, update: UpdateIntegration
    ) -> Integration:
        request = self.build_request(
            "PATCH", f"/integrations/{integration_id}/", json=update.to_payload()
        )
        return await self.send_json(request, Integration)

    async def delete_integration(self, integration_id: ResourceId) -> None:
        await self.send_delete(self.build_request("DELETE", f"/integrations/{integration_id}/"))

    async def sync_integration(self, integration_id: ResourceId) -> Integration:
        """Trigger a synchronization run and return the integration with its new sync status."""
        request = self.build_request("POST", f"/integrations/{integration_id}/sync")
        integration = await self.send_json(request, Integration)
        logger.info(f"Triggered sync for integration {integration_id}: {integration.sync_status}")
        return integration
