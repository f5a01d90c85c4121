"""Webhooks API service."""

from __future__ import annotations

from loguru import logger
from pydantic import BaseModel, Field

from ..http import HttpCore
from ..models import (
    CreateWebhook,
    TestWebhook,
    UpdateWebhook,
    Webhook,
    WebhookResult,
    WebhooksPage,
)
from ..models.base import ResourceId


class ListWebhooksOptions(BaseModel):
    after: str | None = Field(None, description="Opaque cursor from a previous page")
    limit: int | None = Field(None, ge=1)

    def to_params(self) -> dict[str, str | int]:
        return self.model_dump(exclude_none=True)


class WebhooksService(HttpCore):
    """Workspace event subscriptions."""

    async def list_webhooks(
        self, workspace_id: ResourceId, options: ListWebhooksOptions | None = None
    ) -> WebhooksPage:
        opts = options or ListWebhooksOptions()
        request = self.build_request(
            "GET", f"/workspaces/{workspace_id}/webhooks/", params=opts.to_params()
        )
        return await self.send_json(request, WebhooksPage)

    async def get_webhook(self, webhook_id: ResourceId) -> Webhook:
        return await self.send_json(self.build_request("GET", f"/webhooks/{webhook_id}/"), Webhook)

    async def create_webhook(self, workspace_id: ResourceId, request: CreateWebhook) -> Webhook:
        http_request = self.build_request(
            "POST", f"/workspaces/{workspace_id}/webhooks/", json=request.to_payload()
        )
        webhook = await self.send_json(http_request, Webhook)
        logger.info(f"Created webhook {webhook.webhook_id} -> {webhook.url}")
        return webhook

    async def update_webhook(self, webhook_id: ResourceId, update: UpdateWebhook) -> Webhook:
        request = self.build_request(
            "PATCH", f"/webhooks/{webhook_id}/", json=update.to_payload()
        )
        return await self.send_json(request, Webhook)

    async def delete_webhook(self, webhook_id: ResourceId) -> None:
        await self.send_delete(self.build_request("DELETE", f"/webhooks/{webhook_id}/"))

    async def test_webhook(
        self, webhook_id: ResourceId, request: TestWebhook | None = None
    ) -> WebhookResult:
        """Send a test delivery, optionally with a custom payload.

        Without ``request`` the POST carries no body and the server sends its
        default test event.
        """
        path = f"/webhooks/{webhook_id}/test"
        if request is None:
            http_request = self.build_request("POST", path)
        else:
            http_request = self.build_request("POST", path, json=request.to_payload())
        result = await self.send_json(http_request, WebhookResult)
        logger.info(
            f"Webhook {webhook_id} test delivery: HTTP {result.status_code} "
            f"in {result.response_time_ms}ms"
        )
        return result
