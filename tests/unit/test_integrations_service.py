"""Unit tests for the integrations endpoints."""

from __future__ import annotations

import asyncio

import pytest
from nvisy_fakes import (
    INTEGRATION_ID,
    WORKSPACE_ID,
    RecordingHandler,
    integration_payload,
    make_client,
)
from pydantic import ValidationError

from nvisy_sdk.models import (
    CreateIntegration,
    IntegrationStatus,
    IntegrationType,
    UpdateIntegration,
)
from nvisy_sdk.services import ListIntegrationsOptions


def test_list_integrations() -> None:
    handler = RecordingHandler(
        payload={"items": [integration_payload()], "nextCursor": "next", "total": 3}
    )

    async def scenario() -> None:
        page = await make_client(handler).list_integrations(
            WORKSPACE_ID, ListIntegrationsOptions(limit=1)
        )
        assert page.items[0].integration_type is IntegrationType.STORAGE
        assert page.next_cursor == "next"

    asyncio.run(scenario())
    assert handler.last.url.path == f"/workspaces/{WORKSPACE_ID}/integrations/"
    assert dict(handler.last.url.params) == {"limit": "1"}


def test_get_integration() -> None:
    handler = RecordingHandler(payload=integration_payload(lastSyncAt="2025-01-03T00:00:00Z"))

    async def scenario() -> None:
        integration = await make_client(handler).get_integration(INTEGRATION_ID)
        assert integration.is_active is True
        assert integration.last_sync_at is not None

    asyncio.run(scenario())
    assert handler.last.url.path == f"/integrations/{INTEGRATION_ID}/"


def test_create_integration_posts_to_workspace() -> None:
    """Given a create request, when posted, then it targets the workspace
    integrations path with a camelCase body."""
    handler = RecordingHandler(status_code=201, payload=integration_payload())
    request = CreateIntegration(
        integration_name="S3 Archive",
        description="Sync documents from S3",
        integration_type=IntegrationType.STORAGE,
        credentials={"bucket": "docs"},
    )

    async def scenario() -> None:
        await make_client(handler).create_integration(WORKSPACE_ID, request)

    asyncio.run(scenario())
    assert handler.last.method == "POST"
    assert handler.last.url.path == f"/workspaces/{WORKSPACE_ID}/integrations/"
    assert handler.last_json() == {
        "integrationName": "S3 Archive",
        "description": "Sync documents from S3",
        "integrationType": "storage",
        "credentials": {"bucket": "docs"},
    }


@pytest.mark.parametrize(
    ("name", "description"),
    [("", "ok"), ("x" * 101, "ok"), ("ok", ""), ("ok", "x" * 501)],
)
def test_create_integration_enforces_lengths(name: str, description: str) -> None:
    with pytest.raises(ValidationError):
        CreateIntegration(
            integration_name=name,
            description=description,
            integration_type=IntegrationType.CUSTOM,
        )


def test_update_and_delete_integration() -> None:
    handler = RecordingHandler(payload=integration_payload(isActive=False))

    async def scenario() -> None:
        client = make_client(handler)
        updated = await client.update_integration(
            INTEGRATION_ID, UpdateIntegration(is_active=False)
        )
        assert updated.is_active is False
        await client.delete_integration(INTEGRATION_ID)

    asyncio.run(scenario())
    patch_request, delete_request = handler.requests
    assert patch_request.method == "PATCH"
    assert patch_request.url.path == f"/integrations/{INTEGRATION_ID}/"
    assert delete_request.method == "DELETE"
    assert delete_request.url.path == f"/integrations/{INTEGRATION_ID}/"


def test_sync_integration() -> None:
    handler = RecordingHandler(payload=integration_payload(syncStatus="running"))

    async def scenario() -> None:
        integration = await make_client(handler).sync_integration(INTEGRATION_ID)
        assert integration.sync_status is IntegrationStatus.RUNNING

    asyncio.run(scenario())
    assert handler.last.method == "POST"
    assert handler.last.url.path == f"/integrations/{INTEGRATION_ID}/sync"
