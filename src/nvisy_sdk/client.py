"""The Nvisy API client."""

from __future__ import annotations

from .config import NvisyConfig
from .services import (
    DocumentsService,
    FilesService,
    HealthService,
    IntegrationsService,
    WebhooksService,
    WorkspacesService,
)


class NvisyClient(
    WorkspacesService,
    DocumentsService,
    FilesService,
    IntegrationsService,
    WebhooksService,
    HealthService,
):
    """Asynchronous client for every Nvisy API resource.

    Example:
        async with NvisyClient.with_api_key("your-api-key") as client:
            workspace = await client.create_workspace(CreateWorkspace(display_name="Docs"))
            uploaded = await client.upload_file(workspace.workspace_id, "a.txt", b"hello")
            content = await client.download_file(uploaded.file_id)

    Clones made with :meth:`clone` (or ``copy.copy``) share configuration and
    transport and may be used concurrently.
    """

    @classmethod
    def with_api_key(cls, api_key: str) -> NvisyClient:
        """Create a client with default base URL and timeout."""
        return cls(NvisyConfig.build(api_key))

    @classmethod
    def from_env(cls) -> NvisyClient:
        """Create a client configured from ``NVISY_*`` environment variables."""
        return cls(NvisyConfig.from_env())
