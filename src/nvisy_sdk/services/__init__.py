"""Service mixins for the Nvisy API endpoints.

Each resource family is a mixin over :class:`~nvisy_sdk.http.HttpCore`;
:class:`~nvisy_sdk.client.NvisyClient` combines all of them.
"""

from .documents import DocumentsService
from .files import FilesService, ListFilesOptions
from .health import HealthService
from .integrations import IntegrationsService, ListIntegrationsOptions
from .webhooks import ListWebhooksOptions, WebhooksService
from .workspaces import ListWorkspacesOptions, WorkspacesService

__all__ = [
    "DocumentsService",
    "FilesService",
    "HealthService",
    "IntegrationsService",
    "ListFilesOptions",
    "ListIntegrationsOptions",
    "ListWebhooksOptions",
    "ListWorkspacesOptions",
    "WebhooksService",
    "WorkspacesService",
]
