"""Data models for the Nvisy API."""

from .document import (
    CreateDocumentRequest,
    Document,
    DocumentType,
    DocumentVersion,
    UpdateDocumentRequest,
)
from .file import (
    ArchiveFormat,
    DeleteFiles,
    DownloadFiles,
    File,
    FileFormat,
    FilesPage,
    FileStatus,
    UpdateFile,
)
from .health import CheckHealth, MonitorStatus, ServiceStatus
from .integration import (
    CreateIntegration,
    Integration,
    IntegrationsPage,
    IntegrationStatus,
    IntegrationType,
    UpdateIntegration,
)
from .pagination import PaginatedResponse, Pagination
from .webhook import (
    CreateWebhook,
    TestWebhook,
    UpdateWebhook,
    Webhook,
    WebhookEvent,
    WebhookResult,
    WebhooksPage,
    WebhookStatus,
    WebhookType,
)
from .workspace import (
    CreateWorkspace,
    NotificationEvent,
    NotificationSettings,
    UpdateNotificationSettings,
    UpdateWorkspace,
    Workspace,
    WorkspaceRole,
    WorkspacesPage,
)

__all__ = [
    "ArchiveFormat",
    "CheckHealth",
    "CreateDocumentRequest",
    "CreateIntegration",
    "CreateWebhook",
    "CreateWorkspace",
    "DeleteFiles",
    "Document",
    "DocumentType",
    "DocumentVersion",
    "DownloadFiles",
    "File",
    "FileFormat",
    "FileStatus",
    "FilesPage",
    "Integration",
    "IntegrationStatus",
    "IntegrationType",
    "IntegrationsPage",
    "MonitorStatus",
    "NotificationEvent",
    "NotificationSettings",
    "PaginatedResponse",
    "Pagination",
    "ServiceStatus",
    "TestWebhook",
    "UpdateDocumentRequest",
    "UpdateFile",
    "UpdateIntegration",
    "UpdateNotificationSettings",
    "UpdateWebhook",
    "UpdateWorkspace",
    "Webhook",
    "WebhookEvent",
    "WebhookResult",
    "WebhookStatus",
    "WebhookType",
    "WebhooksPage",
    "Workspace",
    "WorkspaceRole",
    "WorkspacesPage",
]
