"""Documents API service (offset-paginated endpoints)."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from ..http import HttpCore
from ..models import (
    CreateDocumentRequest,
    Document,
    DocumentVersion,
    PaginatedResponse,
    Pagination,
    UpdateDocumentRequest,
)
from ..models.base import ResourceId
from .local_files import read_local_file, write_local_file


class DocumentsService(HttpCore):
    """Document metadata, content and version operations."""

    async def get_document(self, document_id: ResourceId) -> Document:
        request = self.build_request("GET", f"/documents/{document_id}")
        return await self.send_json(request, Document)

    async def list_documents(
        self, pagination: Pagination | None = None
    ) -> PaginatedResponse[Document]:
        """List documents with optional offset pagination."""
        params = pagination.to_params() if pagination else None
        request = self.build_request("GET", "/documents", params=params)
        return await self.send_json(request, PaginatedResponse[Document])

    async def list_workspace_documents(
        self, workspace_id: ResourceId, pagination: Pagination | None = None
    ) -> PaginatedResponse[Document]:
        params = pagination.to_params() if pagination else None
        request = self.build_request("GET", f"/workspaces/{workspace_id}/documents", params=params)
        return await self.send_json(request, PaginatedResponse[Document])

    async def create_document(self, request: CreateDocumentRequest) -> Document:
        """Create document metadata; upload the content afterwards."""
        http_request = self.build_request("POST", "/documents", json=request.to_payload())
        return await self.send_json(http_request, Document)

    async def update_document(
        self, document_id: ResourceId, update: UpdateDocumentRequest
    ) -> Document:
        request = self.build_request("PUT", f"/documents/{document_id}", json=update.to_payload())
        return await self.send_json(request, Document)

    async def delete_document(self, document_id: ResourceId) -> None:
        await self.send_delete(self.build_request("DELETE", f"/documents/{document_id}"))

    async def upload_document(self, document_id: ResourceId, path: Path | str) -> Document:
        """Upload document content read from a local file."""
        content = read_local_file(Path(path))
        return await self.upload_document_bytes(document_id, content)

    async def upload_document_bytes(self, document_id: ResourceId, content: bytes) -> Document:
        """Replace the document content with raw ``content`` bytes."""
        logger.info(f"Uploading {len(content)} bytes to document {document_id}")
        request = self.build_request("PUT", f"/documents/{document_id}/content", content=content)
        return await self.send_json(request, Document)

    async def download_document(self, document_id: ResourceId, path: Path | str) -> None:
        """Download document content into a local file."""
        content = await self.download_document_bytes(document_id)
        write_local_file(Path(path), content)
        logger.info(f"Saved document {document_id} to {path} ({len(content)} bytes)")

    async def download_document_bytes(self, document_id: ResourceId) -> bytes:
        request = self.build_request("GET", f"/documents/{document_id}/content")
        return await self.send_bytes(request)

    async def download_document_url(self, document_id: ResourceId) -> str:
        """Return a direct download URL suitable for a browser."""
        request = self.build_request("GET", f"/documents/{document_id}/url")
        return await self.send_text(request)

    async def list_document_versions(
        self, document_id: ResourceId, pagination: Pagination | None = None
    ) -> PaginatedResponse[DocumentVersion]:
        params = pagination.to_params() if pagination else None
        request = self.build_request("GET", f"/documents/{document_id}/versions", params=params)
        return await self.send_json(request, PaginatedResponse[DocumentVersion])

    async def restore_document_version(self, document_id: ResourceId, version: int) -> Document:
        """Make ``version`` the current content of the document."""
        request = self.build_request(
            "POST", f"/documents/{document_id}/versions/{version}/restore"
        )
        return await self.send_json(request, Document)
