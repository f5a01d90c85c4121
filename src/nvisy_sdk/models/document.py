"""Document models (offset-paginated endpoints, snake_case payloads)."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from .base import SnakeModel

_EXTENSIONS: dict[str, str] = {
    "docx": "docx",
    "pdf": "pdf",
    "xlsx": "xlsx",
    "pptx": "pptx",
    "svg": "svg",
    "jpeg": "jpg",
    "png": "png",
    "json": "json",
    "xml": "xml",
    "text": "txt",
    "other": "bin",
}

_MIME_TYPES: dict[str, str] = {
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "pdf": "application/pdf",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "svg": "image/svg+xml",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "json": "application/json",
    "xml": "application/xml",
    "text": "text/plain",
    "other": "application/octet-stream",
}

# Extension aliases; anything unlisted maps to OTHER.
_FROM_EXTENSION: dict[str, str] = {
    "docx": "docx",
    "doc": "docx",
    "pdf": "pdf",
    "xlsx": "xlsx",
    "xls": "xlsx",
    "pptx": "pptx",
    "ppt": "pptx",
    "svg": "svg",
    "svgz": "svg",
    "jpg": "jpeg",
    "jpeg": "jpeg",
    "png": "png",
    "json": "json",
    "xml": "xml",
    "txt": "text",
    "text": "text",
}


class DocumentType(StrEnum):
    """Document format."""

    DOCX = "docx"
    PDF = "pdf"
    XLSX = "xlsx"
    PPTX = "pptx"
    SVG = "svg"
    JPEG = "jpeg"
    PNG = "png"
    JSON = "json"
    XML = "xml"
    TEXT = "text"
    OTHER = "other"

    @property
    def extension(self) -> str:
        """File extension (without dot) for this document type."""
        return _EXTENSIONS[self.value]

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self.value]

    @classmethod
    def from_extension(cls, ext: str) -> DocumentType:
        """Detect the document type from a file extension such as ``".PDF"`` or ``"jpg"``."""
        normalized = ext.lower().lstrip(".")
        return cls(_FROM_EXTENSION.get(normalized, "other"))


class Document(SnakeModel):
    """A document stored in Nvisy."""

    id: str
    name: str
    document_type: DocumentType = Field(alias="type")
    size: int = Field(..., ge=0, description="File size in bytes")
    workspace_id: str
    uploaded_by: str
    created_at: str = Field(description="ISO 8601 creation timestamp")
    updated_at: str = Field(description="ISO 8601 last-update timestamp")


class CreateDocumentRequest(SnakeModel):
    """Document metadata created before its content is uploaded."""

    name: str = Field(..., min_length=1)
    document_type: DocumentType = Field(alias="type")
    workspace_id: str = Field(..., min_length=1)


class UpdateDocumentRequest(SnakeModel):
    """Sparse metadata update; setting ``workspace_id`` moves the document."""

    name: str | None = None
    workspace_id: str | None = None


class DocumentVersion(SnakeModel):
    version: int = Field(..., ge=0)
    size: int = Field(..., ge=0)
    created_by: str
    created_at: str
