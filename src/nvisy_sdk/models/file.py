"""Workspace file models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import Field

from .base import ApiModel


class FileFormat(StrEnum):
    """Formats accepted by the files endpoints (also used as a list filter)."""

    PDF = "pdf"
    DOCX = "docx"
    XLSX = "xlsx"
    PPTX = "pptx"
    TXT = "txt"
    CSV = "csv"
    JSON = "json"
    XML = "xml"
    HTML = "html"
    MD = "md"
    PNG = "png"
    JPEG = "jpeg"
    SVG = "svg"


class FileStatus(StrEnum):
    """Processing status of an uploaded file."""

    PENDING = "pending"
    PROCESSING = "processing"
    READY = "ready"
    FAILED = "failed"
    CANCELED = "canceled"


class ArchiveFormat(StrEnum):
    """Archive format for batch downloads."""

    ZIP = "zip"
    TAR_GZ = "tar_gz"


class File(ApiModel):
    """A stored file as returned by the API."""

    file_id: UUID
    workspace_id: UUID
    display_name: str = Field(examples=["contract.pdf"])
    file_format: FileFormat | None = None
    file_size: int = Field(..., ge=0, description="Size in bytes")
    status: FileStatus = FileStatus.PENDING
    tags: list[str] = Field(default_factory=list)
    version_number: int | None = None
    created_by: UUID
    created_at: datetime
    updated_at: datetime


class UpdateFile(ApiModel):
    """Sparse file metadata update."""

    display_name: str | None = None
    tags: list[str] | None = None
    require_approval: bool | None = None


class FilesPage(ApiModel):
    """Cursor-paginated list of files."""

    items: list[File]
    next_cursor: str | None = None
    total: int | None = None


class DeleteFiles(ApiModel):
    """Request body for a batch delete."""

    file_ids: list[UUID]


class DownloadFiles(ApiModel):
    """Request body for a batch archive download; an empty id list selects every file."""

    file_ids: list[UUID] = Field(default_factory=list)
    format: ArchiveFormat = ArchiveFormat.ZIP
