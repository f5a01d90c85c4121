"""Files API service.

Manages files stored in a workspace: cursor-paginated listing, metadata
updates, multipart upload, content download and batch operations.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from uuid import UUID

from loguru import logger
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from ..errors import ApiError, SerializationError
from ..http import HttpCore
from ..models import (
    ArchiveFormat,
    DeleteFiles,
    DownloadFiles,
    File,
    FileFormat,
    FilesPage,
    UpdateFile,
)
from ..models.base import ResourceId
from .local_files import read_local_file

_FILE_IDS = TypeAdapter(list[UUID])


def _file_uuids(file_ids: Sequence[ResourceId]) -> list[UUID]:
    try:
        return _FILE_IDS.validate_python(list(file_ids))
    except ValidationError as exc:
        raise SerializationError(
            "Batch file ids must be UUIDs",
            context={"errors": exc.errors(include_url=False, include_context=False)},
        ) from exc


class ListFilesOptions(BaseModel):
    """Filters and cursor pagination for :meth:`FilesService.list_files`."""

    formats: list[FileFormat] | None = Field(None, description="Only return these formats")
    search: str | None = Field(None, description="Free-text search query")
    after: str | None = Field(None, description="Opaque cursor from a previous page")
    limit: int | None = Field(None, ge=1)

    def to_params(self) -> list[tuple[str, str | int]]:
        """Encode as query pairs; each format becomes its own ``formats`` parameter."""
        params: list[tuple[str, str | int]] = [
            ("formats", file_format.value) for file_format in self.formats or []
        ]
        if self.search is not None:
            params.append(("search", self.search))
        if self.after is not None:
            params.append(("after", self.after))
        if self.limit is not None:
            params.append(("limit", self.limit))
        return params


class FilesService(HttpCore):
    """Workspace file operations."""

    async def list_files(
        self, workspace_id: ResourceId, options: ListFilesOptions | None = None
    ) -> FilesPage:
        opts = options or ListFilesOptions()
        request = self.build_request(
            "GET", f"/workspaces/{workspace_id}/files/", params=opts.to_params()
        )
        return await self.send_json(request, FilesPage)

    async def get_file(self, file_id: ResourceId) -> File:
        return await self.send_json(self.build_request("GET", f"/files/{file_id}"), File)

    async def update_file(self, file_id: ResourceId, update: UpdateFile) -> File:
        request = self.build_request("PATCH", f"/files/{file_id}", json=update.to_payload())
        return await self.send_json(request, File)

    async def delete_file(self, file_id: ResourceId) -> None:
        """Soft-delete a file; it stays recoverable for the server's retention period."""
        await self.send_delete(self.build_request("DELETE", f"/files/{file_id}"))

    async def download_file(self, file_id: ResourceId) -> bytes:
        """Return the raw content of a file."""
        return await self.send_bytes(self.build_request("GET", f"/files/{file_id}/content"))

    async def upload_file(self, workspace_id: ResourceId, file_name: str, file_data: bytes) -> File:
        """Upload ``file_data`` as ``file_name`` into a workspace.

        The endpoint answers with a list of created files; the single record
        for this upload is returned.

        Raises:
            ApiError: If the response list is empty.
        """
        request = self.build_multipart_request(
            "POST", f"/workspaces/{workspace_id}/files/", file_name, file_data
        )
        files = await self.send_json(request, list[File])
        if not files:
            raise ApiError(
                "upload returned no files",
                context={"workspace_id": str(workspace_id), "file_name": file_name},
            )
        if len(files) > 1:
            logger.warning(
                f"Upload of {file_name} returned {len(files)} files; using {files[0].file_id}"
            )
        uploaded = files[0]
        logger.info(
            f"Uploaded {file_name} to workspace {workspace_id} "
            f"as {uploaded.file_id} ({uploaded.file_size} bytes)"
        )
        return uploaded

    async def upload_file_from_path(self, workspace_id: ResourceId, path: Path | str) -> File:
        """Upload a local file, using its name as the file name."""
        file_path = Path(path)
        return await self.upload_file(workspace_id, file_path.name, read_local_file(file_path))

    async def delete_files_batch(
        self, workspace_id: ResourceId, file_ids: Sequence[ResourceId]
    ) -> None:
        body = DeleteFiles(file_ids=_file_uuids(file_ids))
        request = self.build_request(
            "DELETE", f"/workspaces/{workspace_id}/files/batch", json=body.to_payload()
        )
        await self.send_delete(request)
        logger.info(f"Deleted {len(body.file_ids)} files from workspace {workspace_id}")

    async def download_files_batch(
        self,
        workspace_id: ResourceId,
        file_ids: Sequence[ResourceId] = (),
        format: ArchiveFormat = ArchiveFormat.ZIP,
    ) -> bytes:
        """Download several files as one archive.

        An empty ``file_ids`` selects every file in the workspace.
        """
        body = DownloadFiles(file_ids=_file_uuids(file_ids), format=format)
        request = self.build_request(
            "GET", f"/workspaces/{workspace_id}/files/batch", json=body.to_payload()
        )
        archive = await self.send_bytes(request)
        logger.info(
            f"Downloaded {body.format.value} archive of "
            f"{len(body.file_ids) or 'all'} files from workspace {workspace_id} "
            f"({len(archive)} bytes)"
        )
        return archive
