"""Unit tests for the workspace files endpoints."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from uuid import UUID

import pytest
from nvisy_fakes import (
    FILE_ID,
    WORKSPACE_ID,
    FakeNvisyApi,
    RecordingHandler,
    file_payload,
    make_client,
)

from nvisy_sdk import ApiError, FileAccessError, SerializationError
from nvisy_sdk.models import ArchiveFormat, FileFormat, FileStatus, UpdateFile
from nvisy_sdk.services import ListFilesOptions

OTHER_FILE_ID = "11111111-2222-4333-8444-555555555555"


def test_list_files_repeats_format_filter() -> None:
    """Given several formats, when `list_files()` runs, then each format is
    sent as its own `formats` query parameter."""
    handler = RecordingHandler(payload={"items": [file_payload()], "nextCursor": None, "total": 1})
    options = ListFilesOptions(
        formats=[FileFormat.PDF, FileFormat.DOCX], search="contract", limit=25
    )

    async def scenario() -> None:
        page = await make_client(handler).list_files(WORKSPACE_ID, options)
        assert page.total == 1
        assert page.items[0].file_format is FileFormat.TXT

    asyncio.run(scenario())
    params = handler.last.url.params
    assert handler.last.url.path == f"/workspaces/{WORKSPACE_ID}/files/"
    assert params.get_list("formats") == ["pdf", "docx"]
    assert params["search"] == "contract"
    assert params["limit"] == "25"
    assert "after" not in params


def test_list_files_options_to_params() -> None:
    assert ListFilesOptions().to_params() == []
    assert ListFilesOptions(after="cur-9").to_params() == [("after", "cur-9")]


def test_get_file_parses_status() -> None:
    handler = RecordingHandler(payload=file_payload(status="processing", versionNumber=2))

    async def scenario() -> None:
        file = await make_client(handler).get_file(FILE_ID)
        assert file.file_id == UUID(FILE_ID)
        assert file.status is FileStatus.PROCESSING
        assert file.version_number == 2

    asyncio.run(scenario())
    assert handler.last.url.path == f"/files/{FILE_ID}"


def test_file_status_defaults_to_pending() -> None:
    payload = file_payload()
    del payload["status"]
    handler = RecordingHandler(payload=payload)

    async def scenario() -> None:
        file = await make_client(handler).get_file(FILE_ID)
        assert file.status is FileStatus.PENDING

    asyncio.run(scenario())


def test_update_file_patches_sparse_body() -> None:
    handler = RecordingHandler(payload=file_payload(tags=["signed"]))

    async def scenario() -> None:
        file = await make_client(handler).update_file(FILE_ID, UpdateFile(tags=["signed"]))
        assert file.tags == ["signed"]

    asyncio.run(scenario())
    assert handler.last.method == "PATCH"
    assert handler.last_json() == {"tags": ["signed"]}


def test_delete_file() -> None:
    handler = RecordingHandler(status_code=204)

    async def scenario() -> None:
        await make_client(handler).delete_file(FILE_ID)

    asyncio.run(scenario())
    assert handler.last.method == "DELETE"
    assert handler.last.url.path == f"/files/{FILE_ID}"


def test_download_file_returns_raw_bytes() -> None:
    handler = RecordingHandler(content=b"\x89PNG\r\n")

    async def scenario() -> None:
        assert await make_client(handler).download_file(FILE_ID) == b"\x89PNG\r\n"

    asyncio.run(scenario())
    assert handler.last.url.path == f"/files/{FILE_ID}/content"


def test_upload_file_sends_multipart_and_returns_first_record() -> None:
    """Given file bytes, when `upload_file()` runs, then a multipart form
    with a `file` field is posted and the single created record returned."""
    api = FakeNvisyApi()

    async def scenario() -> None:
        uploaded = await make_client(api).upload_file(WORKSPACE_ID, "notes.txt", b"hello nvisy")
        assert uploaded.display_name == "notes.txt"
        assert uploaded.file_size == len(b"hello nvisy")
        assert uploaded.workspace_id == UUID(WORKSPACE_ID)

    asyncio.run(scenario())
    assert list(api.contents.values()) == [b"hello nvisy"]


def test_upload_file_sets_multipart_content_type() -> None:
    handler = RecordingHandler(status_code=201, payload=[file_payload()])

    async def scenario() -> None:
        await make_client(handler).upload_file(WORKSPACE_ID, "hello.txt", b"hello")

    asyncio.run(scenario())
    request = handler.last
    assert request.method == "POST"
    assert request.url.path == f"/workspaces/{WORKSPACE_ID}/files/"
    assert request.headers["content-type"].startswith("multipart/form-data; boundary=")
    assert b'name="file"; filename="hello.txt"' in request.content


def test_upload_file_empty_response_raises_api_error() -> None:
    handler = RecordingHandler(status_code=201, payload=[])

    async def scenario() -> None:
        with pytest.raises(ApiError, match="upload returned no files"):
            await make_client(handler).upload_file(WORKSPACE_ID, "a.txt", b"a")

    asyncio.run(scenario())


def test_upload_file_from_path_uses_file_name(tmp_path: Path) -> None:
    source = tmp_path / "minutes.md"
    source.write_bytes(b"# Minutes")
    api = FakeNvisyApi()

    async def scenario() -> None:
        uploaded = await make_client(api).upload_file_from_path(WORKSPACE_ID, source)
        assert uploaded.display_name == "minutes.md"
        assert uploaded.file_size == 9

    asyncio.run(scenario())


def test_upload_file_from_missing_path(tmp_path: Path) -> None:
    handler = RecordingHandler(payload=[file_payload()])

    async def scenario() -> None:
        with pytest.raises(FileAccessError):
            await make_client(handler).upload_file_from_path(WORKSPACE_ID, tmp_path / "gone.txt")

    asyncio.run(scenario())
    assert handler.requests == []


def test_delete_files_batch_sends_ids() -> None:
    handler = RecordingHandler(status_code=204)

    async def scenario() -> None:
        await make_client(handler).delete_files_batch(WORKSPACE_ID, [FILE_ID, OTHER_FILE_ID])

    asyncio.run(scenario())
    assert handler.last.method == "DELETE"
    assert handler.last.url.path == f"/workspaces/{WORKSPACE_ID}/files/batch"
    assert handler.last_json() == {"fileIds": [FILE_ID, OTHER_FILE_ID]}


def test_download_files_batch_defaults_to_zip_of_everything() -> None:
    """Given no file ids, when a batch download is requested, then the body
    selects every file and asks for a zip archive."""
    handler = RecordingHandler(content=b"PK\x03\x04")

    async def scenario() -> None:
        archive = await make_client(handler).download_files_batch(WORKSPACE_ID)
        assert archive == b"PK\x03\x04"

    asyncio.run(scenario())
    assert handler.last.method == "GET"
    assert handler.last.url.path == f"/workspaces/{WORKSPACE_ID}/files/batch"
    assert json.loads(handler.last.content) == {"fileIds": [], "format": "zip"}


def test_download_files_batch_tar_gz_selection() -> None:
    handler = RecordingHandler(content=b"\x1f\x8b")

    async def scenario() -> None:
        await make_client(handler).download_files_batch(
            WORKSPACE_ID, [FILE_ID], format=ArchiveFormat.TAR_GZ
        )

    asyncio.run(scenario())
    assert handler.last_json() == {"fileIds": [FILE_ID], "format": "tar_gz"}


@pytest.mark.parametrize("operation", ["delete_files_batch", "download_files_batch"])
def test_batch_operations_reject_non_uuid_ids(operation: str) -> None:
    """Given a file id that is not a UUID, when a batch operation is called,
    then a `SerializationError` is raised before any request is sent."""
    handler = RecordingHandler(status_code=204)

    async def scenario() -> None:
        client = make_client(handler)
        with pytest.raises(SerializationError, match="must be UUIDs") as exc_info:
            await getattr(client, operation)(WORKSPACE_ID, [FILE_ID, "file-1"])
        assert exc_info.value.context["errors"][0]["loc"] == (1,)

    asyncio.run(scenario())
    assert handler.requests == []


def test_batch_operations_accept_uuid_objects() -> None:
    handler = RecordingHandler(status_code=204)

    async def scenario() -> None:
        await make_client(handler).delete_files_batch(WORKSPACE_ID, [UUID(FILE_ID)])

    asyncio.run(scenario())
    assert handler.last_json() == {"fileIds": [FILE_ID]}
