#!/usr/bin/env python
"""Upload, list and download files in a throwaway workspace.

Creates a workspace, uploads two small files, lists them, downloads one
file and an archive of all of them, then deletes everything again.

Usage:
    NVISY_API_KEY=... python scripts/files_example.py
    NVISY_API_KEY=... python scripts/files_example.py --save-archive files.zip
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import click
from loguru import logger

from nvisy_sdk import NvisyClient, NvisyError
from nvisy_sdk.models import ArchiveFormat, CreateWorkspace
from nvisy_sdk.services import ListFilesOptions

logger.remove()
logger.add(sys.stderr, level="INFO", format="<level>{message}</level>")

SAMPLE_FILES = {
    "hello.txt": b"Hello from the Nvisy SDK!\n\nThis is a test document.",
    "readme.md": b"# README\n\nThis is another test file.",
}


async def run(save_archive: Path | None, archive_format: ArchiveFormat) -> None:
    async with NvisyClient.from_env() as client:
        workspace = await client.create_workspace(
            CreateWorkspace(display_name="File Upload Example")
        )
        workspace_id = workspace.workspace_id
        logger.info(f"Created workspace {workspace_id}")

        try:
            uploaded = []
            for name, content in SAMPLE_FILES.items():
                file = await client.upload_file(workspace_id, name, content)
                logger.info(f"  {file.display_name}: {file.file_size} bytes, {file.status.value}")
                uploaded.append(file)

            page = await client.list_files(workspace_id, ListFilesOptions(limit=10))
            for file in page.items:
                logger.info(f"  - {file.display_name} ({file.status.value})")
            logger.info(f"Total: {len(page.items)} file(s)")

            downloaded = await client.download_file(uploaded[0].file_id)
            text = downloaded.decode(errors="replace")
            logger.info(f"Downloaded {len(downloaded)} bytes: {text!r}")

            archive = await client.download_files_batch(workspace_id, format=archive_format)
            logger.info(f"Downloaded {archive_format.value} archive: {len(archive)} bytes")
            if save_archive is not None:
                save_archive.write_bytes(archive)
                logger.success(f"Saved archive to {save_archive}")

            for file in uploaded:
                await client.delete_file(file.file_id)
            logger.info("Files deleted")
        finally:
            await client.delete_workspace(workspace_id)
            logger.info("Workspace cleaned up")


@click.command()
@click.option(
    "--save-archive",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the batch download archive to this path",
)
@click.option(
    "--format",
    "archive_format",
    type=click.Choice([f.value for f in ArchiveFormat]),
    default=ArchiveFormat.ZIP.value,
    show_default=True,
)
def cli(save_archive: Path | None, archive_format: str) -> None:
    """Walk through the file endpoints end to end."""
    try:
        asyncio.run(run(save_archive, ArchiveFormat(archive_format)))
    except NvisyError as exc:
        logger.error(f"Example failed: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
