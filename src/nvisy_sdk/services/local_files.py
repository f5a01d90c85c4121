"""Local file helpers for the path-based upload/download conveniences."""

from __future__ import annotations

from pathlib import Path

from ..errors import FileAccessError


def read_local_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileAccessError(f"Cannot read {path}: {exc}", context={"path": str(path)}) from exc


def write_local_file(path: Path, content: bytes) -> None:
    try:
        path.write_bytes(content)
    except OSError as exc:
        raise FileAccessError(f"Cannot write {path}: {exc}", context={"path": str(path)}) from exc
