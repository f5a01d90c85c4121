"""Pytest configuration for test discovery, env, and fixtures.

This file ensures that:
- `src/` is importable without an editable install
- the shared fakes in `tests/nvisy_fakes.py` are importable from sub-directories
- no ambient `NVISY_*` environment variables leak into config tests
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent
for extra_path in (repo_root / "src", Path(__file__).parent):
    if str(extra_path) not in sys.path:
        sys.path.insert(0, str(extra_path))

from nvisy_fakes import FakeNvisyApi, RecordingHandler  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_nvisy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("NVISY_API_KEY", "NVISY_BASE_URL", "NVISY_TIMEOUT", "NVISY_CONFIG_PATH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_api() -> FakeNvisyApi:
    return FakeNvisyApi()


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()
