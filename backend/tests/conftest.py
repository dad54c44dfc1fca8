"""Test fixtures for filehash."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pytest

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

@pytest.fixture(autouse=True)
def reset_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear cached settings, FILEHASH_* variables and root handlers between tests."""
    from filehash.core.config import get_settings

    for key in list(os.environ):
        if key.startswith("FILEHASH_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    get_settings.cache_clear()
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    get_settings.cache_clear()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    logging.captureWarnings(False)


@pytest.fixture
def abc_file(tmp_path: Path) -> Path:
    path = tmp_path / "abc.txt"
    path.write_bytes(b"abc")
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path
