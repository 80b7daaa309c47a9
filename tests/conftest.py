# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskfile.storage import TaskFileStore


@pytest.fixture()
def storage_path(tmp_path: Path) -> Path:
    """Storage file inside a directory that does not exist yet."""
    return tmp_path / "data" / "tasks.txt"


@pytest.fixture()
def store(storage_path: Path) -> TaskFileStore:
    return TaskFileStore(storage_path)


@pytest.fixture()
def write_lines(storage_path: Path):
    """Write raw lines to the storage file, creating its directory."""

    def _write(*lines: str) -> Path:
        storage_path.parent.mkdir(parents=True, exist_ok=True)
        storage_path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return storage_path

    return _write
