# tests/test_cli.py

from __future__ import annotations

import json
import logging
from pathlib import Path

from taskfile.cli import main


def run(storage_path: Path, *argv: str) -> int:
    command, *rest = argv
    return main([command, *rest, "--file", str(storage_path)])


def test_add_and_list(storage_path: Path, capsys) -> None:
    assert run(storage_path, "todo", "buy milk") == 0
    assert run(storage_path, "deadline", "pay bills", "--by", "2024-01-31T00:00") == 0
    assert run(storage_path, "event", "sync", "--from", "2024-11-01T09:00", "--to", "2024-11-01T10:00") == 0
    capsys.readouterr()

    assert run(storage_path, "list") == 0
    out = capsys.readouterr().out
    assert "1. [T][ ] buy milk" in out
    assert "2. [D][ ] pay bills (by: 2024-01-31T00:00)" in out
    assert "3. [E][ ] sync (from: 2024-11-01T09:00 to: 2024-11-01T10:00)" in out

    assert storage_path.read_text(encoding="utf-8").splitlines() == [
        "T | 0 | buy milk",
        "D | 0 | pay bills | 2024-01-31T00:00",
        "E | 0 | sync | 2024-11-01T09:00 | 2024-11-01T10:00",
    ]


def test_mark_unmark_delete(storage_path: Path) -> None:
    run(storage_path, "todo", "one")
    run(storage_path, "todo", "two")

    assert run(storage_path, "mark", "2") == 0
    assert storage_path.read_text(encoding="utf-8").splitlines() == ["T | 0 | one", "T | 1 | two"]

    assert run(storage_path, "unmark", "2") == 0
    assert run(storage_path, "delete", "1") == 0
    assert storage_path.read_text(encoding="utf-8").splitlines() == ["T | 0 | two"]


def test_bad_index_fails(storage_path: Path, capsys) -> None:
    run(storage_path, "todo", "only")
    assert run(storage_path, "mark", "5") == 1
    assert run(storage_path, "delete", "0") == 1
    assert "Task not found" in capsys.readouterr().out


def test_delimiter_in_description_rejected(storage_path: Path, capsys) -> None:
    assert run(storage_path, "todo", "a | b") == 1
    assert "Invalid task" in capsys.readouterr().out
    assert storage_path.read_text(encoding="utf-8") == ""


def test_invalid_storage_path(tmp_path: Path, capsys) -> None:
    assert main(["list", "--file", str(tmp_path / "tasks.dat")]) == 1
    assert ".txt" in capsys.readouterr().out


def test_list_json(storage_path: Path, capsys) -> None:
    run(storage_path, "deadline", "pay bills", "--by", "2024-01-31T00:00")
    capsys.readouterr()

    assert run(storage_path, "list", "--json") == 0
    data = json.loads(capsys.readouterr().out)
    assert data["tasks"] == [
        {"description": "pay bills", "is_done": False, "kind": "D", "by": "2024-01-31T00:00"}
    ]


def test_file_defaults_to_environment(tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "env" / "tasks.txt"
    monkeypatch.setenv("TASKFILE_PATH", str(target))

    assert main(["todo", "from env"]) == 0
    assert target.read_text(encoding="utf-8") == "T | 0 | from env\n"


def test_no_command_prints_help(capsys) -> None:
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()


def test_bad_log_level_flag_fails_cleanly(storage_path: Path, capsys) -> None:
    assert main(["--log-level", "bogus", "list", "--file", str(storage_path)]) == 1
    assert "unknown log level" in capsys.readouterr().out
    assert not storage_path.exists()


def test_log_level_flag_is_applied(storage_path: Path) -> None:
    logger = logging.getLogger("taskfile")
    previous = logger.level
    try:
        assert main(["--log-level", "warning", "list", "--file", str(storage_path)]) == 0
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(previous)


def test_bad_log_level_environment_fails_cleanly(storage_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("TASKFILE_LOG_LEVEL", "chatty")
    assert run(storage_path, "list") == 1
    assert "unknown log level" in capsys.readouterr().out
