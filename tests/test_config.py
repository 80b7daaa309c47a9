# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from taskfile.config import DEFAULT_STORAGE_PATH, load_settings


def test_defaults_without_environment() -> None:
    settings = load_settings({})
    assert settings.storage_path == DEFAULT_STORAGE_PATH
    assert settings.log_level == "INFO"


def test_environment_overrides() -> None:
    settings = load_settings({"TASKFILE_PATH": "/tmp/my/tasks.txt", "TASKFILE_LOG_LEVEL": " debug "})
    assert settings.storage_path == Path("/tmp/my/tasks.txt")
    assert settings.log_level == "DEBUG"


def test_blank_values_fall_back_to_defaults() -> None:
    settings = load_settings({"TASKFILE_PATH": "  ", "TASKFILE_LOG_LEVEL": ""})
    assert settings.storage_path == DEFAULT_STORAGE_PATH
    assert settings.log_level == "INFO"


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        load_settings({"TASKFILE_LOG_LEVEL": "chatty"})
