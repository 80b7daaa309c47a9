"""
TASKFILE - Settings
===================
Settings read from TASKFILE_* environment variables; CLI flags override them.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

ENV_PREFIX = "TASKFILE"
DEFAULT_STORAGE_PATH = Path("data") / "tasks.txt"
DEFAULT_LOG_LEVEL = "INFO"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


class Settings(BaseModel):
    storage_path: Path = DEFAULT_STORAGE_PATH
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment (os.environ unless given)"""
    env = os.environ if environ is None else environ
    values = {}

    raw_path = env.get(_k("PATH"), "").strip()
    if raw_path:
        values["storage_path"] = Path(raw_path).expanduser()

    raw_level = env.get(_k("LOG_LEVEL"), "").strip()
    if raw_level:
        values["log_level"] = raw_level

    return Settings(**values)
