"""
TASKFILE - Flat-File Task Storage
=================================

Loads a task list from a line-oriented text file and saves it back.

Usage:
    from taskfile import TaskFileStore, Todo

    store = TaskFileStore("data/tasks.txt")
    tasks = store.load()
    tasks.add(Todo(description="buy milk"))
    store.save(tasks)

File format, one task per line:
    T | 1 | buy milk
    D | 0 | submit report | 2024-12-01T23:59
    E | 0 | team sync | 2024-11-01T09:00 | 2024-11-01T10:00
"""

from .errors import (
    TaskFileError,
    InvalidPathError,
    StorageOperationError,
    TaskParseError,
    UnknownTaskKindError,
    MissingFieldError
)

from .schema import (
    TaskKind,
    Task,
    Todo,
    Deadline,
    Event,
    TaskList
)

from .storage import (
    TaskFileStore,
    ParseSuccess,
    ParseFailure,
    is_valid_path,
    parse_line
)

__version__ = "1.0.0"
__all__ = [
    "TaskFileStore",
    "is_valid_path",
    "parse_line",
    "ParseSuccess",
    "ParseFailure",
    "TaskKind",
    "Task",
    "Todo",
    "Deadline",
    "Event",
    "TaskList",
    "TaskFileError",
    "InvalidPathError",
    "StorageOperationError",
    "TaskParseError",
    "UnknownTaskKindError",
    "MissingFieldError"
]
