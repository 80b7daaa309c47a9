"""
TASKFILE - Error Types
======================
Everything raised by the store derives from TaskFileError.
"""

from pathlib import Path
from typing import Union


class TaskFileError(Exception):
    """Base class for taskfile errors"""


class InvalidPathError(TaskFileError):
    """Storage path does not end with the required suffix"""


class StorageOperationError(TaskFileError):
    """Creating the storage directory or file failed"""

    def __init__(self, path: Union[str, Path], message: str = "Error writing to file"):
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class TaskParseError(TaskFileError):
    """A stored line could not be turned into a task"""


class UnknownTaskKindError(TaskParseError):
    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unknown task identified: {tag!r}")


class MissingFieldError(TaskParseError):
    def __init__(self, kind: str, expected: int, found: int):
        self.kind = kind
        self.expected = expected
        self.found = found
        super().__init__(
            f"Task {kind!r} needs {expected} fields, found {found}"
        )
