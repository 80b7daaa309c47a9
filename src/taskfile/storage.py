"""
TASKFILE - Flat-File Task Store
===============================
Loads tasks from a line-oriented text file and writes them back.
One task per line, fields separated by '|', see schema.py for the format.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from pydantic import BaseModel

from .errors import (
    InvalidPathError,
    MissingFieldError,
    StorageOperationError,
    TaskParseError,
    UnknownTaskKindError,
)
from .schema import (
    DELIMITER,
    DONE_FLAG,
    AnyTask,
    Deadline,
    Event,
    Task,
    TaskKind,
    TaskList,
    Todo,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("taskfile")

STORAGE_SUFFIX = ".txt"

# Fields each kind needs: tag, done flag, description, then extras
REQUIRED_FIELDS = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


def is_valid_path(path: Union[str, Path]) -> bool:
    """True if the path is acceptable as a storage file (ends with '.txt')"""
    return str(path).endswith(STORAGE_SUFFIX)


# ============================================================
# LINE PARSING
# ============================================================

class ParseSuccess(BaseModel):
    line_number: int = 0
    task: AnyTask


class ParseFailure(BaseModel):
    line_number: int = 0
    line: str
    reason: str


ParseResult = Union[ParseSuccess, ParseFailure]


def convert_string_to_task(line: str) -> Task:
    """
    Convert one stored line into a Task.

    Raises:
        UnknownTaskKindError: the kind tag is not T, D or E
        MissingFieldError: the line is too short for its kind
    """
    args = [field.strip() for field in line.split(DELIMITER)]

    tag = args[0]
    try:
        kind = TaskKind(tag)
    except ValueError:
        raise UnknownTaskKindError(tag) from None

    required = REQUIRED_FIELDS[kind]
    if len(args) < required:
        raise MissingFieldError(tag, required, len(args))

    is_done = args[1] == DONE_FLAG
    description = args[2]

    if kind is TaskKind.TODO:
        return Todo(description=description, is_done=is_done)
    if kind is TaskKind.DEADLINE:
        return Deadline(description=description, by=args[3], is_done=is_done)
    return Event(description=description, start=args[3], end=args[4], is_done=is_done)


def parse_line(line: str, line_number: int = 0) -> ParseResult:
    """Parse one stored line without raising for bad input"""
    try:
        task = convert_string_to_task(line)
    except TaskParseError as e:
        return ParseFailure(line_number=line_number, line=line, reason=str(e))
    return ParseSuccess(line_number=line_number, task=task)


def parse_lines(lines: Iterable[str]) -> Tuple[TaskList, List[ParseFailure]]:
    """
    Parse stored lines in order.

    Returns the successfully parsed tasks plus the failures; blank lines
    are skipped without producing either.
    """
    tasks: List[Task] = []
    failures: List[ParseFailure] = []

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        result = parse_line(line, line_number)
        if isinstance(result, ParseSuccess):
            tasks.append(result.task)
        else:
            failures.append(result)

    return TaskList(tasks=tasks), failures


# ============================================================
# STORE
# ============================================================

class TaskFileStore:
    """
    Flat-file task store

    load() reads the whole file into a TaskList, skipping lines it cannot
    parse. save() rewrites the file one task per line. Nothing is cached
    between calls.
    """

    def __init__(self, path: Union[str, Path]):
        if not is_valid_path(path):
            raise InvalidPathError(f"Storage file should end with '{STORAGE_SUFFIX}': {path}")
        self.path = Path(path)
        self.last_failures: List[ParseFailure] = []

    # ========================================
    # LOADING
    # ========================================

    def load(self) -> TaskList:
        """
        Load tasks, creating the directory and file if missing

        Raises:
            StorageOperationError: the storage file could not be created
        """
        self._ensure_directory()

        try:
            with open(self.path, "x", encoding="utf-8"):
                pass
        except FileExistsError:
            logger.info(f"📂 File already exists, loading tasks: {self.path}")
        except OSError as e:
            raise StorageOperationError(self.path) from e
        else:
            logger.info(f"🆕 File not found. New file created: {self.path.name}")
            self.last_failures = []
            return TaskList()

        return self.parse_file()

    def parse_file(self) -> TaskList:
        """Read and parse the storage file; bad lines are reported and skipped"""
        # Undecodable bytes become U+FFFD so one bad line cannot abort the read
        with open(self.path, "r", encoding="utf-8", errors="replace") as f:
            task_list, failures = parse_lines(f)

        for failure in failures:
            logger.warning(f"⚠️ Skipping line {failure.line_number}: {failure.reason}")

        self.last_failures = failures
        logger.info(f"✅ Loaded {task_list.size()} tasks from {self.path.name}")
        return task_list

    def _ensure_directory(self) -> None:
        directory = self.path.parent
        if directory.exists():
            return
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create directory {directory}: {e}")
            return
        logger.info(f"📁 Directory was not found. New directory {directory} is created")

    # ========================================
    # SAVING
    # ========================================

    def save(self, tasks: TaskList) -> None:
        """
        Rewrite the storage file from a TaskList.

        Failures are logged, never raised: a task whose line could not be
        written is missing from the file and the caller is not told.
        """
        try:
            self._clear_file()
        except OSError as e:
            logger.warning(f"Could not clear {self.path}: {e}")

        for index in range(tasks.size()):
            task = tasks.get(index)
            text = self.convert_task_to_string(task) + "\n"
            try:
                self._append_to_file(text)
            except OSError as e:
                logger.warning(f"Could not save task {index + 1}: {e}")
                continue
            logger.debug(f"💾 Saved task {index + 1}: {text.rstrip()}")

    def convert_task_to_string(self, task: Task) -> str:
        return task.format_to_save()

    def _clear_file(self) -> None:
        with open(self.path, "w", encoding="utf-8"):
            pass

    def _append_to_file(self, text: str) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(text)

