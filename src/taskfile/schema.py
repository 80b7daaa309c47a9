"""
TASKFILE - Task Schema Definition
=================================
Task variants (Todo, Deadline, Event) and the ordered TaskList container.

Each task renders itself into a single pipe-delimited line for the store:

    T | 1 | buy milk
    D | 0 | submit report | 2024-12-01T23:59
    E | 0 | team sync | 2024-11-01T09:00 | 2024-11-01T10:00
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DELIMITER = "|"
SEPARATOR = f" {DELIMITER} "
DONE_FLAG = "1"
NOT_DONE_FLAG = "0"


class TaskKind(str, Enum):
    """Single-character tags identifying each task variant"""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def parse_datetime(text: str) -> datetime:
    """Parse a stored date-time string (ISO-8601)"""
    return datetime.fromisoformat(text)


def _check_storable(value: str) -> str:
    # The line format has no escaping; one task per line
    for forbidden in (DELIMITER, "\n", "\r"):
        if forbidden in value:
            raise ValueError(f"must not contain {forbidden!r}")
    return value


class Task(BaseModel):
    """Fields shared by every task variant"""
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    description: str
    is_done: bool = False

    @field_validator("description")
    @classmethod
    def _check_description(cls, value: str) -> str:
        return _check_storable(value)

    def mark_done(self) -> None:
        self.is_done = True

    def mark_undone(self) -> None:
        self.is_done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def extra_fields(self) -> List[str]:
        """Kind-specific fields written after the description"""
        return []

    def format_to_save(self) -> str:
        """Canonical single-line form, parseable back into an equal task"""
        fields = [
            self.kind.value,
            DONE_FLAG if self.is_done else NOT_DONE_FLAG,
            self.description,
            *self.extra_fields(),
        ]
        return SEPARATOR.join(fields)

    def display(self) -> str:
        return f"[{self.kind.value}][{self.status_icon}] {self.description}"


class Todo(Task):
    kind: Literal[TaskKind.TODO] = TaskKind.TODO


class Deadline(Task):
    kind: Literal[TaskKind.DEADLINE] = TaskKind.DEADLINE
    by: str

    @field_validator("by")
    @classmethod
    def _check_by(cls, value: str) -> str:
        return _check_storable(value)

    def by_datetime(self) -> datetime:
        return parse_datetime(self.by)

    def extra_fields(self) -> List[str]:
        return [self.by]

    def display(self) -> str:
        return f"{super().display()} (by: {self.by})"


class Event(Task):
    kind: Literal[TaskKind.EVENT] = TaskKind.EVENT
    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def _check_dates(cls, value: str) -> str:
        return _check_storable(value)

    def start_datetime(self) -> datetime:
        return parse_datetime(self.start)

    def end_datetime(self) -> datetime:
        return parse_datetime(self.end)

    def extra_fields(self) -> List[str]:
        return [self.start, self.end]

    def display(self) -> str:
        return f"{super().display()} (from: {self.start} to: {self.end})"


AnyTask = Annotated[Union[Todo, Deadline, Event], Field(discriminator="kind")]


class TaskList(BaseModel):
    """Ordered task collection; order is file line order, duplicates allowed"""
    model_config = ConfigDict(validate_assignment=True)

    tasks: List[AnyTask] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def size(self) -> int:
        return len(self.tasks)

    def get(self, index: int) -> Task:
        return self.tasks[index]

    def add(self, task: Task) -> None:
        # Reassign so the new task is validated against the task variants
        self.tasks = [*self.tasks, task]

    def delete(self, index: int) -> Task:
        return self.tasks.pop(index)
