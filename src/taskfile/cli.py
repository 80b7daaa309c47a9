#!/usr/bin/env python3
"""
TASKFILE - CLI Interface
========================
Command-line tool for a flat-file task list.

Usage:
    taskfile list
    taskfile todo "buy milk"
    taskfile deadline "submit report" --by 2024-12-01T23:59
    taskfile event "team sync" --from 2024-11-01T09:00 --to 2024-11-01T10:00
    taskfile mark 2
    taskfile unmark 2
    taskfile delete 1
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import Settings, load_settings
from .errors import InvalidPathError, StorageOperationError
from .schema import Deadline, Event, Task, TaskList, Todo
from .storage import TaskFileStore


def build_parser(default_file: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskfile",
        description="Flat-file task list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  taskfile list                                   Show all tasks
  taskfile todo "buy milk"                        Add a todo
  taskfile deadline "pay bills" --by 2024-01-31T00:00
  taskfile event "sync" --from 2024-11-01T09:00 --to 2024-11-01T10:00
  taskfile mark 2                                 Mark task 2 as done
  taskfile delete 1                               Delete task 1
        """
    )
    parser.add_argument("--log-level", help="Logging level (default from TASKFILE_LOG_LEVEL)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # LIST command
    list_parser = subparsers.add_parser("list", help="List all tasks")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # TODO command
    todo_parser = subparsers.add_parser("todo", help="Add a todo")
    todo_parser.add_argument("description", help="Task description")

    # DEADLINE command
    deadline_parser = subparsers.add_parser("deadline", help="Add a task with a deadline")
    deadline_parser.add_argument("description", help="Task description")
    deadline_parser.add_argument("--by", required=True, help="Due date-time (ISO-8601)")

    # EVENT command
    event_parser = subparsers.add_parser("event", help="Add an event")
    event_parser.add_argument("description", help="Event description")
    event_parser.add_argument("--from", dest="start", required=True, help="Start date-time")
    event_parser.add_argument("--to", dest="end", required=True, help="End date-time")

    # MARK / UNMARK / DELETE commands
    for name, help_text in (
        ("mark", "Mark a task as done"),
        ("unmark", "Mark a task as not done"),
        ("delete", "Delete a task"),
    ):
        index_parser = subparsers.add_parser(name, help=help_text)
        index_parser.add_argument("index", type=int, help="Task number as shown by 'list'")

    for sub in subparsers.choices.values():
        sub.add_argument("--file", default=default_file, help="Storage file (.txt)")

    return parser


def _get_task(task_list: TaskList, index: int) -> Optional[Task]:
    if 1 <= index <= task_list.size():
        return task_list.get(index - 1)
    return None


def _print_tasks(task_list: TaskList) -> None:
    if not task_list.size():
        print("No tasks found")
        return
    print("📋 Tasks:")
    for number, task in enumerate(task_list.tasks, start=1):
        print(f"  {number}. {task.display()}")


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"❌ Invalid settings: {e.errors()[0]['msg']}")
        return 1

    parser = build_parser(str(settings.storage_path))
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.log_level:
        try:
            settings = Settings(storage_path=settings.storage_path, log_level=args.log_level)
        except ValidationError as e:
            print(f"❌ Invalid settings: {e.errors()[0]['msg']}")
            return 1
    logging.getLogger("taskfile").setLevel(settings.log_level)

    try:
        store = TaskFileStore(args.file)
        task_list = store.load()
    except (InvalidPathError, StorageOperationError) as e:
        print(f"❌ {e}")
        return 1

    # Execute command
    if args.command == "list":
        if args.json:
            print(json.dumps(task_list.model_dump(mode="json"), indent=2))
        else:
            _print_tasks(task_list)
        return 0

    if args.command in ("todo", "deadline", "event"):
        try:
            if args.command == "todo":
                task = Todo(description=args.description)
            elif args.command == "deadline":
                task = Deadline(description=args.description, by=args.by)
            else:
                task = Event(description=args.description, start=args.start, end=args.end)
        except ValidationError as e:
            print(f"❌ Invalid task: {e.errors()[0]['msg']}")
            return 1
        task_list.add(task)
        store.save(task_list)
        print(f"✅ Added: {task.display()}")
        print(f"   Now you have {task_list.size()} tasks in the list.")
        return 0

    task = _get_task(task_list, args.index)
    if task is None:
        print(f"❌ Task not found: {args.index}")
        return 1

    if args.command == "mark":
        task.mark_done()
        print(f"✅ Marked as done: {task.display()}")
    elif args.command == "unmark":
        task.mark_undone()
        print(f"↩️ Marked as not done: {task.display()}")
    elif args.command == "delete":
        task_list.delete(args.index - 1)
        print(f"🗑️ Deleted: {task.display()}")

    store.save(task_list)
    return 0


if __name__ == "__main__":
    sys.exit(main())
