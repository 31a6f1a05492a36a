"""Task storage with JSON persistence.

Tasks are addressed by 1-based index at the public methods. Internally the
list is 0-based. Every successful mutation is saved before returning; a
mutation whose save fails is rolled back.
"""
import json
from pathlib import Path
from typing import NamedTuple

from todolist.models import Task

DEFAULT_FILE = "tasks.json"


class TaskNotFoundError(KeyError):
    """Index does not address an existing task."""

    def __init__(self, index):
        super().__init__(f"Task {index} not found")
        self.index = index

    def __str__(self):
        return self.args[0]


class StorageError(RuntimeError):
    """Tasks could not be written to the backing file."""

    def __init__(self, path, reason):
        super().__init__(f"Failed to write tasks to {path}: {reason}")
        self.path = path


class TaskEntry(NamedTuple):
    index: int
    done: bool
    description: str


class TaskStore:
    """Ordered task list backed by a single JSON file."""

    def __init__(self, path=DEFAULT_FILE, tasks=None):
        self.path = Path(path)
        self._tasks: list[Task] = list(tasks) if tasks else []

    @classmethod
    def load(cls, path=DEFAULT_FILE) -> "TaskStore":
        """Load tasks from the JSON file.

        A missing, unreadable or malformed file gives an empty store.
        """
        return cls(path, cls._read(Path(path)))

    @staticmethod
    def _read(path: Path) -> list[Task]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError):
            return []
        if not isinstance(data, dict) or not isinstance(data.get("tasks"), list):
            return []
        try:
            return [Task.from_dict(raw) for raw in data["tasks"]]
        except ValueError:
            return []

    def save(self):
        """Persist tasks to the JSON file, replacing it atomically."""
        tmp_file = None
        try:
            # with_name raises ValueError for paths like "." or "/"
            tmp_file = self.path.with_name(self.path.name + ".tmp")
            payload = json.dumps({"tasks": [t.to_dict() for t in self._tasks]}, indent=2)
            tmp_file.write_text(payload + "\n", encoding="utf-8")
            tmp_file.replace(self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_file is not None:
                tmp_file.unlink(missing_ok=True)
            raise StorageError(self.path, e) from e

    def _position(self, index) -> int:
        """Translate a 1-based index into a list position."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise TaskNotFoundError(index)
        if not 1 <= index <= len(self._tasks):
            raise TaskNotFoundError(index)
        return index - 1

    def add(self, description: str) -> int:
        """Append a task. Returns its 1-based index."""
        self._tasks.append(Task(description))
        try:
            self.save()
        except StorageError:
            self._tasks.pop()
            raise
        return len(self._tasks)

    def complete(self, index: int) -> str:
        """Mark a task as done. Returns its description."""
        task = self._tasks[self._position(index)]
        was_done = task.done
        task.done = True
        try:
            self.save()
        except StorageError:
            task.done = was_done
            raise
        return task.description

    def delete(self, index: int) -> str:
        """Delete a task. Later tasks move up one index."""
        pos = self._position(index)
        task = self._tasks.pop(pos)
        try:
            self.save()
        except StorageError:
            self._tasks.insert(pos, task)
            raise
        return task.description

    def list_tasks(self) -> list[TaskEntry]:
        return [
            TaskEntry(i, task.done, task.description)
            for i, task in enumerate(self._tasks, start=1)
        ]

    def __len__(self):
        return len(self._tasks)
