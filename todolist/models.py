"""Data models for the task list."""
from dataclasses import dataclass


@dataclass
class Task:
    description: str
    done: bool = False

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "done": self.done,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Build a task from its stored form.

        Raises ValueError when a field is missing or has the wrong type.
        Unknown keys are ignored.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Task entry must be an object, got {type(data).__name__}")
        if "description" not in data or "done" not in data:
            raise ValueError("Task entry needs 'description' and 'done'")
        description = data["description"]
        done = data["done"]
        if not isinstance(description, str):
            raise ValueError("Task description must be a string")
        if not isinstance(done, bool):
            raise ValueError("Task done flag must be a boolean")
        return cls(description=description, done=done)
