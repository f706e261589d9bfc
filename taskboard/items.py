"""Request and response bodies for the task views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from taskboard.status import TaskStatus
from taskboard.tasks import Task, to_do_factory


@dataclass(frozen=True)
class TaskItem:
    """A task as sent by a client: a title and a status name."""

    title: str
    status: str

    @classmethod
    def from_json(cls, data: Any) -> TaskItem:
        """Build from a decoded JSON object; raise ValueError if it is malformed."""
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        missing = [name for name in ("title", "status") if name not in data]
        if missing:
            raise ValueError(f"missing field {missing[0]}")
        title, status = data["title"], data["status"]
        if not isinstance(title, str) or not isinstance(status, str):
            raise ValueError("title and status must be strings")
        return cls(title=title, status=status)


def _task_dict(task: Task) -> dict[str, str]:
    return {"title": task.title, "status": task.status.stringify()}


@dataclass
class TaskItems:
    """All tasks, split into pending and done."""

    pending_items: list[Task] = field(default_factory=list)
    done_items: list[Task] = field(default_factory=list)

    @property
    def pending_item_count(self) -> int:
        return len(self.pending_items)

    @property
    def done_item_count(self) -> int:
        return len(self.done_items)

    @classmethod
    def from_items(cls, items: Iterable[Task]) -> TaskItems:
        """Split the tasks by status, keeping their order."""
        result = cls()
        for item in items:
            if item.status is TaskStatus.DONE:
                result.done_items.append(item)
            else:
                result.pending_items.append(item)
        return result

    @classmethod
    def from_state(cls, state: dict[str, Any]) -> TaskItems:
        """Build from a title-to-status mapping, in title order.

        Raises ValueError for a status that is not a known status name.
        """
        tasks = []
        for title, value in sorted(state.items()):
            if not isinstance(value, str):
                raise ValueError(f"status of {title} is not a string")
            tasks.append(to_do_factory(title, TaskStatus.from_string(value)))
        return cls.from_items(tasks)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the collection."""
        return {
            "pending_items": [_task_dict(task) for task in self.pending_items],
            "done_items": [_task_dict(task) for task in self.done_items],
            "pending_item_count": self.pending_item_count,
            "done_item_count": self.done_item_count,
        }