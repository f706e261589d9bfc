"""Task items and the operations each kind of item allows on the state."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from taskboard.state import DEFAULT_STATE_PATH, PathLike, write_to_file
from taskboard.status import TaskStatus


@dataclass
class Task:
    """A titled task with a status; every task can be looked up and edited."""

    title: str
    status: TaskStatus

    def get(self, state: dict[str, Any]) -> Any:
        """Print and return this task's entry in the state, or None if absent."""
        if self.title not in state:
            print(f"item: {self.title} was not found")
            return None
        result = state[self.title]
        print(f"\n\nItem: {self.title}")
        print(f"Status: {json.dumps(result, ensure_ascii=False)}\n\n")
        return result

    def set_to_done(
        self, state: dict[str, Any], state_path: PathLike = DEFAULT_STATE_PATH
    ) -> None:
        """Mark this task done in the state and save it."""
        state[self.title] = TaskStatus.DONE.stringify()
        write_to_file(state_path, state)
        print(f"\n\n{self.title} is being set to done\n\n")

    def set_to_pending(
        self, state: dict[str, Any], state_path: PathLike = DEFAULT_STATE_PATH
    ) -> None:
        """Mark this task pending in the state and save it."""
        state[self.title] = TaskStatus.PENDING.stringify()
        write_to_file(state_path, state)
        print(f"\n\n{self.title} is being set to pending\n\n")


@dataclass
class Pending(Task):
    """A task still to be done; it can be created."""

    status: TaskStatus = field(default=TaskStatus.PENDING, init=False)

    def create(
        self, state: dict[str, Any], state_path: PathLike = DEFAULT_STATE_PATH
    ) -> None:
        """Add this task to the state with its status and save it."""
        state[self.title] = self.status.stringify()
        write_to_file(state_path, state)
        print(f"\n\n{self.title} is being created\n\n")


@dataclass
class Done(Task):
    """A finished task; it can be deleted."""

    status: TaskStatus = field(default=TaskStatus.DONE, init=False)

    def delete(
        self, state: dict[str, Any], state_path: PathLike = DEFAULT_STATE_PATH
    ) -> None:
        """Remove this task from the state, if present, and save it."""
        state.pop(self.title, None)
        write_to_file(state_path, state)
        print(f"\n\n{self.title} is being deleted\n\n")


def to_do_factory(title: str, status: TaskStatus) -> Task:
    """Build the task kind that matches the status."""
    if status is TaskStatus.DONE:
        return Done(title)
    return Pending(title)