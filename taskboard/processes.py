"""Dispatching a command to a task item."""

from __future__ import annotations

from typing import Any

from taskboard.state import DEFAULT_STATE_PATH, PathLike
from taskboard.tasks import Done, Pending, Task


def _process_pending(
    item: Pending, command: str, state: dict[str, Any], state_path: PathLike
) -> None:
    if command == "get":
        item.get(state)
    elif command == "create":
        item.create(state, state_path)
    elif command == "edit":
        item.set_to_done(state, state_path)
    else:
        print(f"command: {command} not supported")


def _process_done(
    item: Done, command: str, state: dict[str, Any], state_path: PathLike
) -> None:
    if command == "get":
        item.get(state)
    elif command == "delete":
        item.delete(state, state_path)
    elif command == "edit":
        item.set_to_pending(state, state_path)
    else:
        print(f"command: {command} not supported")


def process_input(
    item: Task,
    command: str,
    state: dict[str, Any],
    state_path: PathLike = DEFAULT_STATE_PATH,
) -> dict[str, Any]:
    """Run the command on the item against a copy of the state; return the copy.

    Pending items accept get, create and edit; done items accept get, delete
    and edit. Any other command is reported as not supported.
    """
    new_state = dict(state)
    if isinstance(item, Done):
        _process_done(item, command, new_state, state_path)
    elif isinstance(item, Pending):
        _process_pending(item, command, new_state, state_path)
    else:
        raise TypeError(f"unsupported task type: {type(item).__name__}")
    return new_state