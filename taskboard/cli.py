"""Command line for managing tasks kept in a JSON state file."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from taskboard.processes import process_input
from taskboard.state import DEFAULT_STATE_PATH, read_file
from taskboard.status import TaskStatus
from taskboard.tasks import to_do_factory


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskboard", description="Manage to-do items.")
    parser.add_argument("command", help="get, create, edit or delete")
    parser.add_argument("title", help="title of the item")
    parser.add_argument(
        "--state", default=DEFAULT_STATE_PATH, help="path of the JSON state file"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one command on one item; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        state = read_file(args.state)
        if args.title in state:
            shown = json.dumps(state[args.title], ensure_ascii=False)
            print(shown)
            status_text = shown.replace('"', "")
        else:
            status_text = "pending"
        status = TaskStatus.from_string(status_text.upper())
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    item = to_do_factory(args.title, status)
    try:
        process_input(item, args.command, state, args.state)
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())