"""Loading and saving the task state file, a JSON object of title to status."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

DEFAULT_STATE_PATH = "./state.json"

PathLike = Union[str, Path]


def read_file(file_name: PathLike) -> dict[str, Any]:
    """Read the state file; raise ValueError unless it holds a JSON object."""
    data = json.loads(Path(file_name).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{file_name} does not hold a JSON object")
    return data


def write_to_file(file_name: PathLike, state: dict[str, Any]) -> None:
    """Write the state as compact JSON with keys in sorted order."""
    text = json.dumps(state, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    Path(file_name).write_text(text, encoding="utf-8")