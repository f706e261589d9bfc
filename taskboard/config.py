"""Service configuration read from a YAML file."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import yaml


@dataclass
class Config:
    """Top-level settings of a YAML configuration file, keyed by name."""

    map: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> Config:
        """Load a YAML mapping; raise ValueError if the file holds anything else."""
        with open(file_path, encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
        if not isinstance(data, dict):
            raise ValueError(f"{file_path} does not hold a YAML mapping")
        return cls({str(key): value for key, value in data.items()})

    @classmethod
    def from_argv(cls, argv: Optional[Sequence[str]] = None) -> Config:
        """Load the file named by the last command-line argument."""
        args = list(sys.argv if argv is None else argv)
        if not args:
            raise ValueError("no configuration file given")
        return cls.from_file(args[-1])