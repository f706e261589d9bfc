"""The two states a task can be in."""

from __future__ import annotations

from enum import Enum


class TaskStatus(Enum):
    """Whether a task is finished or still outstanding."""

    DONE = "DONE"
    PENDING = "PENDING"

    def stringify(self) -> str:
        """Return the status as its upper-case name."""
        return self.value

    @classmethod
    def from_string(cls, input_string: str) -> TaskStatus:
        """Parse an upper-case status name; raise ValueError for anything else."""
        try:
            return cls(input_string)
        except ValueError:
            raise ValueError(f"input {input_string} not supported") from None

    def __str__(self) -> str:
        return self.stringify()