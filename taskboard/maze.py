"""Maze games whose rooms come from a factory method."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence


class Room(ABC):
    """A room of a maze."""

    @abstractmethod
    def render(self) -> str:
        """Draw the room and return the line drawn."""


@dataclass(frozen=True)
class OrdinaryRoom(Room):
    id: int

    def render(self) -> str:
        line = f"Ordinary Room: #{self.id}"
        print(line)
        return line


@dataclass(frozen=True)
class MagicRoom(Room):
    title: str

    def render(self) -> str:
        line = f"Magic Room: {self.title}"
        print(line)
        return line


class MazeGame(ABC):
    """A game played through the rooms its factory method provides."""

    @abstractmethod
    def rooms(self) -> list[Room]:
        """Return the rooms in the order they are visited."""

    def play(self) -> None:
        """Draw every room in turn."""
        for room in self.rooms():
            room.render()


class OrdinaryMaze(MazeGame):
    """Numbered rooms, visited from last to first."""

    def __init__(self) -> None:
        self._rooms = [OrdinaryRoom(1), OrdinaryRoom(2)]

    def rooms(self) -> list[Room]:
        return list(reversed(self._rooms))


class MagicMaze(MazeGame):
    """Named rooms, visited in order."""

    def __init__(self) -> None:
        self._rooms = [MagicRoom("Infinite Room"), MagicRoom("Red Room")]

    def rooms(self) -> list[Room]:
        return list(self._rooms)


def run(maze_game: MazeGame) -> None:
    """Prepare the game, then play it."""
    print("Loading resources...")
    print("Starting the game...")
    maze_game.play()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play an ordinary maze and then a magic maze."""
    run(OrdinaryMaze())
    run(MagicMaze())
    return 0


if __name__ == "__main__":
    sys.exit(main())