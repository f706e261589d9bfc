"""Dialogs that build the button suited to the platform they run on."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from typing import Optional, Sequence


class Button(ABC):
    """A button that can be drawn and clicked."""

    @abstractmethod
    def render(self) -> None:
        """Draw the button, then click it."""

    @abstractmethod
    def on_click(self) -> str:
        """React to a click and return the message shown."""


class HtmlButton(Button):
    def render(self) -> None:
        print("<button>Test Button</button>")
        self.on_click()

    def on_click(self) -> str:
        message = "Click! Button says - 'Hello World!'"
        print(message)
        return message


class WindowsButton(Button):
    def render(self) -> None:
        print("Drawing a Windows button")
        self.on_click()

    def on_click(self) -> str:
        message = "Click! Hello, Windows!"
        print(message)
        return message


class Dialog(ABC):
    """A dialog whose button comes from its create_button factory method."""

    @abstractmethod
    def create_button(self) -> Button:
        """Return the button this dialog shows."""

    def render(self) -> None:
        """Create the button and draw it."""
        self.create_button().render()

    def refresh(self) -> str:
        """Refresh the dialog and return the message shown."""
        message = "Dialog - Refresh"
        print(message)
        return message


class HtmlDialog(Dialog):
    def create_button(self) -> Button:
        return HtmlButton()


class WindowsDialog(Dialog):
    def create_button(self) -> Button:
        return WindowsButton()


def initialize(platform: Optional[str] = None) -> Dialog:
    """Pick the dialog for the platform, the running one by default."""
    if platform is None:
        platform = sys.platform
    if platform == "win32":
        print("-- Windows detected, creating Windows GUI --")
        return WindowsDialog()
    print("-- No OS detected, creating the HTML GUI --")
    return HtmlDialog()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render and refresh the dialog for the platform."""
    parser = argparse.ArgumentParser(prog="taskboard-dialog", description="Render a dialog.")
    parser.add_argument("--platform", default=None, help="platform name, e.g. win32 or linux")
    args = parser.parse_args(argv)
    dialog = initialize(args.platform)
    dialog.render()
    dialog.refresh()
    return 0


if __name__ == "__main__":
    sys.exit(main())