"""State of the developer console: input line, history and blinking cursor."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from .anime import RepeatingTimer
from .console_commands import (
    DevConsoleCommand,
    UnknownCommandError,
    complete_command,
    parse_command,
)

_KEY_MAP: dict[str, str] = {
    **{f"Digit{d}": str(d) for d in range(10)},
    **{f"Key{c}": c.lower() for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"},
    "Minus": "-",
    "Equal": "=",
    "Space": " ",
    "Period": ".",
}

_KEY_UPPERCASE_MAP: dict[str, str] = {
    "Digit0": ")",
    "Digit1": "!",
    "Digit2": "@",
    "Digit3": "#",
    "Digit4": "$",
    "Digit5": "%",
    "Digit6": "^",
    "Digit7": "&",
    "Digit8": "*",
    "Digit9": "(",
    "Minus": "_",
    "Equal": "+",
    "Period": ">",
}

CURSOR_FLASH_SECONDS = 0.5
CURSOR = "_"


class EntryKind(enum.Enum):
    """Whether a history line was typed by the user or printed by a command."""

    USER_INPUT = "user_input"
    COMMAND_OUTPUT = "command_output"


@dataclass(frozen=True)
class HistoryEntry:
    kind: EntryKind
    text: str


@dataclass
class DevConsoleHistory:
    """Everything typed into and printed by the console, oldest first."""

    entries: list[HistoryEntry] = field(default_factory=list)

    def push_command_output(self, output: object) -> None:
        self.entries.append(HistoryEntry(EntryKind.COMMAND_OUTPUT, str(output)))

    def push_user_input(self, text: str) -> None:
        self.entries.append(HistoryEntry(EntryKind.USER_INPUT, text))

    def last_user_input(self) -> str | None:
        """The most recent line the user submitted, if any."""
        return next(
            (
                entry.text
                for entry in reversed(self.entries)
                if entry.kind is EntryKind.USER_INPUT
            ),
            None,
        )

    def last_lines(self, count: int) -> list[HistoryEntry]:
        """The newest ``count`` entries, oldest first, as they are displayed."""
        if count <= 0:
            return []
        return self.entries[-count:]


@dataclass
class DevConsoleInput:
    """The line being edited and the history it is submitted to."""

    text: str = ""
    history: DevConsoleHistory = field(default_factory=DevConsoleHistory)

    def press(
        self,
        key: str,
        shift: bool = False,
        food_names: Iterable[str] | None = None,
    ) -> DevConsoleCommand | None:
        """Handle one key press, named as a key code such as ``"KeyA"``.

        ``Backspace`` deletes, ``Tab`` completes, ``ArrowUp`` recalls the last
        input and ``Enter`` submits, returning the parsed command if any.
        """
        if key == "Backspace":
            self.text = self.text[:-1]
            return None
        if key == "Enter":
            return self.submit()
        if key == "Tab":
            completed = complete_command(self.text, food_names)
            if completed is not None:
                self.text = completed
        elif key == "ArrowUp":
            last = self.history.last_user_input()
            if last is not None:
                self.text = last

        if shift:
            if key in _KEY_UPPERCASE_MAP:
                self.text += _KEY_UPPERCASE_MAP[key]
            elif key in _KEY_MAP:
                self.text += _KEY_MAP[key].upper()
        elif key in _KEY_MAP:
            self.text += _KEY_MAP[key]
        return None

    def submit(self) -> DevConsoleCommand | None:
        """Parse and record the current line, then clear it.

        A blank line is left untouched and nothing is recorded. An unknown
        command adds an error line to the history before the input itself.
        """
        if not self.text.split():
            return None
        try:
            command = parse_command(self.text)
        except UnknownCommandError as error:
            self.history.push_command_output(str(error))
            command = None
        self.history.push_user_input(self.text)
        self.text = ""
        return command


@dataclass
class CursorFlash:
    """A cursor that toggles between shown and hidden on a fixed period."""

    timer: RepeatingTimer = field(
        default_factory=lambda: RepeatingTimer(CURSOR_FLASH_SECONDS)
    )
    showing: bool = True

    def tick(self, delta: float) -> str:
        """Advance by ``delta`` seconds and return the cursor text to draw."""
        if self.timer.tick(delta):
            self.showing = not self.showing
        return CURSOR if self.showing else ""