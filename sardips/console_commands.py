"""Commands understood by the developer console, with parsing and tab completion."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


class CommandKind(enum.Enum):
    """Every developer console command, valued by the word that invokes it."""

    SET_SIM_TIME_SCALE = "set_sim_time_scale"
    SPAWN_PET = "spawn_pet"
    EVOLVE_PET = "evolve_pet"
    SPAWN_FOOD = "spawn_food"
    SPAWN_POOP = "spawn_poop"
    CLEAR_ALL_PETS = "clear_all_pets"
    CLEAR_ALL_FOODS = "clear_all_foods"
    CHANGE_LANGUAGE = "change_language"
    DISCOVER_COMPLETE_DIPDEX = "discover_complete_dipdex"

    @property
    def takes_argument(self) -> bool:
        return self in _COMMANDS_WITH_ARGUMENT


_COMMANDS_WITH_ARGUMENT = frozenset(
    {
        CommandKind.SET_SIM_TIME_SCALE,
        CommandKind.SPAWN_PET,
        CommandKind.EVOLVE_PET,
        CommandKind.SPAWN_FOOD,
        CommandKind.CHANGE_LANGUAGE,
    }
)


class UnknownCommandError(ValueError):
    """Raised when the console input starts with a word that is no command."""

    def __init__(self, command: str) -> None:
        super().__init__(f'Unknown command: "{command}"')
        self.command = command


@dataclass(frozen=True)
class DevConsoleCommand:
    """A parsed console command and its argument, if it takes one.

    ``argument`` is a float for ``set_sim_time_scale``, a string for the
    other commands with an argument and ``None`` for those without.
    """

    kind: CommandKind
    argument: float | str | None = None

    @property
    def command_str(self) -> str:
        return self.kind.value


def command_names() -> list[str]:
    """The words of all console commands, in declaration order."""
    return [kind.value for kind in CommandKind]


def common_prefix(matches: Sequence[str]) -> str:
    """Prefix that the candidates share, used to extend a tab completion.

    The prefix grows one character of the first candidate at a time while
    every candidate still starts with the prefix built so far; the final
    character added is then dropped.
    """
    if not matches:
        raise ValueError("common_prefix needs at least one candidate")
    prefix = ""
    for char in matches[0]:
        if all(match.startswith(prefix) for match in matches):
            prefix += char
        else:
            break
    return prefix[:-1]


def _complete_from(word: str, candidates: Iterable[str]) -> str | None:
    matches = [candidate for candidate in candidates if candidate.startswith(word)]
    if not matches:
        return None
    if len(matches) == 1:
        return matches[0]
    return common_prefix(matches)


def complete_command(text: str, food_names: Iterable[str] | None = None) -> str | None:
    """Tab completion of the console input, or ``None`` if nothing matches.

    A single word is completed against the command names. A command with one
    argument is completed only for ``spawn_food``, against ``food_names``.
    """
    words = text.split()
    if len(words) == 1:
        return _complete_from(words[0], command_names())
    if len(words) == 2:
        command, argument = words
        if command != CommandKind.SPAWN_FOOD.value or food_names is None:
            return None
        matched = _complete_from(argument, food_names)
        if matched is None:
            return None
        return f"{command} {matched}"
    return None


def _parse_scale(text: str) -> float | None:
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_command(text: str) -> DevConsoleCommand | None:
    """Parse a submitted console line.

    Returns ``None`` for an empty line, for a command that lacks its
    argument and for a time scale that is not a number. Words after the
    first argument are ignored. Raises ``UnknownCommandError`` when the
    first word names no command.
    """
    words = text.split()
    if not words:
        return None
    name, *rest = words
    try:
        kind = CommandKind(name)
    except ValueError:
        raise UnknownCommandError(name) from None

    if not kind.takes_argument:
        return DevConsoleCommand(kind)
    if not rest:
        return None
    if kind is CommandKind.SET_SIM_TIME_SCALE:
        scale = _parse_scale(rest[0])
        if scale is None:
            return None
        return DevConsoleCommand(kind, scale)
    return DevConsoleCommand(kind, rest[0])