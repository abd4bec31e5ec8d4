"""Registry of named commands that operate on an interpreter context."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable

NO_COMMAND = 0
"""Command id reported for names that are not registered."""

MAX_CAPACITY = 0xFF

Handler = Callable[[Any], None]


class CommandFlag(enum.IntFlag):
    """How a command is carried out."""

    EXTERNAL = 1


class CommandError(Exception):
    """Raised when a command cannot be registered or called."""


@dataclass(frozen=True)
class _Command:
    name: str
    handler: Handler
    flags: CommandFlag


def _names_match(registered: str, requested: str) -> bool:
    """Both names are non-empty and one is a prefix of the other."""
    if not registered or not requested:
        return False
    return registered.startswith(requested) or requested.startswith(registered)


class CommandSystem:
    """A fixed-capacity table of commands addressed by ids starting at 1."""

    def __init__(self, capacity: int) -> None:
        if not 0 <= capacity <= MAX_CAPACITY:
            raise ValueError(f"capacity must be between 0 and {MAX_CAPACITY}")
        self.capacity = capacity
        self._commands: list[_Command] = []

    def add_command(self, name: str, flags: CommandFlag, handler: Handler) -> int:
        """Register a command and return its id."""
        if name is None:
            raise CommandError("command name is required")
        if flags != CommandFlag.EXTERNAL:
            raise CommandError(f"unsupported command flags {flags!r}")
        if len(self._commands) >= self.capacity:
            raise CommandError("command system is full")
        self._commands.append(_Command(name, handler, CommandFlag(flags)))
        return len(self._commands)

    def id_for_name(self, name: str) -> int:
        """Return the id of the first command whose name matches, or NO_COMMAND."""
        if name is None:
            return NO_COMMAND
        for command_id, command in enumerate(self._commands, start=1):
            if _names_match(command.name, name):
                return command_id
        return NO_COMMAND

    def call(self, context: Any, command_id: int) -> None:
        """Run the command with the given id on the context."""
        if not 1 <= command_id <= len(self._commands):
            raise CommandError(f"unknown command id {command_id}")
        command = self._commands[command_id - 1]
        if not command.flags & CommandFlag.EXTERNAL:
            raise CommandError(f"command {command.name!r} cannot be called")
        command.handler(context)

    def __len__(self) -> int:
        return len(self._commands)