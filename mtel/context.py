"""The interpreter state shared by the stack, the types and the commands."""

from __future__ import annotations

from dataclasses import dataclass

from mtel.commands import CommandSystem
from mtel.stack import Stack
from mtel.type_system import TypeSystem


@dataclass
class Context:
    """Everything a running program and its commands operate on."""

    type_system: TypeSystem
    stack: Stack
    command_system: CommandSystem

    @classmethod
    def create(cls, type_capacity: int, stack_size: int, command_capacity: int) -> "Context":
        """Build an empty context whose stack uses its own type system."""
        type_system = TypeSystem(type_capacity)
        return cls(
            type_system=type_system,
            stack=Stack(stack_size, type_system),
            command_system=CommandSystem(command_capacity),
        )