"""Registry of named value types with fixed byte sizes."""

from __future__ import annotations

from dataclasses import dataclass

NO_TYPE = 0
"""Type id reported for names that are not registered."""

GROUP_TYPE = 1
"""Type id that marks a group of elements on the stack."""

FIRST_TYPE_ID = 2
"""Id given to the first registered type."""

_MAX_TYPE_ID = 0xFF
MAX_CAPACITY = _MAX_TYPE_ID - FIRST_TYPE_ID + 1


class TypeSystemError(Exception):
    """Raised when a type cannot be registered."""


@dataclass(frozen=True)
class TypeInfo:
    """A registered type: its name and the size of one value in bytes."""

    name: str
    size: int


def _names_match(registered: str, requested: str) -> bool:
    """Both names are non-empty and one is a prefix of the other."""
    if not registered or not requested:
        return False
    return registered.startswith(requested) or requested.startswith(registered)


class TypeSystem:
    """A fixed-capacity table of types addressed by one-byte ids."""

    def __init__(self, capacity: int) -> None:
        if not 0 <= capacity <= MAX_CAPACITY:
            raise ValueError(f"capacity must be between 0 and {MAX_CAPACITY}")
        self.capacity = capacity
        self._types: list[TypeInfo] = []

    def add_type(self, name: str, size: int) -> int:
        """Register a type and return its id."""
        if name is None:
            raise TypeSystemError("type name is required")
        if size <= 0:
            raise TypeSystemError(f"type {name!r} must have a positive size")
        if len(self._types) >= self.capacity:
            raise TypeSystemError("type system is full")
        self._types.append(TypeInfo(name, size))
        return FIRST_TYPE_ID + len(self._types) - 1

    def type_for_name(self, name: str) -> int:
        """Return the id of the first type whose name matches, or NO_TYPE."""
        if name is None:
            return NO_TYPE
        for type_id, info in enumerate(self._types, start=FIRST_TYPE_ID):
            if _names_match(info.name, name):
                return type_id
        return NO_TYPE

    def size_of(self, type_id: int) -> int:
        """Return the byte size of a type, or 0 for ids that name no type."""
        index = type_id - FIRST_TYPE_ID
        if not 0 <= index < len(self._types):
            return 0
        return self._types[index].size

    def __len__(self) -> int:
        return len(self._types)