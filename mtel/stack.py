"""A bounded value stack holding typed single values and groups."""

from __future__ import annotations

from dataclasses import dataclass

from mtel.type_system import TypeSystem

TYPE_ID_SIZE = 1
COUNT_SIZE = 8
GROUP_HEADER_SIZE = COUNT_SIZE + 2 * TYPE_ID_SIZE
"""Bytes a group uses beyond its elements: count, element type and marker."""


class StackError(Exception):
    """Raised on overflow, underflow or a value of the wrong shape."""


@dataclass
class _Entry:
    type_id: int
    element_size: int
    data: bytes
    grouped: bool

    @property
    def count(self) -> int:
        return len(self.data) // self.element_size

    @property
    def footprint(self) -> int:
        overhead = GROUP_HEADER_SIZE if self.grouped else TYPE_ID_SIZE
        return len(self.data) + overhead


class Stack:
    """A stack limited to a number of bytes, with each value tagged by its type."""

    def __init__(self, size: int, type_system: TypeSystem) -> None:
        if size < 0:
            raise ValueError("stack size must not be negative")
        self.size = size
        self._types = type_system
        self._entries: list[_Entry] = []
        self._used = 0

    @property
    def used(self) -> int:
        """Bytes taken by the values on the stack."""
        return self._used

    @property
    def free(self) -> int:
        """Bytes still available."""
        return self.size - self._used

    def _element_size(self, type_id: int) -> int:
        size = self._types.size_of(type_id)
        if not size:
            raise StackError(f"unknown type id {type_id}")
        return size

    @staticmethod
    def _payload(data, length: int) -> bytes:
        if data is None:
            raise StackError("no data to push")
        payload = bytes(data)[:length]
        if len(payload) < length:
            raise StackError(f"expected {length} bytes, got {len(payload)}")
        return payload

    def _append(self, entry: _Entry) -> None:
        if self.free < entry.footprint:
            raise StackError("stack overflow")
        self._entries.append(entry)
        self._used += entry.footprint

    def _top(self) -> _Entry:
        if not self._entries:
            raise StackError("stack is empty")
        return self._entries[-1]

    def push(self, data, type_id: int) -> None:
        """Push one value of the given type."""
        size = self._element_size(type_id)
        self._append(_Entry(type_id, size, self._payload(data, size), grouped=False))

    def push_group(self, data, count: int, type_id: int) -> None:
        """Push `count` consecutive values of one type as a single group."""
        size = self._element_size(type_id)
        if count <= 0:
            raise StackError("a group needs at least one element")
        payload = self._payload(data, count * size)
        self._append(_Entry(type_id, size, payload, grouped=True))

    def pop(self) -> bytes:
        """Remove and return the top value; from a group, its first element."""
        entry = self._top()
        element = entry.data[: entry.element_size]
        if entry.grouped and entry.count > 1:
            entry.data = entry.data[entry.element_size :]
            self._used -= entry.element_size
        else:
            self._entries.pop()
            self._used -= entry.footprint
        return element

    def pop_group(self) -> tuple[bytes, int]:
        """Remove the top group and return its bytes and element count."""
        data, count = self.peek_group()
        entry = self._entries.pop()
        self._used -= entry.footprint
        return data, count

    def peek(self) -> bytes:
        """Return the top value, or a group's first element, without removing it."""
        entry = self._top()
        return entry.data[: entry.element_size]

    def peek_group(self) -> tuple[bytes, int]:
        """Return the top group's bytes and element count without removing it."""
        entry = self._top()
        if not entry.grouped:
            raise StackError("top of stack is not a group")
        return entry.data, entry.count

    def head_type(self) -> int:
        """Return the type id of the top value; for a group, its element type."""
        return self._top().type_id

    def __len__(self) -> int:
        return len(self._entries)