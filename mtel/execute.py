"""Runs compiled byte code against a context."""

from __future__ import annotations

import enum

from mtel.context import Context

INT_TYPE_NAME = "int32"
CHAR_TYPE_NAME = "int8"
INT_SIZE = 4


class ByteCode(enum.IntEnum):
    """Opcodes of the byte code."""

    END = 0
    INT = 1
    STR = 2
    COMMAND = 3


def execute(context: Context, data) -> None:
    """Execute byte code until an END opcode or the end of the data.

    INT is followed by four little-endian bytes pushed as an int32 value;
    STR by NUL-terminated bytes pushed as a group of int8 values;
    COMMAND by a one-byte command id that is called on the context.
    """
    if data is None:
        return
    code = bytes(data)
    pos = 0
    while pos < len(code):
        op = code[pos]
        if op == ByteCode.END:
            break
        if op == ByteCode.INT:
            payload = code[pos + 1 : pos + 1 + INT_SIZE]
            if len(payload) < INT_SIZE:
                raise ValueError(f"truncated integer at offset {pos}")
            int_type = context.type_system.type_for_name(INT_TYPE_NAME)
            context.stack.push(payload, int_type)
            pos += 1 + INT_SIZE
        elif op == ByteCode.STR:
            end = code.find(b"\0", pos + 1)
            if end == -1:
                raise ValueError(f"unterminated string at offset {pos}")
            text = code[pos + 1 : end]
            if text:
                char_type = context.type_system.type_for_name(CHAR_TYPE_NAME)
                context.stack.push_group(text, len(text), char_type)
            pos = end + 1
        elif op == ByteCode.COMMAND:
            if pos + 1 >= len(code):
                raise ValueError(f"missing command id at offset {pos}")
            context.command_system.call(context, code[pos + 1])
            pos += 2
        else:
            raise ValueError(f"unknown byte code {op} at offset {pos}")