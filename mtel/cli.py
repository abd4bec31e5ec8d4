"""Command-line interpreter for .mtel program files."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from mtel.commands import CommandError, CommandFlag
from mtel.context import Context
from mtel.execute import INT_SIZE, INT_TYPE_NAME, ByteCode, execute
from mtel.stack import StackError
from mtel.type_system import TypeSystemError

_WHITESPACE = " \t\n\r"
_ESCAPE = "\\"
_STRING_PREFIX = "/"


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _to_bytes(value: int) -> bytes:
    return _wrap_int32(value).to_bytes(INT_SIZE, "little", signed=True)


def _pop_int(context: Context) -> int:
    return int.from_bytes(context.stack.pop(), "little", signed=True)


def add(context: Context) -> None:
    """Pop two int32 values and push their sum, wrapping at 32 bits."""
    a = _pop_int(context)
    b = _pop_int(context)
    int_type = context.type_system.type_for_name(INT_TYPE_NAME)
    context.stack.push(_to_bytes(a + b), int_type)


def print_int(context: Context) -> None:
    """Pop an int32 value and print it."""
    print(f"int: {_pop_int(context)}")


def encode_token(token: str, context: Context) -> bytes:
    """Compile one source token to byte code.

    A token starting with '/' is a string, one starting with a digit 1-9 is
    an integer made of its leading digits, anything else names a command.
    """
    if token.startswith(_STRING_PREFIX):
        payload = token[len(_STRING_PREFIX) :].encode()
        return bytes([ByteCode.STR]) + payload + b"\0" + bytes([ByteCode.END])
    if token[:1] in set("123456789") and token:
        value = 0
        for ch in token:
            if not "0" <= ch <= "9":
                break
            value = value * 10 + int(ch)
        return bytes([ByteCode.INT]) + _to_bytes(value) + bytes([ByteCode.END])
    command_id = context.command_system.id_for_name(token)
    return bytes([ByteCode.COMMAND, command_id, ByteCode.END])


def read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated tokens; a backslash makes the next character literal."""
    token: list[str] = []
    escaped = False
    for line in stream:
        for ch in line:
            if escaped:
                token.append(ch)
                escaped = False
            elif ch == _ESCAPE:
                escaped = True
            elif ch in _WHITESPACE:
                if token:
                    yield "".join(token)
                    token = []
            else:
                token.append(ch)
    if token:
        yield "".join(token)


def build_context() -> Context:
    """Create the context with the built-in types and commands."""
    context = Context.create(2, 128, 2)
    context.type_system.add_type("int8", 1)
    context.type_system.add_type(INT_TYPE_NAME, INT_SIZE)
    context.command_system.add_command("add", CommandFlag.EXTERNAL, add)
    context.command_system.add_command("printInt", CommandFlag.EXTERNAL, print_int)
    return context


def run(stream: TextIO, context: Context) -> None:
    """Compile and execute every token of a program, one at a time."""
    for token in read_tokens(stream):
        execute(context, encode_token(token, context))


def main(argv: list[str] | None = None) -> int:
    """Run the program file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: mtel file.mtel")
        return 1
    context = build_context()
    try:
        with open(args[0], encoding="utf-8") as stream:
            run(stream, context)
    except OSError as exc:
        print(f"mtel: cannot read {args[0]}: {exc}", file=sys.stderr)
        return 1
    except (StackError, CommandError, TypeSystemError, ValueError) as exc:
        print(f"mtel: {exc}", file=sys.stderr)
        return 1
    return 0