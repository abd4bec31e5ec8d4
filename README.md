# mtel

`mtel` runs programs written in a very small stack language. A program is a
sequence of tokens separated by spaces, tabs or line breaks. A backslash
makes the character after it part of the token, so `\ ` puts a space inside
a token.

- A token starting with a digit `1`–`9` pushes a 32-bit integer made of its
  leading digits. The value wraps at 32 bits.
- A token starting with `/` pushes the rest of the token as a group of
  `int8` values. A lone `/` pushes nothing.
- Any other token calls the command with that name.

Command and type names are looked up by prefix. The first registered name
that is a prefix of the token, or that the token is a prefix of, is used. For
example, `print` calls `printInt`.

## Installation

```
pip install .
```

## Running a program

Save this as `sum.mtel`:

```
2 40 add printInt
```

and run it:

```
mtel sum.mtel
```

It prints:

```
int: 42
```

The runner has two commands:

- `add` pops two integers and pushes their sum.
- `printInt` pops an integer and prints it as `int: <value>`.

The runner's stack holds 128 bytes. An integer takes 5 of them. A group takes
its bytes plus 10.

`mtel` exits with status 1 in these cases:

- It is not given exactly one file argument. It then prints a usage line.
- The file cannot be read.
- The program fails, for example through an unknown command, a stack
  overflow or popping an empty stack. The error goes to standard error.

## Using the library

- `mtel.type_system.TypeSystem(capacity)` holds named value types with fixed
  byte sizes. Its methods:
  - `add_type(name, size)` returns the new type's id. Ids start at 2.
  - `type_for_name(name)` returns the id, or 0 if the name is unknown.
  - `size_of(type_id)` returns the size, or 0 for an id that names no type.
- `mtel.stack.Stack(size, type_system)` is a stack bounded to `size` bytes.
  Its methods:
  - `push(data, type_id)` pushes a single typed value.
  - `push_group(data, count, type_id)` pushes a typed group of values.
  - `pop()` removes and returns the top value. On a group it takes only the
    group's first element.
  - `pop_group()` removes the top group and returns its bytes and element
    count.
  - `peek()` and `peek_group()` return the same as `pop()` and `pop_group()`
    without removing anything.
  - `head_type()` returns the type id of the top value.
  - The `used` and `free` properties give byte counts.
- `mtel.commands.CommandSystem(capacity)` stores commands and calls them:
  - `add_command(name, flags, handler)` registers a command and returns its
    id. Ids start at 1.
  - `id_for_name(name)` returns the id, or 0 if the name is unknown.
  - `call(context, command_id)` runs the command.
  - The only supported flag is `CommandFlag.EXTERNAL`.
- `mtel.context.Context` holds `type_system`, `stack` and `command_system`.
  `Context.create(type_capacity, stack_size, command_capacity)` builds an
  empty one.
- `mtel.execute.execute(context, data)` runs byte code. The opcodes are
  listed in `ByteCode` as `END`, `INT`, `STR` and `COMMAND`. The function
  looks up the `int32` and `int8` types by name.
- `mtel.cli` provides the runner's parts:
  - `read_tokens(stream)`
  - `encode_token(token, context)`
  - `build_context()`
  - `run(stream, context)`
  - the `add` and `print_int` commands

This example runs a program from a string:

```python
import io
from mtel.cli import build_context, run

context = build_context()
run(io.StringIO("5 6 add printInt"), context)
```

Extra commands are ordinary callables that receive the context:

```python
from mtel.commands import CommandFlag
from mtel.context import Context

context = Context.create(2, 128, 4)
context.type_system.add_type("int8", 1)
context.type_system.add_type("int32", 4)
context.command_system.add_command("drop", CommandFlag.EXTERNAL, lambda ctx: ctx.stack.pop())
```

Errors are raised as exceptions:

- `TypeSystemError` for a type that cannot be registered.
- `StackError` for overflow, underflow, an unknown type or a value of the
  wrong shape.
- `CommandError` for a command that cannot be registered, or an unknown
  command id.
- `ValueError` for malformed byte code.

## What it does not do

The language has no other built-in commands. In particular, nothing prints or
otherwise uses the strings that `/` tokens push. It also has no arithmetic
beyond `add`, no control flow and no variables. Anything more has to be added
as commands through the library.

## Tests

```
pip install .[test]
pytest
```