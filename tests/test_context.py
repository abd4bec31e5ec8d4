import pytest

from mtel.commands import CommandFlag
from mtel.context import Context
from mtel.stack import StackError


def test_create_is_empty():
    context = Context.create(2, 128, 3)
    assert len(context.type_system) == 0
    assert len(context.stack) == 0
    assert len(context.command_system) == 0


def test_create_uses_capacities():
    context = Context.create(2, 128, 3)
    assert context.type_system.capacity == 2
    assert context.stack.size == 128
    assert context.command_system.capacity == 3


def test_stack_sees_types_of_the_context():
    context = Context.create(1, 16, 1)
    type_id = context.type_system.add_type("int32", 4)
    context.stack.push(b"\x01\x02\x03\x04", type_id)
    assert context.stack.head_type() == type_id
    assert context.stack.pop() == b"\x01\x02\x03\x04"


def test_stack_rejects_types_not_registered():
    context = Context.create(1, 16, 1)
    with pytest.raises(StackError):
        context.stack.push(b"\x00\x00\x00\x00", 2)


def test_commands_receive_the_context():
    context = Context.create(1, 16, 1)
    seen = []
    command_id = context.command_system.add_command(
        "probe", CommandFlag.EXTERNAL, seen.append
    )
    context.command_system.call(context, command_id)
    assert seen == [context]


def test_invalid_capacity_raises():
    with pytest.raises(ValueError):
        Context.create(-1, 16, 1)