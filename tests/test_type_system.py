import pytest

from mtel.type_system import (
    FIRST_TYPE_ID,
    GROUP_TYPE,
    NO_TYPE,
    TypeSystem,
    TypeSystemError,
)


@pytest.fixture
def types():
    system = TypeSystem(2)
    system.add_type("int8", 1)
    system.add_type("int32", 4)
    return system


def test_ids_start_after_reserved_ones(types):
    assert types.type_for_name("int8") == FIRST_TYPE_ID
    assert types.type_for_name("int32") == FIRST_TYPE_ID + 1


def test_add_type_returns_id():
    system = TypeSystem(3)
    first = system.add_type("a", 1)
    second = system.add_type("b", 2)
    assert first == FIRST_TYPE_ID
    assert second == first + 1


def test_size_of_registered(types):
    assert types.size_of(types.type_for_name("int8")) == 1
    assert types.size_of(types.type_for_name("int32")) == 4


@pytest.mark.parametrize("type_id", [NO_TYPE, GROUP_TYPE, 200])
def test_size_of_unknown_is_zero(types, type_id):
    assert types.size_of(type_id) == 0


def test_unknown_name(types):
    assert types.type_for_name("float") == NO_TYPE
    assert types.type_for_name("") == NO_TYPE
    assert types.type_for_name(None) == NO_TYPE


def test_prefix_matches_first_registered(types):
    assert types.type_for_name("int") == types.type_for_name("int8")
    assert types.type_for_name("int8extra") == types.type_for_name("int8")


def test_len_counts_types(types):
    assert len(types) == 2
    assert len(TypeSystem(5)) == 0


def test_full_type_system_raises(types):
    with pytest.raises(TypeSystemError):
        types.add_type("int64", 8)
    assert len(types) == 2


def test_zero_size_rejected():
    system = TypeSystem(1)
    with pytest.raises(TypeSystemError):
        system.add_type("void", 0)
    assert len(system) == 0


def test_missing_name_rejected():
    with pytest.raises(TypeSystemError):
        TypeSystem(1).add_type(None, 1)


@pytest.mark.parametrize("capacity", [-1, 255])
def test_capacity_out_of_range(capacity):
    with pytest.raises(ValueError):
        TypeSystem(capacity)