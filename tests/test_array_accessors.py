from __future__ import annotations

import numpy as _np
import pytest

from avm import array
from avm.errors import InvalidArgument, MissingValueError, ShapeError


def test_fixed_arity_functions_exist_for_one_to_sixteen():
    for count in range(1, 17):
        for prefix in ("get", "set", "push", "pop", "unpack"):
            function = getattr(array, f"{prefix}_{count}")
            assert function.__name__ == f"{prefix}_{count}"


def test_get_returns_tuples_at_offset():
    src = [10, 20, 30, 40, 50]
    assert array.get_1(src, 4) == (50,)
    assert array.get_3(src, 1) == (20, 30, 40)
    assert array.get(src, 0, 2) == (10, 20)


def test_set_writes_at_offset():
    dest = [0] * 6
    array.set_4(dest, 2, 1, 2, 3, 4)
    assert dest == [0, 0, 1, 2, 3, 4]


@pytest.mark.parametrize("count", [1, 2, 5, 16])
def test_out_of_range_access_raises_without_mutation(count):
    dest = list(range(count))
    snapshot = list(dest)
    setter = getattr(array, f"set_{count}")
    getter = getattr(array, f"get_{count}")
    with pytest.raises(ShapeError):
        setter(dest, 1, *range(count))
    with pytest.raises(ShapeError):
        getter(dest, 1)
    assert dest == snapshot


def test_negative_offset_is_rejected():
    with pytest.raises(ShapeError):
        array.get_2([1, 2, 3], -1)


def test_set_requires_exact_value_count():
    dest = [0, 0, 0]
    with pytest.raises(MissingValueError):
        array.set_3(dest, 0, 1, 2)
    with pytest.raises(InvalidArgument):
        array.set_2(dest, 0, 1, 2, 3)
    with pytest.raises(MissingValueError):
        array.set_2(dest, 0, 1, None)
    assert dest == [0, 0, 0]


def test_push_and_pop_preserve_order():
    data = [1]
    array.push_3(data, 2, 3, 4)
    assert data == [1, 2, 3, 4]
    assert array.pop_2(data) == (3, 4)
    assert data == [1, 2]
    assert array.pop_1(data) == 2
    assert data == [1]


def test_pop_more_than_available_fails_untouched():
    data = [1, 2]
    with pytest.raises(ShapeError):
        array.pop_3(data)
    assert data == [1, 2]


def test_push_requires_growable_destination():
    with pytest.raises(InvalidArgument):
        array.push_1(_np.zeros(2), 1.0)


def test_checks_can_be_disabled(unchecked):
    dest = [0, 0]
    with pytest.raises(IndexError):
        array.set_3(dest, 0, 1, 2, 3)


def test_unpack():
    assert array.unpack([1, 2, 3]) == (1, 2, 3)
    assert array.unpack_2([1, 2, 3]) == (1, 2)


def test_append_extend_and_join():
    dest = [1, 2]
    array.append([3, 4], dest)
    assert dest == [1, 2, 3, 4]
    array.extend(dest, [5])
    assert dest == [1, 2, 3, 4, 5]
    array.append(dest, dest)
    assert dest == [1, 2, 3, 4, 5, 1, 2, 3, 4, 5]
    assert array.join([1, 2], [3]) == [1, 2, 3]
    assert array.join_ex([0, 1, 2, 3], 1, 2, [4, 5, 6], 2, 1) == [1, 2, 6]
