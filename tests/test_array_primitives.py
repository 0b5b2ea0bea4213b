from __future__ import annotations

import numpy as _np
import pytest

from avm import array
from avm.errors import InvalidArgument, ShapeError


def test_new_array_is_zero_filled_list():
    assert array.new_array(3) == [0, 0, 0]
    assert array.new_array(0) == []
    with pytest.raises(InvalidArgument):
        array.new_array(-1)


def test_new_array_uses_numpy_backend(numpy_backend):
    dest = array.new_array(4)
    assert isinstance(dest, _np.ndarray)
    assert dest.dtype == _np.float64
    assert dest.tolist() == [0.0, 0.0, 0.0, 0.0]


def test_fill_and_fill_into():
    assert array.fill(7, 3) == [7, 7, 7]
    dest = [1, 2, 3, 4]
    array.fill_into(0, 2, dest, 1)
    assert dest == [1, 0, 0, 4]
    with pytest.raises(ShapeError):
        array.fill_into(0, 4, dest, 1)


def test_range_ascending_descending_and_sum():
    up = array.range(1, 10)
    down = array.range(10, 1, -1)
    assert up == list(range(1, 11))
    assert down == list(range(10, 0, -1))
    assert array.add(up, down) == [11] * 10


def test_range_default_step_follows_direction():
    assert array.range(3, 1) == [3, 2, 1]
    assert array.range(5, 5) == [5]
    assert array.range(0, 1, 0.25) == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
    assert array.range(0, 9, 4) == [0, 4, 8]


@pytest.mark.parametrize("start, stop, step", [(1, 10, 0), (1, 10, -1), (10, 1, 1)])
def test_range_rejects_bad_steps(start, stop, step):
    with pytest.raises(InvalidArgument):
        array.range(start, stop, step)


def test_range_into_writes_at_offset():
    dest = [0] * 6
    array.range_into(1, 3, None, dest, 2)
    assert dest == [0, 0, 1, 2, 3, 0]


def test_copy_variants():
    src = [1, 2, 3, 4, 5]
    copied = array.copy(src)
    assert copied == src and copied is not src
    assert array.copy_ex(src, 1, 3) == [2, 3, 4]
    assert array.copy_ex(src, 1, 2, None, 2) == [0, 0, 2, 3]
    dest = [9, 9, 9, 9, 9, 9]
    array.copy_into([1, 2], dest, 4)
    assert dest == [9, 9, 9, 9, 1, 2]


def test_copy_ex_handles_overlapping_ranges():
    data = [1, 2, 3, 4, 5]
    array.copy_ex(data, 0, 4, data, 1)
    assert data == [1, 1, 2, 3, 4]


def test_reverse_twice_is_identity():
    src = [3, 1, 4, 1, 5, 9]
    assert array.reverse(src) == [9, 5, 1, 4, 1, 3]
    assert array.reverse(array.reverse(src)) == src


def test_reverse_into_in_place():
    data = [1, 2, 3, 4]
    array.reverse_into(data, data)
    assert data == [4, 3, 2, 1]
    assert array.reverse_ex([1, 2, 3, 4, 5], 1, 3) == [4, 3, 2]


def test_reshape_and_flatten_round_trip():
    nested = array.reshape([1, 2, 3, 4, 5, 6], [3, 2])
    assert nested == [[1, 2], [3, 4], [5, 6]]
    assert array.flatten(nested) == [1, 2, 3, 4, 5, 6]


def test_reshape_nested_to_other_nesting():
    assert array.reshape([[1, 2, 3], [4, 5, 6]], [3, 2]) == [[1, 2], [3, 4], [5, 6]]
    assert array.reshape(list(range(8)), [2, 2, 2]) == [[[0, 1], [2, 3]], [[4, 5], [6, 7]]]


def test_reshape_rejects_bad_shapes():
    with pytest.raises(InvalidArgument):
        array.reshape([1, 2], [])
    with pytest.raises(InvalidArgument):
        array.reshape([1, 2], [2, -1])
    with pytest.raises(ShapeError):
        array.reshape([1, 2, 3], [2, 2])


def test_reshape_into_offsets_first_dimension():
    dest = [["a"]]
    array.reshape_into([1, 2, 3, 4], [2, 2], dest, 1)
    assert dest == [["a"], [1, 2], [3, 4]]


def test_flatten_empty_and_into():
    assert array.flatten([]) == []
    assert array.flatten([[], []]) == []
    dest = [0, 0]
    array.flatten_into([[1, 2], [3, 4]], dest, 2)
    assert dest == [0, 0, 1, 2, 3, 4]


def test_flatten_numpy_matrix():
    matrix = _np.arange(6).reshape(2, 3)
    assert array.flatten(matrix) == [0, 1, 2, 3, 4, 5]


def test_range_allocates_with_numpy_backend(numpy_backend):
    result = array.range(1, 3)
    assert isinstance(result, _np.ndarray)
    assert result.tolist() == [1.0, 2.0, 3.0]
