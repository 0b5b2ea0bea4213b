from __future__ import annotations

import pytest

from avm import iterator
from avm.errors import InvalidArgument, ShapeError


def test_group_as_tuples():
    groups = list(iterator.group_2([1, 2, 3, 4, 5, 6]))
    assert groups == [(1, 2), (3, 4), (5, 6)]
    assert [i for i, _ in enumerate(iterator.group_3([1, 2, 3, 4, 5, 6]))] == [0, 1]


def test_group_from_slice():
    assert list(iterator.group_2_ex([1, 2, 3, 4, 5, 6], 1, 4)) == [(2, 3), (4, 5)]


def test_group_requires_whole_groups():
    with pytest.raises(InvalidArgument):
        iterator.group_4([1, 2, 3, 4, 5])
    with pytest.raises(ShapeError):
        iterator.group_2_ex([1, 2, 3], 2, 2)


def test_zip_across_two_arrays():
    a = [1, -2, 3, -4]
    b = [-1, 2, -3, 4]
    assert all(ax == -bx and ay == -by for ax, ay, bx, by in iterator.zip_2(a, b))
    assert list(iterator.zip_1_ex([0, 1, 2], 1, 2, [5, 6], 0)) == [(1, 5), (2, 6)]


def test_fixed_size_iterators_exist():
    for size in range(1, 17):
        assert getattr(iterator, f"group_{size}").__name__ == f"group_{size}"
        assert getattr(iterator, f"zip_{size}_ex").__name__ == f"zip_{size}_ex"
    assert list(iterator.group_16(list(range(16)))) == [tuple(range(16))]
