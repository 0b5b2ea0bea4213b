"""Lightweight views that remap indices into an existing sequence.

A view never copies: reads and writes go straight through to ``src``.  Views
satisfy the flat-sequence protocol, so they can be passed to any kernel in
:mod:`avm.array` or :mod:`avm.linalg`.

>>> data = [1, 2, 3, 4, 5, 6]
>>> list(stride(data, 0, 2, 3))
[1, 3, 5]
"""

from __future__ import annotations

import builtins as _builtins
from typing import Any, Iterator, List, Sequence

from . import _checks
from .errors import InvalidArgument


class _View:
    __slots__ = ("_src", "_index", "_count")

    def __init__(self, src: Sequence[Any], index: int, count: int):
        _checks.check("src", src, "sequence")
        if count < 0:
            raise InvalidArgument(f"bad argument 'count' (non-negative integer expected, got {count})")
        self._src = src
        self._index = index
        self._count = count

    def _position(self, k: int) -> int:
        raise NotImplementedError

    def _resolve(self, k: int) -> int:
        if not isinstance(k, int):
            raise TypeError(f"view indices must be integers, not {type(k).__name__}")
        if k < 0:
            k += self._count
        if not 0 <= k < self._count:
            raise IndexError(f"view index {k} out of range for length {self._count}")
        return self._position(k)

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, k):
        if isinstance(k, _builtins.slice):
            return [self._src[self._position(i)] for i in range(*k.indices(self._count))]
        return self._src[self._resolve(k)]

    def __setitem__(self, k: int, value: Any) -> None:
        self._src[self._resolve(k)] = value

    def __iter__(self) -> Iterator[Any]:
        for k in range(self._count):
            yield self._src[self._position(k)]

    def to_list(self) -> List[Any]:
        return list(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


class SliceView(_View):
    __slots__ = ()

    def _position(self, k: int) -> int:
        return self._index + k


class StrideView(_View):
    __slots__ = ("_stride",)

    def __init__(self, src: Sequence[Any], index: int, stride: int, count: int):
        if stride == 0:
            raise InvalidArgument("bad argument 'stride' (must be non-zero)")
        super().__init__(src, index, count)
        self._stride = stride

    def _position(self, k: int) -> int:
        return self._index + k * self._stride


class InterleavedView(_View):
    __slots__ = ("_group_size", "_stride")

    def __init__(self, src: Sequence[Any], index: int, group_size: int, stride: int, count: int):
        if group_size <= 0:
            raise InvalidArgument("bad argument 'group_size' (must be greater than 0)")
        if stride == 0:
            raise InvalidArgument("bad argument 'stride' (must be non-zero)")
        super().__init__(src, index, count)
        self._group_size = group_size
        self._stride = stride

    def _position(self, k: int) -> int:
        group, offset = divmod(k, self._group_size)
        return self._index + group * self._stride + offset


def slice(src: Sequence[Any], index: int, count: int) -> SliceView:  # noqa: A001
    """``count`` elements of ``src`` starting at ``index``."""

    _checks.check_array("src", src, index, count)
    return SliceView(src, index, count)


def stride(src: Sequence[Any], index: int, stride: int, count: int) -> StrideView:
    """Every ``stride``-th element of ``src`` starting at ``index``."""

    if count > 0:
        _checks.check_array("src", src, index, 1)
        _checks.check_array("src", src, index + (count - 1) * stride, 1)
    return StrideView(src, index, stride, count)


def reverse(src: Sequence[Any], index: int | None = None, count: int | None = None) -> StrideView:
    """Walk ``src`` backwards from ``index`` (default: the last element)."""

    _checks.check_array_and_size("src", src)
    size = len(src)
    index = size - 1 if index is None else index
    count = index + 1 if count is None else count
    return stride(src, index, -1, count)


def interleave(src: Sequence[Any], index: int, group_size: int, stride: int, count: int) -> InterleavedView:
    """Collect groups of ``group_size`` elements whose starts are ``stride`` apart.

    >>> list(interleave([1, 2, 0, 0, 5, 6, 0, 0, 9, 10], 0, 2, 4, 6))
    [1, 2, 5, 6, 9, 10]
    """

    view = InterleavedView(src, index, group_size, stride, count)
    if count > 0:
        _checks.check_array("src", src, view._position(0), 1)
        _checks.check_array("src", src, view._position(count - 1), 1)
    return view
