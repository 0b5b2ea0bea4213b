"""Iterate flat sequences as fixed-size groups.

``group_2([1, 2, 3, 4])`` yields ``(1, 2)`` and ``(3, 4)``; ``zip_2(a, b)``
yields ``(a0, a1, b0, b1)`` for each pair of groups.  Use :func:`enumerate`
when the group number is needed.
"""

from __future__ import annotations

import builtins as _builtins
from typing import Any, Callable, Iterator, Sequence, Tuple

from . import _checks
from .errors import InvalidArgument

MAX_GROUP_SIZE = 16


def _check_group(name: str, count: int, size: int) -> None:
    if size < 1:
        raise InvalidArgument(f"bad argument 'size' (must be greater than 0, got {size})")
    if _checks.enabled() and count % size:
        raise InvalidArgument(
            f"bad argument '{name}' ({count} elements do not split into groups of {size})"
        )


def _groups(src, src_index, src_count, size):
    for start in range(src_index, src_index + src_count, size):
        yield tuple(src[start + j] for j in range(size))


def group_ex(src: Sequence[Any], src_index: int, src_count: int, size: int) -> Iterator[Tuple[Any, ...]]:
    _checks.check_array("src", src, src_index, src_count)
    _check_group("src", src_count, size)
    return _groups(src, src_index, src_count, size)


def group(src: Sequence[Any], size: int) -> Iterator[Tuple[Any, ...]]:
    _checks.check_array_and_size("src", src)
    return group_ex(src, 0, len(src), size)


def zip_ex(
    a: Sequence[Any],
    a_index: int,
    a_count: int,
    b: Sequence[Any],
    b_index: int,
    size: int,
) -> Iterator[Tuple[Any, ...]]:
    _checks.check_array("a", a, a_index, a_count)
    _checks.check_array("b", b, b_index, a_count)
    _check_group("a", a_count, size)
    return (
        left + right
        for left, right in _builtins.zip(
            _groups(a, a_index, a_count, size),
            _groups(b, b_index, a_count, size),
        )
    )


def zip(a: Sequence[Any], b: Sequence[Any], size: int) -> Iterator[Tuple[Any, ...]]:  # noqa: A001
    """Walk ``a`` and ``b`` in lockstep; ``b`` must be at least as long as ``a``."""

    _checks.check_array_and_size("a", a)
    return zip_ex(a, 0, len(a), b, 0, size)


def _fixed(size: int) -> Tuple[Callable[..., Any], ...]:
    def group_n(src):
        return group(src, size)

    def group_n_ex(src, src_index, src_count):
        return group_ex(src, src_index, src_count, size)

    def zip_n(a, b):
        return zip(a, b, size)

    def zip_n_ex(a, a_index, a_count, b, b_index):
        return zip_ex(a, a_index, a_count, b, b_index, size)

    return group_n, group_n_ex, zip_n, zip_n_ex


def _install() -> None:
    namespace = globals()
    for size in range(1, MAX_GROUP_SIZE + 1):
        names = (f"group_{size}", f"group_{size}_ex", f"zip_{size}", f"zip_{size}_ex")
        for name, function in _builtins.zip(names, _fixed(size)):
            function.__name__ = function.__qualname__ = name
            namespace[name] = function


_install()
