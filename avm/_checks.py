"""Argument and bounds checks shared by the kernels.

Every helper is a no-op while :data:`avm.config.CHECK_PARAMS` is false.  The
flag is looked up on each call so it can be flipped at runtime.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from typing import Any, Sequence

from . import config
from .errors import InvalidArgument, MissingValueError, ShapeError


def is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return hasattr(value, "__len__") and hasattr(value, "__getitem__")


def is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real)


def enabled() -> bool:
    return config.CHECK_PARAMS


def check(name: str, value: Any, expected: str | None = None) -> None:
    """Validate a single argument; ``expected`` is ``"number"`` or ``"sequence"``."""

    if not config.CHECK_PARAMS:
        return
    if value is None:
        raise MissingValueError(f"bad argument '{name}' (value expected, got None)")
    if expected == "number" and not is_number(value):
        raise InvalidArgument(
            f"bad argument '{name}' (number expected, got {type(value).__name__})"
        )
    if expected == "sequence" and not is_sequence(value):
        raise InvalidArgument(
            f"bad argument '{name}' (sequence expected, got {type(value).__name__})"
        )


def check_numbers(name: str, values: Sequence[Any]) -> None:
    if not config.CHECK_PARAMS:
        return
    for position, value in enumerate(values):
        check(f"{name}[{position}]", value, "number")


def check_array(
    name: str,
    src: Any,
    index: int | None = None,
    count: int | None = None,
) -> None:
    """Ensure ``src`` is a sequence holding ``[index, index + count)``."""

    if not config.CHECK_PARAMS:
        return
    check(name, src, "sequence")
    if index is None and count is None:
        return
    if index is None or count is None:
        raise InvalidArgument(
            f"bad argument '{name}' (index and count must be given together)"
        )
    if count < 0:
        raise InvalidArgument(f"bad argument '{name}' (negative count {count})")
    size = len(src)
    if index < 0 or index + count > size:
        raise ShapeError(
            f"bad argument '{name}' (needs [{index}, {index + count}) "
            f"but has length {size})"
        )


def check_array_and_size(name: str, src: Any) -> None:
    if not config.CHECK_PARAMS:
        return
    check(name, src, "sequence")
    try:
        len(src)
    except TypeError as exc:
        raise InvalidArgument(f"bad argument '{name}' (sized sequence expected)") from exc


def check_destination(name: str, dest: Any, index: int, count: int) -> None:
    """Like :func:`check_array` but also requires item assignment."""

    if not config.CHECK_PARAMS:
        return
    check_array(name, dest, index, count)
    if not hasattr(dest, "__setitem__"):
        raise InvalidArgument(
            f"bad argument '{name}' (writable sequence expected, got {type(dest).__name__})"
        )


def check_growable(name: str, dest: Any) -> None:
    if not config.CHECK_PARAMS:
        return
    check(name, dest, "sequence")
    if not (hasattr(dest, "append") and hasattr(dest, "pop")):
        raise InvalidArgument(
            f"bad argument '{name}' (growable sequence expected, got {type(dest).__name__})"
        )


def check_dimension(name: str, value: int, allowed: Sequence[int]) -> None:
    # Shape arguments are validated even when parameter checks are off.
    if value not in allowed:
        choices = ", ".join(str(item) for item in allowed)
        raise InvalidArgument(f"bad argument '{name}' (expected one of {choices}, got {value!r})")
