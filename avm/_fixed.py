"""Shared base for the small fixed-size vector and matrix types."""

from __future__ import annotations

from typing import Any, ClassVar, Iterator, List, Sequence, Tuple

import numpy as _np

from . import _checks, linalg
from .errors import InvalidArgument, MissingValueError


def _to_python_scalar(value: Any) -> Any:
    if isinstance(value, _np.generic):
        return value.item()
    return value


class FixedArray:
    """``SIZE`` float64 components held in a NumPy array.

    Operators compute on the NumPy storage under ``errstate`` rather than
    through :mod:`avm.array`. Operand sizes are checked whatever
    ``config.CHECK_PARAMS`` says.
    """

    __slots__ = ("_array",)

    SIZE: ClassVar[int] = 0

    def __init__(self, *values: Any):
        if len(values) != self.SIZE:
            raise TypeError(
                f"{type(self).__name__} takes {self.SIZE} components ({len(values)} given)"
            )
        self._array = _np.array(self._validate(values), dtype=_np.float64)

    @classmethod
    def _validate(cls, values: Sequence[Any]) -> Sequence[Any]:
        for position, value in enumerate(values):
            if value is None:
                raise MissingValueError(
                    f"bad argument 'v{position + 1}' ({cls.__name__} component expected, got None)"
                )
        _checks.check_numbers("values", values)
        return values

    @classmethod
    def _wrap(cls, data: Any):
        result = cls.__new__(cls)
        result._array = _np.asarray(data, dtype=_np.float64).reshape(cls.SIZE).copy()
        return result

    @classmethod
    def from_sequence(cls, src: Sequence[Any], src_index: int = 0):
        _checks.check_array("src", src, src_index, cls.SIZE)
        return cls(*(src[src_index + i] for i in range(cls.SIZE)))

    # sequence protocol -------------------------------------------------
    def __len__(self) -> int:
        return self.SIZE

    def __getitem__(self, index):
        result = self._array[index]
        if _np.isscalar(result):
            return _to_python_scalar(result)
        return result.tolist()

    def __setitem__(self, index, value) -> None:
        if value is None:
            raise MissingValueError(f"bad argument 'value' ({type(self).__name__} component expected, got None)")
        self._array[index] = value

    def __iter__(self) -> Iterator[float]:
        for item in self._array:
            yield _to_python_scalar(item)

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> _np.ndarray:
        if dtype is None:
            return self._array.copy() if copy else self._array
        return self._array.astype(dtype)

    def to_list(self) -> List[float]:
        return self._array.tolist()

    # value access ------------------------------------------------------
    def get(self) -> Tuple[float, ...]:
        return tuple(self._array.tolist())

    def set(self, *values: Any) -> None:
        if len(values) != self.SIZE:
            raise TypeError(
                f"{type(self).__name__}.set takes {self.SIZE} components ({len(values)} given)"
            )
        self._array[:] = self._validate(values)

    def copy(self):
        return self._wrap(self._array)

    def copy_into(self, dest: Any, dest_index: int = 0) -> None:
        _checks.check_destination("dest", dest, dest_index, self.SIZE)
        for i, value in enumerate(self._array.tolist()):
            dest[dest_index + i] = value

    def almost_equals(self, other: Sequence[Any], epsilon: float | None = None) -> bool:
        return linalg.equals(self, other, epsilon)

    # arithmetic --------------------------------------------------------
    def _coerce_operand(self, other: Any) -> Any:
        if isinstance(other, FixedArray):
            if other.SIZE != self.SIZE:
                raise InvalidArgument(
                    f"bad argument 'other' ({type(self).__name__} cannot combine with {type(other).__name__})"
                )
            return other._array
        if _checks.is_sequence(other):
            values = _np.asarray(other, dtype=_np.float64).reshape(-1)
            if values.size == 0 or values.size > self.SIZE:
                raise InvalidArgument(
                    f"bad argument 'other' (1 to {self.SIZE} values expected, got {values.size})"
                )
            # Shorter sequences repeat across the components.
            return _np.resize(values, self.SIZE)
        _checks.check("other", other, "number")
        return other

    def _binary_op(self, other: Any, op, reflected: bool = False):
        try:
            operand = self._coerce_operand(other)
        except (InvalidArgument, TypeError, ValueError):
            return NotImplemented
        with _np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            result = op(operand, self._array) if reflected else op(self._array, operand)
        return self._wrap(result)

    def __add__(self, other: Any):
        return self._binary_op(other, _np.add)

    def __radd__(self, other: Any):
        return self._binary_op(other, _np.add, reflected=True)

    def __sub__(self, other: Any):
        return self._binary_op(other, _np.subtract)

    def __rsub__(self, other: Any):
        return self._binary_op(other, _np.subtract, reflected=True)

    def __mul__(self, other: Any):
        return self._binary_op(other, _np.multiply)

    def __rmul__(self, other: Any):
        return self._binary_op(other, _np.multiply, reflected=True)

    def __truediv__(self, other: Any):
        return self._binary_op(other, _np.divide)

    def __rtruediv__(self, other: Any):
        return self._binary_op(other, _np.divide, reflected=True)

    def __neg__(self):
        return self._wrap(_np.negative(self._array))

    def _checked_op(self, other: Any, op):
        result = self._binary_op(other, op)
        if result is NotImplemented:
            self._coerce_operand(other)
            raise InvalidArgument(f"bad argument 'other' (unsupported operand {other!r})")
        return result

    def add(self, other: Any):
        return self._checked_op(other, _np.add)

    def sub(self, other: Any):
        return self._checked_op(other, _np.subtract)

    def mul(self, other: Any):
        return self._checked_op(other, _np.multiply)

    def div(self, other: Any):
        return self._checked_op(other, _np.divide)

    def add_into(self, other: Any, dest: Any, dest_index: int = 0) -> None:
        self.add(other).copy_into(dest, dest_index)

    def sub_into(self, other: Any, dest: Any, dest_index: int = 0) -> None:
        self.sub(other).copy_into(dest, dest_index)

    def mul_into(self, other: Any, dest: Any, dest_index: int = 0) -> None:
        self.mul(other).copy_into(dest, dest_index)

    def div_into(self, other: Any, dest: Any, dest_index: int = 0) -> None:
        self.div(other).copy_into(dest, dest_index)

    # comparison --------------------------------------------------------
    def __eq__(self, other: Any) -> bool:  # type: ignore[override]
        if isinstance(other, FixedArray):
            return type(other) is type(self) and bool(_np.array_equal(self._array, other._array))
        if _checks.is_sequence(other):
            return len(other) == self.SIZE and bool(_np.array_equal(self._array, _np.asarray(other)))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = ", ".join(repr(value) for value in self._array.tolist())
        return f"{type(self).__name__}({values})"
