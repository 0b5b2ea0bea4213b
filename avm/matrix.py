"""Square 2x2, 3x3 and 4x4 matrices stored column-major.

Constructor arguments are given column by column: ``Matrix2(a, b, c, d)`` has
first column ``(a, b)`` and second column ``(c, d)``.  Arithmetic operators
act elementwise; use ``@`` or :meth:`matmul` for the matrix product.
"""

from __future__ import annotations

from typing import Any

import numpy as _np

from . import format as _format
from . import linalg
from ._fixed import FixedArray
from .errors import InvalidArgument
from .vector import VECTOR_TYPES


class _Matrix(FixedArray):
    __slots__ = ()
    ORDER = 0

    @classmethod
    def identity(cls):
        return cls._wrap(linalg.identity(cls.ORDER))

    @classmethod
    def zero(cls):
        return cls._wrap(_np.zeros(cls.SIZE))

    def transpose(self):
        dest = _np.empty(self.SIZE)
        linalg.transpose_ex(self._array, 0, self.ORDER, self.ORDER, dest)
        return self._wrap(dest)

    def _product_size(self, other: Any) -> int:
        if isinstance(other, _Matrix):
            if other.ORDER != self.ORDER:
                raise InvalidArgument(
                    f"bad argument 'other' ({type(self).__name__} cannot multiply {type(other).__name__})"
                )
            return self.SIZE
        count = len(other)
        if count == self.SIZE and not isinstance(other, FixedArray):
            return count
        if count not in VECTOR_TYPES or count > self.ORDER:
            raise InvalidArgument(
                f"bad argument 'other' ({count} values cannot multiply a {self.ORDER}x{self.ORDER} matrix)"
            )
        return count

    def matmul_into(self, other: Any, dest: Any, dest_index: int = 0) -> None:
        """Write ``self @ other`` into ``dest``; ``dest`` must not be an operand."""

        size = self._product_size(other)
        if size == self.SIZE:
            linalg.matmul_ex(self._array, 0, other, 0, self.ORDER, self.ORDER, self.ORDER, dest, dest_index)
        else:
            linalg.matmul_vec_ex(self._array, 0, self.ORDER, other, 0, size, dest, dest_index)

    def matmul(self, other: Any):
        """Matrix product with a matrix, or the transformed vector for a vector."""

        size = self._product_size(other)
        dest = _np.empty(size)
        self.matmul_into(other, dest)
        if size == self.SIZE:
            return self._wrap(dest)
        return VECTOR_TYPES[size]._wrap(dest)

    def __matmul__(self, other: Any):
        try:
            return self.matmul(other)
        except (InvalidArgument, TypeError):
            return NotImplemented

    def __str__(self) -> str:
        return _format.matrix(self._array, 0, self.ORDER, self.ORDER)


class Matrix2(_Matrix):
    __slots__ = ()
    ORDER = 2
    SIZE = 4

    def __init__(self, e11: float, e12: float, e21: float, e22: float):
        super().__init__(e11, e12, e21, e22)


class Matrix3(_Matrix):
    __slots__ = ()
    ORDER = 3
    SIZE = 9

    def __init__(
        self,
        e11: float, e12: float, e13: float,
        e21: float, e22: float, e23: float,
        e31: float, e32: float, e33: float,
    ):
        super().__init__(e11, e12, e13, e21, e22, e23, e31, e32, e33)


class Matrix4(_Matrix):
    __slots__ = ()
    ORDER = 4
    SIZE = 16

    def __init__(
        self,
        e11: float, e12: float, e13: float, e14: float,
        e21: float, e22: float, e23: float, e24: float,
        e31: float, e32: float, e33: float, e34: float,
        e41: float, e42: float, e43: float, e44: float,
    ):
        super().__init__(
            e11, e12, e13, e14,
            e21, e22, e23, e24,
            e31, e32, e33, e34,
            e41, e42, e43, e44,
        )
