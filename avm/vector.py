"""2, 3 and 4 component vectors with GLSL style swizzles.

>>> v = Vector3(1, 2, 3)
>>> v.zyx()
(3.0, 2.0, 1.0)
>>> v.set_xy(5, 6); v
Vector3(5.0, 6.0, 3.0)
"""

from __future__ import annotations

from typing import Any, Tuple

from . import format as _format
from . import linalg
from ._fixed import FixedArray, _to_python_scalar
from .errors import InvalidArgument

_COMPONENTS = "xyzw"


class _Vector(FixedArray):
    __slots__ = ()

    def _swizzle_indices(self, pattern: str) -> Tuple[int, ...] | None:
        if not 1 <= len(pattern) <= 4:
            return None
        indices = tuple(_COMPONENTS.find(char) for char in pattern)
        if any(index < 0 or index >= self.SIZE for index in indices):
            return None
        return indices

    def __getattr__(self, name: str):
        if name.startswith("set_"):
            indices = self._swizzle_indices(name[4:])
            if indices is None or len(set(indices)) != len(indices):
                raise AttributeError(name)

            def setter(*values: Any) -> None:
                if len(values) != len(indices):
                    raise TypeError(f"{name} takes {len(indices)} components ({len(values)} given)")
                self._validate(values)
                for index, value in zip(indices, values):
                    self._array[index] = value

            return setter

        indices = self._swizzle_indices(name)
        if indices is None:
            raise AttributeError(name)
        if len(indices) == 1:
            return lambda: _to_python_scalar(self._array[indices[0]])
        return lambda: tuple(self._array[list(indices)].tolist())

    def length(self) -> float:
        return linalg.length(self._array)

    def length_squared(self) -> float:
        return linalg.length_squared(self._array)

    def normalize(self):
        return self._wrap(linalg.normalize_ex(self._array, 0, self.SIZE, self._array.copy()))

    def dot(self, other: Any) -> float:
        if len(other) != self.SIZE:
            raise InvalidArgument(f"bad argument 'other' ({self.SIZE} components expected, got {len(other)})")
        return linalg.dot_ex(self._array, 0, other, 0, self.SIZE)

    def __str__(self) -> str:
        return f"({_format.array(self._array)})"


class Vector2(_Vector):
    __slots__ = ()
    SIZE = 2

    def __init__(self, x: float, y: float):
        super().__init__(x, y)


class Vector3(_Vector):
    __slots__ = ()
    SIZE = 3

    def __init__(self, x: float, y: float, z: float):
        super().__init__(x, y, z)

    def cross(self, other: Any) -> "Vector3":
        result = linalg.cross_ex(self._array, 0, other, 0, self._array.copy())
        return self._wrap(result)


class Vector4(_Vector):
    __slots__ = ()
    SIZE = 4

    def __init__(self, x: float, y: float, z: float, w: float):
        super().__init__(x, y, z, w)


VECTOR_TYPES = {2: Vector2, 3: Vector3, 4: Vector4}
