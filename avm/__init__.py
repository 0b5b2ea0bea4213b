"""Fixed-size vector and matrix helpers over flat numeric arrays."""

from importlib.metadata import PackageNotFoundError, version

from .errors import AvmError, InvalidArgument, MissingValueError, ShapeError
from .matrix import Matrix2, Matrix3, Matrix4
from .vector import Vector2, Vector3, Vector4


try:  # pragma: no cover - metadata is provided at build time
    __version__ = version("avm")
except PackageNotFoundError:  # pragma: no cover - fallback during development
    __version__ = "0.0.0.dev0"


__all__ = [
    "__version__",
    "AvmError",
    "InvalidArgument",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "MissingValueError",
    "ShapeError",
    "Vector2",
    "Vector3",
    "Vector4",
]
