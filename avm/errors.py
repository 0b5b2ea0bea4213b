"""Exception types raised by the array, vector and matrix kernels."""

from __future__ import annotations


class AvmError(Exception):
    """Base class for every error raised by :mod:`avm`."""


class ShapeError(AvmError, ValueError):
    """A sequence is too short for the requested offset and count."""


class InvalidArgument(AvmError, ValueError):
    """An argument has the wrong kind or an unusable value."""


class MissingValueError(InvalidArgument):
    """A required component was ``None`` or omitted."""
