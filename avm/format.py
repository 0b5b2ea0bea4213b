"""Render arrays, slices and matrices as readable strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence

import numpy as _np

from . import _checks


def _text(value: Any, fmt: str | None) -> str:
    if isinstance(value, _np.generic):
        value = value.item()
    if fmt is None:
        return str(value)
    return fmt % value


def slice(  # noqa: A001
    src: Sequence[Any],
    src_index: int,
    src_count: int,
    separator: str = ", ",
    fmt: str | None = None,
) -> str:
    """Join ``src[src_index:src_index + src_count]``.

    >>> slice([1, 2, 3, 4], 1, 2)
    '2, 3'
    """

    _checks.check_array("src", src, src_index, src_count)
    return separator.join(_text(src[src_index + i], fmt) for i in range(src_count))


def array(src: Sequence[Any], separator: str = ", ", fmt: str | None = None) -> str:
    """Comma separated values, e.g. ``array([1, 2, 3]) == "1, 2, 3"``."""

    _checks.check_array_and_size("src", src)
    return slice(src, 0, len(src), separator, fmt)


def matrix(
    src: Sequence[Any],
    src_index: int,
    cols: int,
    rows: int,
    fmt: str | None = None,
    row_major: bool = False,
) -> str:
    """One line per matrix row; ``src`` is column-major unless ``row_major``."""

    _checks.check_array("src", src, src_index, cols * rows)
    lines: List[str] = []
    for row in range(rows):
        cells = []
        for col in range(cols):
            index = src_index + (row * cols + col if row_major else col * rows + row)
            cells.append(_text(src[index], fmt))
        lines.append(", ".join(cells))
    return "\n".join(lines)


def _matrix_formatter(cols: int, rows: int) -> Callable[..., str]:
    def formatter(src, fmt=None):
        return matrix(src, 0, cols, rows, fmt)

    return formatter


def _install() -> None:
    namespace: Dict[str, Any] = globals()
    for cols in range(1, 5):
        for rows in range(1, 5):
            name = f"mat{cols}x{rows}"
            namespace[name] = _matrix_formatter(cols, rows)
            namespace[name].__name__ = namespace[name].__qualname__ = name
        namespace[f"mat{cols}"] = namespace[f"mat{cols}x{cols}"]


_install()


@dataclass
class Column:
    """One column of :func:`tabulated` output.

    ``group_size`` consecutive values of ``data`` make up each cell; ``fmt``
    is applied to the whole group (``"%g,%g"`` for pairs).
    """

    data: Sequence[Any]
    index: int = 0
    count: int | None = None
    group_size: int = 1
    label: str = ""
    fmt: str | None = None

    def cell(self, row: int) -> str:
        start = self.index + row * self.group_size
        end = self.index + (len(self.data) - self.index if self.count is None else self.count)
        if start + self.group_size > end:
            return "-"
        values = tuple(
            value.item() if isinstance(value, _np.generic) else value
            for value in (self.data[start + j] for j in range(self.group_size))
        )
        if self.fmt is not None:
            return self.fmt % values
        return " ".join(str(value) for value in values)


def tabulated(rows: int, *columns: Column, padding: int = 4) -> str:
    """Lay out several columns side by side with numbered rows.

    ::

           pos      mass
        ------------------
        1  0 0 0    1
        2  0 1 0    1.5
    """

    for position, column in enumerate(columns):
        _checks.check(f"columns[{position}].data", column.data, "sequence")
    label_width = len(str(rows))
    grid = [[" " * label_width] + [column.label or "-" for column in columns]]
    for row in range(rows):
        grid.append([str(row + 1).rjust(label_width)] + [column.cell(row) for column in columns])
    widths = [max(len(line[i]) for line in grid) for i in range(len(columns) + 1)]
    gap = " " * padding
    lines = [gap.join(cell.ljust(width) for cell, width in zip(line, widths)).rstrip() for line in grid]
    lines.insert(1, "-" * max(len(line) for line in lines))
    return "\n".join(lines)
