"""Vector and matrix kernels over flat arrays.

Vectors have 2, 3 or 4 components.  Matrices are stored column-major with at
most four rows and four columns, so element ``(row, col)`` of a matrix with
``rows`` rows lives at ``col * rows + row``.  Named kernels follow the GLSL
``matCxR`` convention (``C`` columns, ``R`` rows)::

    matmul_mat3x4_mat4x3(a, b)   # 4 rows x 3 inner, 3 rows x 4 cols -> 4x4
    transpose_mat2x3(m)          # 2 columns of 3 rows -> 3 columns of 2 rows
    matmul_mat4_vec3(m, v)       # homogeneous: v[3] is taken to be 1
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, List, Sequence

from . import _checks, array
from .errors import InvalidArgument

LOGGER = logging.getLogger(__name__)

VECTOR_SIZES = (2, 3, 4)
MATRIX_DIMENSIONS = (1, 2, 3, 4)
SQUARE_ORDERS = (2, 3, 4)


def _result(values: Sequence[Any], dest: Any = None, dest_index: int = 0):
    count = len(values)
    if dest is None:
        dest = array.new_array(dest_index + count)
    else:
        _checks.check_destination("dest", dest, dest_index, count)
    for i, value in enumerate(values):
        dest[dest_index + i] = value
    return dest


def _vector_size(name: str, v: Sequence[Any]) -> int:
    _checks.check_array_and_size(name, v)
    size = len(v)
    _checks.check_dimension(f"len({name})", size, VECTOR_SIZES)
    return size


# ---------------------------------------------------------------------------
# vectors
# ---------------------------------------------------------------------------
def length_squared_ex(src: Sequence[Any], src_index: int, n: int) -> float:
    _checks.check_dimension("n", n, VECTOR_SIZES)
    _checks.check_array("src", src, src_index, n)
    return sum(src[src_index + i] * src[src_index + i] for i in range(n))


def length_squared(v: Sequence[Any]) -> float:
    return length_squared_ex(v, 0, _vector_size("v", v))


def length_ex(src: Sequence[Any], src_index: int, n: int) -> float:
    return math.sqrt(length_squared_ex(src, src_index, n))


def length(v: Sequence[Any]) -> float:
    """Euclidean length of a 2, 3 or 4 component vector."""

    return length_ex(v, 0, _vector_size("v", v))


def normalize_ex(src: Sequence[Any], src_index: int, n: int, dest: Any = None, dest_index: int = 0):
    """Scale ``src[src_index:src_index + n]`` to unit length.

    A zero vector is not special-cased; its components become NaN.
    """

    norm = length_ex(src, src_index, n)
    return _result([array._div(src[src_index + i], norm) for i in range(n)], dest, dest_index)


def normalize(v: Sequence[Any]):
    return normalize_ex(v, 0, _vector_size("v", v))


def dot_ex(a: Sequence[Any], a_index: int, b: Sequence[Any], b_index: int, n: int) -> float:
    _checks.check_dimension("n", n, VECTOR_SIZES)
    _checks.check_array("a", a, a_index, n)
    _checks.check_array("b", b, b_index, n)
    return sum(a[a_index + i] * b[b_index + i] for i in range(n))


def dot(a: Sequence[Any], b: Sequence[Any]) -> float:
    return dot_ex(a, 0, b, 0, _vector_size("a", a))


def cross_ex(a: Sequence[Any], a_index: int, b: Sequence[Any], b_index: int, dest: Any = None, dest_index: int = 0):
    _checks.check_array("a", a, a_index, 3)
    _checks.check_array("b", b, b_index, 3)
    a1, a2, a3 = a[a_index], a[a_index + 1], a[a_index + 2]
    b1, b2, b3 = b[b_index], b[b_index + 1], b[b_index + 2]
    return _result((a2 * b3 - a3 * b2, a3 * b1 - a1 * b3, a1 * b2 - a2 * b1), dest, dest_index)


def cross(a: Sequence[Any], b: Sequence[Any]):
    """Cross product of two 3 component vectors."""

    _checks.check_dimension("len(a)", len(a), (3,))
    return cross_ex(a, 0, b, 0)


def negate_ex(src: Sequence[Any], src_index: int, n: int, dest: Any = None, dest_index: int = 0):
    _checks.check_array("src", src, src_index, n)
    return _result([-src[src_index + i] for i in range(n)], dest, dest_index)


def negate(v: Sequence[Any]):
    _checks.check_array_and_size("v", v)
    return negate_ex(v, 0, len(v))


def equals_ex(
    a: Sequence[Any],
    a_index: int,
    b: Sequence[Any],
    b_index: int,
    n: int,
    epsilon: float | None = None,
) -> bool:
    return array.all_almost_equals_ex(a, a_index, n, b, b_index, epsilon)


def equals(a: Sequence[Any], b: Sequence[Any], epsilon: float | None = None) -> bool:
    return array.all_almost_equals(a, b, epsilon)


# ---------------------------------------------------------------------------
# matrices
# ---------------------------------------------------------------------------
def _check_shape(**dims: int) -> None:
    for name, value in dims.items():
        _checks.check_dimension(name, value, MATRIX_DIMENSIONS)


def transpose_ex(
    src: Sequence[Any],
    src_index: int,
    rows: int,
    cols: int,
    dest: Any = None,
    dest_index: int = 0,
):
    """Transpose a ``rows x cols`` matrix into a ``cols x rows`` one."""

    _check_shape(rows=rows, cols=cols)
    _checks.check_array("src", src, src_index, rows * cols)
    values = [0] * (rows * cols)
    for c in range(cols):
        for r in range(rows):
            values[r * cols + c] = src[src_index + c * rows + r]
    return _result(values, dest, dest_index)


def transpose(src: Sequence[Any], rows: int, cols: int | None = None):
    return transpose_ex(src, 0, rows, rows if cols is None else cols)


def matmul_ex(
    a: Sequence[Any],
    a_index: int,
    b: Sequence[Any],
    b_index: int,
    rows: int,
    inner: int,
    cols: int,
    dest: Any = None,
    dest_index: int = 0,
):
    """``dest = a @ b`` for a ``rows x inner`` ``a`` and an ``inner x cols`` ``b``."""

    _check_shape(rows=rows, inner=inner, cols=cols)
    _checks.check_array("a", a, a_index, rows * inner)
    _checks.check_array("b", b, b_index, inner * cols)
    if _checks.enabled() and dest is not None and (dest is a or dest is b):
        LOGGER.warning("matmul destination aliases an input (%dx%d @ %dx%d)", rows, inner, inner, cols)
    values = [0] * (rows * cols)
    for c in range(cols):
        for r in range(rows):
            total = 0
            for k in range(inner):
                total += a[a_index + k * rows + r] * b[b_index + c * inner + k]
            values[c * rows + r] = total
    return _result(values, dest, dest_index)


def matmul(a: Sequence[Any], b: Sequence[Any], rows: int, inner: int | None = None, cols: int | None = None):
    """Matrix product; ``inner`` and ``cols`` default to ``rows`` (square case)."""

    inner = rows if inner is None else inner
    cols = rows if cols is None else cols
    return matmul_ex(a, 0, b, 0, rows, inner, cols)


def _square_order(m: Sequence[Any]) -> int:
    _checks.check_array_and_size("m", m)
    for order in SQUARE_ORDERS:
        if len(m) == order * order:
            return order
    raise InvalidArgument(f"bad argument 'm' (2x2, 3x3 or 4x4 matrix expected, got {len(m)} values)")


def matmul_vec_ex(
    m: Sequence[Any],
    m_index: int,
    order: int,
    v: Sequence[Any],
    v_index: int,
    v_count: int,
    dest: Any = None,
    dest_index: int = 0,
):
    """Multiply a square matrix by a column vector.

    A vector one component short (two for a 4x4 matrix) is treated as
    homogeneous: the missing components are 1 and only ``v_count`` results
    are produced.
    """

    _checks.check_dimension("order", order, SQUARE_ORDERS)
    if not 2 <= v_count <= order:
        raise InvalidArgument(
            f"bad argument 'v' ({v_count} components cannot multiply a {order}x{order} matrix)"
        )
    _checks.check_array("m", m, m_index, order * order)
    _checks.check_array("v", v, v_index, v_count)
    full = [v[v_index + i] for i in range(v_count)] + [1] * (order - v_count)
    values = []
    for r in range(v_count):
        values.append(sum(m[m_index + c * order + r] * full[c] for c in range(order)))
    return _result(values, dest, dest_index)


def matmul_vec(m: Sequence[Any], v: Sequence[Any], order: int | None = None):
    order = _square_order(m) if order is None else order
    _checks.check_array_and_size("v", v)
    return matmul_vec_ex(m, 0, order, v, 0, len(v))


def identity(n: int):
    _checks.check_dimension("n", n, SQUARE_ORDERS)
    return _result([1 if r == c else 0 for c in range(n) for r in range(n)])


def zero(n: int):
    _checks.check_dimension("n", n, SQUARE_ORDERS)
    return array.new_array(n * n)


# ---------------------------------------------------------------------------
# transforms
# ---------------------------------------------------------------------------
def mat3_translate(x: float, y: float):
    """2-d translation in homogeneous coordinates."""

    _checks.check_numbers("translation", (x, y))
    return _result((1, 0, 0, 0, 1, 0, x, y, 1))


def mat3_scale(x: float, y: float, z: float):
    _checks.check_numbers("scale", (x, y, z))
    return _result((x, 0, 0, 0, y, 0, 0, 0, z))


def _rotation(angle: float, x: float, y: float, z: float) -> List[float]:
    # Columns of the Rodrigues rotation matrix; the axis is used as given.
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1 - c
    return [
        c + x * x * t, x * y * t + z * s, x * z * t - y * s,
        x * y * t - z * s, c + y * y * t, y * z * t + x * s,
        x * z * t + y * s, y * z * t - x * s, c + z * z * t,
    ]


def mat3_rotate_around_axis(angle: float, x: float, y: float, z: float):
    """Rotation of ``angle`` radians about the unit axis ``(x, y, z)``."""

    _checks.check_numbers("rotation", (angle, x, y, z))
    return _result(_rotation(angle, x, y, z))


def mat4_translate(x: float, y: float, z: float):
    _checks.check_numbers("translation", (x, y, z))
    return _result((1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, x, y, z, 1))


def mat4_scale(x: float, y: float, z: float):
    _checks.check_numbers("scale", (x, y, z))
    return _result((x, 0, 0, 0, 0, y, 0, 0, 0, 0, z, 0, 0, 0, 0, 1))


def mat4_rotate_around_axis(angle: float, x: float, y: float, z: float):
    _checks.check_numbers("rotation", (angle, x, y, z))
    r = _rotation(angle, x, y, z)
    return _result(r[0:3] + [0] + r[3:6] + [0] + r[6:9] + [0, 0, 0, 0, 1])


# ---------------------------------------------------------------------------
# named kernels
# ---------------------------------------------------------------------------
def _mat_name(cols: int, rows: int) -> str:
    return f"mat{cols}" if cols == rows and cols > 1 else f"mat{cols}x{rows}"


def _named_kernels() -> Dict[str, Callable[..., Any]]:
    kernels: Dict[str, Callable[..., Any]] = {}

    def matmul_kernel(rows, inner, cols):
        def kernel(a, b):
            return matmul_ex(a, 0, b, 0, rows, inner, cols)

        def kernel_ex(a, a_index, b, b_index, dest=None, dest_index=0):
            return matmul_ex(a, a_index, b, b_index, rows, inner, cols, dest, dest_index)

        return kernel, kernel_ex

    def transpose_kernel(rows, cols):
        def kernel(src):
            return transpose_ex(src, 0, rows, cols)

        def kernel_ex(src, src_index, dest=None, dest_index=0):
            return transpose_ex(src, src_index, rows, cols, dest, dest_index)

        return kernel, kernel_ex

    def matvec_kernel(order, count):
        def kernel(m, v):
            return matmul_vec_ex(m, 0, order, v, 0, count)

        def kernel_ex(m, m_index, v, v_index, dest=None, dest_index=0):
            return matmul_vec_ex(m, m_index, order, v, v_index, count, dest, dest_index)

        return kernel, kernel_ex

    def vector_kernel(generic_ex, n):
        def kernel(src):
            return generic_ex(src, 0, n)

        def kernel_ex(src, src_index, *args, **kwargs):
            return generic_ex(src, src_index, n, *args, **kwargs)

        return kernel, kernel_ex

    def pair_kernel(generic_ex, n):
        def kernel(a, b):
            return generic_ex(a, 0, b, 0, n)

        def kernel_ex(a, a_index, b, b_index, *args, **kwargs):
            return generic_ex(a, a_index, b, b_index, n, *args, **kwargs)

        return kernel, kernel_ex

    for rows in MATRIX_DIMENSIONS:
        for inner in MATRIX_DIMENSIONS:
            for cols in MATRIX_DIMENSIONS:
                name = f"matmul_{_mat_name(inner, rows)}_{_mat_name(cols, inner)}"
                kernels[name], kernels[name + "_ex"] = matmul_kernel(rows, inner, cols)
            name = f"transpose_{_mat_name(inner, rows)}"
            kernels[name], kernels[name + "_ex"] = transpose_kernel(rows, inner)

    for order in SQUARE_ORDERS:
        for count in VECTOR_SIZES:
            if count <= order:
                name = f"matmul_mat{order}_vec{count}"
                kernels[name], kernels[name + "_ex"] = matvec_kernel(order, count)
        kernels[f"mat{order}_identity"] = lambda order=order: identity(order)
        kernels[f"mat{order}_zero"] = lambda order=order: zero(order)

    for n in VECTOR_SIZES:
        for prefix, generic_ex in (
            ("length", length_ex),
            ("length_squared", length_squared_ex),
            ("normalize", normalize_ex),
            ("negate", negate_ex),
        ):
            name = f"{prefix}_vec{n}"
            kernels[name], kernels[name + "_ex"] = vector_kernel(generic_ex, n)
        for prefix, generic_ex in (("dot", dot_ex), ("equals", equals_ex)):
            name = f"{prefix}_vec{n}"
            kernels[name], kernels[name + "_ex"] = pair_kernel(generic_ex, n)

    kernels["cross_vec3"] = cross
    kernels["cross_vec3_ex"] = cross_ex

    for name, function in kernels.items():
        if function.__name__ in {"kernel", "kernel_ex", "<lambda>"}:
            function.__name__ = function.__qualname__ = name
    return kernels


globals().update(_named_kernels())
