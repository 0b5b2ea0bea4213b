"""Flat-array kernels.

Every function works on a *flat sequence*: a ``list``, a 1-D NumPy array, a
:mod:`avm.view` object or one of the wrapper types.  Offsets are 0-based.
Functions come in up to four flavours:

``op(a, b)``
    whole-array form returning a freshly allocated array;
``op_ex(a, a_index, a_count, ..., dest=None, dest_index=0)``
    slice form, writing into ``dest`` when given;
``op_into(a, ..., dest, dest_index=0)``
    whole-array form writing into a caller supplied destination;
``op_constant*``
    the right operand is a number or a pattern repeated across ``a``.

Bounds are verified before anything is written, so a rejected call leaves the
destination unchanged.
"""

from __future__ import annotations

import builtins as _builtins
import itertools
import math
import operator
from typing import Any, Callable, List, Sequence, Tuple

import numpy as _np

from . import _checks, config
from .errors import InvalidArgument, MissingValueError, ShapeError

_python_abs = _builtins.abs
_python_max = _builtins.max
_python_min = _builtins.min
_python_pow = _builtins.pow
_range = _builtins.range

_INF = float("inf")
_NAN = float("nan")

MAX_FIXED_ARITY = 16


# ---------------------------------------------------------------------------
# allocation
# ---------------------------------------------------------------------------
def is_array(src: Any) -> bool:
    return _checks.is_sequence(src)


def length(src: Sequence[Any]) -> int:
    return len(src)


def new_array(count: int, boolean: bool = False):
    """Return ``count`` zero slots using the configured array backend.

    ``boolean`` allocates ``False`` slots instead, for comparison results.
    """

    if count < 0:
        raise InvalidArgument(f"bad argument 'count' (non-negative integer expected, got {count})")
    if config.ARRAY_BACKEND == "numpy":
        return _np.zeros(count, dtype=_np.bool_ if boolean else _np.float64)
    return [False if boolean else 0] * count


def grow_array(dest: List[Any], dest_index: int, dest_count: int) -> None:
    """Append zeros until ``dest`` spans ``[dest_index, dest_index + dest_count)``."""

    _checks.check_growable("dest", dest)
    while len(dest) < dest_index + dest_count:
        dest.append(0)


def _output(dest: Any, dest_index: int, count: int, boolean: bool = False):
    if dest is None:
        return new_array(dest_index + count, boolean)
    _checks.check_destination("dest", dest, dest_index, count)
    return dest


def zeros(count: int):
    return new_array(count)


def fill(constant: Any, count: int):
    dest = new_array(count)
    fill_into(constant, count, dest)
    return dest


def fill_into(constant: Any, count: int, dest: Any, dest_index: int = 0) -> None:
    _checks.check("constant", constant)
    _checks.check_destination("dest", dest, dest_index, count)
    for i in _range(count):
        dest[dest_index + i] = constant


# ---------------------------------------------------------------------------
# ranges
# ---------------------------------------------------------------------------
def _range_step(start: float, stop: float, step: float | None) -> Tuple[float, int]:
    if step is None:
        step = 1 if start <= stop else -1
    if step == 0:
        raise InvalidArgument("bad argument 'step' (step must not be zero)")
    if (stop - start) * step < 0:
        raise InvalidArgument(
            f"bad argument 'step' (step {step} never reaches {stop} from {start})"
        )
    count = int(math.floor((stop - start) / step)) + 1
    return step, count


def range(start: float, stop: float, step: float | None = None):  # noqa: A001
    """Inclusive arithmetic progression from ``start`` to ``stop``.

    >>> range(1, 4)
    [1, 2, 3, 4]
    >>> range(4, 1)
    [4, 3, 2, 1]
    """

    _checks.check("start", start, "number")
    _checks.check("stop", stop, "number")
    step, count = _range_step(start, stop, step)
    dest = new_array(count)
    for i in _range(count):
        dest[i] = start + i * step
    return dest


def range_into(start: float, stop: float, step: float | None, dest: Any, dest_index: int = 0) -> None:
    _checks.check("start", start, "number")
    _checks.check("stop", stop, "number")
    step, count = _range_step(start, stop, step)
    _checks.check_destination("dest", dest, dest_index, count)
    for i in _range(count):
        dest[dest_index + i] = start + i * step


# ---------------------------------------------------------------------------
# copy / reverse
# ---------------------------------------------------------------------------
def copy(src: Sequence[Any]):
    _checks.check_array_and_size("src", src)
    return copy_ex(src, 0, len(src))


def copy_ex(src: Sequence[Any], src_index: int, src_count: int, dest: Any = None, dest_index: int = 0):
    _checks.check_array("src", src, src_index, src_count)
    dest = _output(dest, dest_index, src_count)
    values = [src[src_index + i] for i in _range(src_count)]
    for i, value in enumerate(values):
        dest[dest_index + i] = value
    return dest


def copy_into(src: Sequence[Any], dest: Any, dest_index: int = 0) -> None:
    _checks.check_array_and_size("src", src)
    copy_ex(src, 0, len(src), dest, dest_index)


def reverse(src: Sequence[Any]):
    _checks.check_array_and_size("src", src)
    return reverse_ex(src, 0, len(src))


def reverse_ex(src: Sequence[Any], src_index: int, src_count: int, dest: Any = None, dest_index: int = 0):
    _checks.check_array("src", src, src_index, src_count)
    dest = _output(dest, dest_index, src_count)
    values = [src[src_index + i] for i in _range(src_count)]
    for i, value in enumerate(reversed(values)):
        dest[dest_index + i] = value
    return dest


def reverse_into(src: Sequence[Any], dest: Any, dest_index: int = 0) -> None:
    _checks.check_array_and_size("src", src)
    reverse_ex(src, 0, len(src), dest, dest_index)


# ---------------------------------------------------------------------------
# reshape / flatten
# ---------------------------------------------------------------------------
def _nested_shape(src: Any) -> List[int]:
    shape: List[int] = []
    node = src
    while _checks.is_sequence(node):
        shape.append(len(node))
        if len(node) == 0:
            break
        node = node[0]
    return shape


def _iter_leaves(src: Any, shape: Sequence[int]):
    for path in itertools.product(*(_range(size) for size in shape)):
        node = src
        for index in path:
            node = node[index]
        yield node


def _check_reshape_size(dest_shape: Sequence[int]) -> None:
    if not _checks.is_sequence(dest_shape) or len(dest_shape) == 0:
        raise InvalidArgument("bad argument 'dest_shape' (at least one dimension expected)")
    for dim, size in enumerate(dest_shape):
        if not isinstance(size, int) or size < 0:
            raise InvalidArgument(
                f"bad argument 'dest_shape' (dimension {dim} must be a non-negative integer, got {size!r})"
            )


def _store(dest: Any, path: Tuple[int, ...], value: Any) -> None:
    node = dest
    last = len(path) - 1
    for depth, index in enumerate(path):
        leaf = depth == last
        if index >= len(node):
            _checks.check_growable("dest", node)
            while len(node) < index:
                node.append(0 if leaf else [])
            node.append(value if leaf else [])
        elif leaf:
            node[index] = value
        if not leaf:
            node = node[index]


def reshape(src: Any, dest_shape: Sequence[int]) -> List[Any]:
    """Rearrange ``src`` (flat or nested) into nested lists of ``dest_shape``.

    >>> reshape([1, 2, 3, 4, 5, 6], [3, 2])
    [[1, 2], [3, 4], [5, 6]]
    """

    _check_reshape_size(dest_shape)
    dest: List[Any] = []
    reshape_into(src, dest_shape, dest)
    return dest


def reshape_into(src: Any, dest_shape: Sequence[int], dest: Any, dest_index: int = 0) -> None:
    _check_reshape_size(dest_shape)
    _checks.check("src", src, "sequence")
    _checks.check("dest", dest, "sequence")
    total = math.prod(dest_shape)
    leaves = list(itertools.islice(_iter_leaves(src, _nested_shape(src)), total))
    if len(leaves) < total:
        raise ShapeError(
            f"bad argument 'src' (needs {total} elements for shape {list(dest_shape)}, has {len(leaves)})"
        )
    paths = itertools.product(*(_range(size) for size in dest_shape))
    for path, value in zip(paths, leaves):
        _store(dest, (path[0] + dest_index,) + path[1:], value)


def flatten(src: Any):
    """Flatten nested sequences in row-major order; empty input gives ``[]``."""

    _checks.check("src", src, "sequence")
    total = math.prod(_nested_shape(src))
    if total == 0:
        return []
    return reshape(src, [total])


def flatten_into(src: Any, dest: Any, dest_index: int = 0) -> None:
    _checks.check("src", src, "sequence")
    total = math.prod(_nested_shape(src))
    if total > 0:
        reshape_into(src, [total], dest, dest_index)


# ---------------------------------------------------------------------------
# set / get / push / pop
# ---------------------------------------------------------------------------
def get(src: Sequence[Any], src_index: int, count: int) -> Tuple[Any, ...]:
    _checks.check_array("src", src, src_index, count)
    return tuple(src[src_index + i] for i in _range(count))


def set(dest: Any, dest_index: int, *values: Any) -> None:  # noqa: A001
    _checks.check_destination("dest", dest, dest_index, len(values))
    for i, value in enumerate(values):
        dest[dest_index + i] = value


def push(dest: List[Any], *values: Any) -> None:
    _checks.check_growable("dest", dest)
    start = len(dest)
    grow_array(dest, start, len(values))
    for i, value in enumerate(values):
        dest[start + i] = value


def pop(src: List[Any], count: int = 1) -> Tuple[Any, ...]:
    """Remove the last ``count`` values and return them in head-to-tail order."""

    _checks.check_growable("src", src)
    start = len(src) - count
    _checks.check_array("src", src, start, count)
    values = tuple(src[start + i] for i in _range(count))
    for _ in _range(count):
        src.pop()
    return values


def unpack(src: Sequence[Any]) -> Tuple[Any, ...]:
    _checks.check_array_and_size("src", src)
    return tuple(src[i] for i in _range(len(src)))


def _check_arity(name: str, values: Tuple[Any, ...], count: int) -> None:
    if len(values) < count:
        raise MissingValueError(
            f"bad argument '{name}' ({count} values expected, got {len(values)})"
        )
    if len(values) > count:
        raise InvalidArgument(
            f"bad argument '{name}' ({count} values expected, got {len(values)})"
        )
    if _checks.enabled():
        for position, value in enumerate(values):
            if value is None:
                raise MissingValueError(f"bad argument 'v{position + 1}' (value expected, got None)")


def _make_get(count: int) -> Callable[..., Tuple[Any, ...]]:
    def getter(src, src_index):
        return get(src, src_index, count)

    getter.__doc__ = f"Return the {count} values starting at ``src[src_index]``."
    return getter


def _make_set(count: int) -> Callable[..., None]:
    def setter(dest, dest_index, *values):
        _check_arity("values", values, count)
        set(dest, dest_index, *values)

    setter.__doc__ = f"Write {count} values starting at ``dest[dest_index]``."
    return setter


def _make_push(count: int) -> Callable[..., None]:
    def pusher(dest, *values):
        _check_arity("values", values, count)
        push(dest, *values)

    pusher.__doc__ = f"Append {count} values to ``dest``."
    return pusher


def _make_pop(count: int) -> Callable[..., Any]:
    if count == 1:
        def popper(src):
            return pop(src, 1)[0]
    else:
        def popper(src):
            return pop(src, count)

    popper.__doc__ = f"Remove and return the last {count} values of ``src``."
    return popper


def _make_unpack(count: int) -> Callable[..., Tuple[Any, ...]]:
    def unpacker(src):
        return get(src, 0, count)

    unpacker.__doc__ = f"Return the first {count} values of ``src``."
    return unpacker


def _install_fixed_arity() -> None:
    namespace = globals()
    factories = {
        "get": _make_get,
        "set": _make_set,
        "push": _make_push,
        "pop": _make_pop,
        "unpack": _make_unpack,
    }
    for count in _range(1, MAX_FIXED_ARITY + 1):
        for prefix, factory in factories.items():
            function = factory(count)
            function.__name__ = f"{prefix}_{count}"
            function.__qualname__ = function.__name__
            namespace[function.__name__] = function


_install_fixed_arity()


# ---------------------------------------------------------------------------
# append / join
# ---------------------------------------------------------------------------
def append(src: Sequence[Any], dest: List[Any]) -> None:
    """Append ``src`` to the end of ``dest``; ``src`` may be ``dest`` itself."""

    _checks.check_array_and_size("src", src)
    _checks.check_growable("dest", dest)
    values = list(src)
    start = len(dest)
    grow_array(dest, start, len(values))
    for i, value in enumerate(values):
        dest[start + i] = value


def extend(dest: List[Any], src: Sequence[Any]) -> None:
    append(src, dest)


def join(a: Sequence[Any], b: Sequence[Any]):
    _checks.check_array_and_size("a", a)
    _checks.check_array_and_size("b", b)
    return join_ex(a, 0, len(a), b, 0, len(b))


def join_ex(a: Sequence[Any], a_index: int, a_count: int, b: Sequence[Any], b_index: int, b_count: int):
    _checks.check_array("a", a, a_index, a_count)
    _checks.check_array("b", b, b_index, b_count)
    dest = new_array(a_count + b_count)
    copy_ex(a, a_index, a_count, dest, 0)
    copy_ex(b, b_index, b_count, dest, a_count)
    return dest


# ---------------------------------------------------------------------------
# whole-array comparisons
# ---------------------------------------------------------------------------
def _epsilon(epsilon: float | None) -> float:
    return config.EPSILON if epsilon is None else epsilon


def _close(x, y, eps) -> bool:
    # Equal infinities differ by NaN, so test equality first.
    return x == y or _python_abs(x - y) <= eps


def all_equals(a: Sequence[Any], b: Sequence[Any]) -> bool:
    _checks.check_array_and_size("a", a)
    _checks.check_array_and_size("b", b)
    if len(a) != len(b):
        return False
    return all_equals_ex(a, 0, len(a), b, 0)


def all_equals_ex(a: Sequence[Any], a_index: int, a_count: int, b: Sequence[Any], b_index: int) -> bool:
    _checks.check_array("a", a, a_index, a_count)
    _checks.check_array("b", b, b_index, a_count)
    return _builtins.all(a[a_index + i] == b[b_index + i] for i in _range(a_count))


def all_almost_equals(a: Sequence[Any], b: Sequence[Any], epsilon: float | None = None) -> bool:
    """True when ``len(a) == len(b)`` and no pair differs by more than ``epsilon``."""

    _checks.check_array_and_size("a", a)
    _checks.check_array_and_size("b", b)
    if len(a) != len(b):
        return False
    return all_almost_equals_ex(a, 0, len(a), b, 0, epsilon)


def all_almost_equals_ex(
    a: Sequence[Any],
    a_index: int,
    a_count: int,
    b: Sequence[Any],
    b_index: int,
    epsilon: float | None = None,
) -> bool:
    _checks.check_array("a", a, a_index, a_count)
    _checks.check_array("b", b, b_index, a_count)
    eps = _epsilon(epsilon)
    for i in _range(a_count):
        if not _close(a[a_index + i], b[b_index + i], eps):
            return False
    return True


def all_almost_equals_with_nan(a: Sequence[Any], b: Sequence[Any], epsilon: float | None = None) -> bool:
    """Like :func:`all_almost_equals` but a NaN matches a NaN."""

    _checks.check_array_and_size("a", a)
    _checks.check_array_and_size("b", b)
    if len(a) != len(b):
        return False
    eps = _epsilon(epsilon)
    for x, y in zip(a, b):
        if x != x and y != y:
            continue
        if not _close(x, y, eps):
            return False
    return True


def all_equals_constant(a: Sequence[Any], constant: Any) -> bool:
    _checks.check_array_and_size("a", a)
    return all_equals_constant_ex(a, 0, len(a), constant)


def all_equals_constant_ex(a: Sequence[Any], a_index: int, a_count: int, constant: Any) -> bool:
    _checks.check_array("a", a, a_index, a_count)
    return _builtins.all(a[a_index + i] == constant for i in _range(a_count))


def all_almost_equals_constant(a: Sequence[Any], constant: Any, epsilon: float | None = None) -> bool:
    _checks.check_array_and_size("a", a)
    return all_almost_equals_constant_ex(a, 0, len(a), constant, epsilon)


def all_almost_equals_constant_ex(
    a: Sequence[Any],
    a_index: int,
    a_count: int,
    constant: Any,
    epsilon: float | None = None,
) -> bool:
    _checks.check_array("a", a, a_index, a_count)
    eps = _epsilon(epsilon)
    return _builtins.all(_close(a[a_index + i], constant, eps) for i in _range(a_count))


# ---------------------------------------------------------------------------
# generate / map
# ---------------------------------------------------------------------------
def generate(count: int, f: Callable[[int], Any]):
    """Return ``[f(0), ..., f(count - 1)]``."""

    dest = new_array(count)
    generate_into(count, f, dest)
    return dest


def generate_into(count: int, f: Callable[[int], Any], dest: Any, dest_index: int = 0) -> None:
    _checks.check("f", f)
    _checks.check_destination("dest", dest, dest_index, count)
    for i in _range(count):
        dest[dest_index + i] = f(i)


def _map_slices(f, sources, count, dest, dest_index):
    _checks.check("f", f)
    for position, (src, src_index) in enumerate(sources):
        _checks.check_array(f"a{position + 1}", src, src_index, count)
    dest = _output(dest, dest_index, count)
    for i in _range(count):
        dest[dest_index + i] = f(*(src[src_index + i] for src, src_index in sources))
    return dest


def map(f: Callable[..., Any], a1: Sequence[Any]):  # noqa: A001
    _checks.check_array_and_size("a1", a1)
    return _map_slices(f, ((a1, 0),), len(a1), None, 0)


def map_ex(f, a1, a1_index, a1_count, dest=None, dest_index=0):
    return _map_slices(f, ((a1, a1_index),), a1_count, dest, dest_index)


def map_2(f, a1, a2):
    _checks.check_array_and_size("a1", a1)
    return _map_slices(f, ((a1, 0), (a2, 0)), len(a1), None, 0)


def map_2_ex(f, a1, a1_index, a1_count, a2, a2_index, dest=None, dest_index=0):
    return _map_slices(f, ((a1, a1_index), (a2, a2_index)), a1_count, dest, dest_index)


def map_3(f, a1, a2, a3):
    _checks.check_array_and_size("a1", a1)
    return _map_slices(f, ((a1, 0), (a2, 0), (a3, 0)), len(a1), None, 0)


def map_3_ex(f, a1, a1_index, a1_count, a2, a2_index, a3, a3_index, dest=None, dest_index=0):
    sources = ((a1, a1_index), (a2, a2_index), (a3, a3_index))
    return _map_slices(f, sources, a1_count, dest, dest_index)


def map_4(f, a1, a2, a3, a4):
    _checks.check_array_and_size("a1", a1)
    return _map_slices(f, ((a1, 0), (a2, 0), (a3, 0), (a4, 0)), len(a1), None, 0)


def map_4_ex(f, a1, a1_index, a1_count, a2, a2_index, a3, a3_index, a4, a4_index, dest=None, dest_index=0):
    sources = ((a1, a1_index), (a2, a2_index), (a3, a3_index), (a4, a4_index))
    return _map_slices(f, sources, a1_count, dest, dest_index)


# ---------------------------------------------------------------------------
# scalar operators (IEEE-754 results instead of Python exceptions)
# ---------------------------------------------------------------------------
def _div(a, b):
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or a != a:
            return _NAN
        return math.copysign(_INF, a) * math.copysign(1.0, b)


def _mod(a, b):
    try:
        return a % b
    except ZeroDivisionError:
        return _NAN


def _odd_integer(value) -> bool:
    return float(value).is_integer() and int(value) % 2 == 1


def _pow(a, b):
    try:
        result = _python_pow(a, b)
    except ZeroDivisionError:
        return math.copysign(_INF, a) if _odd_integer(b) else _INF
    except OverflowError:
        return -_INF if a < 0 and _odd_integer(b) else _INF
    if isinstance(result, complex):
        return _NAN
    return result


def _almost_equal(a, b) -> bool:
    return a == b or _python_abs(a - b) < config.EPSILON


def _almost_equal_with_nan(a, b) -> bool:
    if a != a and b != b:
        return True
    return a == b or _python_abs(a - b) < config.EPSILON


# ---------------------------------------------------------------------------
# elementwise operator families
# ---------------------------------------------------------------------------
def _pattern(c: Any) -> Sequence[Any] | None:
    if not _checks.is_sequence(c):
        _checks.check("c", c, "number")
        return None
    if len(c) == 0:
        raise InvalidArgument("bad argument 'c' (constant pattern must not be empty)")
    return c


def _apply(op, a, a_index, count, b, b_index, dest, dest_index, boolean=False):
    _checks.check_array("a", a, a_index, count)
    _checks.check_array("b", b, b_index, count)
    dest = _output(dest, dest_index, count, boolean)
    for i in _range(count):
        dest[dest_index + i] = op(a[a_index + i], b[b_index + i])
    return dest


def _apply_constant(op, a, a_index, count, c, dest, dest_index, boolean=False):
    _checks.check_array("a", a, a_index, count)
    pattern = _pattern(c)
    dest = _output(dest, dest_index, count, boolean)
    if pattern is None:
        for i in _range(count):
            dest[dest_index + i] = op(a[a_index + i], c)
    else:
        width = len(pattern)
        for i in _range(count):
            dest[dest_index + i] = op(a[a_index + i], pattern[i % width])
    return dest


def _family(name: str, symbol: str, op: Callable[[Any, Any], Any], boolean: bool = False):
    def whole(a, b):
        _checks.check_array_and_size("a", a)
        return _apply(op, a, 0, len(a), b, 0, None, 0, boolean)

    def constant(a, c):
        _checks.check_array_and_size("a", a)
        return _apply_constant(op, a, 0, len(a), c, None, 0, boolean)

    def ex(a, a_index, a_count, b, b_index, dest=None, dest_index=0):
        return _apply(op, a, a_index, a_count, b, b_index, dest, dest_index, boolean)

    def constant_ex(a, a_index, a_count, c, dest=None, dest_index=0):
        return _apply_constant(op, a, a_index, a_count, c, dest, dest_index, boolean)

    def into(a, b, dest, dest_index=0):
        _checks.check_array_and_size("a", a)
        _checks.check("dest", dest, "sequence")
        _apply(op, a, 0, len(a), b, 0, dest, dest_index)

    def constant_into(a, c, dest, dest_index=0):
        _checks.check_array_and_size("a", a)
        _checks.check("dest", dest, "sequence")
        _apply_constant(op, a, 0, len(a), c, dest, dest_index)

    docs = {
        "": f"Return ``[a[i] {symbol} b[i]]`` for every index of ``a``.",
        "_constant": f"Return ``[a[i] {symbol} c]``; a sequence ``c`` repeats across ``a``.",
        "_ex": f"Slice form of ``{name}``.",
        "_constant_ex": f"Slice form of ``{name}_constant``.",
        "_into": f"Write ``a {symbol} b`` into ``dest``.",
        "_constant_into": f"Write ``a {symbol} c`` into ``dest``.",
    }
    functions = (whole, constant, ex, constant_ex, into, constant_into)
    for suffix, function in zip(docs, functions):
        function.__name__ = function.__qualname__ = name + suffix
        function.__doc__ = docs[suffix]
    return functions


add, add_constant, add_ex, add_constant_ex, add_into, add_constant_into = _family(
    "add", "+", operator.add
)
sub, sub_constant, sub_ex, sub_constant_ex, sub_into, sub_constant_into = _family(
    "sub", "-", operator.sub
)
mul, mul_constant, mul_ex, mul_constant_ex, mul_into, mul_constant_into = _family(
    "mul", "*", operator.mul
)
div, div_constant, div_ex, div_constant_ex, div_into, div_constant_into = _family(
    "div", "/", _div
)
mod, mod_constant, mod_ex, mod_constant_ex, mod_into, mod_constant_into = _family(
    "mod", "%", _mod
)
pow, pow_constant, pow_ex, pow_constant_ex, pow_into, pow_constant_into = _family(  # noqa: A001
    "pow", "**", _pow
)
equal, equal_constant, equal_ex, equal_constant_ex, equal_into, equal_constant_into = _family(
    "equal", "==", operator.eq, boolean=True
)
(
    not_equal,
    not_equal_constant,
    not_equal_ex,
    not_equal_constant_ex,
    not_equal_into,
    not_equal_constant_into,
) = _family("not_equal", "!=", operator.ne, boolean=True)
(
    less_than,
    less_than_constant,
    less_than_ex,
    less_than_constant_ex,
    less_than_into,
    less_than_constant_into,
) = _family("less_than", "<", operator.lt, boolean=True)
(
    less_than_or_equal,
    less_than_or_equal_constant,
    less_than_or_equal_ex,
    less_than_or_equal_constant_ex,
    less_than_or_equal_into,
    less_than_or_equal_constant_into,
) = _family("less_than_or_equal", "<=", operator.le, boolean=True)
(
    greater_than,
    greater_than_constant,
    greater_than_ex,
    greater_than_constant_ex,
    greater_than_into,
    greater_than_constant_into,
) = _family("greater_than", ">", operator.gt, boolean=True)
(
    greater_than_or_equal,
    greater_than_or_equal_constant,
    greater_than_or_equal_ex,
    greater_than_or_equal_constant_ex,
    greater_than_or_equal_into,
    greater_than_or_equal_constant_into,
) = _family("greater_than_or_equal", ">=", operator.ge, boolean=True)
min, min_constant, min_ex, min_constant_ex, min_into, min_constant_into = _family(  # noqa: A001
    "min", "min", _python_min
)
max, max_constant, max_ex, max_constant_ex, max_into, max_constant_into = _family(  # noqa: A001
    "max", "max", _python_max
)
(
    almost_equal,
    almost_equal_constant,
    almost_equal_ex,
    almost_equal_constant_ex,
    almost_equal_into,
    almost_equal_constant_into,
) = _family("almost_equal", "~=", _almost_equal, boolean=True)
(
    almost_equal_with_nan,
    almost_equal_with_nan_constant,
    almost_equal_with_nan_ex,
    almost_equal_with_nan_constant_ex,
    almost_equal_with_nan_into,
    almost_equal_with_nan_constant_into,
) = _family("almost_equal_with_nan", "~=", _almost_equal_with_nan, boolean=True)


# ---------------------------------------------------------------------------
# fused kernels
# ---------------------------------------------------------------------------
def _fused(a, a_index, count, b, b_index, c, c_index, dest, dest_index):
    _checks.check_array("a", a, a_index, count)
    _checks.check_array("b", b, b_index, count)
    if c_index is None:
        pattern = _pattern(c)
    else:
        _checks.check_array("c", c, c_index, count)
        pattern = None
    dest = _output(dest, dest_index, count)
    for i in _range(count):
        if c_index is not None:
            factor = c[c_index + i]
        elif pattern is not None:
            factor = pattern[i % len(pattern)]
        else:
            factor = c
        dest[dest_index + i] = a[a_index + i] + b[b_index + i] * factor
    return dest


def mul_add(a, b, c):
    """Return ``[a[i] + b[i] * c[i]]``."""

    _checks.check_array_and_size("a", a)
    return _fused(a, 0, len(a), b, 0, c, 0, None, 0)


def mul_add_ex(a, a_index, a_count, b, b_index, c, c_index, dest=None, dest_index=0):
    return _fused(a, a_index, a_count, b, b_index, c, c_index, dest, dest_index)


def mul_add_into(a, b, c, dest, dest_index=0) -> None:
    _checks.check_array_and_size("a", a)
    _checks.check("dest", dest, "sequence")
    _fused(a, 0, len(a), b, 0, c, 0, dest, dest_index)


def mul_add_constant(a, b, c):
    """Return ``[a[i] + b[i] * c]``; a sequence ``c`` repeats across ``a``."""

    _checks.check_array_and_size("a", a)
    return _fused(a, 0, len(a), b, 0, c, None, None, 0)


def mul_add_constant_ex(a, a_index, a_count, b, b_index, c, dest=None, dest_index=0):
    return _fused(a, a_index, a_count, b, b_index, c, None, dest, dest_index)


def mul_add_constant_into(a, b, c, dest, dest_index=0) -> None:
    _checks.check_array_and_size("a", a)
    _checks.check("dest", dest, "sequence")
    _fused(a, 0, len(a), b, 0, c, None, dest, dest_index)


def _lerp(a, a_index, count, b, b_index, t, dest, dest_index):
    _checks.check_array("a", a, a_index, count)
    _checks.check_array("b", b, b_index, count)
    _checks.check("t", t, "number")
    dest = _output(dest, dest_index, count)
    for i in _range(count):
        dest[dest_index + i] = a[a_index + i] * (1 - t) + b[b_index + i] * t
    return dest


def lerp(a, b, t):
    """Linear interpolation ``a * (1 - t) + b * t``."""

    _checks.check_array_and_size("a", a)
    return _lerp(a, 0, len(a), b, 0, t, None, 0)


def lerp_ex(a, a_index, a_count, b, b_index, t, dest=None, dest_index=0):
    return _lerp(a, a_index, a_count, b, b_index, t, dest, dest_index)


def lerp_into(a, b, t, dest, dest_index=0) -> None:
    _checks.check_array_and_size("a", a)
    _checks.check("dest", dest, "sequence")
    _lerp(a, 0, len(a), b, 0, t, dest, dest_index)
