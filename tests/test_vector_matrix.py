from __future__ import annotations

import math

import numpy as _np
import pytest

from avm import Matrix2, Matrix3, Matrix4, Vector2, Vector3, Vector4, linalg
from avm.errors import InvalidArgument, MissingValueError


def test_vectors_require_every_component():
    with pytest.raises(MissingValueError):
        Vector3(1, None, 3)
    with pytest.raises(TypeError):
        Vector2(1)  # type: ignore[call-arg]
    with pytest.raises(InvalidArgument):
        Vector2(1, "two")


def test_vector_sequence_protocol_and_numpy_interop():
    v = Vector4(1, 2, 3, 4)
    assert len(v) == 4
    assert v[2] == 3.0
    assert list(v) == [1.0, 2.0, 3.0, 4.0]
    assert _np.asarray(v).tolist() == [1.0, 2.0, 3.0, 4.0]
    v[0] = 10
    assert v.get() == (10.0, 2.0, 3.0, 4.0)
    with pytest.raises(MissingValueError):
        v[1] = None


def test_swizzles_read_and_write():
    v = Vector3(1, 2, 3)
    assert v.x() == 1.0
    assert v.z() == 3.0
    assert v.zyx() == (3.0, 2.0, 1.0)
    assert v.xxy() == (1.0, 1.0, 2.0)
    v.set_yx(20, 10)
    assert v.get() == (10.0, 20.0, 3.0)
    v.set_z(7)
    assert v.xyz() == (10.0, 20.0, 7.0)
    with pytest.raises(AttributeError):
        v.w()
    with pytest.raises(AttributeError):
        v.set_xx(1, 2)
    with pytest.raises(TypeError):
        v.set_xy(1)
    assert Vector4(1, 2, 3, 4).wzyx() == (4.0, 3.0, 2.0, 1.0)


def test_set_copy_and_copy_into():
    v = Vector2(1, 2)
    w = v.copy()
    w.set(3, 4)
    assert v.get() == (1.0, 2.0)
    dest = [0, 0, 0, 0]
    w.copy_into(dest, 2)
    assert dest == [0, 0, 3.0, 4.0]
    assert Vector2.from_sequence([9, 8, 7], 1) == Vector2(8, 7)


def test_vector_operators():
    a = Vector3(1, 2, 3)
    b = Vector3(4, 5, 6)
    assert a + b == Vector3(5, 7, 9)
    assert b - a == Vector3(3, 3, 3)
    assert a * 2 == Vector3(2, 4, 6)
    assert 2 * a == Vector3(2, 4, 6)
    assert 12 / Vector3(1, 2, 3) == Vector3(12, 6, 4)
    assert a * [1, 0] == Vector3(1, 0, 3)
    assert -a == Vector3(-1, -2, -3)
    assert a + [1, 1, 1] == [2, 3, 4]
    assert a != b
    divided = a / 0
    assert math.isinf(divided[0])


def test_vector_operator_methods_and_into_forms():
    a = Vector2(1, 2)
    assert a.add(Vector2(1, 1)) == Vector2(2, 3)
    assert a.div(2) == Vector2(0.5, 1)
    dest = [0, 0, 0]
    a.mul_into(3, dest, 1)
    assert dest == [0, 3.0, 6.0]
    with pytest.raises(InvalidArgument):
        a.add(Vector3(1, 2, 3))
    with pytest.raises(TypeError):
        a + Vector3(1, 2, 3)


def test_vectors_are_not_hashable_and_type_strict():
    with pytest.raises(TypeError):
        hash(Vector2(1, 2))
    assert Vector2(1, 2) != Matrix2(1, 2, 0, 0)


def test_vector_geometry():
    assert Vector2(3, 4).length() == pytest.approx(5.0)
    assert Vector3(0, 3, 4).normalize().almost_equals([0, 0.6, 0.8])
    assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == pytest.approx(32.0)
    assert Vector3(1, 2, 3).cross(Vector3(4, 5, 6)) == Vector3(-3, 6, -3)


def test_almost_equals_with_infinite_components():
    v = Vector2(math.inf, 0)
    assert v.almost_equals(v.copy())
    assert linalg.equals(Vector3(-math.inf, 1, 2), [-math.inf, 1, 2])
    assert not v.almost_equals(Vector2(-math.inf, 0))


def test_operand_sizes_checked_with_checks_disabled(unchecked):
    with pytest.raises(TypeError):
        Vector2(1, 2) + [1, 2, 3]
    assert (Vector2(1, 2) * [2]).to_list() == [2.0, 4.0]
    assert (Vector2(1, 2) / 0).to_list() == [math.inf, math.inf]


def test_vector_text():
    assert str(Vector2(1, 2)) == "(1.0, 2.0)"
    assert repr(Vector3(1, 2, 3)) == "Vector3(1.0, 2.0, 3.0)"


def test_matrix_product_matches_kernel():
    m = Matrix2(1, 2, 3, 4)
    assert (m @ m).get() == (7.0, 10.0, 15.0, 22.0)
    assert m.matmul(Matrix2.identity()) == m
    dest = [0] * 5
    m.matmul_into(m, dest, 1)
    assert dest == [0, 7.0, 10.0, 15.0, 22.0]


def test_matrix_vector_products_return_vectors():
    a = Matrix4(1, 5, 9, 13, 2, 6, 10, 14, 3, 7, 11, 15, 4, 8, 12, 16)
    result = a @ Vector4(1, 2, 3, 1)
    assert isinstance(result, Vector4)
    assert result.get() == (18.0, 46.0, 74.0, 102.0)
    homogeneous = a @ Vector3(1, 2, 3)
    assert isinstance(homogeneous, Vector3)
    assert homogeneous.get() == (18.0, 46.0, 74.0)
    assert (Matrix3(*range(1, 10)) @ [1, 2]).get() == (16.0, 20.0)
    with pytest.raises(TypeError):
        Matrix2(1, 0, 0, 1) @ Vector3(1, 2, 3)


def test_matrix_transforms_through_wrappers():
    translate = Matrix4.from_sequence(linalg.mat4_translate(1, 2, 3))
    assert (translate @ Vector3(0, 0, 0)).get() == (1.0, 2.0, 3.0)
    assert Matrix3.identity() == Matrix3(1, 0, 0, 0, 1, 0, 0, 0, 1)
    assert Matrix2.zero() == [0, 0, 0, 0]


def test_matrix_transpose_and_elementwise_ops():
    m = Matrix3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m.transpose() == Matrix3(1, 4, 7, 2, 5, 8, 3, 6, 9)
    assert m.transpose().transpose() == m
    assert (m * 2)[8] == 18.0
    assert (m - m) == Matrix3.zero()


def test_matrix_text():
    assert str(Matrix2(1, 2, 3, 4)) == "1.0, 3.0\n2.0, 4.0"
