import pytest

from darwinop.geometry import Point3D, Vector3D
from darwinop.matrix import Matrix3D


def _assert_matrix_close(a, b, tol=1e-9):
    for x, y in zip(a.values, b.values):
        assert x == pytest.approx(y, abs=tol)


def test_default_is_identity():
    assert Matrix3D() == Matrix3D.identity()
    assert Matrix3D.identity()[0, 0] == 1.0
    assert Matrix3D.identity()[0, 1] == 0.0


def test_wrong_size_rejected():
    with pytest.raises(ValueError):
        Matrix3D((1.0, 2.0, 3.0))


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Matrix3D.identity()[4, 0]


def test_identity_transform_keeps_point():
    p = Point3D(1.5, -2.0, 3.25)
    assert Matrix3D.identity().transform(p) == p


def test_transform_keeps_type():
    v = Vector3D(1.0, 2.0, 3.0)
    result = Matrix3D.identity().transform(v)
    assert isinstance(result, Vector3D)
    assert result == v


def test_translate_moves_point():
    offset = Vector3D(1.0, -2.0, 3.0)
    m = Matrix3D.identity().translate(offset)
    p = m.transform(Point3D(0.0, 0.0, 0.0))
    assert p == Point3D(offset.x, offset.y, offset.z)
    assert (m[0, 3], m[1, 3], m[2, 3]) == (offset.x, offset.y, offset.z)


def test_scale_multiplies_components():
    m = Matrix3D.identity().scale(Vector3D(2.0, 3.0, 4.0))
    p = m.transform(Point3D(1.0, 1.0, 1.0))
    assert p == Point3D(2.0, 3.0, 4.0)


def test_rotate_quarter_turn_about_z():
    m = Matrix3D.identity().rotate(90.0, Vector3D(0.0, 0.0, 1.0))
    p = m.transform(Point3D(1.0, 0.0, 0.0))
    assert p.x == pytest.approx(0.0, abs=1e-5)
    assert p.y == pytest.approx(1.0, abs=1e-5)
    assert p.z == pytest.approx(0.0, abs=1e-9)


def test_rotation_preserves_length():
    m = Matrix3D.identity().rotate(37.0, Vector3D(1.0, 1.0, 0.0).normalized())
    p = Point3D(0.3, -1.2, 2.0)
    origin = Point3D()
    assert m.transform(p).distance(origin) == pytest.approx(p.distance(origin))


def test_inverse_times_matrix_is_identity():
    m = (
        Matrix3D.identity()
        .translate(Vector3D(1.0, 2.0, 3.0))
        .rotate(30.0, Vector3D(0.0, 1.0, 0.0))
        .scale(Vector3D(2.0, 0.5, 1.5))
    )
    _assert_matrix_close(m * m.inverse(), Matrix3D.identity())
    _assert_matrix_close(m.inverse() * m, Matrix3D.identity())


def test_inverse_undoes_transform():
    m = Matrix3D.from_transform(Point3D(1.0, -1.0, 2.0), Vector3D(10.0, 20.0, 30.0))
    p = Point3D(0.5, 0.25, -3.0)
    back = m.inverse().transform(m.transform(p))
    assert back.x == pytest.approx(p.x)
    assert back.y == pytest.approx(p.y)
    assert back.z == pytest.approx(p.z)


def test_singular_matrix_has_no_inverse():
    m = Matrix3D.identity().scale(Vector3D(1.0, 0.0, 1.0))
    with pytest.raises(ValueError):
        m.inverse()


def test_from_transform_without_rotation_is_translation():
    point = Point3D(4.0, 5.0, 6.0)
    m = Matrix3D.from_transform(point, Vector3D(0.0, 0.0, 0.0))
    expected = Matrix3D.identity().translate(Vector3D(point.x, point.y, point.z))
    _assert_matrix_close(m, expected)


def test_multiplication_is_associative():
    a = Matrix3D.identity().rotate(15.0, Vector3D(1.0, 0.0, 0.0))
    b = Matrix3D.identity().translate(Vector3D(1.0, 2.0, 3.0))
    c = Matrix3D.identity().scale(Vector3D(2.0, 2.0, 2.0))
    _assert_matrix_close((a * b) * c, a * (b * c))


def test_multiply_by_non_matrix_fails():
    with pytest.raises(TypeError):
        Matrix3D.identity() * 2.0


def test_operations_do_not_mutate():
    m = Matrix3D.identity()
    m.translate(Vector3D(1.0, 1.0, 1.0))
    assert m == Matrix3D.identity()