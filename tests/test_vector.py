import math

import pytest

from strawberry.units import Radians
from strawberry.vector import Vector


def test_zeros():
    assert Vector.zeros(3) == Vector(0, 0, 0)


def test_indexing_and_assignment():
    v = Vector(1, 2, 3)
    v[1] = 7
    assert v[1] == 7
    assert list(v) == [1, 7, 3]
    assert len(v) == 3


def test_as_size_pads_and_truncates():
    v = Vector(1, 2, 3)
    assert v.as_size(5) == Vector(1, 2, 3, 0, 0)
    assert v.as_size(2) == Vector(1, 2)


def test_as_type():
    assert Vector(1.7, -2.2).as_type(int) == Vector(1, -2)


def test_offset_equals_addition():
    v = Vector(1, 2)
    assert v.offset(3, 4) == v + Vector(3, 4)


def test_with_additional_values():
    assert Vector(1, 2).with_additional_values(3, 4) == Vector(1, 2, 3, 4)


def test_map():
    assert Vector(1, 2, 3).map(lambda x: x * 10) == Vector(10, 20, 30)


def test_add_sub_round_trip():
    a = Vector(1.5, -2.0, 3.0)
    b = Vector(4.0, 5.5, -6.0)
    assert (a + b) - b == a


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        Vector(1, 2) + Vector(1, 2, 3)


def test_scalar_multiplication_commutes():
    v = Vector(1, 2, 3)
    assert 2 * v == v * 2
    assert (v * 2)[2] == v[2] * 2


def test_componentwise_multiply_and_divide_round_trip():
    a = Vector(2.0, 3.0, 4.0)
    b = Vector(5.0, 6.0, 7.0)
    result = (a * b) / b
    assert list(result) == pytest.approx(list(a))


def test_scalar_division():
    v = Vector(2.0, 4.0)
    assert list((v / 2.0) * 2.0) == pytest.approx(list(v))


def test_magnitude_pinned():
    assert Vector(3.0, 4.0).magnitude() == pytest.approx(5.0)


def test_square_magnitude_matches_self_dot():
    v = Vector(1, -2, 3)
    assert v.square_magnitude() == v.dot(v)


def test_normalised_has_unit_length():
    assert Vector(3.0, 1.0, -7.0).normalised().magnitude() == pytest.approx(1.0)


def test_cross_of_axes():
    assert Vector(1, 0, 0).cross(Vector(0, 1, 0)) == Vector(0, 0, 1)


def test_cross_is_orthogonal():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_cross_requires_three_elements():
    with pytest.raises(ValueError):
        Vector(1, 2).cross(Vector(3, 4))


def test_angle_between_orthogonal():
    angle = Vector(1.0, 0.0).angle_between(Vector(0.0, 2.0))
    assert isinstance(angle, Radians)
    assert float(angle) == pytest.approx(math.pi / 2)


def test_angle_between_parallel_is_zero():
    assert float(Vector(1.0, 1.0).angle_between(Vector(2.0, 2.0))) == pytest.approx(0.0, abs=1e-6)


def test_project_onto_plane_removes_normal_component():
    normal = Vector(0.0, 0.0, 1.0)
    projected = Vector(2.0, -3.0, 5.0).project_onto_plane(normal)
    assert projected.dot(normal) == pytest.approx(0.0)
    assert projected[0] == 2.0 and projected[1] == -3.0


def test_equal_vectors_hash_equal():
    assert hash(Vector(1, 2, 3)) == hash(Vector(1, 2, 3))
    assert {Vector(1, 2), Vector(1, 2)} == {Vector(1, 2)}