import pytest

from strawberry.aabb import AABB
from strawberry.vector import Vector


def test_area_is_mensuration_in_two_dimensions():
    box = AABB(Vector(0, 0), Vector(2, 3))
    assert box.area() == 6
    assert box.area() == box.mensuration()


def test_volume_in_three_dimensions():
    box = AABB(Vector(1, 1, 1), Vector(2, 3, 4))
    assert box.volume() == box.mensuration() == 2 * 3 * 4


def test_area_requires_two_dimensions():
    with pytest.raises(ValueError):
        AABB(Vector(0, 0, 0), Vector(1, 1, 1)).area()


def test_volume_requires_three_dimensions():
    with pytest.raises(ValueError):
        AABB(Vector(0, 0), Vector(1, 1)).volume()


def test_mismatched_sizes_raise():
    with pytest.raises(ValueError):
        AABB(Vector(0, 0), Vector(1, 1, 1))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (AABB(Vector(0, 0), Vector(2, 2)), AABB(Vector(1, 1), Vector(2, 2)), True),
        (AABB(Vector(0, 0), Vector(2, 2)), AABB(Vector(2, 0), Vector(1, 1)), True),
        (AABB(Vector(0, 0), Vector(1, 1)), AABB(Vector(3, 0), Vector(1, 1)), False),
        (AABB(Vector(0, 0), Vector(1, 1)), AABB(Vector(0, 5), Vector(1, 1)), False),
        (AABB(Vector(0, 0), Vector(10, 10)), AABB(Vector(2, 2), Vector(1, 1)), True),
    ],
)
def test_intersects_is_symmetric(a, b, expected):
    assert a.intersects(b) is expected
    assert b.intersects(a) is expected


def test_intersects_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        AABB(Vector(0, 0), Vector(1, 1)).intersects(AABB(Vector(0, 0, 0), Vector(1, 1, 1)))