import pytest

from strawberry.mathutil import (
    ceil_div,
    greatest_common_divisor,
    round_down_to_multiple,
    round_to_decimal_points,
    round_up_to_multiple,
)


def test_gcd_pinned():
    assert greatest_common_divisor(12, 18) == 6


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (81, 27), (5, 0)])
def test_gcd_divides_both(a, b):
    g = greatest_common_divisor(a, b)
    assert a % g == 0
    assert b % g == 0
    assert greatest_common_divisor(a // g, b // g) == 1


@pytest.mark.parametrize("num,den", [(1, 1), (7, 3), (9, 3), (10, 4), (100, 7)])
def test_ceil_div_bounds(num, den):
    q = ceil_div(num, den)
    assert q * den >= num
    assert (q - 1) * den < num


@pytest.mark.parametrize("n,d", [(3, 4), (5, 1), (11, 6)])
def test_ceil_div_exact(n, d):
    assert ceil_div(n * d, d) == n


@pytest.mark.parametrize("value,multiple", [(13, 4), (12, 4), (1, 3), (99, 10)])
def test_round_up_to_multiple(value, multiple):
    r = round_up_to_multiple(value, multiple)
    assert r % multiple == 0
    assert value <= r < value + multiple


@pytest.mark.parametrize("value,multiple", [(13, 4), (12, 4), (1, 3), (99, 10)])
def test_round_down_to_multiple(value, multiple):
    r = round_down_to_multiple(value, multiple)
    assert r % multiple == 0
    assert value - multiple < r <= value


def test_exact_multiples_unchanged():
    assert round_up_to_multiple(12, 4) == 12
    assert round_down_to_multiple(12, 4) == 12


def test_round_halves_away_from_zero():
    assert round_to_decimal_points(2.5, 0) == 3.0
    assert round_to_decimal_points(-2.5, 0) == -3.0


@pytest.mark.parametrize("value,places", [(1.23456, 2), (9.87654, 3), (-4.4444, 1)])
def test_round_to_decimal_points_is_close(value, places):
    r = round_to_decimal_points(value, places)
    assert abs(r - value) <= 0.5 * 10**-places + 1e-12
    assert round_to_decimal_points(r, places) == pytest.approx(r)