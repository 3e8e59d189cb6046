import math

import pytest

from gradientgen.utils import Addressing, Easing, Vec2D, float_div, normalize_range

SAMPLES = [-3.7, -1.0, -0.25, 0.0, 0.1, 0.5, 0.99, 1.0, 1.3, 2.0, 5.6]


@pytest.mark.parametrize("name", ["CLAMP", "WRAP", "MIRROR"])
@pytest.mark.parametrize("t", SAMPLES)
def test_addressing_stays_in_unit_range(name, t):
    result = Addressing[name].apply(t)
    assert 0.0 <= result <= 1.0


@pytest.mark.parametrize("t", [0.0, 0.2, 0.5, 0.75, 1.0])
def test_clamp_keeps_in_range_values(t):
    assert Addressing.CLAMP.apply(t) == t


def test_clamp_limits():
    assert Addressing.CLAMP.apply(-4.0) == 0.0
    assert Addressing.CLAMP.apply(9.0) == 1.0
    assert Addressing.CLAMP.apply(math.nan) == 0.0


@pytest.mark.parametrize("t", [0.1, 0.5, 0.9, 1.0])
def test_wrap_is_identity_on_half_open_unit(t):
    assert Addressing.WRAP.apply(t) == t


@pytest.mark.parametrize("t", [0.1, 0.5, 0.9])
def test_wrap_is_periodic(t):
    assert Addressing.WRAP.apply(t + 3) == pytest.approx(t)
    assert Addressing.WRAP.apply(t - 2) == pytest.approx(t)


def test_wrap_positive_integers_map_to_one():
    assert Addressing.WRAP.apply(2.0) == 1.0
    assert Addressing.WRAP.apply(0.0) == 0.0


@pytest.mark.parametrize("t", [0.0, 0.2, 0.6])
def test_mirror_reflects_odd_periods(t):
    assert Addressing.MIRROR.apply(t) == pytest.approx(t)
    assert Addressing.MIRROR.apply(1.0 + t) == pytest.approx(1.0 - t)
    assert Addressing.MIRROR.apply(2.0 + t) == pytest.approx(t)


def test_linear_easing_is_identity():
    for t in SAMPLES:
        assert Easing.LINEAR.apply(t) == t


@pytest.mark.parametrize("easing", [Easing.SMOOTHSTEP, Easing.SMOOTHERSTEP])
def test_smooth_easings_fix_endpoints_and_are_symmetric(easing):
    assert easing.apply(0.0) == 0.0
    assert easing.apply(1.0) == 1.0
    for step in range(11):
        t = step / 10
        assert easing.apply(t) + easing.apply(1.0 - t) == pytest.approx(1.0)


@pytest.mark.parametrize("name", ["LINEAR", "SMOOTHSTEP", "SMOOTHERSTEP"])
def test_easings_are_monotonic_on_unit(name):
    values = [Easing[name].apply(step / 50) for step in range(51)]
    assert values == sorted(values)
    assert values[0] == 0.0
    assert values[-1] == 1.0


def test_normalize_range_maps_endpoints():
    assert normalize_range(-1.0, (-1.0, 1.0), (0.0, 1.0)) == 0.0
    assert normalize_range(1.0, (-1.0, 1.0), (0.0, 1.0)) == 1.0


@pytest.mark.parametrize("t", [-0.8, 0.0, 0.3, 0.9])
def test_normalize_range_round_trip(t):
    there = normalize_range(t, (-1.0, 1.0), (10.0, 20.0))
    assert normalize_range(there, (10.0, 20.0), (-1.0, 1.0)) == pytest.approx(t)


def test_float_div_by_zero():
    assert float_div(1.0, 0.0) == math.inf
    assert float_div(-1.0, 0.0) == -math.inf
    assert math.isnan(float_div(0.0, 0.0))
    assert float_div(6.0, 3.0) == 2.0


def test_vec_between_and_magnitude():
    v = Vec2D.between((1.0, 2.0), (4.0, 6.0))
    assert v == Vec2D(3.0, 4.0)
    assert v.magnitude() == 5.0


def test_vec_dot_and_arithmetic():
    a, b = Vec2D(2.0, 0.0), Vec2D(0.0, 7.0)
    assert a.dot(b) == 0.0
    assert a.dot(a) == a.magnitude() ** 2
    assert (a + b) - b == a


def test_vec_angle():
    assert Vec2D(0.0, 1.0).angle() == pytest.approx(math.pi / 2)
    assert Vec2D(1.0, 0.0).angle() == 0.0
    assert Vec2D(-1.0, 0.0).angle() == pytest.approx(math.pi)