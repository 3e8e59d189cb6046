import math

import pytest

from gradientgen.shapes import Conical, Diamond, Linear, Radial, Square
from gradientgen.utils import Addressing

GRID = [(x, y) for x in range(0, 801, 100) for y in range(0, 801, 100)]


@pytest.mark.parametrize("shape", [Conical(), Diamond(), Linear(), Radial(), Square()])
def test_defaults_stay_in_unit_range(shape):
    for point in GRID:
        assert 0.0 <= shape.t(point) <= 1.0


def test_conical_zero_along_reference_axis():
    cone = Conical(center=(10.0, 10.0))
    assert cone.t((50.0, 10.0)) == 0.0


def test_conical_opposite_side_is_half():
    cone = Conical(center=(10.0, 10.0))
    assert cone.t((0.0, 10.0)) == pytest.approx(0.5)


def test_conical_theta_rotates_reference():
    cone = Conical(center=(0.0, 0.0), theta_0=math.pi / 2)
    assert cone.t((0.0, 5.0)) == pytest.approx(0.0)
    assert cone.t((1.0, 0.0)) == pytest.approx(Conical().t((0.0, -1.0)))


def test_conical_increases_counter_clockwise():
    cone = Conical()
    angles = [k * math.pi / 8 for k in range(1, 16)]
    values = [cone.t((math.cos(a), math.sin(a))) for a in angles]
    assert values == sorted(values)


def test_diamond_centre_and_edge():
    shape = Diamond(center=(100.0, 100.0), max_distance=50.0)
    assert shape.t((100.0, 100.0)) == 0.0
    assert shape.t((150.0, 100.0)) == 1.0
    assert shape.t((100.0, 40.0)) == 1.0


def test_diamond_uses_taxicab_distance():
    shape = Diamond()
    assert shape.t((500.0, 500.0)) == shape.t((600.0, 400.0))
    assert shape.t((300.0, 450.0)) == shape.t((400.0, 550.0))


def test_diamond_wrap_addressing():
    shape = Diamond(center=(0.0, 0.0), max_distance=10.0, addressing=Addressing.WRAP)
    assert shape.t((3.0, 0.0)) == pytest.approx(shape.t((8.0, 5.0)))


def test_square_uses_chebyshev_distance():
    shape = Square()
    assert shape.t((500.0, 450.0)) == shape.t((500.0, 400.0))
    assert shape.t((500.0, 400.0)) == shape.t((400.0, 300.0))


def test_square_centre_and_edge():
    shape = Square(center=(20.0, 20.0), max_distance=10.0)
    assert shape.t((20.0, 20.0)) == 0.0
    assert shape.t((30.0, 27.0)) == 1.0


def test_linear_start_middle_end():
    line = Linear(start=(0.0, 0.0), end=(200.0, 0.0))
    assert line.t((0.0, 0.0)) == 0.0
    assert line.t((200.0, 0.0)) == 1.0
    assert line.t((100.0, 0.0)) == 0.5


def test_linear_constant_across_perpendicular():
    line = Linear(start=(0.0, 0.0), end=(200.0, 0.0))
    assert line.t((60.0, -90.0)) == line.t((60.0, 40.0))


def test_linear_degenerate_line_clamps_to_zero():
    line = Linear(start=(5.0, 5.0), end=(5.0, 5.0))
    assert line.t((7.0, 9.0)) == 0.0


def test_radial_default_reaches_corners():
    radial = Radial()
    assert radial.t((400.0, 400.0)) == 0.0
    assert radial.t((0.0, 0.0)) == pytest.approx(1.0)
    assert radial.t((800.0, 800.0)) == pytest.approx(1.0)


def test_radial_with_radius_to():
    radial = Radial(center=(10.0, 10.0), radius=1.0)
    wider = radial.with_radius_to((40.0, 50.0))
    assert wider.t((40.0, 50.0)) == pytest.approx(1.0)
    assert wider.center == radial.center
    assert radial.radius == 1.0


def test_radial_is_rotationally_symmetric():
    radial = Radial(center=(0.0, 0.0), radius=100.0)
    assert radial.t((30.0, 40.0)) == pytest.approx(radial.t((-40.0, 30.0)))
    assert radial.t((30.0, 40.0)) == pytest.approx(radial.t((0.0, -50.0)))