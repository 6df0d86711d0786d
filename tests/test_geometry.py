import math

import pytest

from chargefield.field import ElectricField
from chargefield.geometry import (
    FieldArrow,
    arrow_vertices,
    circle_vertices,
    cosine_field,
    field_grid,
    rotational_field,
    screen_to_world,
    world_bounds,
    world_to_screen,
)


def test_field_arrow_length_and_angle():
    arrow = FieldArrow(1.0, 2.0, 3.0, 4.0)
    assert arrow.length == pytest.approx(5.0)
    assert FieldArrow(0.0, 0.0, 0.0, 2.0).angle == pytest.approx(math.pi / 2)


def test_arrow_vertices_shape():
    tris = arrow_vertices()
    assert len(tris) == 3
    points = [p for tri in tris for p in tri]
    assert max(p[0] for p in points) == 0.5
    assert (0.5, 0.0) in points
    assert min(p[0] for p in points) == -0.4


def test_circle_vertices_on_unit_circle():
    tris = circle_vertices(32)
    assert len(tris) == 32
    for center, a, b in tris:
        assert center == (0.0, 0.0)
        assert math.hypot(*a) == pytest.approx(1.0)
        assert math.hypot(*b) == pytest.approx(1.0)


def test_circle_vertices_fan_is_closed():
    tris = circle_vertices(8)
    for current, following in zip(tris, tris[1:] + tris[:1]):
        assert current[2] == following[1]


def test_circle_vertices_rejects_zero_segments():
    with pytest.raises(ValueError):
        circle_vertices(0)


def test_world_bounds_wide_and_tall():
    xmin, xmax, ymin, ymax = world_bounds(1280, 720)
    assert (ymin, ymax) == (-1.0, 1.0)
    assert xmax == pytest.approx(1280 / 720) and xmin == -xmax
    xmin, xmax, ymin, ymax = world_bounds(400, 800)
    assert (xmin, xmax) == (-1.0, 1.0)
    assert ymax == pytest.approx(800 / 400) and ymin == -ymax


def test_world_bounds_rejects_empty_window():
    with pytest.raises(ValueError):
        world_bounds(100, 0)


def test_screen_to_world_center_and_corner():
    assert screen_to_world(640, 360, 1280, 720) == pytest.approx((0.0, 0.0))
    xmin, _, _, ymax = world_bounds(1280, 720)
    assert screen_to_world(0, 0, 1280, 720) == pytest.approx((xmin, ymax))


@pytest.mark.parametrize("size", [(1280, 720), (720, 1280), (500, 500)])
@pytest.mark.parametrize("cursor", [(0.0, 0.0), (100.0, 250.0), (333.0, 17.0)])
def test_screen_world_round_trip_flips_y(size, cursor):
    width, height = size
    wx, wy = screen_to_world(cursor[0], cursor[1], width, height)
    sx, sy = world_to_screen(wx, wy, width, height)
    assert sx == pytest.approx(cursor[0])
    assert sy == pytest.approx(height - cursor[1])


def test_example_fields():
    assert rotational_field(2.0, 3.0) == (-3.0, 2.0)
    assert cosine_field(5.0, 0.0) == (1.0, 1.0)
    assert cosine_field(0.0, math.pi)[1] == pytest.approx(-1.0)


def test_field_grid_rotational_perpendicular_and_in_bounds():
    arrows = field_grid(rotational_field, [], 800, 600, density=10)
    xmin, xmax, ymin, ymax = world_bounds(800, 600)
    assert arrows
    for a in arrows:
        assert xmin <= a.x <= xmax and ymin <= a.y <= ymax
        assert a.x * a.dx + a.y * a.dy == pytest.approx(0.0, abs=1e-9)
        assert a.length >= 0.05 - 1e-12


def test_field_grid_length_grows_with_magnitude():
    arrows = field_grid(rotational_field, [], 600, 600, density=8)
    ordered = sorted(arrows, key=lambda a: math.hypot(a.x, a.y))
    lengths = [a.length for a in ordered]
    assert lengths == sorted(lengths)


def test_field_grid_skips_points_near_charges():
    field = ElectricField()
    field.add_charge(0.0, 0.0, 1.0)
    without = field_grid(rotational_field, [], 600, 600, density=10)
    with_charge = field_grid(field.vector_field(), field.charges, 600, 600, density=10)
    assert len(with_charge) < len(without)
    for a in with_charge:
        assert a.x ** 2 + a.y ** 2 >= 0.01


def test_field_grid_rejects_bad_density():
    with pytest.raises(ValueError):
        field_grid(rotational_field, [], 600, 600, density=0)