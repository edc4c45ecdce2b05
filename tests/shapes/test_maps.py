import math

from microcan.shapes import (
    circle, rect,
    map_polygon_vertices,
    map_ellipse_position, map_ellipse_rotation,
    map_ellipse_angle, map_ellipse_radius,
)


def test_map_polygon_vertices():
    shape = rect((2, 2), (0, 0))
    moved = map_polygon_vertices(lambda p: (p[0] + 10, p[1] * 2), shape)
    assert moved.points == ((9.0, -2.0), (11.0, -2.0), (11.0, 2.0), (9.0, 2.0))
    # Original untouched
    assert shape.points[0] == (-1.0, -1.0)


def test_map_ellipse_position():
    e = circle(3, (1, 1))
    moved = map_ellipse_position(lambda s: (s.position[0] + s.radius[0], s.position[1]), e)
    assert moved.position == (4.0, 1.0)
    assert (moved.rotation, moved.radius, moved.angle) == (e.rotation, e.radius, e.angle)


def test_map_ellipse_rotation():
    e = circle(3, (1, 1))
    rotated = map_ellipse_rotation(lambda s: s.rotation + math.pi, e)
    assert rotated.rotation == math.pi
    assert (rotated.position, rotated.radius, rotated.angle) == (e.position, e.radius, e.angle)


def test_map_ellipse_angle():
    e = circle(3, (1, 1))
    half = map_ellipse_angle(lambda s: (s.angle[0], s.angle[1] / 2), e)
    assert half.angle == (0.0, math.pi)
    assert half.position == e.position


def test_map_ellipse_radius():
    e = circle(3, (1, 1))
    wide = map_ellipse_radius(lambda s: (s.radius[0] * 2, s.radius[1]), e)
    assert wide.radius == (6.0, 3.0)
    assert e.radius == (3.0, 3.0)
