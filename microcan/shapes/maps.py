"""Combinators that rebuild a shape with one part transformed."""

from dataclasses import replace
from typing import Callable, Sequence

from ..types.shape_types import Ellipse, Point, Polygon, Vector2
from .builders import polygon as make_polygon


def map_polygon_vertices(fn: Callable[[Point], Sequence[float]], polygon: Polygon) -> Polygon:
    """Apply ``fn`` to every vertex, keeping their order."""
    return make_polygon(fn(p) for p in polygon.points)


# The ellipse maps pass the whole ellipse to ``fn`` so the new value can
# depend on the other fields.

def map_ellipse_position(fn: Callable[[Ellipse], Sequence[float]], e: Ellipse) -> Ellipse:
    x, y = fn(e)
    return replace(e, position=(float(x), float(y)))


def map_ellipse_rotation(fn: Callable[[Ellipse], float], e: Ellipse) -> Ellipse:
    return replace(e, rotation=float(fn(e)))


def map_ellipse_angle(fn: Callable[[Ellipse], Sequence[float]], e: Ellipse) -> Ellipse:
    start, end = fn(e)
    return replace(e, angle=(float(start), float(end)))


def map_ellipse_radius(fn: Callable[[Ellipse], Sequence[float]], e: Ellipse) -> Ellipse:
    rx, ry = fn(e)
    radius: Vector2 = (float(rx), float(ry))
    return replace(e, radius=radius)
