"""
Microcan Shape Descriptors
==========================

Pure builders for the immutable :class:`Polygon` and :class:`Ellipse`
descriptors consumed by :class:`microcan.drawing.DrawingContext`.

>>> from microcan.shapes import regular_polygon, circle, map_ellipse_radius
>>> hexagon = regular_polygon(6, 10, (50, 50))
>>> len(hexagon.points)
6
>>> ring = circle(5, (0, 0))
>>> map_ellipse_radius(lambda e: (e.radius[0] * 2, e.radius[1]), ring).radius
(10.0, 5.0)
"""

from .builders import (
    polygon,
    regular_polygon,
    aligned_regular_polygon,
    rect,
    square,
    line,
    full_ellipse,
    ellipse,
    circle,
    arc,
    poly,
    aligned_poly,
)
from .maps import (
    map_polygon_vertices,
    map_ellipse_position,
    map_ellipse_rotation,
    map_ellipse_angle,
    map_ellipse_radius,
)
from ..types.shape_types import Ellipse, Polygon, Shape, ShapeType

__all__ = [
    "Ellipse",
    "Polygon",
    "Shape",
    "ShapeType",
    "polygon",
    "regular_polygon",
    "aligned_regular_polygon",
    "rect",
    "square",
    "line",
    "full_ellipse",
    "ellipse",
    "circle",
    "arc",
    "poly",
    "aligned_poly",
    "map_polygon_vertices",
    "map_ellipse_position",
    "map_ellipse_rotation",
    "map_ellipse_angle",
    "map_ellipse_radius",
]
