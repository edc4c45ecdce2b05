from __future__ import annotations

import math
from typing import Iterable, Sequence

from ..constants import FULL_TURN, TAU
from ..types.shape_types import Ellipse, Point, Polygon
from ..utils.num_utils import require_count


def _point(p: Sequence[float]) -> Point:
    x, y = p
    return float(x), float(y)


def polygon(points: Iterable[Sequence[float]]) -> Polygon:
    """Wrap a vertex sequence in a :class:`Polygon`."""
    return Polygon(tuple(_point(p) for p in points))


def _points_on_circle(n: int, radius: float, center: Sequence[float], offset: float) -> Polygon:
    n = require_count(n)
    x, y = _point(center)
    step = TAU / n
    return Polygon(tuple(
        (x + math.cos(step * i + offset) * radius, y + math.sin(step * i + offset) * radius)
        for i in range(n)
    ))


def regular_polygon(n: int, radius: float, center: Sequence[float]) -> Polygon:
    """
    ``n`` vertices evenly spaced on a circle, the first at angle 0.

    Raises:
        InvalidArgumentError: if ``n`` is not an integer >= 1.
    """
    return _points_on_circle(n, radius, center, 0.0)


def aligned_regular_polygon(n: int, radius: float, center: Sequence[float]) -> Polygon:
    """
    Like :func:`regular_polygon`, rotated into the canonical orientation:
    by ``-TAU / (2n)`` for even ``n`` and ``+pi / (2n)`` for odd ``n``.
    """
    n = require_count(n)
    offset = -TAU / (2 * n) if n % 2 == 0 else math.pi / (2 * n)
    return _points_on_circle(n, radius, center, offset)


def rect(dimensions: Sequence[float], center: Sequence[float]) -> Polygon:
    """Axis-aligned rectangle centered on ``center``; corners run clockwise from top-left."""
    w, h = dimensions
    x, y = _point(center)
    w2 = w / 2
    h2 = h / 2
    return Polygon((
        (x - w2, y - h2),
        (x + w2, y - h2),
        (x + w2, y + h2),
        (x - w2, y + h2),
    ))


def square(side: float, center: Sequence[float]) -> Polygon:
    return rect((side, side), center)


def line(p1: Sequence[float], p2: Sequence[float]) -> Polygon:
    return Polygon((_point(p1), _point(p2)))


def full_ellipse(
    rotation: float,
    radius: Sequence[float],
    angle_range: Sequence[float],
    center: Sequence[float],
) -> Ellipse:
    rx, ry = radius
    start, end = angle_range
    return Ellipse(
        rotation=float(rotation),
        radius=(float(rx), float(ry)),
        angle=(float(start), float(end)),
        position=_point(center),
    )


def ellipse(rotation: float, radius: Sequence[float], center: Sequence[float]) -> Ellipse:
    return full_ellipse(rotation, radius, FULL_TURN, center)


def circle(radius: float, center: Sequence[float]) -> Ellipse:
    return full_ellipse(0.0, (radius, radius), FULL_TURN, center)


def arc(radius: float, angle_range: Sequence[float], center: Sequence[float]) -> Ellipse:
    return full_ellipse(0.0, (radius, radius), angle_range, center)


# Short aliases
poly = regular_polygon
aligned_poly = aligned_regular_polygon
