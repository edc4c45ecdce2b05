from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple, Union

Point = Tuple[float, float]
Vector2 = Tuple[float, float]


class ShapeType(str, Enum):
    POLYGON = "polygon"
    ELLIPSE = "ellipse"


@dataclass(frozen=True)
class Polygon:
    """Ordered vertex list. The edge from the last vertex back to the first is implicit."""

    points: Tuple[Point, ...]
    shape_type: ClassVar[ShapeType] = ShapeType.POLYGON

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class Ellipse:
    """
    Ellipse (or elliptical arc) descriptor.

    Attributes:
        rotation: Rotation of the ellipse axes, in radians.
        radius: ``(rx, ry)``.
        angle: ``(start, end)`` of the arc, in radians.
        position: Center ``(x, y)``.
    """

    rotation: float
    radius: Vector2
    angle: Vector2
    position: Point
    shape_type: ClassVar[ShapeType] = ShapeType.ELLIPSE


Shape = Union[Polygon, Ellipse]
