from __future__ import annotations

import warnings
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from boundednumbers.functions import clamp

from ..conversions import rgba_to_css
from ..constants import DEFAULT_FONT_FAMILY, TRANSPARENT
from ..exceptions import EmptyStackError, InvalidArgumentError, UnsupportedShapeTypeError
from ..types.color_types import ColorLike, as_rgba
from ..types.shape_types import Ellipse, Polygon, Shape, ShapeType
from ..utils.default import value_or_default
from .style import RGBAValue, StyleFrame, font_string
from .surface import DrawingSurface


def _checked_rgba(color: ColorLike) -> RGBAValue:
    r, g, b, a = as_rgba(color)
    if not 0.0 <= a <= 1.0:
        warnings.warn(
            f"Alpha {a} is outside [0, 1], clamping",
            UserWarning,
            stacklevel=3,
        )
        a = clamp(a, 0.0, 1.0)
    return r, g, b, a


class DrawingContext:
    """
    Stateful drawing helper around an injected :class:`DrawingSurface`.

    The context owns its current :class:`StyleFrame` and a LIFO stack of saved
    frames. Style setters change the current frame and forward the change to
    the surface; ``push()``/``pop()`` save and restore the frame as a unit.

    Instances hold unsynchronized mutable state and are meant to be used from a
    single thread.
    """

    def __init__(self, surface: DrawingSurface, size: Sequence[float]) -> None:
        self._surface = surface
        self._stack: List[StyleFrame] = []
        self.style = StyleFrame()
        self.set_width_height(size)
        self._apply_style()

    # ------------------ STATE ------------------
    @property
    def surface(self) -> DrawingSurface:
        return self._surface

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def text_size(self) -> float:
        return self.style.text_size

    @property
    def stroke_color(self) -> RGBAValue:
        return self.style.stroke_color

    @property
    def fill_color(self) -> RGBAValue:
        return self.style.fill_color

    @property
    def dash_pattern(self) -> Tuple[float, ...]:
        return self.style.dash

    @property
    def line_weight(self) -> float:
        return self.style.line_weight

    @property
    def stack_depth(self) -> int:
        return len(self._stack)

    def set_width_height(self, size: Sequence[float]) -> None:
        w, h = size
        self._width = w
        self._height = h
        self._surface.canvas.width = w
        self._surface.canvas.height = h

    def set_surface(self, surface: DrawingSurface) -> None:
        """Draw on ``surface`` from now on. The current style is applied to it."""
        self._surface = surface
        self._apply_style()

    def push(self) -> None:
        self._stack.append(replace(self.style))

    def pop(self) -> None:
        """
        Restore the most recently pushed style frame.

        Raises:
            EmptyStackError: if there is no pushed frame.
        """
        if not self._stack:
            raise EmptyStackError()
        self.style = self._stack.pop()
        self._apply_style()

    def _apply_style(self) -> None:
        s = self.style
        self._surface.fill_style = rgba_to_css(s.fill_color)
        self._surface.stroke_style = rgba_to_css(s.stroke_color)
        self._surface.line_width = s.line_weight
        self._surface.set_line_dash(list(s.dash))
        self._surface.font = s.font

    # ------------------ STYLE ------------------
    def fill(self, rgba: ColorLike) -> None:
        color = _checked_rgba(rgba)
        self._surface.fill_style = rgba_to_css(color)
        self.style.fill_color = color

    def stroke(self, rgba: ColorLike) -> None:
        color = _checked_rgba(rgba)
        self._surface.stroke_style = rgba_to_css(color)
        self.style.stroke_color = color

    def no_fill(self) -> None:
        self.fill(TRANSPARENT)

    def no_stroke(self) -> None:
        self.stroke(TRANSPARENT)

    def dash(self, pattern: Sequence[float]) -> None:
        segments = tuple(float(v) for v in pattern)
        if any(v < 0 for v in segments):
            raise InvalidArgumentError(f"Dash segments must be non-negative, got {segments}")
        self._surface.set_line_dash(list(segments))
        self.style.dash = segments

    def no_dash(self) -> None:
        self.dash(())

    def stroke_weight(self, weight: float) -> None:
        if weight < 0:
            raise InvalidArgumentError(f"Stroke weight must be non-negative, got {weight}")
        self._surface.line_width = weight
        self.style.line_weight = weight

    def set_font(self, size: float, family: Optional[str] = None, modifier: Optional[str] = None) -> None:
        """
        Set the font, e.g. ``set_font(16, "serif", "bold")`` -> ``"bold 16px serif"``.

        Args:
            size: Text size in pixels; also used to center text vertically.
            family: Font family, defaults to ``DEFAULT_FONT_FAMILY``.
            modifier: Optional style prefix such as ``"italic"`` or ``"bold"``.
        """
        if size <= 0:
            raise InvalidArgumentError(f"Font size must be positive, got {size}")
        font = font_string(size, value_or_default(family, DEFAULT_FONT_FAMILY), modifier)
        self._surface.font = font
        self.style.font = font
        self.style.text_size = size

    def background(self, rgba: ColorLike) -> None:
        """Fill the whole canvas; the surface fill style is left as it was."""
        color = _checked_rgba(rgba)
        previous = self._surface.fill_style
        self._surface.fill_style = rgba_to_css(color)
        self._surface.fill_rect(0, 0, self._width, self._height)
        self._surface.fill_style = previous

    # ------------------ TEXT ------------------
    def text(self, text: str, pos: Sequence[float]) -> None:
        x, y = pos
        self._surface.fill_text(text, x, y)
        self._surface.stroke_text(text, x, y)

    def centered_text(self, text: str, pos: Sequence[float]) -> None:
        x, y = pos
        width = self._surface.measure_text(text).width
        self.text(text, (x - width / 2, y + self.style.text_size / 4))

    # ------------------ SHAPES ------------------
    def draw_polygon(self, shape: Polygon) -> None:
        points = shape.points
        if not points:
            raise InvalidArgumentError("Cannot draw a polygon with no vertices")
        ctx = self._surface
        ctx.begin_path()
        ctx.move_to(*points[0])
        for point in points[1:]:
            ctx.line_to(*point)
        ctx.line_to(*points[0])
        ctx.close_path()
        ctx.stroke()
        ctx.fill()

    def draw_ellipse(self, shape: Ellipse) -> None:
        ctx = self._surface
        ctx.begin_path()
        ctx.ellipse(*shape.position, *shape.radius, shape.rotation, *shape.angle, False)
        ctx.stroke()
        ctx.fill()
        ctx.close_path()

    def draw_arc(self, shape: Ellipse) -> None:
        """Draw ``shape`` as a circular arc of radius ``shape.radius[0]``, ignoring rotation."""
        ctx = self._surface
        ctx.begin_path()
        ctx.arc(*shape.position, shape.radius[0], *shape.angle, False)
        ctx.stroke()
        ctx.fill()
        ctx.close_path()

    def draw_line(self, shape: Polygon) -> None:
        """Stroke a two-point polygon such as the one built by ``shapes.line``."""
        if getattr(shape, "shape_type", None) is not ShapeType.POLYGON:
            raise UnsupportedShapeTypeError(shape)
        if len(shape.points) != 2:
            raise InvalidArgumentError(f"A line needs exactly 2 points, got {len(shape.points)}")
        (x1, y1), (x2, y2) = shape.points
        ctx = self._surface
        ctx.begin_path()
        ctx.move_to(x1, y1)
        ctx.line_to(x2, y2)
        ctx.stroke()
        ctx.close_path()

    def draw_shape(self, shape: Shape) -> None:
        """
        Draw a polygon or ellipse descriptor, stroking then filling it.

        Raises:
            UnsupportedShapeTypeError: for anything that is not a known shape.
        """
        drawer = DRAW_BY_TYPE.get(getattr(shape, "shape_type", None))
        if drawer is None:
            raise UnsupportedShapeTypeError(shape)
        drawer(self, shape)


DRAW_BY_TYPE: Dict[ShapeType, Callable[[DrawingContext, Shape], None]] = {
    ShapeType.POLYGON: DrawingContext.draw_polygon,
    ShapeType.ELLIPSE: DrawingContext.draw_ellipse,
}
