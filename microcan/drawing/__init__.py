"""
Microcan Drawing
================

:class:`DrawingContext` wraps any object satisfying :class:`DrawingSurface`
(an HTML-canvas-like 2D context) and draws shape descriptors on it.

>>> ctx = DrawingContext(surface, (400, 300))      # doctest: +SKIP
>>> ctx.background((255, 255, 255))                # doctest: +SKIP
>>> ctx.push()                                     # doctest: +SKIP
>>> ctx.fill((255, 0, 0, 0.5))                     # doctest: +SKIP
>>> ctx.draw_shape(circle(20, (200, 150)))         # doctest: +SKIP
>>> ctx.pop()                                      # doctest: +SKIP
"""

from .context import DrawingContext
from .style import StyleFrame, font_string
from .surface import CanvasElement, DrawingSurface, TextMetrics

__all__ = [
    "DrawingContext",
    "StyleFrame",
    "font_string",
    "CanvasElement",
    "DrawingSurface",
    "TextMetrics",
]
