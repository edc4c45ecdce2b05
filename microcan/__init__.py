"""
Microcan - Canvas Drawing and Colour Helpers
============================================

Two small libraries for programs that draw on an HTML-canvas-like 2D surface.

Key Features
------------
- Immutable shape descriptors: polygons, regular polygons, rectangles, lines,
  ellipses, circles and arcs
- Mapping combinators that rebuild a shape with one part transformed
- A drawing context with a push/pop style stack over any injected surface
- Hex, RGB and HSL conversions (scalar and numpy-vectorized)
- Lighten/darken in HSL space
- Linear and eased gradients

Quick Start
-----------
>>> from microcan import regular_polygon, lighten_hex, linear_gradient
>>>
>>> triangle = regular_polygon(3, 10, (0, 0))
>>> lighten_hex(0.2, "#6699CC")
'#7ab8f5'
>>> stops = linear_gradient(5, (0, 0, 0), (255, 255, 255))

Modules
-------
- shapes: shape descriptor builders and maps
- drawing: DrawingContext, StyleFrame and the DrawingSurface protocol
- conversions: hex/RGB/HSL conversions
- colors: lightness adjustment
- gradients: interpolation, gradients and ease functions
- exceptions: error types
"""

from .shapes import (
    Ellipse, Polygon, Shape, ShapeType,
    polygon, regular_polygon, aligned_regular_polygon,
    rect, square, line,
    full_ellipse, ellipse, circle, arc,
    map_polygon_vertices,
    map_ellipse_position, map_ellipse_rotation,
    map_ellipse_angle, map_ellipse_radius,
)

from .drawing import DrawingContext, DrawingSurface, StyleFrame

from .conversions import (
    hex_to_rgb, rgb_to_hex, rgba_to_css,
    rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb,
    hex_to_hsl, hsl_to_hex,
    convert,
)

from .colors import (
    lighten_hsl, darken_hsl,
    lighten_rgb, darken_rgb,
    lighten_hex, darken_hex,
)

from .gradients import lerp3, linear_gradient, gradient, np_gradient

from .exceptions import (
    MicrocanError,
    EmptyStackError,
    InvalidColorFormatError,
    UnsupportedShapeTypeError,
    InvalidArgumentError,
)

from .constants import TAU, TRANSPARENT

__version__ = "1.0.0"

__all__ = [
    # Shapes
    "Ellipse", "Polygon", "Shape", "ShapeType",
    "polygon", "regular_polygon", "aligned_regular_polygon",
    "rect", "square", "line",
    "full_ellipse", "ellipse", "circle", "arc",
    "map_polygon_vertices",
    "map_ellipse_position", "map_ellipse_rotation",
    "map_ellipse_angle", "map_ellipse_radius",

    # Drawing
    "DrawingContext", "DrawingSurface", "StyleFrame",

    # Conversions
    "hex_to_rgb", "rgb_to_hex", "rgba_to_css",
    "rgb_to_hsl", "hsl_to_rgb", "np_rgb_to_hsl", "np_hsl_to_rgb",
    "hex_to_hsl", "hsl_to_hex",
    "convert",

    # Lightness
    "lighten_hsl", "darken_hsl",
    "lighten_rgb", "darken_rgb",
    "lighten_hex", "darken_hex",

    # Gradients
    "lerp3", "linear_gradient", "gradient", "np_gradient",

    # Errors
    "MicrocanError", "EmptyStackError", "InvalidColorFormatError",
    "UnsupportedShapeTypeError", "InvalidArgumentError",

    # Constants
    "TAU", "TRANSPARENT",

    # Version
    "__version__",
]
