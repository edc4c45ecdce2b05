"""Basic microcan usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from types import SimpleNamespace

from microcan import (
    DrawingContext,
    aligned_regular_polygon,
    circle,
    darken_hex,
    gradient,
    hex_to_hsl,
    lighten_hex,
    linear_gradient,
    map_polygon_vertices,
    rgb_to_hex,
)
from microcan.gradients import ease_in_out_quad


class PrintingSurface:
    """Stand-in for a real canvas: prints each drawing call."""

    def __init__(self):
        self.fill_style = self.stroke_style = self.font = ""
        self.line_width = 1
        self.canvas = SimpleNamespace(width=0, height=0)

    def measure_text(self, text):
        return SimpleNamespace(width=7 * len(text))

    def __getattr__(self, name):
        return lambda *args: print(f"  {name}{args}")


def demonstrate_colors() -> None:
    accent = "#6699cc"
    print("HSL:", hex_to_hsl(accent))
    print("Lighter / darker:", lighten_hex(0.2, accent), darken_hex(0.2, accent))

    stops = linear_gradient(5, (255, 0, 0), (0, 0, 255))
    print("Linear gradient:", [rgb_to_hex(c) for c in stops])

    eased = gradient(ease_in_out_quad, 5, (0, 0, 0), (255, 255, 255))
    print("Eased gradient:", [rgb_to_hex(c) for c in eased])


def demonstrate_drawing() -> None:
    ctx = DrawingContext(PrintingSurface(), (200, 200))
    ctx.background((255, 255, 255))

    hexagon = aligned_regular_polygon(6, 40, (100, 100))
    shifted = map_polygon_vertices(lambda p: (p[0] + 5, p[1] + 5), hexagon)

    ctx.push()
    ctx.fill((0, 0, 0, 0.2))
    ctx.no_stroke()
    ctx.draw_shape(shifted)
    ctx.pop()

    ctx.fill((102, 153, 204))
    ctx.draw_shape(hexagon)
    ctx.draw_shape(circle(10, (100, 100)))
    ctx.set_font(12, "sans-serif", "bold")
    ctx.centered_text("microcan", (100, 170))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_drawing()
