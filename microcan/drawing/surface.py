"""Contract for the externally provided 2D drawing surface.

Mirrors the HTML canvas 2D context with Python naming so that any backend
(a browser bridge, cairo, a test recorder) can be plugged in.
"""

from __future__ import annotations

from typing import Protocol, Sequence


class CanvasElement(Protocol):
    width: int
    height: int


class TextMetrics(Protocol):
    width: float


class DrawingSurface(Protocol):
    fill_style: str
    stroke_style: str
    line_width: float
    font: str
    canvas: CanvasElement

    def set_line_dash(self, segments: Sequence[float]) -> None:
        ...

    def begin_path(self) -> None:
        ...

    def close_path(self) -> None:
        ...

    def move_to(self, x: float, y: float) -> None:
        ...

    def line_to(self, x: float, y: float) -> None:
        ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        ...

    def ellipse(
        self,
        x: float,
        y: float,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        ...

    def stroke(self) -> None:
        ...

    def fill(self) -> None:
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        ...

    def fill_text(self, text: str, x: float, y: float) -> None:
        ...

    def stroke_text(self, text: str, x: float, y: float) -> None:
        ...

    def measure_text(self, text: str) -> TextMetrics:
        ...
