from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..constants import BLACK, DEFAULT_FONT_FAMILY, DEFAULT_LINE_WIDTH, DEFAULT_TEXT_SIZE
from ..utils.num_utils import format_number

RGBAValue = Tuple[float, float, float, float]


def font_string(size: float, family: str, modifier: Optional[str] = None) -> str:
    """CSS font shorthand, e.g. ``"bold 14px serif"``."""
    prefix = f"{modifier} " if modifier else ""
    return f"{prefix}{format_number(size)}px {family}"


@dataclass
class StyleFrame:
    """
    Current drawing style of a :class:`DrawingContext`.

    The context mutates its own frame through the style setters; ``push()``
    stores a copy and ``pop()`` swaps a stored copy back in. All fields hold
    immutable values so a shallow copy is a full snapshot.
    """

    text_size: float = DEFAULT_TEXT_SIZE
    font: str = field(default_factory=lambda: font_string(DEFAULT_TEXT_SIZE, DEFAULT_FONT_FAMILY))
    stroke_color: RGBAValue = BLACK
    fill_color: RGBAValue = BLACK
    dash: Tuple[float, ...] = ()
    line_weight: float = DEFAULT_LINE_WIDTH
