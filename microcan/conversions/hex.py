import math
import re
from typing import Tuple

from boundednumbers.functions import clamp

from ..exceptions import InvalidColorFormatError
from ..types.color_types import RGB, ColorLike, as_rgba, as_vector3
from ..utils.num_utils import format_number

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse a 6-digit hex colour into an ``(r, g, b)`` tuple of ints in [0, 255].

    The leading ``#`` is optional and digits may be upper or lower case.

    Raises:
        InvalidColorFormatError: on anything other than exactly 6 hex digits.
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormatError(hex_color, "expected a string")
    match = _HEX_PATTERN.fullmatch(hex_color.strip())
    if match is None:
        raise InvalidColorFormatError(hex_color, "expected 6 hexadecimal digits")
    digits = match.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def to_channel(value: float) -> int:
    """Clamp a value to [0, 255] and round it half up to a byte channel."""
    return int(math.floor(clamp(float(value), 0.0, 255.0) + 0.5))


def rgb_to_hex(rgb: ColorLike) -> str:
    """Format an RGB triple as a lowercase ``#rrggbb`` string."""
    r, g, b = (to_channel(c) for c in as_vector3(rgb))
    return f"#{r:02x}{g:02x}{b:02x}"


def rgba_to_css(rgba: ColorLike) -> str:
    """
    Format an RGB or RGBA colour as ``rgba(r, g, b, a)``.

    Alpha defaults to 1 when only three channels are given.
    """
    r, g, b, a = as_rgba(rgba)
    channels: Tuple[str, ...] = tuple(format_number(c) for c in (r, g, b, a))
    return "rgba({}, {}, {}, {})".format(*channels)
