from typing import Callable, Dict, Tuple, Union

from ..types.color_types import ColorLike, ColorSpace, is_color_space
from .hex import hex_to_rgb, rgb_to_hex
from .to_hsl import hex_to_hsl, rgb_to_hsl
from .to_rgb import hsl_to_hex, hsl_to_rgb

ColorInput = Union[str, ColorLike]
ColorOutput = Union[str, Tuple[float, ...]]

# Conversions between RGB and HSL take the use_css_algo flag
CONVERT_CSS: Dict[Tuple[str, str], Callable[[ColorInput, bool], ColorOutput]] = {
    ("rgb", "hsl"): lambda c, use_css: rgb_to_hsl(c, use_css_algo=use_css),
    ("hsl", "rgb"): lambda c, use_css: hsl_to_rgb(c, use_css_algo=use_css),
    ("hex", "hsl"): lambda c, use_css: hex_to_hsl(c, use_css_algo=use_css),
    ("hsl", "hex"): lambda c, use_css: hsl_to_hex(c, use_css_algo=use_css),
}

CONVERT_DIRECT: Dict[Tuple[str, str], Callable[[ColorInput], ColorOutput]] = {
    ("hex", "rgb"): hex_to_rgb,
    ("rgb", "hex"): rgb_to_hex,
}


def convert(
    color: ColorInput,
    from_space: ColorSpace,
    to_space: ColorSpace,
    use_css_algo: bool = False,
) -> ColorOutput:
    """
    Convert a colour between the ``"hex"``, ``"rgb"`` and ``"hsl"`` representations.

    Converting a space to itself returns the input unchanged.
    """
    fs, ts = from_space.lower(), to_space.lower()
    for space in (fs, ts):
        if not is_color_space(space):
            raise ValueError(f"Unknown space: {space}")

    if fs == ts:
        return color  # No conversion needed

    key = (fs, ts)
    if key in CONVERT_CSS:
        return CONVERT_CSS[key](color, use_css_algo)
    return CONVERT_DIRECT[key](color)
