"""
Microcan Color Conversions
==========================

Conversions between the three colour representations used by microcan.

- Hex: ``"#rrggbb"`` (``#`` optional, any case on input, lowercase on output)
- RGB: ``(r, g, b)`` with channels in [0, 255]
- HSL: ``(hue, saturation, lightness)`` each normalized to [0, 1]

Conversion Functions
-------------------

Hex ↔ RGB:
    hex_to_rgb(hex_color), rgb_to_hex(rgb)

RGB ↔ HSL:
    rgb_to_hsl(rgb, use_css_algo=False)
    hsl_to_rgb(hsl, use_css_algo=False)
    np_rgb_to_hsl(r, g, b, use_css_algo=False)
    np_hsl_to_rgb(h, s, l, use_css_algo=False)

Hex ↔ HSL:
    hex_to_hsl(hex_color), hsl_to_hex(hsl)

Drawing surfaces:
    rgba_to_css(rgba)

High-Level API
-------------
    convert(color, from_space, to_space, use_css_algo=False)

Algorithm Selection
------------------
    - use_css_algo=False (default): proportional model, saturation is
      ``delta / (max + min)``. Scaling lightness scales every RGB channel
      by the same factor, which is what ``lighten_*``/``darken_*`` rely on.
    - use_css_algo=True: CSS Color 4 formulas.

Examples
--------
>>> from microcan.conversions import hex_to_rgb, rgb_to_hex
>>> hex_to_rgb("#FF0000")
(255, 0, 0)
>>> rgb_to_hex((255, 0, 0))
'#ff0000'
"""

from .hex import hex_to_rgb, rgb_to_hex, rgba_to_css, to_channel
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl, hex_to_hsl
from .to_rgb import hsl_to_rgb, hsl_to_unit_rgb, np_hsl_to_rgb, hsl_to_hex
from .wrapper import convert

# Short names
hex2rgb = hex_to_rgb
rgb2hex = rgb_to_hex
rgb2hsl = rgb_to_hsl
hsl2rgb = hsl_to_rgb
hex2hsl = hex_to_hsl
hsl2hex = hsl_to_hex

__all__ = [
    # Hex ↔ RGB
    'hex_to_rgb',
    'rgb_to_hex',
    'rgba_to_css',
    'to_channel',

    # RGB ↔ HSL
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'hsl_to_rgb',
    'hsl_to_unit_rgb',
    'np_hsl_to_rgb',

    # Hex ↔ HSL
    'hex_to_hsl',
    'hsl_to_hex',

    # High-level API
    'convert',

    # Short names
    'hex2rgb',
    'rgb2hex',
    'rgb2hsl',
    'hsl2rgb',
    'hex2hsl',
    'hsl2hex',
]
