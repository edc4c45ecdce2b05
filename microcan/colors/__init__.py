"""
Microcan Color Adjustments
==========================

Lighten and darken colours by a fraction of their HSL lightness.

>>> from microcan.colors import lighten_hex, darken_hex
>>> lighten_hex(0.2, "#6699CC")
'#7ab8f5'
>>> darken_hex(0.2, "#6699CC")
'#527aa3'

Every function takes ``amount`` first and the colour second, and leaves hue
and saturation untouched. The resulting lightness is clamped to [0, 1].
"""

from .lightness import (
    lighten_hsl, darken_hsl,
    lighten_rgb, darken_rgb,
    lighten_hex, darken_hex,
)

__all__ = [
    'lighten_hsl', 'darken_hsl',
    'lighten_rgb', 'darken_rgb',
    'lighten_hex', 'darken_hex',
]
