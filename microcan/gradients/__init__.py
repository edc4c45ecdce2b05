"""
Gradient Generation Module
==========================

Interpolation between two 3-vector colours (RGB or HSL tuples).

>>> from microcan.gradients import lerp3, linear_gradient, gradient, ease_in_quad
>>> lerp3(0.5, (0, 0, 0), (255, 255, 255))
(127.5, 127.5, 127.5)
>>> len(linear_gradient(10, (0, 0, 0), (255, 255, 255)))
10
"""

from .gradient import lerp3, linear_gradient, gradient, np_gradient, EaseFunction
from .easing import linear, ease_in_quad, ease_out_quad, ease_in_out_quad, smoothstep

__all__ = [
    "lerp3",
    "linear_gradient",
    "gradient",
    "np_gradient",
    "EaseFunction",
    "linear",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "smoothstep",
]
