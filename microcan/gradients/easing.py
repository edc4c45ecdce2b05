"""Ease functions for :func:`microcan.gradients.gradient`.

Each maps progress in [0, 1] to an interpolation factor and works on floats
and numpy arrays alike.
"""


def linear(t):
    return t


def ease_in_quad(t):
    return t * t


def ease_out_quad(t):
    return t * (2 - t)


def ease_in_out_quad(t):
    # 2t^2 on the first half, mirrored on the second
    return 2 * t * t * (t < 0.5) + (1 - (-2 * t + 2) ** 2 / 2) * (t >= 0.5)


def smoothstep(t):
    return t * t * (3 - 2 * t)
