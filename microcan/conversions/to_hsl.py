import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSL, ColorLike, as_vector3
from .hex import hex_to_rgb


def rgb_to_hsl(rgb: ColorLike, use_css_algo: bool = False) -> HSL:
    """
    Convert an RGB triple with channels in [0, 255] to HSL in [0, 1].

    Args:
        rgb: ``(r, g, b)``.
        use_css_algo: Use the CSS Color 4 saturation ``delta / (1 - |2l - 1|)``
            instead of the default proportional model ``delta / (max + min)``.

    Returns:
        Tuple[float, float, float]: (hue, saturation, lightness), each in [0, 1]
    """
    r, g, b = (c / 255.0 for c in as_vector3(rgb))
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    if use_css_algo:
        saturation = delta / (1 - abs(2 * lightness - 1))
    else:
        saturation = delta / (max_c + min_c)

    if max_c == r:
        sector = ((g - b) / delta) % 6
    elif max_c == g:
        sector = (b - r) / delta + 2
    else:
        sector = (r - g) / delta + 4

    hue = (sector / 6.0) % 1.0
    return hue, saturation, lightness


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray, use_css_algo: bool = False) -> NDArray:
    """
    Vectorized: Convert RGB channels in [0, 255] to HSL in [0, 1].

    Args:
        r, g, b: array-like or scalar, [0, 255]
        use_css_algo: see :func:`rgb_to_hsl`

    Returns:
        hsl: array of shape (..., 3)
    """
    r = np.asarray(r, dtype=float) / 255.0
    g = np.asarray(g, dtype=float) / 255.0
    b = np.asarray(b, dtype=float) / 255.0

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    mask = delta > 0
    saturation = np.zeros(out_shape)
    if use_css_algo:
        saturation[mask] = delta[mask] / (1 - np.abs(2 * lightness[mask] - 1))
    else:
        saturation[mask] = delta[mask] / (max_c[mask] + min_c[mask])

    sector = np.zeros(out_shape)
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    sector[mask_r] = ((g[mask_r] - b[mask_r]) / delta[mask_r]) % 6
    sector[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    sector[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4

    hue = (sector / 6.0) % 1.0
    return np.stack([hue, saturation, lightness], axis=-1)


def hex_to_hsl(hex_color: str, use_css_algo: bool = False) -> HSL:
    return rgb_to_hsl(hex_to_rgb(hex_color), use_css_algo=use_css_algo)
