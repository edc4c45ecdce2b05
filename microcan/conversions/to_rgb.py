import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB, ColorLike, as_vector3
from .hex import rgb_to_hex, to_channel


def _hue_to_channel(p: float, q: float, t: float) -> float:
    t = t % 1.0
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _upper_bound(saturation, lightness, use_css_algo: bool):
    if use_css_algo:
        return np.where(
            lightness < 0.5,
            lightness * (1 + saturation),
            lightness + saturation - lightness * saturation,
        )
    return lightness * (1 + saturation)


def hsl_to_unit_rgb(hsl: ColorLike, use_css_algo: bool = False) -> tuple[float, float, float]:
    """
    Convert HSL in [0, 1] to unrounded RGB in [0, 1].

    With the default proportional model the result may exceed 1 for light,
    saturated input; :func:`hsl_to_rgb` clamps when converting to bytes.
    """
    h, s, l = as_vector3(hsl)
    if s == 0:
        return l, l, l

    q = float(_upper_bound(s, l, use_css_algo))
    p = 2 * l - q
    return (
        _hue_to_channel(p, q, h + 1 / 3),
        _hue_to_channel(p, q, h),
        _hue_to_channel(p, q, h - 1 / 3),
    )


def hsl_to_rgb(hsl: ColorLike, use_css_algo: bool = False) -> RGB:
    """
    Convert HSL in [0, 1] to an RGB triple of ints in [0, 255].

    Args:
        hsl: ``(hue, saturation, lightness)``, already normalized to [0, 1].
        use_css_algo: Use the CSS Color 4 inverse instead of the default
            proportional model. Must match the flag used for ``rgb_to_hsl``
            for round trips to hold.
    """
    r, g, b = hsl_to_unit_rgb(hsl, use_css_algo=use_css_algo)
    return to_channel(r * 255), to_channel(g * 255), to_channel(b * 255)


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray, use_css_algo: bool = False) -> NDArray:
    """
    Vectorized: Convert HSL in [0, 1] to integer RGB in [0, 255].

    Returns:
        rgb: int array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = _upper_bound(s, l, use_css_algo)
    p = 2 * l - q

    def channel(t: NDArray) -> NDArray:
        t = t % 1.0
        rising = p + (q - p) * 6 * t
        falling = p + (q - p) * (2 / 3 - t) * 6
        return np.select(
            [t < 1 / 6, t < 1 / 2, t < 2 / 3],
            [rising, q, falling],
            default=p,
        )

    rgb = np.stack([channel(h + 1 / 3), channel(h), channel(h - 1 / 3)], axis=-1)
    grey = np.stack([l, l, l], axis=-1)
    rgb = np.where((s == 0)[..., None], grey, rgb)
    return np.floor(np.clip(rgb * 255, 0, 255) + 0.5).astype(np.int64)


def hsl_to_hex(hsl: ColorLike, use_css_algo: bool = False) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl, use_css_algo=use_css_algo))
