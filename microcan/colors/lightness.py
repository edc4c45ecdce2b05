"""Lightness adjustment in HSL space, with RGB and hex wrappers."""

from boundednumbers.functions import clamp

from ..conversions import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from ..types.color_types import HSL, RGB, ColorLike, as_vector3


def _scale_lightness(factor: float, hsl: ColorLike) -> HSL:
    h, s, l = as_vector3(hsl)
    return h, s, clamp(l + factor * l, 0.0, 1.0)


def lighten_hsl(amount: float, hsl: ColorLike) -> HSL:
    """Raise lightness by ``amount * lightness``, clamped to [0, 1]."""
    return _scale_lightness(amount, hsl)


def darken_hsl(amount: float, hsl: ColorLike) -> HSL:
    """Lower lightness by ``amount * lightness``, clamped to [0, 1]."""
    return _scale_lightness(-amount, hsl)


def lighten_rgb(amount: float, rgb: ColorLike, use_css_algo: bool = False) -> RGB:
    hsl = rgb_to_hsl(rgb, use_css_algo=use_css_algo)
    return hsl_to_rgb(lighten_hsl(amount, hsl), use_css_algo=use_css_algo)


def darken_rgb(amount: float, rgb: ColorLike, use_css_algo: bool = False) -> RGB:
    hsl = rgb_to_hsl(rgb, use_css_algo=use_css_algo)
    return hsl_to_rgb(darken_hsl(amount, hsl), use_css_algo=use_css_algo)


def lighten_hex(amount: float, hex_color: str, use_css_algo: bool = False) -> str:
    return rgb_to_hex(lighten_rgb(amount, hex_to_rgb(hex_color), use_css_algo=use_css_algo))


def darken_hex(amount: float, hex_color: str, use_css_algo: bool = False) -> str:
    return rgb_to_hex(darken_rgb(amount, hex_to_rgb(hex_color), use_css_algo=use_css_algo))
