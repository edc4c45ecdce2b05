import pytest

from microcan.colors import (
    lighten_hex, darken_hex,
    lighten_rgb, darken_rgb,
    lighten_hsl, darken_hsl,
)


def test_lighten_hex():
    assert lighten_hex(0.2, "#6699CC") == "#7ab8f5"


def test_darken_hex():
    assert darken_hex(0.2, "#6699CC") == "#527aa3"


def test_lighten_rgb():
    assert lighten_rgb(0.2, (0x66, 0x99, 0xCC)) == (0x7a, 0xb8, 0xf5)


def test_darken_rgb():
    assert darken_rgb(0.2, (0x66, 0x99, 0xCC)) == (0x52, 0x7a, 0xa3)


def test_lighten_hsl():
    hsl = (210 / 360, 0.5, 0.6)
    assert lighten_hsl(0.2, hsl) == pytest.approx((210 / 360, 0.5, 0.6 + 0.6 * 0.2))


def test_darken_hsl():
    hsl = (210 / 360, 0.5, 0.6)
    assert darken_hsl(0.2, hsl) == pytest.approx((210 / 360, 0.5, 0.6 - 0.6 * 0.2))


def test_lightness_is_clamped():
    assert lighten_hsl(1.0, (0.1, 0.2, 0.8))[2] == pytest.approx(1.0)
    assert darken_hsl(2.0, (0.1, 0.2, 0.8))[2] == pytest.approx(0.0)


def test_zero_amount_is_identity():
    assert lighten_hex(0, "#6699cc") == "#6699cc"
    assert darken_rgb(0, (175, 103, 31)) == (175, 103, 31)


def test_lighten_rgb_css_keeps_saturation():
    # Lightness 0.6 -> 0.72 with saturation 0.5 under the CSS formulas
    assert lighten_rgb(0.2, (102, 153, 204), use_css_algo=True) == (148, 184, 219)
