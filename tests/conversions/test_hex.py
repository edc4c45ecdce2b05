import pytest

from microcan.conversions import hex_to_rgb, rgb_to_hex, rgba_to_css, hex2rgb, rgb2hex
from microcan.exceptions import InvalidColorFormatError
from ..samples import samples_hex_rgb, rgb_grid


def test_hex_to_rgb():
    for hex_color, expected in samples_hex_rgb.items():
        assert hex_to_rgb(hex_color) == expected


def test_hex_to_rgb_with_and_without_hash():
    assert hex_to_rgb("#FF0000") == (255, 0, 0)
    assert hex_to_rgb("FF0000") == (255, 0, 0)


def test_rgb_to_hex():
    assert rgb_to_hex((255, 0, 0)) == "#ff0000"
    assert rgb_to_hex([102, 153, 204]) == "#6699cc"


def test_rgb_to_hex_clamps_and_rounds():
    assert rgb_to_hex((300, -5, 127.5)) == "#ff0080"
    assert rgb_to_hex((0.4, 254.6, 16.49)) == "#00ff10"


@pytest.mark.parametrize("bad", ["#FFF", "GGGGGG", "#12345", "1234567", "##ff0000", "", "ff 000"])
def test_hex_to_rgb_rejects_malformed(bad):
    with pytest.raises(InvalidColorFormatError):
        hex_to_rgb(bad)


def test_hex_to_rgb_rejects_non_string():
    with pytest.raises(ValueError):
        hex_to_rgb(0xFF0000)


def test_rgb_to_hex_rejects_wrong_channel_count():
    with pytest.raises(InvalidColorFormatError):
        rgb_to_hex((1, 2))


def test_round_trip_hex_rgb():
    for rgb in rgb_grid:
        assert hex_to_rgb(rgb_to_hex(rgb)) == rgb


def test_short_names():
    assert hex2rgb is hex_to_rgb
    assert rgb2hex is rgb_to_hex


def test_rgba_to_css():
    assert rgba_to_css((255, 0, 0)) == "rgba(255, 0, 0, 1)"
    assert rgba_to_css((0, 0, 0, 0)) == "rgba(0, 0, 0, 0)"
    assert rgba_to_css((10, 20, 30, 0.5)) == "rgba(10, 20, 30, 0.5)"
