import numpy as np
import pytest

from microcan.gradients import linear, ease_in_quad, ease_out_quad, ease_in_out_quad, smoothstep

easings = [linear, ease_in_quad, ease_out_quad, ease_in_out_quad, smoothstep]


@pytest.mark.parametrize("ease", easings)
def test_endpoints(ease):
    assert ease(0.0) == pytest.approx(0.0)
    assert ease(1.0) == pytest.approx(1.0)


@pytest.mark.parametrize("ease", easings)
def test_monotonic_on_arrays(ease):
    t = np.linspace(0.0, 1.0, 50)
    assert np.all(np.diff(ease(t)) >= 0)


def test_ease_in_out_quad_midpoint():
    assert ease_in_out_quad(0.5) == pytest.approx(0.5)
    assert ease_in_out_quad(0.25) == pytest.approx(0.125)
    assert ease_in_out_quad(0.75) == pytest.approx(0.875)
