from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from typing import Callable, List, Optional, Tuple

from ..types.color_types import ColorLike, as_vector3
from ..utils.num_utils import require_count

EaseFunction = Callable[[float], float]
UnitTransform = Callable[[NDArray], NDArray]


def lerp3(t: float, a: ColorLike, b: ColorLike) -> Tuple[float, float, float]:
    """Per-component linear interpolation ``a + t * (b - a)`` of two 3-vectors."""
    a0, a1, a2 = as_vector3(a)
    b0, b1, b2 = as_vector3(b)
    return (
        a0 + t * (b0 - a0),
        a1 + t * (b1 - a1),
        a2 + t * (b2 - a2),
    )


def _progress(i: int, n: int) -> float:
    # A single stop sits at the start of the range
    return i / (n - 1) if n > 1 else 0.0


def gradient(ease_fn: EaseFunction, n: int, a: ColorLike, b: ColorLike) -> List[Tuple[float, float, float]]:
    """
    Build ``n`` colours from ``a`` to ``b``; stop ``i`` is ``lerp3(ease_fn(i / (n - 1)), a, b)``.

    ``n == 1`` gives ``[lerp3(ease_fn(0), a, b)]`` and ``n == 0`` an empty list.

    Raises:
        InvalidArgumentError: if ``n`` is negative or not an integer.
    """
    n = require_count(n, minimum=0)
    return [lerp3(ease_fn(_progress(i, n)), a, b) for i in range(n)]


def linear_gradient(n: int, a: ColorLike, b: ColorLike) -> List[Tuple[float, float, float]]:
    """Build ``n`` evenly spaced colours from ``a`` to ``b`` inclusive."""
    n = require_count(n, minimum=0)
    return [lerp3(_progress(i, n), a, b) for i in range(n)]


def np_gradient(
    n: int,
    a: ColorLike,
    b: ColorLike,
    ease_fn: Optional[UnitTransform] = None,
) -> NDArray:
    """
    Vectorized gradient.

    Args:
        n: Number of stops.
        a: Start colour.
        b: End colour.
        ease_fn: Optional transform applied to the whole progress array.

    Returns:
        float array of shape (n, 3)
    """
    n = require_count(n, minimum=0)
    start = np.array(as_vector3(a), dtype=float)
    end = np.array(as_vector3(b), dtype=float)

    u = np.linspace(0.0, 1.0, n, dtype=float)
    if ease_fn is not None:
        u = np.asarray(ease_fn(u), dtype=float)

    return start + u[:, None] * (end - start)
