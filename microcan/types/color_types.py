from __future__ import annotations
from typing import Literal, Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

from ..exceptions import InvalidColorFormatError

Scalar = int | float
RGB = Tuple[int, int, int]
RGBA = Tuple[Scalar, Scalar, Scalar, Scalar]
HSL = Tuple[float, float, float]
Vector3 = Tuple[Scalar, Scalar, Scalar]
ColorLike = Union[Sequence[Scalar], ndarray]
ColorSpace = Literal["hex", "rgb", "hsl"]
COLOR_SPACES = ("hex", "rgb", "hsl")


def as_vector3(color: ColorLike) -> Tuple[float, ...]:
    """
    Validate a three-channel colour and return it as a tuple.

    Raises:
        InvalidColorFormatError: if the colour does not have exactly 3 channels.
    """
    values = tuple(np.asarray(color, dtype=float).ravel().tolist())
    if len(values) != 3:
        raise InvalidColorFormatError(color, f"expected 3 channels, got {len(values)}")
    return values


def as_rgba(color: ColorLike) -> Tuple[float, float, float, float]:
    """
    Validate an RGB or RGBA colour. A missing alpha defaults to fully opaque.

    Raises:
        InvalidColorFormatError: if the colour does not have 3 or 4 channels.
    """
    values = tuple(np.asarray(color, dtype=float).ravel().tolist())
    if len(values) == 3:
        return values + (1.0,)
    if len(values) != 4:
        raise InvalidColorFormatError(color, f"expected 3 or 4 channels, got {len(values)}")
    return values


def is_color_space(space: str) -> bool:
    return space.lower() in COLOR_SPACES
