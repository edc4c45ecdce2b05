import math
from typing import Tuple

TAU = math.pi * 2

RGBAConstant = Tuple[float, float, float, float]

TRANSPARENT: RGBAConstant = (0, 0, 0, 0)
BLACK: RGBAConstant = (0, 0, 0, 1)

DEFAULT_TEXT_SIZE = 14
DEFAULT_FONT_FAMILY = "sans-serif"
DEFAULT_LINE_WIDTH = 1

FULL_TURN: Tuple[float, float] = (0.0, TAU)
