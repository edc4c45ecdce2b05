"""Exceptions raised by microcan."""

from __future__ import annotations


class MicrocanError(Exception):
    """Base exception class for all microcan errors."""


class EmptyStackError(MicrocanError, IndexError):
    """Raised when ``pop()`` is called with no saved style frame."""

    def __init__(self) -> None:
        super().__init__("No style frame to pop")


class InvalidColorFormatError(MicrocanError, ValueError):
    """Raised when a colour cannot be parsed or has the wrong number of channels.

    Attributes:
        value: The offending input.
    """

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        super().__init__(f"Invalid color {value!r}: {reason}")


class UnsupportedShapeTypeError(MicrocanError, TypeError):
    """Raised when a drawing call receives something that is not a known shape.

    Attributes:
        shape: The object that could not be drawn.
    """

    def __init__(self, shape: object) -> None:
        self.shape = shape
        shape_type = getattr(shape, "shape_type", type(shape).__name__)
        super().__init__(f"Cannot draw shape of type {shape_type!r}")


class InvalidArgumentError(MicrocanError, ValueError):
    """Raised when a numeric argument is outside the range an operation accepts."""
