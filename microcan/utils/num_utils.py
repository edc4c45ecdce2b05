import numbers

from ..exceptions import InvalidArgumentError


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def format_number(value: float) -> str:
    """Format a channel value for CSS-like strings: ``255.0`` -> ``"255"``."""
    if is_close_to_int(value):
        return str(int(round(value)))
    return repr(float(value))


def require_count(n, name: str = "n", minimum: int = 1) -> int:
    """Return ``n`` as an int, or raise if it is not an integer ``>= minimum``."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {n!r}")
    if n < minimum:
        raise InvalidArgumentError(f"{name} must be >= {minimum}, got {n}")
    return int(n)
