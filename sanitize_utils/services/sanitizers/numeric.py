"""
Numeric sanitizers: clamps, ratings, percentages and plain casts.

Two fallbacks exist for non-numeric input to a range:
- clamp-to-min: the value becomes the lower bound (sanitize_range default)
- default-zero: the value becomes 0, then is clamped like any other number
"""
from typing import Any

from sanitize_utils.services.numbers import is_numeric, to_float, to_int


def _clamp(value, min_value, max_value):
    return max(min_value, min(max_value, value))


def sanitize_range_clamp_to_min(value: Any, min_value: float, max_value: float) -> float:
    """Float in [min_value, max_value]; non-numeric input becomes min_value."""
    number = to_float(value) if is_numeric(value) else float(min_value)
    return float(_clamp(number, min_value, max_value))


def sanitize_range_default_zero(value: Any, min_value: float, max_value: float) -> float:
    """Float in [min_value, max_value]; non-numeric input becomes 0 before clamping."""
    number = to_float(value) if is_numeric(value) else 0.0
    return float(_clamp(number, min_value, max_value))


sanitize_range = sanitize_range_clamp_to_min


def sanitize_int_range(value: Any, min_value: int, max_value: int) -> int:
    """Integer in [min_value, max_value]; numeric input is truncated, anything else becomes min_value."""
    number = to_int(value) if is_numeric(value) else int(min_value)
    return int(_clamp(number, min_value, max_value))


def sanitize_int_range_default_zero(value: Any, min_value: int, max_value: int) -> int:
    """Integer in [min_value, max_value]; non-numeric input becomes 0 before clamping."""
    number = to_int(value) if is_numeric(value) else 0
    return int(_clamp(number, min_value, max_value))


def sanitize_rating(value: Any, min_value: int = 1, max_value: int = 5) -> int:
    """Star rating, 1 to 5 unless told otherwise."""
    return sanitize_int_range(value, min_value, max_value)


def sanitize_percentage(value: Any) -> float:
    return sanitize_range(value, 0.0, 100.0)


def sanitize_absint(value: Any) -> int:
    """Non-negative integer: the absolute value of the integer cast."""
    return abs(to_int(value))


def sanitize_int(value: Any, default: int = 0) -> int:
    """Integer cast of numeric input, default otherwise."""
    return to_int(value) if is_numeric(value) else default


def sanitize_float(value: Any, default: float = 0.0) -> float:
    """Float cast of numeric input, default otherwise."""
    return to_float(value) if is_numeric(value) else default
