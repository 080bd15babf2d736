"""
Numeric validators. Non-numeric input always fails; nothing is coerced
beyond reading a numeric string.
"""
import math
import re
from decimal import Decimal
from typing import Any

from sanitize_utils.services.numbers import is_numeric, to_float

_INTEGER_REGEX = re.compile(r"^\s*[+-]?(0|[1-9]\d*)\s*$")


def is_integer(value: Any) -> bool:
    """Integers, integral floats and integer strings without leading zeros."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    if isinstance(value, str):
        return bool(_INTEGER_REGEX.match(value))
    return False


def is_float(value: Any) -> bool:
    """Anything that reads as a finite number ("1", "1.5", ".5", "1e3", 2.0)."""
    return is_numeric(value) and math.isfinite(to_float(value))


def meets_min(value: Any, min_value: float) -> bool:
    return is_numeric(value) and to_float(value) >= min_value


def meets_max(value: Any, max_value: float) -> bool:
    return is_numeric(value) and to_float(value) <= max_value


def is_in_range(value: Any, min_value: float, max_value: float) -> bool:
    """True when value is numeric and already within [min_value, max_value]."""
    if not is_numeric(value):
        return False
    number = to_float(value)
    return min_value <= number <= max_value


def is_percentage(value: Any) -> bool:
    """Numeric value within [0, 100]."""
    return is_in_range(value, 0, 100)
