"""
Numeric coercion shared by sanitizers and validators.

The rules mirror the loose scalar handling of web form input:
- numeric means int/float (finite, not bool) or a numeric string
- casting a string reads its longest leading numeric prefix
- anything that cannot be read becomes zero
"""
import math
import re
import sys
from decimal import Decimal, InvalidOperation
from typing import Any

_MAX_INT_DIGITS = len(str(sys.maxsize))

# Whole-string numeric: optional whitespace, sign, digits/fraction, exponent
_NUMERIC_REGEX = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

# Leading numeric prefix used by casts ("12abc" -> 12)
_LEADING_NUMBER_REGEX = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def is_numeric(value: Any) -> bool:
    """True for finite numbers and numeric strings. Booleans are not numeric."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, str):
        return bool(_NUMERIC_REGEX.match(value))
    return False


def to_decimal(value: Any) -> Decimal:
    """
    Cast a scalar to Decimal.

    Strings contribute their leading numeric prefix; everything that cannot
    be read (None, "", "abc", nan, containers) becomes Decimal(0).
    """
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return Decimal(0)
        return Decimal(repr(value))
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal(0)
    if isinstance(value, str):
        match = _LEADING_NUMBER_REGEX.match(value)
        if not match:
            return Decimal(0)
        try:
            return Decimal(match.group(1))
        except InvalidOperation:
            return Decimal(0)
    return Decimal(0)


def to_float(value: Any) -> float:
    """Float cast, zero when unreadable."""
    return float(to_decimal(value))


def to_int(value: Any) -> int:
    """Integer cast truncating toward zero, zero when unreadable.

    Magnitudes beyond the platform word size saturate at +/-sys.maxsize.
    """
    number = to_decimal(value)
    if number.adjusted() >= _MAX_INT_DIGITS:
        return sys.maxsize if number > 0 else -sys.maxsize
    return int(number)
