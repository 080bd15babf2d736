"""
Fixed-vocabulary sanitizers.
"""
from typing import Any, Callable, Collection

from sanitize_utils.core.capabilities import get_capabilities

STATUS_OPTIONS = ("active", "inactive")
DEFAULT_STATUS = "active"

DISCOUNT_TYPE_OPTIONS = ("percentage", "flat")
DEFAULT_DISCOUNT_TYPE = "percentage"


def sanitize_option(value: Any, allowed: Collection[str], default: str = "") -> str:
    """
    Return the normalized, lower-cased value if it is one of allowed.

    Args:
        value: Raw option
        allowed: Accepted lower-case options (a single string is one option)
        default: Returned when value is not accepted

    Returns:
        The accepted option or default
    """
    if isinstance(allowed, str):
        # A bare string is one option, not a set of characters
        allowed = (allowed,)
    option = get_capabilities().normalize_text(value).lower()
    return option if option in frozenset(allowed) else default


def option_sanitizer(allowed: Collection[str], default: str = "") -> Callable[[Any], str]:
    """Build a one-argument sanitizer bound to a vocabulary."""
    vocabulary = allowed if isinstance(allowed, str) else frozenset(allowed)

    def sanitize(value: Any) -> str:
        return sanitize_option(value, vocabulary, default)

    return sanitize


def sanitize_status(value: Any) -> str:
    return sanitize_option(value, STATUS_OPTIONS, DEFAULT_STATUS)


def sanitize_discount_type(value: Any) -> str:
    return sanitize_option(value, DISCOUNT_TYPE_OPTIONS, DEFAULT_DISCOUNT_TYPE)
