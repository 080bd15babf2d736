"""
Checksum, password and pattern validators.

Input-safe: card numbers, passwords and patterns are never logged.
"""
import re
from typing import Optional

from sanitize_utils.core.config import get_settings
from sanitize_utils.core.logging import get_safe_logger

logger = get_safe_logger(__name__)

_NON_DIGIT_REGEX = re.compile(r"[^0-9]")
_UPPER_REGEX = re.compile(r"[A-Z]")
_LOWER_REGEX = re.compile(r"[a-z]")
_DIGIT_REGEX = re.compile(r"[0-9]")
_SPECIAL_REGEX = re.compile(r"[^A-Za-z0-9]")


def is_credit_card(number: str) -> bool:
    """
    Luhn (mod 10) checksum.

    Non-digits are stripped first, so "4532 0151 1283 0366" and
    "4532-0151-1283-0366" are read the same. Walking right to left, every
    digit whose left-based index has the parity of the length is doubled
    (minus 9 above 9); the sum must be a multiple of 10.

    Note: a string without digits sums to 0 and passes. Reject empty input
    with is_required() where that matters.
    """
    if not isinstance(number, str):
        return False
    digits = _NON_DIGIT_REGEX.sub("", number)
    parity = len(digits) % 2

    total = 0
    for i in range(len(digits) - 1, -1, -1):
        digit = ord(digits[i]) - 48  # '0' -> 48
        if i % 2 == parity:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit

    return total % 10 == 0


def is_strong_password(
    password: str,
    min_length: Optional[int] = None,
    require_upper: bool = True,
    require_lower: bool = True,
    require_digit: bool = True,
    require_special: bool = True,
) -> bool:
    """
    Password strength check.

    Args:
        password: Candidate password
        min_length: Minimum length in characters (settings.password_min_length by default)
        require_upper: Needs an ASCII uppercase letter
        require_lower: Needs an ASCII lowercase letter
        require_digit: Needs an ASCII digit
        require_special: Needs a character outside [A-Za-z0-9]

    Returns:
        True if every enabled requirement is met
    """
    if not isinstance(password, str):
        return False
    if min_length is None:
        min_length = get_settings().password_min_length

    if len(password) < min_length:
        return False
    if require_upper and not _UPPER_REGEX.search(password):
        return False
    if require_lower and not _LOWER_REGEX.search(password):
        return False
    if require_digit and not _DIGIT_REGEX.search(password):
        return False
    if require_special and not _SPECIAL_REGEX.search(password):
        return False
    return True


def _compile(pattern: str) -> Optional[re.Pattern]:
    if not isinstance(pattern, str) or not pattern:
        return None
    try:
        return re.compile(pattern)
    except (re.error, RecursionError, OverflowError) as e:
        logger.debug("Pattern does not compile", exception_class=type(e).__name__)
        return None


def is_regex(pattern: str) -> bool:
    """True when pattern is a non-empty regular expression that compiles."""
    return _compile(pattern) is not None


def matches_pattern(value: str, pattern: str) -> bool:
    """
    True when pattern is found in value (re.search).

    A pattern that does not compile never matches.
    """
    compiled = _compile(pattern)
    if compiled is None or not isinstance(value, str):
        return False
    return compiled.search(value) is not None
