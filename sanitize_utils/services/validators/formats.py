"""
Format validators: email, URL, color, IP, date/time, timezone, JSON,
phone, slug, username, UUID.
"""
import ipaddress
import re
from typing import Optional

from sanitize_utils.core.capabilities import get_capabilities
from sanitize_utils.core.config import get_settings

_PHONE_REGEX = re.compile(r"\+?[0-9\s\-()]{7,15}")
_SLUG_REGEX = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
_UUID4_REGEX = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_email(value: str) -> bool:
    return isinstance(value, str) and get_capabilities().is_email(value)


def is_url(value: str) -> bool:
    return isinstance(value, str) and get_capabilities().is_url(value)


def is_hex_color(value: str) -> bool:
    """3 or 6 hex digits, leading '#' optional."""
    if not isinstance(value, str):
        return False
    digits = value.lstrip("#")
    return len(digits) in (3, 6) and all(ch in _HEX_DIGITS for ch in digits)


def is_ip(value: str, version: Optional[int] = None) -> bool:
    """
    IP address check.

    Args:
        value: Candidate address
        version: 4 or 6 to accept only that family, None for both
    """
    if not isinstance(value, str):
        return False
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        return False
    return version is None or address.version == version


def is_date(value: str, fmt: Optional[str] = None) -> bool:
    """
    True when value parses with fmt and formats back to the same text.

    The round trip rejects overflowing values such as "2024-02-30" and
    loosely padded ones such as "2024-2-5" for "%Y-%m-%d".
    """
    fmt = fmt or get_settings().date_format
    return _round_trips(value, fmt)


def is_time(value: str, fmt: Optional[str] = None) -> bool:
    """Same round-trip rule as is_date(), with settings.time_format."""
    fmt = fmt or get_settings().time_format
    return _round_trips(value, fmt)


def _round_trips(value: str, fmt: str) -> bool:
    if not isinstance(value, str) or not value:
        return False
    parsed = get_capabilities().parse_datetime(value, fmt)
    return parsed is not None and parsed.strftime(fmt) == value


def is_timezone(value: str) -> bool:
    return isinstance(value, str) and value in get_capabilities().timezones()


def is_json(value: str) -> bool:
    if not isinstance(value, str):
        return False
    try:
        get_capabilities().decode_json(value)
    except ValueError:
        return False
    return True


def is_phone(value: str) -> bool:
    """Basic shape: optional '+', then 7 to 15 digits, spaces, dashes or parentheses."""
    return isinstance(value, str) and _PHONE_REGEX.fullmatch(value) is not None


def is_slug(value: str) -> bool:
    """Lower-case alphanumeric words joined by single dashes."""
    return isinstance(value, str) and _SLUG_REGEX.fullmatch(value) is not None


def is_username(value: str) -> bool:
    return isinstance(value, str) and get_capabilities().is_username(value)


def is_uuid(value: str) -> bool:
    """Version 4 UUID in canonical 8-4-4-4-12 form, any case."""
    return isinstance(value, str) and _UUID4_REGEX.fullmatch(value) is not None
