"""
Date, time and timezone sanitizers.

A value is read with the configured strptime format first and as ISO 8601
second, then written back in the configured format. Unreadable values
become "" (dates/times) or the default timezone.
"""
from datetime import date, datetime, time
from typing import Any, Optional

from sanitize_utils.core.capabilities import get_capabilities
from sanitize_utils.core.config import get_settings


def _read_datetime(value: Any, fmt: str, iso_parser) -> Optional[Any]:
    if isinstance(value, (datetime, date, time)):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    parsed = get_capabilities().parse_datetime(text, fmt)
    if parsed is not None:
        return parsed
    try:
        return iso_parser(text)
    except ValueError:
        return None


def sanitize_date(value: Any, fmt: Optional[str] = None) -> str:
    """Date in fmt (settings.date_format by default), "" if unreadable."""
    fmt = fmt or get_settings().date_format
    parsed = _read_datetime(value, fmt, datetime.fromisoformat)
    if parsed is None or isinstance(parsed, time):
        return ""
    return parsed.strftime(fmt)


def sanitize_time(value: Any, fmt: Optional[str] = None) -> str:
    """Time in fmt (settings.time_format by default), "" if unreadable."""
    fmt = fmt or get_settings().time_format
    parsed = _read_datetime(value, fmt, time.fromisoformat)
    if parsed is None:
        return ""
    if isinstance(parsed, datetime):
        parsed = parsed.time()
    elif isinstance(parsed, date):
        return ""
    return parsed.strftime(fmt)


def sanitize_timezone(value: Any, default: Optional[str] = None) -> str:
    """Registered timezone name, or default (settings.default_timezone)."""
    zone = value.strip() if isinstance(value, str) else ""
    if zone and zone in get_capabilities().timezones():
        return zone
    return default if default is not None else get_settings().default_timezone
