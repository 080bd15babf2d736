"""
Sanitizers for contact-style fields: email, URL, phone, color.
Invalid values become "".
"""
import re
from typing import Any

from sanitize_utils.core.capabilities import get_capabilities

_HEX_COLOR_REGEX = re.compile(r"^#?((?:[0-9a-fA-F]{3}){1,2})$")
_PHONE_DISALLOWED_REGEX = re.compile(r"[^0-9\s\-()]")
_SPACES_REGEX = re.compile(r"\s+")


def sanitize_email(value: Any) -> str:
    """Trimmed address with a lower-case domain, or "" when invalid."""
    capabilities = get_capabilities()
    email = capabilities.normalize_text(value)
    if not capabilities.is_email(email):
        return ""
    local, _, domain = email.rpartition("@")
    return f"{local}@{domain.lower()}"


def sanitize_url(value: Any) -> str:
    """Trimmed URL, or "" when it lacks a scheme or host."""
    capabilities = get_capabilities()
    url = "" if value is None else str(value).strip()
    return url if capabilities.is_url(url) else ""


def sanitize_phone(value: Any) -> str:
    """Digits, spaces, dashes and parentheses, with an optional leading '+'."""
    text = get_capabilities().normalize_text(value)
    international = text.startswith("+")
    text = _PHONE_DISALLOWED_REGEX.sub("", text)
    text = _SPACES_REGEX.sub(" ", text).strip()
    if not text:
        return ""
    return f"+{text}" if international else text


def sanitize_hex_color(value: Any) -> str:
    """'#rgb' or '#rrggbb' in lower case, "" when not a hex color."""
    if not isinstance(value, str):
        return ""
    match = _HEX_COLOR_REGEX.match(value.strip())
    if not match:
        return ""
    return f"#{match.group(1).lower()}"
