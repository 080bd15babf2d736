"""
Sanitizer dispatch by kind.

Each SanitizerKind maps to exactly one sanitizer function; extra
parameters (bounds, allowed options, formats) are passed through.
"""
from enum import Enum
from typing import Any, Callable, Dict, Union

from sanitize_utils.core.logging import get_safe_logger
from sanitize_utils.services.exceptions import UnknownSanitizerError
from sanitize_utils.services.sanitizers.amount import sanitize_amount
from sanitize_utils.services.sanitizers.contact import (
    sanitize_email,
    sanitize_hex_color,
    sanitize_phone,
    sanitize_url,
)
from sanitize_utils.services.sanitizers.dates import (
    sanitize_date,
    sanitize_time,
    sanitize_timezone,
)
from sanitize_utils.services.sanitizers.lists import (
    sanitize_comma_list,
    sanitize_emails,
    sanitize_list,
    sanitize_object_ids,
)
from sanitize_utils.services.sanitizers.numeric import (
    sanitize_absint,
    sanitize_float,
    sanitize_int,
    sanitize_int_range,
    sanitize_percentage,
    sanitize_range,
    sanitize_rating,
)
from sanitize_utils.services.sanitizers.options import (
    sanitize_discount_type,
    sanitize_option,
    sanitize_status,
)
from sanitize_utils.services.sanitizers.text import (
    sanitize_bool,
    sanitize_clean,
    sanitize_html,
    sanitize_json,
    sanitize_key,
    sanitize_slug,
    sanitize_text,
    sanitize_username,
)

logger = get_safe_logger(__name__)


class SanitizerKind(str, Enum):
    """Every sanitizer reachable through sanitize_value()."""
    CLEAN = "clean"
    TEXT = "text"
    HTML = "html"
    KEY = "key"
    SLUG = "slug"
    USERNAME = "username"
    JSON = "json"
    BOOL = "bool"
    EMAIL = "email"
    URL = "url"
    PHONE = "phone"
    HEX_COLOR = "hex_color"
    DATE = "date"
    TIME = "time"
    TIMEZONE = "timezone"
    AMOUNT = "amount"
    RANGE = "range"
    INT_RANGE = "int_range"
    RATING = "rating"
    PERCENTAGE = "percentage"
    ABSINT = "absint"
    INT = "int"
    FLOAT = "float"
    LIST = "list"
    COMMA_LIST = "comma_list"
    EMAILS = "emails"
    OBJECT_IDS = "object_ids"
    OPTION = "option"
    STATUS = "status"
    DISCOUNT_TYPE = "discount_type"


SANITIZERS: Dict[SanitizerKind, Callable[..., Any]] = {
    SanitizerKind.CLEAN: sanitize_clean,
    SanitizerKind.TEXT: sanitize_text,
    SanitizerKind.HTML: sanitize_html,
    SanitizerKind.KEY: sanitize_key,
    SanitizerKind.SLUG: sanitize_slug,
    SanitizerKind.USERNAME: sanitize_username,
    SanitizerKind.JSON: sanitize_json,
    SanitizerKind.BOOL: sanitize_bool,
    SanitizerKind.EMAIL: sanitize_email,
    SanitizerKind.URL: sanitize_url,
    SanitizerKind.PHONE: sanitize_phone,
    SanitizerKind.HEX_COLOR: sanitize_hex_color,
    SanitizerKind.DATE: sanitize_date,
    SanitizerKind.TIME: sanitize_time,
    SanitizerKind.TIMEZONE: sanitize_timezone,
    SanitizerKind.AMOUNT: sanitize_amount,
    SanitizerKind.RANGE: sanitize_range,
    SanitizerKind.INT_RANGE: sanitize_int_range,
    SanitizerKind.RATING: sanitize_rating,
    SanitizerKind.PERCENTAGE: sanitize_percentage,
    SanitizerKind.ABSINT: sanitize_absint,
    SanitizerKind.INT: sanitize_int,
    SanitizerKind.FLOAT: sanitize_float,
    SanitizerKind.LIST: sanitize_list,
    SanitizerKind.COMMA_LIST: sanitize_comma_list,
    SanitizerKind.EMAILS: sanitize_emails,
    SanitizerKind.OBJECT_IDS: sanitize_object_ids,
    SanitizerKind.OPTION: sanitize_option,
    SanitizerKind.STATUS: sanitize_status,
    SanitizerKind.DISCOUNT_TYPE: sanitize_discount_type,
}


def sanitize_value(value: Any, kind: Union[SanitizerKind, str], **params: Any) -> Any:
    """
    Sanitize value with the sanitizer registered for kind.

    Args:
        value: Raw value
        kind: SanitizerKind member or its string value ("email", "range", ...)
        **params: Extra arguments for the sanitizer (min_value, allowed, fmt, ...)

    Raises:
        UnknownSanitizerError: if kind is not a SanitizerKind
    """
    try:
        resolved = SanitizerKind(kind)
    except ValueError:
        logger.error("Unknown sanitizer kind", error_code="UNKNOWN_SANITIZER")
        raise UnknownSanitizerError(str(kind)) from None

    return SANITIZERS[resolved](value, **params)
