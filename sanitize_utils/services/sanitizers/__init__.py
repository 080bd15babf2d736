"""
Sanitizers module.
Every function returns a value of a fixed type and never raises for bad input.
"""
from sanitize_utils.services.sanitizers.amount import (
    normalize_amount,
    sanitize_amount,
)
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
    sanitize_int_range_default_zero,
    sanitize_percentage,
    sanitize_range,
    sanitize_range_clamp_to_min,
    sanitize_range_default_zero,
    sanitize_rating,
)
from sanitize_utils.services.sanitizers.options import (
    DISCOUNT_TYPE_OPTIONS,
    STATUS_OPTIONS,
    option_sanitizer,
    sanitize_discount_type,
    sanitize_option,
    sanitize_status,
)
from sanitize_utils.services.sanitizers.registry import (
    SANITIZERS,
    SanitizerKind,
    sanitize_value,
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

__all__ = [
    "normalize_amount",
    "sanitize_amount",
    "sanitize_email",
    "sanitize_hex_color",
    "sanitize_phone",
    "sanitize_url",
    "sanitize_date",
    "sanitize_time",
    "sanitize_timezone",
    "sanitize_comma_list",
    "sanitize_emails",
    "sanitize_list",
    "sanitize_object_ids",
    "sanitize_absint",
    "sanitize_float",
    "sanitize_int",
    "sanitize_int_range",
    "sanitize_int_range_default_zero",
    "sanitize_percentage",
    "sanitize_range",
    "sanitize_range_clamp_to_min",
    "sanitize_range_default_zero",
    "sanitize_rating",
    "DISCOUNT_TYPE_OPTIONS",
    "STATUS_OPTIONS",
    "option_sanitizer",
    "sanitize_discount_type",
    "sanitize_option",
    "sanitize_status",
    "SANITIZERS",
    "SanitizerKind",
    "sanitize_value",
    "sanitize_bool",
    "sanitize_clean",
    "sanitize_html",
    "sanitize_json",
    "sanitize_key",
    "sanitize_slug",
    "sanitize_text",
    "sanitize_username",
]
