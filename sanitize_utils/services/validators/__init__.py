"""
Validators module.
Every function is a pure predicate (or violation list) and never raises for bad input.
"""
from sanitize_utils.services.numbers import is_numeric
from sanitize_utils.services.validators.fields import (
    has_length,
    is_in,
    is_required,
    missing_required_fields,
    required_fields,
)
from sanitize_utils.services.validators.filesystem import (
    is_readable_file,
    is_writable_directory,
)
from sanitize_utils.services.validators.formats import (
    is_date,
    is_email,
    is_hex_color,
    is_ip,
    is_json,
    is_phone,
    is_slug,
    is_time,
    is_timezone,
    is_url,
    is_username,
    is_uuid,
)
from sanitize_utils.services.validators.numeric import (
    is_float,
    is_in_range,
    is_integer,
    is_percentage,
    meets_max,
    meets_min,
)
from sanitize_utils.services.validators.security import (
    is_credit_card,
    is_regex,
    is_strong_password,
    matches_pattern,
)

__all__ = [
    "is_numeric",
    "has_length",
    "is_in",
    "is_required",
    "missing_required_fields",
    "required_fields",
    "is_readable_file",
    "is_writable_directory",
    "is_date",
    "is_email",
    "is_hex_color",
    "is_ip",
    "is_json",
    "is_phone",
    "is_slug",
    "is_time",
    "is_timezone",
    "is_url",
    "is_username",
    "is_uuid",
    "is_float",
    "is_in_range",
    "is_integer",
    "is_percentage",
    "meets_max",
    "meets_min",
    "is_credit_card",
    "is_regex",
    "is_strong_password",
    "matches_pattern",
]
