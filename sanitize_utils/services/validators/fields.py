"""
Presence, membership and length validators.
"""
from typing import Any, Collection, Hashable, List, Mapping, Sequence

from sanitize_utils.core.logging import get_safe_logger

logger = get_safe_logger(__name__)


def is_required(value: Any) -> bool:
    """
    True when value counts as provided.

    - Strings must be non-empty after trimming
    - Collections must be non-empty
    - Other values must be truthy, except the integer 0 which is
      meaningful data and counts as provided (False and 0.0 do not)
    """
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) > 0
    if isinstance(value, int) and not isinstance(value, bool) and value == 0:
        return True
    return bool(value)


def missing_required_fields(
    data: Mapping[Hashable, Any],
    required: Sequence[Hashable],
) -> List[Hashable]:
    """
    Fields from required that are absent, None or empty in data.

    Returns:
        Missing field names in the order of required (empty when all present)
    """
    missing = []
    for field in required:
        if field not in data or data[field] is None or not is_required(data[field]):
            missing.append(field)

    if missing:
        logger.debug("Required fields missing", missing_count=len(missing))
    return missing


required_fields = missing_required_fields


def is_in(value: Any, options: Collection[Any], strict: bool = True) -> bool:
    """
    Membership check.

    strict compares type and value (1 does not match True or "1");
    loose compares the string forms as well.
    """
    if strict:
        return any(type(option) is type(value) and option == value for option in options)
    text = str(value)
    return any(option == value or str(option) == text for option in options)


def has_length(value: str, max_length: int, min_length: int = 0) -> bool:
    """Character length within [min_length, max_length]."""
    if not isinstance(value, str):
        return False
    return min_length <= len(value) <= max_length
