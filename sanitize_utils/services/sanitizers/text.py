"""
Text sanitizers built on the host capabilities.

Rules:
- None becomes "" for every string sanitizer
- Containers are cleaned recursively by sanitize_clean()
- Invalid JSON becomes "" (never an exception)

Input-safe: no logging of field values.
"""
from typing import Any, Iterable, Optional

from sanitize_utils.core.capabilities import get_capabilities
from sanitize_utils.core.logging import get_safe_logger

logger = get_safe_logger(__name__)

# Values read as "on" by sanitize_bool (case-insensitive, after trim)
TRUTHY_VALUES = frozenset({"1", "true", "on", "yes"})

_CONTAINER_TYPES = (list, tuple, dict)


def _empty_like(container: Any) -> Any:
    return {} if isinstance(container, dict) else []


def sanitize_clean(value: Any) -> Any:
    """
    Clean a value with basic text normalization.

    - Strings are normalized
    - Lists/tuples become lists of cleaned items
    - Dicts keep their keys, values are cleaned
    - Other scalars (numbers, bools, None) are returned unchanged

    Containers are walked with an explicit stack, so nesting depth is not
    bounded by the interpreter recursion limit.
    """
    normalize_text = get_capabilities().normalize_text
    if isinstance(value, str):
        return normalize_text(value)
    if not isinstance(value, _CONTAINER_TYPES):
        return value

    root = _empty_like(value)
    pending = [(value, root)]
    while pending:
        source, target = pending.pop()
        items = source.items() if isinstance(source, dict) else enumerate(source)
        for key, item in items:
            if isinstance(item, str):
                cleaned = normalize_text(item)
            elif isinstance(item, _CONTAINER_TYPES):
                cleaned = _empty_like(item)
                pending.append((item, cleaned))
            else:
                cleaned = item

            if isinstance(target, dict):
                target[key] = cleaned
            else:
                target.append(cleaned)
    return root


def sanitize_text(value: Any) -> str:
    """Single-line plain text."""
    return get_capabilities().normalize_text(value)


def sanitize_html(value: Any, allowed_tags: Optional[Iterable[str]] = None) -> str:
    """Markup restricted to an allow-list of tags (settings default when None)."""
    return get_capabilities().sanitize_html(value, allowed_tags)


def sanitize_key(value: Any) -> str:
    return get_capabilities().sanitize_key(value)


def sanitize_slug(value: Any) -> str:
    return get_capabilities().sanitize_slug(value)


def sanitize_username(value: Any) -> str:
    return get_capabilities().sanitize_username(value)


def sanitize_json(value: Any) -> str:
    """
    Re-encode a JSON document with all strings cleaned.

    Returns:
        Compact JSON, or "" when value is not a valid JSON string
    """
    if not isinstance(value, str):
        return ""

    capabilities = get_capabilities()
    try:
        decoded = capabilities.decode_json(value)
    except ValueError:
        logger.debug("Invalid JSON, using empty string", reason="decode_failed")
        return ""

    try:
        return capabilities.encode_json(sanitize_clean(decoded))
    except (ValueError, RecursionError):
        logger.debug("JSON not re-encodable, using empty string", reason="encode_failed")
        return ""


def sanitize_bool(value: Any) -> bool:
    """True for 1/"1"/"true"/"on"/"yes" (any case), False for everything else."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_VALUES
    return False
