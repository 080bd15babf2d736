"""
List sanitizers.

Deterministic rules:
- Strings are split on a delimiter, sequences (and mapping values) are used as they are
- Items are trimmed and text-normalized, empty items dropped
- Duplicates removed, first occurrence wins
- An optional validator filters what is left

Input-safe: only counts are logged.
"""
from typing import Any, Callable, Iterable, List, Mapping, Optional

from sanitize_utils.core.capabilities import get_capabilities
from sanitize_utils.core.logging import get_safe_logger
from sanitize_utils.services.numbers import to_int

logger = get_safe_logger(__name__)

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _split_items(value: Any, delimiter: str) -> Iterable[Any]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return value.values()
    if isinstance(value, _SEQUENCE_TYPES):
        return value
    # An empty delimiter means the whole string is one item
    if not delimiter:
        return [str(value)]
    return str(value).split(delimiter)


def sanitize_list(
    value: Any,
    validator: Optional[Callable[[str], bool]] = None,
    delimiter: str = "\n",
) -> List[str]:
    """
    Sanitize a list of text items.

    Args:
        value: Delimited string, or a list/tuple/set of items
        validator: Optional predicate; items it rejects are dropped
        delimiter: Separator used when value is a string

    Returns:
        Unique, non-empty, normalized strings in first-occurrence order
    """
    normalize_text = get_capabilities().normalize_text

    seen = set()
    items: List[str] = []
    for raw in _split_items(value, delimiter):
        if raw is None or isinstance(raw, (Mapping,) + _SEQUENCE_TYPES):
            continue
        item = str(raw).strip()
        if not item:
            continue
        item = normalize_text(item)
        if not item or item in seen:
            continue
        seen.add(item)
        items.append(item)

    if validator is None:
        return items

    kept = [item for item in items if validator(item)]
    if len(kept) != len(items):
        logger.debug("List items rejected by validator", dropped_count=len(items) - len(kept))
    return kept


def sanitize_comma_list(value: Any) -> List[str]:
    """Comma separated list ("a, b, c")."""
    return sanitize_list(value, None, ",")


def sanitize_emails(value: Any) -> List[str]:
    """Newline separated (or sequence of) email addresses, invalid ones dropped."""
    return sanitize_list(value, get_capabilities().is_email)


def sanitize_object_ids(values: Any) -> List[int]:
    """
    Unique positive IDs in first-occurrence order.

    Each item is cast to an integer and made absolute; zeros (including
    everything that could not be read) are dropped.
    """
    if values is None:
        return []
    if isinstance(values, Mapping):
        values = list(values.values())
    elif not isinstance(values, _SEQUENCE_TYPES):
        values = [values]

    seen = set()
    ids: List[int] = []
    for raw in values:
        object_id = abs(to_int(raw))
        if object_id <= 0 or object_id in seen:
            continue
        seen.add(object_id)
        ids.append(object_id)
    return ids
