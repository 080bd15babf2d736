"""
Amount / price normalization.

Deterministic rules:
- Thousands separator removed, decimal separator turned into '.'
- Everything except digits, '.' and '-' stripped
- Longest leading numeric prefix parsed, unreadable residue is 0
- Negative amounts optionally folded to their absolute value
- Fixed number of decimals, half away from zero, no thousands grouping

Input-safe: amounts are never logged.
"""
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Mapping, Optional, Union

from sanitize_utils.core.logging import get_safe_logger
from sanitize_utils.schemas.amount import AmountConfig
from sanitize_utils.services.numbers import to_decimal

logger = get_safe_logger(__name__)

_AMOUNT_DISALLOWED_REGEX = re.compile(r"[^0-9.\-]")

# Digits before the point beyond which an amount is treated as unreadable
MAX_AMOUNT_DIGITS = 400

ConfigInput = Optional[Union[AmountConfig, Mapping[str, Any]]]


def _raw_to_decimal(raw: Any, config: AmountConfig) -> Decimal:
    """Read a raw amount into a Decimal following the config separators."""
    if isinstance(raw, (bool, int, float, Decimal)):
        return to_decimal(raw)

    # Containers and other objects carry no amount
    if not isinstance(raw, str):
        return Decimal(0)

    text = raw
    if config.thousands_separator:
        text = text.replace(config.thousands_separator, "")
    if config.decimal_separator != ".":
        text = text.replace(config.decimal_separator, ".")
    text = _AMOUNT_DISALLOWED_REGEX.sub("", text)

    return to_decimal(text)


def _format_decimal(amount: Decimal, decimals: int) -> str:
    """Fixed-point formatting, half away from zero, never '-0'."""
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = max(28, amount.adjusted() + decimals + 2)
        rounded = amount.quantize(exponent, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:f}"


def normalize_amount(raw: Any, config: ConfigInput = None) -> str:
    """
    Normalize an amount to a plain decimal string.

    Args:
        raw: String or number as typed by a user ("$1,234.50", "1.234,5", 12.3)
        config: AmountConfig, mapping of overrides, or None for the defaults

    Returns:
        "-?digits.decimals" string, "0.00" for unreadable input (2 decimals)

    Raises:
        pydantic.ValidationError: only for an invalid config
    """
    resolved = AmountConfig.resolve(config)
    amount = _raw_to_decimal(raw, resolved)

    if amount.adjusted() > MAX_AMOUNT_DIGITS:
        logger.debug("Amount out of range, using zero", reason="too_many_digits")
        amount = Decimal(0)

    if not resolved.allow_negative:
        amount = abs(amount)

    return _format_decimal(amount, resolved.decimals)


def sanitize_amount(raw: Any, config: ConfigInput = None) -> str:
    """Sanitizer entry point for amounts, see normalize_amount()."""
    return normalize_amount(raw, config)
