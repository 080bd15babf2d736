"""
sanitize_utils

Stateless helpers that sanitize and validate form-style input values:
strings, numbers, amounts, emails, dates, IDs, colors, phone numbers.

    from sanitize_utils import sanitize, validate

    sanitize.sanitize_amount("$1,234.5")        # "1234.50"
    validate.is_credit_card("4532015112830366")  # True
"""
from sanitize_utils.core.capabilities import (
    HostCapabilities,
    get_capabilities,
    reset_capabilities,
    set_capabilities,
)
from sanitize_utils.schemas.amount import AmountConfig
from sanitize_utils.services import sanitizers as sanitize
from sanitize_utils.services import validators as validate

__all__ = [
    "__version__",
    "AmountConfig",
    "HostCapabilities",
    "get_capabilities",
    "reset_capabilities",
    "set_capabilities",
    "sanitize",
    "validate",
]
__version__ = "0.1.0"
