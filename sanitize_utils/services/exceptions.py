"""
Custom exceptions for sanitize_utils.
Input-safe: these exceptions never carry the offending value.

Sanitizers and validators do not raise for bad input. These errors signal
programming mistakes at the call site (unknown dispatch kind, broken host
capability object).
"""
from enum import Enum


class SanitizeErrorCode(str, Enum):
    """Input-safe error codes."""
    UNKNOWN_SANITIZER = "UNKNOWN_SANITIZER"
    INVALID_CAPABILITIES = "INVALID_CAPABILITIES"


class SanitizeUtilsError(Exception):
    """
    Base exception for library errors.

    Attributes:
        error_code: Input-safe error code for logging
        message: Input-safe message (no user values)
    """

    def __init__(
        self,
        error_code: SanitizeErrorCode,
        message: str = "Sanitize utils error"
    ):
        self.error_code = error_code
        self.message = message
        super().__init__(message)


class UnknownSanitizerError(SanitizeUtilsError, ValueError):
    """Raised when sanitize_value() is asked for a kind it does not know."""

    def __init__(self, kind: str = "unknown"):
        super().__init__(
            error_code=SanitizeErrorCode.UNKNOWN_SANITIZER,
            message=f"Unknown sanitizer kind: {kind}"
        )


class InvalidCapabilitiesError(SanitizeUtilsError, TypeError):
    """Raised when set_capabilities() receives something that is not HostCapabilities."""

    def __init__(self, received: str = "unknown"):
        super().__init__(
            error_code=SanitizeErrorCode.INVALID_CAPABILITIES,
            message=f"Expected HostCapabilities, got {received}"
        )
