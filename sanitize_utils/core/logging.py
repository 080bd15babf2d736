"""
Logging setup and the context-filtering SafeLogger.

Values passing through sanitizers can be emails, card numbers or passwords,
so log records carry the sanitizer kind, counts and error codes only.
"""
import logging
import sys
from typing import Any, Optional

from sanitize_utils.core.config import get_settings


def setup_logging() -> None:
    """Configure library logging with the input-safe format.

    The library never calls this on import; embedding applications opt in.
    """
    settings = get_settings()

    # Explicit level wins, otherwise derive from environment
    if settings.log_level:
        log_level = getattr(logging, settings.log_level)
    else:
        log_level = logging.DEBUG if settings.service_env == "dev" else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )


def get_logger(name: str) -> logging.Logger:
    """Get a named logger instance."""
    return logging.getLogger(name)


class SafeLogger:
    """
    Input-safe logger wrapper.
    Only allows logging of safe fields: kind, counts, codes and reasons.
    """

    SAFE_FIELDS = frozenset({
        "kind",
        "capability",
        "error_code",
        "reason",
        "count",
        "missing_count",
        "dropped_count",
        "decimals",
        "exception_class",
    })

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def _format_safe_context(self, context: dict[str, Any]) -> str:
        """Format only safe fields from context."""
        safe_items = []
        for key, value in context.items():
            if key in self.SAFE_FIELDS:
                safe_items.append(f"{key}={value}")
        return " | ".join(safe_items) if safe_items else ""

    def _emit(self, level: int, message: str, context: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        ctx = self._format_safe_context(context)
        full_message = f"{message} | {ctx}" if ctx else message
        self._logger.log(level, full_message)

    def info(self, message: str, **context: Any) -> None:
        """Log info with safe context only."""
        self._emit(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        """Log warning with safe context only."""
        self._emit(logging.WARNING, message, context)

    def error(
        self,
        message: str,
        error_code: Optional[str] = None,
        **context: Any
    ) -> None:
        """
        Log error with safe context only.
        NEVER log exception messages, they may echo the offending input.
        """
        if error_code:
            context["error_code"] = error_code
        self._emit(logging.ERROR, message, context)

    def debug(self, message: str, **context: Any) -> None:
        """Log debug with safe context only."""
        self._emit(logging.DEBUG, message, context)


def get_safe_logger(name: str) -> SafeLogger:
    """Get an input-safe logger instance."""
    return SafeLogger(name)
