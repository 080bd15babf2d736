"""
Filesystem validators. Any access error reads as False.
"""
import os
from pathlib import Path
from typing import Union

from sanitize_utils.core.logging import get_safe_logger

logger = get_safe_logger(__name__)

PathInput = Union[str, os.PathLike]


def is_readable_file(path: PathInput) -> bool:
    """Existing regular file the current process can read."""
    try:
        return Path(path).is_file() and os.access(path, os.R_OK)
    except (OSError, TypeError, ValueError) as e:
        logger.debug("File check failed", exception_class=type(e).__name__)
        return False


def is_writable_directory(path: PathInput) -> bool:
    """Existing directory the current process can write into."""
    try:
        return Path(path).is_dir() and os.access(path, os.W_OK)
    except (OSError, TypeError, ValueError) as e:
        logger.debug("Directory check failed", exception_class=type(e).__name__)
        return False
