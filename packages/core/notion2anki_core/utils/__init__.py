"""Utility functions."""

from notion2anki_core.utils.logging import get_logger, log_exceptions, set_log_level
from notion2anki_core.utils.retry import RateLimitError, with_retry

__all__ = [
    "get_logger",
    "log_exceptions",
    "set_log_level",
    "RateLimitError",
    "with_retry",
]
