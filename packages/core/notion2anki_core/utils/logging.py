"""Logging for the core package.

Every core logger is a child of the ``notion2anki_core`` logger, which owns
the one stdout handler. ``NOTION2ANKI_LOG_LEVEL`` sets the starting level and
the runner changes it at startup with :func:`set_log_level`.
"""

import inspect
import logging
import os
import sys
from functools import wraps
from typing import Any, Callable, TypeVar

PACKAGE_LOGGER = "notion2anki_core"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

F = TypeVar("F", bound=Callable[..., Any])


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
        level = os.environ.get("NOTION2ANKI_LOG_LEVEL", "INFO").upper()
        logger.setLevel(getattr(logging, level, logging.INFO))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger that inherits the package handler and level
    """
    package = _package_logger()
    if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        return logging.getLogger(name)
    return package.getChild(name)


def set_log_level(level: str | int) -> None:
    """Set the level for all core loggers.

    Args:
        level: Level name such as ``"DEBUG"`` or a ``logging`` constant
    """
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {level}")
        level = value
    _package_logger().setLevel(level)


def log_exceptions(logger: logging.Logger) -> Callable[[F], F]:
    """Log an exception escaping a coroutine function, then re-raise it.

    Args:
        logger: Logger to use for exception logging

    Returns:
        Decorator
    """

    def decorator(func: F) -> F:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"{func.__name__} is not a coroutine function")

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.exception(f"{func.__name__} aborted: {e}")
                raise

        return wrapper  # type: ignore

    return decorator
