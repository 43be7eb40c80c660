"""Retry utilities for HTTP collaborators."""

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from notion2anki_core.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Default retry configuration
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_MIN_WAIT = 1  # seconds
DEFAULT_MAX_WAIT = 30  # seconds


class RateLimitError(Exception):
    """Raised when an API answers with HTTP 429."""

    def __init__(
        self, message: str = "Rate limit exceeded", retry_after: float | None = None
    ):
        super().__init__(message)
        self.retry_after = retry_after


# Exceptions that should trigger a retry
RETRYABLE_EXCEPTIONS = (
    ConnectionError,
    TimeoutError,
    asyncio.TimeoutError,
    httpx.TransportError,
    RateLimitError,
)


def get_async_retry(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait: float = DEFAULT_MIN_WAIT,
    max_wait: float = DEFAULT_MAX_WAIT,
) -> AsyncRetrying:
    """Create an async retry context manager.

    Args:
        max_attempts: Maximum number of attempts
        min_wait: Minimum wait time in seconds
        max_wait: Maximum wait time in seconds

    Returns:
        AsyncRetrying context manager
    """
    return AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
        reraise=True,
    )


def raise_for_rate_limit(response: httpx.Response) -> None:
    """Turn an HTTP 429 response into a retryable RateLimitError."""
    if response.status_code != 429:
        return
    retry_after: float | None = None
    header = response.headers.get("Retry-After")
    if header:
        try:
            retry_after = float(header)
        except ValueError:
            retry_after = None
    raise RateLimitError(retry_after=retry_after)


def _format_exception(e: Exception) -> str:
    """Format exception for logging, handling nested/empty exceptions."""
    msg = str(e).strip()
    if not msg:
        msg = type(e).__name__

    if e.__cause__:
        cause_msg = str(e.__cause__).strip()
        if cause_msg:
            msg = f"{msg} (caused by: {cause_msg})"

    if isinstance(e, httpx.HTTPStatusError):
        msg = f"HTTP {e.response.status_code}: {msg}"

    return msg or "Unknown error"


async def with_retry(
    func: Callable[..., Any],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait: float = DEFAULT_MIN_WAIT,
    max_wait: float = DEFAULT_MAX_WAIT,
    operation_name: str = "operation",
    **kwargs: Any,
) -> Any:
    """Execute an async function with retry logic.

    Args:
        func: Async function to execute
        *args: Positional arguments for the function
        max_attempts: Maximum number of attempts
        min_wait: Minimum wait between attempts in seconds
        max_wait: Maximum wait between attempts in seconds
        operation_name: Name for logging purposes
        **kwargs: Keyword arguments for the function

    Returns:
        Result of the function

    Raises:
        The last exception if all retries fail
    """
    attempt = 0

    async for attempt_ctx in get_async_retry(
        max_attempts=max_attempts, min_wait=min_wait, max_wait=max_wait
    ):
        with attempt_ctx:
            attempt += 1
            if attempt > 1:
                logger.info(
                    f"Retrying {operation_name} (attempt {attempt}/{max_attempts})"
                )
            try:
                return await func(*args, **kwargs)
            except RETRYABLE_EXCEPTIONS as e:
                logger.warning(
                    f"{operation_name} failed (attempt {attempt}/{max_attempts}): "
                    f"{_format_exception(e)}"
                )
                raise
            except Exception as e:
                logger.error(
                    f"{operation_name} failed with non-retryable error: "
                    f"{_format_exception(e)}"
                )
                raise

    raise RuntimeError(f"{operation_name} failed after {max_attempts} attempts")
