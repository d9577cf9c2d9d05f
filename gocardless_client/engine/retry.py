"""
Exponential backoff retry logic for API calls.

Only failures that leave the server state unknown or unchanged are retried:
transport errors (connection reset, timeout) and 5xx `gocardless` errors.
Everything else (validation failures, invalid state, bad auth) is raised
on the first attempt. Callers decide whether a request is safe to repeat
at all; see GoCardlessClient.execute.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

import httpx

from gocardless_client.errors import ApiConnectionError, ApiError

logger = logging.getLogger("gocardless_client.retry")

T = TypeVar("T")

MAX_RETRIES = 3
BASE_DELAY = 0.5
MAX_DELAY = 5.0


def _is_retriable(error: Exception) -> bool:
    if isinstance(error, httpx.TransportError):
        return True
    return isinstance(error, ApiError) and error.retriable


async def with_retry(
    func: Callable[[], Awaitable[T]],
    *,
    max_retries: int = MAX_RETRIES,
    base_delay: float = BASE_DELAY,
    max_delay: float = MAX_DELAY,
) -> T:
    """
    Await `func` with exponential backoff on retriable errors.

    Args:
        func: Zero-argument async callable performing one attempt.
        max_retries: Retries after the first attempt (0 disables retrying).
        base_delay: Seconds to wait before the first retry.
        max_delay: Upper bound on any single wait.

    Returns:
        The result of the first successful attempt.

    Raises:
        ApiConnectionError: Transport failures outlived every retry.
        ApiError: On a non-retriable API error, or the last retriable one.
    """
    delay = base_delay

    for attempt in range(max_retries + 1):
        try:
            return await func()
        except (httpx.TransportError, ApiError) as e:
            if not _is_retriable(e):
                raise

            if attempt >= max_retries:
                logger.error("Exhausted %d retries for API call: %s", max_retries, e)
                if isinstance(e, httpx.TransportError):
                    raise ApiConnectionError(f"Could not reach the API: {e}") from e
                raise

            sleep_for = min(delay, max_delay)
            logger.warning(
                "Retriable error on attempt %d/%d: %s - sleeping %.1fs",
                attempt + 1,
                max_retries + 1,
                str(e) or type(e).__name__,
                sleep_for,
            )
            await asyncio.sleep(sleep_for)
            delay = min(delay * 2, max_delay)

    raise ApiConnectionError("Unknown error after retries")
