"""Bounded retry for transient provider failures.

Only ``ProviderError``s flagged as transient (rate limiting, 5xx, transport
errors without a status) are retried. Everything else, and the last
transient failure, propagates to the caller unchanged.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from ainotes.ai.schemas import ProviderError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def with_retry(
    call: Callable[[], Awaitable[T]],
    *,
    attempts: int = 2,
    base_delay: float = 0.5,
) -> T:
    """Await ``call()`` up to *attempts* times with exponential backoff.

    Args:
        call: Zero-argument coroutine factory; invoked once per attempt.
        attempts: Total number of attempts. Values below 1 behave as 1.
        base_delay: Delay before the second attempt; doubles each retry.

    Returns:
        Whatever ``call()`` returns on the first successful attempt.

    Raises:
        ProviderError: The last error, once attempts are exhausted or the
            error is not transient.
    """
    attempts = max(1, attempts)
    for attempt in range(1, attempts + 1):
        try:
            return await call()
        except ProviderError as exc:
            if not exc.is_transient or attempt == attempts:
                raise
            delay = base_delay * (2 ** (attempt - 1))
            logger.warning(
                "Transient provider error (attempt %d/%d), retrying in %.2fs: %s",
                attempt,
                attempts,
                delay,
                exc,
            )
            await asyncio.sleep(delay)
    raise AssertionError("unreachable")  # pragma: no cover
