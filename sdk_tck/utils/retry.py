"""Fixed-delay retry for reads that lag behind consensus (mirror node ingestion)."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TypeVar
from collections.abc import Awaitable, Callable

from loguru import logger

T = TypeVar("T")


@dataclass(slots=True)
class RetryPolicy:
    """Fixed-delay retry policy; attempts counts the first call."""

    max_retries: int = 100
    retry_delay_seconds: float = 0.2


DEFAULT_POLICY = RetryPolicy()


async def retry_on_error(
    action: Callable[[], Awaitable[T]],
    max_retries: int = DEFAULT_POLICY.max_retries,
    retry_delay: float = DEFAULT_POLICY.retry_delay_seconds,
) -> T:
    """Await ``action`` until it succeeds or ``max_retries`` attempts have failed.

    Any ``Exception`` (assertion failures included) triggers another attempt
    after ``retry_delay`` seconds. The last error is re-raised unchanged.
    ``max_retries`` below 1 still makes one attempt: a check that never ran
    must not count as passed.
    """
    attempts = max(1, max_retries)
    for attempt in range(1, attempts + 1):
        try:
            return await action()
        except Exception as exc:
            if attempt >= attempts:
                raise
            logger.debug("Attempt {}/{} failed: {!r}", attempt, attempts, exc)
            await asyncio.sleep(retry_delay)
    raise AssertionError("unreachable")


async def with_retry(action: Callable[[], Awaitable[T]], policy: RetryPolicy) -> T:
    """Run ``action`` under ``policy``."""
    return await retry_on_error(action, policy.max_retries, policy.retry_delay_seconds)
