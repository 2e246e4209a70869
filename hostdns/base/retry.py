"""
Retry utilities with linear backoff.

The backoff policy is a pure function of the attempt number so it can be
tested on its own; :func:`retry_linear` drives a callable with it.
"""

from __future__ import annotations

import time
import logging
from typing import Callable, TypeVar

from hostdns.base.exceptions import DNSError, ZoneResolutionError

logger = logging.getLogger("hostdns")

T = TypeVar("T")

# Provider failures; DNS clients wrap transport and API errors into DNSError.
_DEFAULT_RETRYABLE: tuple[type[BaseException], ...] = (DNSError,)


def linear_backoff(attempt: int, step: float = 2.0, max_steps: int = 4) -> float | None:
    """Return the sleep before *attempt*, or ``None`` once the policy is spent.

    Args:
        attempt: Zero-based attempt number.
        step: Seconds added per attempt.
        max_steps: Last attempt number that is still allowed.

    Returns:
        ``attempt * step`` while ``attempt <= max_steps``, else ``None``.
        With the defaults: 0, 2, 4, 6, 8, then ``None``.
    """
    if attempt < 0:
        raise ValueError(f"attempt must be non-negative, got {attempt}")
    if attempt > max_steps:
        return None
    return attempt * step


def retry_linear(
    fn: Callable[[], T],
    *,
    step: float = 2.0,
    max_steps: int = 4,
    retryable_exceptions: tuple[type[BaseException], ...] | None = None,
    sleep: Callable[[float], None] = time.sleep,
    description: str | None = None,
) -> T:
    """Call *fn* until it succeeds or the linear backoff policy is exhausted.

    Each attempt is preceded by the delay :func:`linear_backoff` yields for
    it, so the defaults make at most 5 calls with sleeps 0, 2, 4, 6, 8.

    Args:
        fn: Zero-argument callable to invoke.
        step: Backoff increment in seconds.
        max_steps: Highest attempt number allowed.
        retryable_exceptions: Exception types that trigger another attempt.
            Defaults to :class:`DNSError`.
        sleep: Sleep function, injectable for tests.
        description: Name used in log lines, defaults to ``fn.__qualname__``.

    Returns:
        Whatever *fn* returns on its first successful call.

    Raises:
        ZoneResolutionError: When every allowed attempt failed; chained from
            the last error.
    """
    if retryable_exceptions is None:
        retryable_exceptions = _DEFAULT_RETRYABLE
    name = description or getattr(fn, "__qualname__", repr(fn))

    attempt = 0
    last_exc: BaseException | None = None
    while True:
        delay = linear_backoff(attempt, step, max_steps)
        if delay is None:
            logger.error("All %d attempts failed for %s: %s", attempt, name, last_exc)
            raise ZoneResolutionError(
                f"{name} failed after {attempt} attempts: {last_exc}"
            ) from last_exc
        sleep(delay)
        try:
            return fn()
        except retryable_exceptions as exc:
            last_exc = exc
            logger.warning(
                "Attempt %d/%d for %s failed (%s)",
                attempt + 1,
                max_steps + 1,
                name,
                exc,
            )
        attempt += 1
