"""Retry Supabase queries that hit the rate limiter."""

import logging
import time
from typing import Callable, Sequence, TypeVar


logger = logging.getLogger(__name__)
T = TypeVar("T")

DEFAULT_DELAYS = (0.5, 1, 2, 4)


def is_rate_limit_error(exc: Exception) -> bool:
    """True for a 429 status attribute or a 'too many requests' message."""
    status = getattr(exc, "status", None) or getattr(exc, "status_code", None) or getattr(exc, "code", None)
    try:
        if status is not None and int(status) == 429:
            return True
    except (TypeError, ValueError):
        pass

    return "too many requests" in str(exc).lower()


def with_supabase_retry(
    fn: Callable[[], T],
    *,
    max_attempts: int = 5,
    delays: Sequence[float] = DEFAULT_DELAYS,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Call `fn`, backing off and retrying while Supabase answers 429

    Any other error, or the last failed attempt, propagates unchanged.
    """
    attempt = 0
    while True:
        try:
            return fn()
        except Exception as exc:  # noqa: BLE001 - need to inspect Supabase errors
            attempt += 1
            if attempt >= max_attempts or not is_rate_limit_error(exc):
                raise

            delay = delays[min(attempt - 1, len(delays) - 1)]
            logger.warning(
                "Supabase rate limited the request (attempt %s/%s), retrying in %.1fs",
                attempt,
                max_attempts,
                delay,
            )
            sleep(delay)
