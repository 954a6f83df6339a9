"""
Bounded polling utilities for environment readiness.
"""

import logging
import time
from collections.abc import Callable
from typing import Any

from arkenv.errors import BootstrapError, ReadinessTimeoutError

logger = logging.getLogger("wait")


def poll_until_ready(
    check: Callable[[], Any],
    max_retries: int = 30,
    retry_delay: float = 2.0,
    description: str = "service",
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Poll `check` until it returns a truth value, at most `max_retries` times.

    A falsy return or a raised exception counts as a failed attempt, except
    for a `BootstrapError`, which is fatal and propagates immediately. Failed
    attempts are followed by a sleep of exactly `retry_delay` seconds, except
    the last one, so a check passing on attempt k costs k-1 delays.

    Args:
        check: Readiness predicate
        max_retries: Number of attempts before giving up
        retry_delay: Constant delay between attempts in seconds
        description: What is being waited on, used in logs and the error
        sleep: Sleep function, injectable for tests

    Raises:
        ReadinessTimeoutError: If no attempt succeeds, chained from the last
            attempt's exception when it raised one
        BootstrapError: If `check` raises one
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    logger.info(f"Waiting for {description} to be ready...")
    last_exc: Exception | None = None
    for attempt in range(1, max_retries + 1):
        last_exc = None
        try:
            if check():
                logger.info(f"{description} is ready")
                return
        except BootstrapError:
            raise
        except Exception as e:
            last_exc = e
            ety = type(e)
            logger.warning(f"caught exception {ety}, will still wait for {description}: {e}")

        logger.info(f"Waiting for {description} to be ready ({attempt}/{max_retries})...")
        if attempt < max_retries:
            sleep(retry_delay)

    raise ReadinessTimeoutError(description, max_retries) from last_exc
