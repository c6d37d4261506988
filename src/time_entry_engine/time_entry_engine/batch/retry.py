from __future__ import annotations

import asyncio
import inspect
import logging
import random
from typing import Awaitable, Callable, Optional, TypeVar

from ..core.constants import JITTER_RATIO
from ..core.enums import UnitState
from ..core.exceptions import PermanentError, TransientIOError, ValidationError
from .model import RetryConfig, UnitFn

logger = logging.getLogger(__name__)

T = TypeVar("T")

SleepFn = Callable[[float], Awaitable[None]]
TransitionFn = Callable[[UnitState, int, Optional[BaseException]], None]

RETRYABLE_MARKERS = (
    "network",
    "fetch",
    "timeout",
    "timed out",
    "econnreset",
    "econnrefused",
    "socket",
    "connection",
    "500",
    "502",
    "503",
    "504",
)


def is_retryable_error(error: BaseException) -> bool:
    """Transient network/timeout/connection/5xx failures are retryable; everything else is not."""
    if isinstance(error, (PermanentError, ValidationError)):
        return False
    if isinstance(error, (TransientIOError, TimeoutError, asyncio.TimeoutError, ConnectionError)):
        return True
    message = str(error).lower()
    return any(marker in message for marker in RETRYABLE_MARKERS)


def backoff_delay(attempt: int, config: RetryConfig, rng: random.Random) -> float:
    """min(max_delay, base * 2**attempt + jitter) with jitter in [0, 30%) of the exponential term."""
    exponential = config.base_delay * (2 ** attempt)
    jitter = rng.random() * JITTER_RATIO * exponential
    return min(exponential + jitter, config.max_delay)


async def with_retry(
    fn: UnitFn,
    config: RetryConfig,
    *,
    rng: Optional[random.Random] = None,
    sleep: Optional[SleepFn] = None,
    label: str = "",
    on_transition: Optional[TransitionFn] = None,
):
    """Run fn, retrying retryable failures with exponential backoff.

    Makes at most 1 + config.max_retries attempts. Non-retryable errors and the
    error of the last attempt propagate unchanged.
    """
    rng = rng or random.Random()
    sleep = sleep or asyncio.sleep

    def transition(state: UnitState, attempt: int, error: Optional[BaseException] = None) -> None:
        if on_transition:
            on_transition(state, attempt, error)

    attempt = 0
    while True:
        transition(UnitState.RUNNING, attempt + 1)
        try:
            result = fn()
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            if attempt >= config.max_retries or not is_retryable_error(e):
                transition(UnitState.FAILED, attempt + 1, e)
                raise

            delay = backoff_delay(attempt, config, rng)
            transition(UnitState.RETRY_SCHEDULED, attempt + 1, e)
            logger.warning(
                "Unit %r failed (attempt %s/%s): %s; retrying in %.2fs",
                label, attempt + 1, config.max_retries + 1, e, delay,
            )
            await sleep(delay)
            attempt += 1
            continue

        transition(UnitState.SUCCEEDED, attempt + 1)
        return result
