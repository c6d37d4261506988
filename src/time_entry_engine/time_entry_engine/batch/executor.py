from __future__ import annotations

import asyncio
import logging
import random
from typing import Iterable, Optional, Sequence

from ..core.constants import DEFAULT_CONCURRENCY_LIMIT
from ..core.enums import UnitState
from ..core.exceptions import ValidationError
from .model import BatchResult, BatchUnit, ProgressCallback, RetryConfig, UnitOutcome
from .retry import SleepFn, with_retry

logger = logging.getLogger(__name__)


class _Progress:
    def __init__(self, total: int, callback: Optional[ProgressCallback]):
        self.total = total
        self.processed = 0
        self._callback = callback

    def tick(self) -> None:
        self.processed += 1
        if self._callback:
            self._callback(self.processed, self.total)


class BatchExecutor:
    """Runs independent units concurrently; one failing unit never cancels the others.

    The jitter source and the sleep coroutine are injectable so retry timing is
    reproducible in tests.
    """

    def __init__(
        self,
        *,
        retry_config: Optional[RetryConfig] = None,
        rng: Optional[random.Random] = None,
        sleep: Optional[SleepFn] = None,
        default_concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
    ):
        self._config = retry_config or RetryConfig()
        self._rng = rng or random.Random()
        self._sleep = sleep or asyncio.sleep
        self._default_limit = int(default_concurrency_limit)

    async def run_all(
        self,
        units: Iterable[BatchUnit],
        *,
        on_progress: Optional[ProgressCallback] = None,
    ) -> BatchResult:
        """Start every unit at once and wait for all of them to settle."""
        units = list(units)
        progress = _Progress(len(units), on_progress)
        outcomes = await self._settle_all(list(enumerate(units)), progress)
        return self._finish(outcomes)

    async def run_bounded(
        self,
        units: Iterable[BatchUnit],
        concurrency_limit: Optional[int] = None,
        *,
        on_progress: Optional[ProgressCallback] = None,
    ) -> BatchResult:
        """Process units in submission-ordered chunks of concurrency_limit."""
        limit = self._default_limit if concurrency_limit is None else int(concurrency_limit)
        if limit < 1:
            raise ValidationError("concurrency_limit muss mindestens 1 sein")

        units = list(units)
        progress = _Progress(len(units), on_progress)
        outcomes: list[UnitOutcome] = []
        for offset in range(0, len(units), limit):
            chunk = units[offset:offset + limit]
            outcomes.extend(await self._settle_all([(offset + i, u) for i, u in enumerate(chunk)], progress))
        return self._finish(outcomes)

    async def _settle_all(self, indexed_units: Sequence[tuple], progress: _Progress) -> list[UnitOutcome]:
        """Settle units concurrently, reporting progress as each one finishes.

        The progress callback runs here, outside the unit tasks. If it raises,
        the still-running units are cancelled and the error propagates.
        """
        tasks = [asyncio.ensure_future(self._settle(i, u)) for i, u in indexed_units]
        outcomes: list[UnitOutcome] = []
        try:
            for next_done in asyncio.as_completed(tasks):
                outcomes.append(await next_done)
                progress.tick()
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.error("Batch aborted: %s of %s unit(s) settled", len(outcomes), len(tasks))
            raise
        return outcomes

    async def _settle(self, index: int, unit: BatchUnit) -> UnitOutcome:
        state = UnitState.PENDING
        attempts = 0

        def on_transition(new_state: UnitState, attempt: int, error: Optional[BaseException]) -> None:
            nonlocal state, attempts
            logger.debug("Unit %r: %s -> %s (attempt %s)", unit.label, state.value, new_state.value, attempt)
            state = new_state
            attempts = attempt

        try:
            value = await with_retry(
                unit.fn,
                self._config,
                rng=self._rng,
                sleep=self._sleep,
                label=unit.label,
                on_transition=on_transition,
            )
        except Exception as e:
            logger.warning("Unit %r failed after %s attempt(s): %s", unit.label, attempts, e)
            outcome = UnitOutcome(index=index, label=unit.label, state=UnitState.FAILED, error=e, attempts=attempts)
        else:
            outcome = UnitOutcome(index=index, label=unit.label, state=UnitState.SUCCEEDED, value=value, attempts=attempts)

        return outcome

    def _finish(self, outcomes: Sequence[UnitOutcome]) -> BatchResult:
        result = BatchResult.from_outcomes(outcomes)
        if result.success:
            logger.info("Batch finished: %s/%s units succeeded", result.success_count, result.total_processed)
        else:
            logger.warning(
                "Batch finished with errors: %s/%s succeeded, failed=%s",
                result.success_count, result.total_processed, result.failed_labels,
            )
        return result
