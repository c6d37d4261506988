from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Iterable, Optional, Sequence

from ..batch.executor import BatchExecutor
from ..batch.model import BatchResult, BatchUnit, ProgressCallback
from .builder import TimeEntryBuilder
from .model import BuildEntryParams, EmployeeBatchPayload, TimeEntryRecord

logger = logging.getLogger(__name__)

CreateEntriesFn = Callable[[str, Sequence[TimeEntryRecord]], Awaitable[Any]]


class TimeEntryBatchService:
    """Creates time entries for many employees at once.

    Persisting is up to the caller-supplied create_entries collaborator; this
    service only builds the entries and runs one retryable unit per employee.
    """

    def __init__(
        self,
        *,
        builder: Optional[TimeEntryBuilder] = None,
        executor: Optional[BatchExecutor] = None,
        concurrency_limit: Optional[int] = None,
    ):
        self._builder = builder or TimeEntryBuilder()
        self._executor = executor or BatchExecutor()
        self._concurrency_limit = concurrency_limit

    def units_for(self, payloads: Iterable[EmployeeBatchPayload], create_entries: CreateEntriesFn) -> list[BatchUnit]:
        def make_unit(payload: EmployeeBatchPayload) -> BatchUnit:
            return BatchUnit(
                label=payload.employee_name,
                fn=lambda: create_entries(payload.employee_name, payload.entries),
            )

        return [make_unit(p) for p in payloads]

    async def submit(
        self,
        payloads: Sequence[EmployeeBatchPayload],
        create_entries: CreateEntriesFn,
        *,
        on_progress: Optional[ProgressCallback] = None,
    ) -> BatchResult:
        logger.info("Submitting time entries for %s employee(s)", len(payloads))
        return await self._executor.run_bounded(
            self.units_for(payloads, create_entries),
            self._concurrency_limit,
            on_progress=on_progress,
        )

    async def create_for_employees(
        self,
        employees: Sequence[str],
        days: Sequence[str],
        template: BuildEntryParams,
        create_entries: CreateEntriesFn,
        *,
        holiday_days: Iterable[str] = (),
        on_progress: Optional[ProgressCallback] = None,
    ) -> BatchResult:
        payloads = self._builder.prepare_batch_payloads(employees, days, template, holiday_days)
        return await self.submit(payloads, create_entries, on_progress=on_progress)
