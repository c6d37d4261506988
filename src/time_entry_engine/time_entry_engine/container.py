from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .batch.executor import BatchExecutor
from .batch.model import RetryConfig
from .core.constants import DEFAULT_CONCURRENCY_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.service import HolidayService
from .time_entries.batch_service import TimeEntryBatchService
from .time_entries.builder import TimeEntryBuilder
from .time_entries.service import TimeEntryComputer


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    holidays_repo: MySQLHolidayRepository

    holiday_service: HolidayService
    time_entry_computer: TimeEntryComputer
    time_entry_builder: TimeEntryBuilder
    batch_executor: BatchExecutor
    time_entry_batch_service: TimeEntryBatchService


def build_container(*, db_config: dict, settings: Optional[ModuleType] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    holidays_repo = MySQLHolidayRepository(conn)
    holiday_service = HolidayService(holidays_repo)

    concurrency_limit = int(getattr(settings, "BATCH_CONCURRENCY_LIMIT", DEFAULT_CONCURRENCY_LIMIT))
    time_entry_computer = TimeEntryComputer()
    time_entry_builder = TimeEntryBuilder(time_entry_computer)
    batch_executor = BatchExecutor(
        retry_config=RetryConfig.from_settings(settings),
        default_concurrency_limit=concurrency_limit,
    )
    time_entry_batch_service = TimeEntryBatchService(
        builder=time_entry_builder,
        executor=batch_executor,
        concurrency_limit=concurrency_limit,
    )

    return Container(
        conn=conn,
        holidays_repo=holidays_repo,
        holiday_service=holiday_service,
        time_entry_computer=time_entry_computer,
        time_entry_builder=time_entry_builder,
        batch_executor=batch_executor,
        time_entry_batch_service=time_entry_batch_service,
    )
