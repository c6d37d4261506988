"""Example: use the service layer directly (no Flask, no database).

Computes one night shift and then creates a week of entries for two employees
through the batch service with a fake record store.
"""

import asyncio

from src.time_entry_engine.time_entry_engine.batch.report import format_batch_error_report
from src.time_entry_engine.time_entry_engine.time_entries.batch_service import TimeEntryBatchService
from src.time_entry_engine.time_entry_engine.time_entries.model import BuildEntryParams
from src.time_entry_engine.time_entry_engine.time_entries.service import TimeEntryComputer


async def store_entries(employee_name, entries):
    await asyncio.sleep(0.01)
    return len(entries)


def main():
    computer = TimeEntryComputer()
    entry = computer.compute("2025-12-24T22:00", "2025-12-25T08:00", holidays=["2025-12-25"])
    print(entry.to_payload())

    template = BuildEntryParams(name="", role="SIPO", day="2025-12-22", start_time="08:00", end_time="16:30", pause="0,5")
    result = asyncio.run(
        TimeEntryBatchService().create_for_employees(
            ["Max Mustermann", "Erika Musterfrau"],
            ["2025-12-22", "2025-12-23", "2025-12-24"],
            template,
            store_entries,
        )
    )
    print(format_batch_error_report(result))


if __name__ == "__main__":
    main()
