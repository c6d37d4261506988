from __future__ import annotations

import math
from dataclasses import replace
from datetime import datetime, time, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import duration_minutes, parse_iso_date, parse_iso_datetime
from ..common.validators import parse_locale_number
from ..core.constants import SUNDAY_WEEKDAY
from .model import BuildEntryParams, EmployeeBatchPayload, TimeEntryRecord
from .service import TimeEntryComputer

HOLIDAY_DAY_FORMAT = "%d.%m.%Y"
END_OF_DAY = time(23, 59, 59)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def prorated_night_minutes(night_minutes: int, work_minutes: int, pause_minutes: float) -> float:
    """Night minutes minus the night share of an unplaced pause."""
    if work_minutes <= 0:
        return float(night_minutes)
    pause_in_night = pause_minutes * night_minutes / work_minutes
    return max(0.0, night_minutes - pause_in_night)


def holiday_hours_until_midnight(start_iso: str) -> float:
    """Hours from the shift start to 23:59:59 of its start day (holiday part of a night shift)."""
    start = parse_iso_datetime(start_iso)
    end_of_day = datetime.combine(start.date(), END_OF_DAY)
    return duration_minutes(start, end_of_day) / 60


class TimeEntryBuilder:
    """Turns form input (day, HH:MM times, pause as "0,5") into stored entries.

    Premium hours come from the same classifier TimeEntryComputer uses. The
    pause is a plain duration here (no position), so it is subtracted from the
    hours and, for the night bonus, prorated over the night share.
    """

    def __init__(self, computer: Optional[TimeEntryComputer] = None):
        self._computer = computer or TimeEntryComputer()

    def build(self, params: BuildEntryParams) -> TimeEntryRecord:
        start_iso = f"{params.day}T{params.start_time}"
        end_day = params.day
        if params.is_multi_day:
            end_day = (parse_iso_date(params.day) + timedelta(days=1)).isoformat()
        end_iso = f"{end_day}T{params.end_time}"

        holidays = (params.day,) if params.is_holiday else ()
        # Raw classification of the whole interval; the pause has no position.
        raw = self._computer.compute(start_iso, end_iso, holidays, manual_breaks=(), override_breaks=True)

        pause_hours = parse_locale_number(params.pause)
        hours = raw.total_duration_minutes / 60 - pause_hours

        holiday_hours = 0
        if params.is_holiday:
            if params.is_multi_day:
                holiday_hours = _round_half_up(holiday_hours_until_midnight(start_iso))
            else:
                holiday_hours = _round_half_up(hours)

        night = prorated_night_minutes(
            raw.premiums.night_minutes, raw.premiums.total_work_minutes, pause_hours * 60
        )

        return TimeEntryRecord(
            entry_id=params.entry_id or f"{params.day}-{params.name}",
            name=params.name,
            role=params.role,
            start=start_iso,
            end=end_iso,
            hours=hours,
            pause=params.pause,
            extra=parse_locale_number(params.extra),
            travel_hours=parse_locale_number(params.travel_hours),
            holiday_hours=holiday_hours,
            sunday=1 if params.is_sunday else 0,
            sunday_hours=raw.premiums.sunday_minutes / 60,
            night_bonus_hours=night / 60,
            remark=params.remark,
        )

    def build_for_days(
        self,
        employee_name: str,
        days: Sequence[str],
        template: BuildEntryParams,
        holiday_days: Iterable[str] = (),
    ) -> list[TimeEntryRecord]:
        """One entry per day; holiday_days use the dd.MM.yyyy form of the UI."""
        holiday_set = set(holiday_days)
        entries = []
        for day in days:
            day_date = parse_iso_date(day)
            entries.append(
                self.build(
                    replace(
                        template,
                        name=employee_name,
                        day=day,
                        is_holiday=day_date.strftime(HOLIDAY_DAY_FORMAT) in holiday_set,
                        is_sunday=template.is_sunday or day_date.weekday() == SUNDAY_WEEKDAY,
                        entry_id=None,
                    )
                )
            )
        return entries

    def prepare_batch_payloads(
        self,
        employees: Sequence[str],
        days: Sequence[str],
        template: BuildEntryParams,
        holiday_days: Iterable[str] = (),
    ) -> list[EmployeeBatchPayload]:
        holiday_days = tuple(holiday_days)
        return [
            EmployeeBatchPayload(
                employee_name=name,
                days=tuple(days),
                entries=tuple(self.build_for_days(name, days, template, holiday_days)),
            )
            for name in employees
        ]
