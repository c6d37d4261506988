from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..breaks.model import BreakSegment
from ..common.datetime_utils import minutes_to_hours
from ..premiums.model import ComputedPremiums


@dataclass(frozen=True)
class ComputedTimeEntry:
    """Result of computing one shift: breaks, paid time and premium buckets."""

    start_iso: str
    end_iso: str
    total_duration_minutes: float
    paid_duration_minutes: float
    break_segments: tuple[BreakSegment, ...]
    break_total_minutes: float
    premiums: ComputedPremiums
    override_breaks: bool = False

    def to_payload(self, *, holidays: Optional[list[str]] = None) -> dict:
        """camelCase payload with hour duals, as returned by the calculate endpoint."""
        p = self.premiums
        payload = {
            "startISO": self.start_iso,
            "endISO": self.end_iso,
            "totalDurationMinutes": self.total_duration_minutes,
            "totalDurationHours": minutes_to_hours(self.total_duration_minutes),
            "paidDurationMinutes": self.paid_duration_minutes,
            "paidDurationHours": minutes_to_hours(self.paid_duration_minutes),
            "breakSegments": [s.to_dict() for s in self.break_segments],
            "breakTotalMinutes": self.break_total_minutes,
            "overrideBreaks": self.override_breaks,
            "premiums": {
                "nightMinutes": p.night_minutes,
                "nightHours": minutes_to_hours(p.night_minutes),
                "sundayMinutes": p.sunday_minutes,
                "sundayHours": minutes_to_hours(p.sunday_minutes),
                "holidayMinutes": p.holiday_minutes,
                "holidayHours": minutes_to_hours(p.holiday_minutes),
                "nightHolidayMinutes": p.night_holiday_minutes,
                "nightHolidayHours": minutes_to_hours(p.night_holiday_minutes),
                "sundayHolidayMinutes": p.sunday_holiday_minutes,
                "sundayHolidayHours": minutes_to_hours(p.sunday_holiday_minutes),
                "normalMinutes": p.normal_minutes,
                "normalHours": minutes_to_hours(p.normal_minutes),
                "totalWorkMinutes": p.total_work_minutes,
                "totalWorkHours": minutes_to_hours(p.total_work_minutes),
            },
        }
        if holidays is not None:
            payload["holidays"] = list(holidays)
        return payload


@dataclass(frozen=True)
class BuildEntryParams:
    """Form input for one employee and one day."""

    name: str
    role: str
    day: str  # YYYY-MM-DD
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    pause: str = "0"
    extra: str = "0"
    travel_hours: str = "0"
    remark: str = ""
    is_multi_day: bool = False
    is_holiday: bool = False
    is_sunday: bool = False
    entry_id: Optional[str] = None


@dataclass(frozen=True)
class TimeEntryRecord:
    """Time entry as stored per employee and day (hours, not minutes)."""

    entry_id: str
    name: str
    role: str
    start: str
    end: str
    hours: float
    pause: str
    extra: float
    travel_hours: float
    holiday_hours: float
    sunday: int
    sunday_hours: float
    night_bonus_hours: float
    remark: str = ""


@dataclass(frozen=True)
class EmployeeBatchPayload:
    employee_name: str
    days: tuple[str, ...]
    entries: tuple[TimeEntryRecord, ...] = field(default_factory=tuple)
