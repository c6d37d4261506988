from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import AbstractSet, Iterator, Union

from ..core.constants import DAY_FORMAT, ISO_MINUTE_FORMAT, NIGHT_END_HOUR, NIGHT_START_HOUR, SUNDAY_WEEKDAY
from ..core.exceptions import ValidationError

Instant = Union[datetime, str]

ONE_MINUTE = timedelta(minutes=1)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DAY_FORMAT).date()


def to_local_naive(instant: datetime) -> datetime:
    """Wall-clock local time without tzinfo; aware values are converted first."""
    if instant.tzinfo is None:
        return instant
    return instant.astimezone().replace(tzinfo=None)


def parse_iso_datetime(value: Instant) -> datetime:
    """Parse 'YYYY-MM-DDTHH:MM[:SS][+HH:MM]' into a naive local datetime.

    Datetimes are accepted too. Values with an offset are converted to local
    time so night hours and calendar days read the way the shift was worked.
    """
    if isinstance(value, datetime):
        return to_local_naive(value)
    if not value or not str(value).strip():
        raise ValidationError("Zeitpunkt fehlt")
    try:
        parsed = datetime.fromisoformat(str(value).strip())
    except ValueError as e:
        raise ValidationError(f"Ungültiges Datumsformat: {value!r}") from e
    return to_local_naive(parsed)


def to_iso_minute(instant: datetime) -> str:
    return instant.strftime(ISO_MINUTE_FORMAT)


def date_key(instant: datetime) -> str:
    """Local calendar day of an instant as 'YYYY-MM-DD'."""
    return instant.strftime(DAY_FORMAT)


def duration_minutes(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 60


def is_night(instant: datetime) -> bool:
    hour = instant.hour
    return hour >= NIGHT_START_HOUR or hour < NIGHT_END_HOUR


def is_sunday(instant: datetime) -> bool:
    return instant.weekday() == SUNDAY_WEEKDAY


def is_holiday(instant: datetime, holidays: AbstractSet[str]) -> bool:
    """Holidays are whole days; any time of a listed day counts."""
    return date_key(instant) in holidays


def iter_minutes(start: datetime, end: datetime) -> Iterator[datetime]:
    """Yield every minute mark in [start, end)."""
    current = start
    while current < end:
        yield current
        current += ONE_MINUTE


def minutes_to_hours(minutes: float) -> float:
    """Hours rounded to 2 decimals. Presentation boundary only."""
    return round(minutes / 60, 2)


def format_minutes_as_time(minutes: int) -> str:
    """Format minutes as 'H:MM' (e.g. 450 -> '7:30')."""
    minutes = int(minutes)
    return f"{minutes // 60}:{minutes % 60:02d}"
