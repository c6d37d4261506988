from datetime import datetime

import pytest

from src.time_entry_engine.time_entry_engine.common.datetime_utils import (
    duration_minutes,
    format_minutes_as_time,
    is_holiday,
    is_night,
    is_sunday,
    iter_minutes,
    minutes_to_hours,
    parse_iso_datetime,
)
from src.time_entry_engine.time_entry_engine.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "hour, minute, expected",
    [
        (22, 59, False),
        (23, 0, True),
        (23, 59, True),
        (0, 0, True),
        (5, 59, True),
        (6, 0, False),
        (12, 0, False),
    ],
)
def test_is_night_window(hour, minute, expected):
    assert is_night(datetime(2024, 1, 15, hour, minute)) is expected


def test_is_sunday():
    assert is_sunday(datetime(2024, 1, 14, 12, 0))
    assert not is_sunday(datetime(2024, 1, 15, 0, 0))


def test_is_holiday_is_whole_day():
    holidays = {"2024-12-25"}
    assert is_holiday(datetime(2024, 12, 25, 0, 0), holidays)
    assert is_holiday(datetime(2024, 12, 25, 23, 59), holidays)
    assert not is_holiday(datetime(2024, 12, 26, 0, 0), holidays)


def test_duration_minutes_allows_fractions():
    assert duration_minutes(datetime(2024, 1, 15, 8, 0), datetime(2024, 1, 15, 16, 0)) == 480
    assert duration_minutes(datetime(2024, 1, 15, 8, 0), datetime(2024, 1, 15, 8, 0, 30)) == 0.5


def test_iter_minutes_is_half_open():
    minutes = list(iter_minutes(datetime(2024, 1, 15, 8, 0), datetime(2024, 1, 15, 8, 3)))
    assert minutes == [datetime(2024, 1, 15, 8, m) for m in range(3)]


def test_parse_iso_datetime():
    assert parse_iso_datetime("2024-01-15T08:00") == datetime(2024, 1, 15, 8, 0)
    dt = datetime(2024, 1, 15, 8, 0)
    assert parse_iso_datetime(dt) is dt


@pytest.mark.parametrize("value", ["", "   ", "15.01.2024 08:00", "not a date"])
def test_parse_iso_datetime_rejects_garbage(value):
    with pytest.raises(ValidationError):
        parse_iso_datetime(value)


def test_minutes_to_hours_rounds_to_two_decimals():
    assert minutes_to_hours(450) == 7.5
    assert minutes_to_hours(20) == 0.33
    assert minutes_to_hours(0) == 0


def test_format_minutes_as_time():
    assert format_minutes_as_time(450) == "7:30"
    assert format_minutes_as_time(5) == "0:05"


def test_parse_iso_datetime_converts_offsets_to_local_time():
    parsed = parse_iso_datetime("2024-01-15T23:30+01:00")

    assert parsed.tzinfo is None
    assert parsed == datetime.fromisoformat("2024-01-15T23:30+01:00").astimezone().replace(tzinfo=None)
    assert parsed < parse_iso_datetime("2024-01-16T23:30")
