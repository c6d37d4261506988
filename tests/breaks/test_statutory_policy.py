from datetime import datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.time_entry_engine.time_entry_engine.breaks.model import BreakSegment
from src.time_entry_engine.time_entry_engine.breaks.policy.base import break_total_minutes
from src.time_entry_engine.time_entry_engine.breaks.policy.statutory_policy import StatutoryBreakPolicy
from src.time_entry_engine.time_entry_engine.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "work_minutes, required",
    [
        (0, 0),
        (300, 0),
        (301, 30),
        (480, 30),
        (540, 30),
        (541, 45),
        (600, 45),
        (601, 60),
        (900, 60),
    ],
)
def test_required_break_boundaries(work_minutes, required):
    assert StatutoryBreakPolicy().required_break_minutes(work_minutes) == required


def test_fractional_minutes_just_above_boundary_need_break():
    assert StatutoryBreakPolicy().required_break_minutes(300.5) == 30


@given(st.integers(min_value=0, max_value=300))
def test_short_shifts_get_no_break(work_minutes):
    policy = StatutoryBreakPolicy()
    start = datetime(2024, 1, 15, 8, 0)
    required = policy.required_break_minutes(work_minutes)
    assert required == 0
    assert policy.layout_break_segments(start, start, required) == []


def test_layout_uses_fixed_offsets():
    policy = StatutoryBreakPolicy()
    start = datetime(2024, 1, 15, 6, 0)
    end = datetime(2024, 1, 15, 18, 0)

    assert policy.layout_break_segments(start, end, 30) == [
        BreakSegment(datetime(2024, 1, 15, 11, 0), datetime(2024, 1, 15, 11, 30)),
    ]
    assert policy.layout_break_segments(start, end, 45) == [
        BreakSegment(datetime(2024, 1, 15, 11, 0), datetime(2024, 1, 15, 11, 30)),
        BreakSegment(datetime(2024, 1, 15, 15, 30), datetime(2024, 1, 15, 15, 45)),
    ]
    assert policy.layout_break_segments(start, end, 60) == [
        BreakSegment(datetime(2024, 1, 15, 11, 0), datetime(2024, 1, 15, 11, 30)),
        BreakSegment(datetime(2024, 1, 15, 15, 30), datetime(2024, 1, 15, 15, 45)),
        BreakSegment(datetime(2024, 1, 15, 16, 15), datetime(2024, 1, 15, 16, 30)),
    ]


def test_layout_does_not_scale_with_shift_length():
    policy = StatutoryBreakPolicy()
    start = datetime(2024, 1, 15, 8, 0)
    short = policy.layout_break_segments(start, datetime(2024, 1, 15, 14, 0), 30)
    long = policy.layout_break_segments(start, datetime(2024, 1, 15, 17, 0), 30)
    assert short == long


def test_break_total_minutes_sums_segments():
    segments = [
        BreakSegment(datetime(2024, 1, 15, 11, 0), datetime(2024, 1, 15, 11, 30)),
        BreakSegment(datetime(2024, 1, 15, 15, 30), datetime(2024, 1, 15, 15, 45)),
    ]
    assert break_total_minutes(segments) == 45
    assert break_total_minutes([]) == 0


def test_segment_contains_is_half_open():
    seg = BreakSegment(datetime(2024, 1, 15, 12, 0), datetime(2024, 1, 15, 12, 30))
    assert seg.contains(datetime(2024, 1, 15, 12, 0))
    assert seg.contains(datetime(2024, 1, 15, 12, 29))
    assert not seg.contains(datetime(2024, 1, 15, 12, 30))


def test_segment_requires_start_before_end():
    with pytest.raises(ValidationError):
        BreakSegment(datetime(2024, 1, 15, 12, 0), datetime(2024, 1, 15, 12, 0))


def test_segment_dict_round_trip_format():
    seg = BreakSegment.from_dict({"start": "2024-01-15T13:00", "end": "2024-01-15T13:30"})
    assert seg.to_dict() == {"start": "2024-01-15T13:00", "end": "2024-01-15T13:30"}
    with pytest.raises(ValidationError):
        BreakSegment.from_dict({"start": "2024-01-15T13:00"})


def test_segment_bounds_with_offset_become_local_time():
    aware_start = datetime.fromisoformat("2024-01-15T12:00+01:00")
    seg = BreakSegment(aware_start, datetime.fromisoformat("2024-01-15T12:30+01:00"))

    assert seg.start.tzinfo is None
    assert seg.start == aware_start.astimezone().replace(tzinfo=None)
    assert seg.duration_minutes == 30
