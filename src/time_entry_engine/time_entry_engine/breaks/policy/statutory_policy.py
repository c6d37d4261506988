from __future__ import annotations

from datetime import datetime, timedelta

from ...core.constants import BREAK_LAYOUT, BREAK_THRESHOLDS, MAX_REQUIRED_BREAK_MINUTES
from ..model import BreakSegment
from .base import BreakPolicy


class StatutoryBreakPolicy(BreakPolicy):
    """Statutory rule: up to 5h no break, up to 9h 30 min, up to 10h 45 min, above 60 min.

    Segments sit at fixed offsets from the shift start:
    30 min after 5h, 15 min at +570 min (9h work + first break) and
    15 min at +615 min (second break + another 30 min of work).
    """

    def required_break_minutes(self, work_minutes: float) -> int:
        for upper_bound, required in BREAK_THRESHOLDS:
            if work_minutes <= upper_bound:
                return required
        return MAX_REQUIRED_BREAK_MINUTES

    def layout_break_segments(self, start: datetime, end: datetime, required_minutes: int) -> list[BreakSegment]:
        segments: list[BreakSegment] = []
        for offset, length, threshold in BREAK_LAYOUT:
            if required_minutes >= threshold:
                seg_start = start + timedelta(minutes=offset)
                segments.append(BreakSegment(start=seg_start, end=seg_start + timedelta(minutes=length)))
        return segments
