from __future__ import annotations

from datetime import datetime
from typing import AbstractSet, Iterable, Sequence

from ..breaks.model import BreakSegment
from ..common.datetime_utils import is_holiday, is_night, is_sunday, iter_minutes
from ..core.enums import PremiumCategory
from .model import ComputedPremiums


class PremiumClassifier:
    """Walks a shift minute by minute and tags every worked minute.

    Break minutes are counted separately and never tagged. Worked minutes
    without any tag are normal minutes.
    """

    def tags_for(self, minute: datetime, holidays: AbstractSet[str]) -> frozenset[PremiumCategory]:
        tags = set()
        if is_night(minute):
            tags.add(PremiumCategory.NIGHT)
        if is_sunday(minute):
            tags.add(PremiumCategory.SUNDAY)
        if is_holiday(minute, holidays):
            tags.add(PremiumCategory.HOLIDAY)
        return frozenset(tags)

    def analyze(
        self,
        start: datetime,
        end: datetime,
        break_segments: Sequence[BreakSegment],
        holidays: Iterable[str],
    ) -> ComputedPremiums:
        holiday_set = holidays if isinstance(holidays, (set, frozenset)) else frozenset(holidays)

        night = sunday = holiday = 0
        night_holiday = sunday_holiday = 0
        normal = total_work = break_total = 0

        for minute in iter_minutes(start, end):
            if any(seg.contains(minute) for seg in break_segments):
                break_total += 1
                continue

            total_work += 1
            tags = self.tags_for(minute, holiday_set)
            if not tags:
                normal += 1
                continue

            if PremiumCategory.NIGHT in tags:
                night += 1
            if PremiumCategory.SUNDAY in tags:
                sunday += 1
            if PremiumCategory.HOLIDAY in tags:
                holiday += 1
                if PremiumCategory.NIGHT in tags:
                    night_holiday += 1
                if PremiumCategory.SUNDAY in tags:
                    sunday_holiday += 1

        return ComputedPremiums(
            night_minutes=night,
            sunday_minutes=sunday,
            holiday_minutes=holiday,
            night_holiday_minutes=night_holiday,
            sunday_holiday_minutes=sunday_holiday,
            normal_minutes=normal,
            total_work_minutes=total_work,
            break_total_minutes=break_total,
        )
