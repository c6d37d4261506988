from __future__ import annotations

from dataclasses import asdict, dataclass

from ..common.datetime_utils import minutes_to_hours


@dataclass(frozen=True)
class ComputedPremiums:
    """Minute counts per premium bucket.

    Buckets are additive: one minute may count as night, Sunday and holiday at
    once (plus the night/holiday and Sunday/holiday overlaps) while being
    counted only once in total_work_minutes.
    """

    night_minutes: int = 0
    sunday_minutes: int = 0
    holiday_minutes: int = 0
    night_holiday_minutes: int = 0
    sunday_holiday_minutes: int = 0
    normal_minutes: int = 0
    total_work_minutes: int = 0
    break_total_minutes: int = 0

    def to_dict(self, *, with_hours: bool = False) -> dict:
        out = asdict(self)
        if with_hours:
            for key in list(out):
                if key == "break_total_minutes":
                    continue
                out[key.replace("_minutes", "_hours")] = minutes_to_hours(out[key])
        return out
