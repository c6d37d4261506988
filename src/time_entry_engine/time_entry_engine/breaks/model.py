from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from ..common.datetime_utils import duration_minutes, parse_iso_datetime, to_iso_minute, to_local_naive
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class BreakSegment:
    """Unpaid break (Pause) as a half-open interval [start, end) in local time."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        # Aware bounds would not compare with the naive shift instants.
        object.__setattr__(self, "start", to_local_naive(self.start))
        object.__setattr__(self, "end", to_local_naive(self.end))
        if self.end <= self.start:
            raise ValidationError("Pausenende muss nach Pausenbeginn liegen")

    @property
    def duration_minutes(self) -> float:
        return duration_minutes(self.start, self.end)

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end

    def to_dict(self) -> dict:
        return {"start": to_iso_minute(self.start), "end": to_iso_minute(self.end)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BreakSegment":
        try:
            return cls(start=parse_iso_datetime(data["start"]), end=parse_iso_datetime(data["end"]))
        except (KeyError, TypeError) as e:
            raise ValidationError("Pausensegment benötigt start und end") from e
