from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable

from ..model import BreakSegment


class BreakPolicy(ABC):
    """Break rule interface (Strategy Pattern for mandatory breaks)."""

    @abstractmethod
    def required_break_minutes(self, work_minutes: float) -> int:
        raise NotImplementedError

    @abstractmethod
    def layout_break_segments(self, start: datetime, end: datetime, required_minutes: int) -> list[BreakSegment]:
        raise NotImplementedError


def break_total_minutes(segments: Iterable[BreakSegment]) -> float:
    return sum((s.duration_minutes for s in segments), 0.0)
