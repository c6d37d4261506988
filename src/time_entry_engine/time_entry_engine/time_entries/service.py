from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..breaks.model import BreakSegment
from ..breaks.policy.base import BreakPolicy, break_total_minutes
from ..breaks.policy.statutory_policy import StatutoryBreakPolicy
from ..common.datetime_utils import Instant, duration_minutes, parse_iso_datetime, to_iso_minute
from ..core.exceptions import InvalidRangeError
from ..premiums.classifier import PremiumClassifier
from .model import ComputedTimeEntry

logger = logging.getLogger(__name__)


class TimeEntryComputer:
    """Combines the break policy and the premium classifier for one shift.

    Stateless: the same inputs always give the same ComputedTimeEntry.
    """

    def __init__(
        self,
        *,
        break_policy: Optional[BreakPolicy] = None,
        classifier: Optional[PremiumClassifier] = None,
    ):
        self._break_policy = break_policy or StatutoryBreakPolicy()
        self._classifier = classifier or PremiumClassifier()

    def compute(
        self,
        start: Instant,
        end: Instant,
        holidays: Iterable[str] = (),
        manual_breaks: Optional[Sequence[BreakSegment]] = None,
        override_breaks: bool = False,
    ) -> ComputedTimeEntry:
        start_dt = parse_iso_datetime(start)
        end_dt = parse_iso_datetime(end)
        if end_dt <= start_dt:
            raise InvalidRangeError("Endzeit muss nach Startzeit liegen")

        total = duration_minutes(start_dt, end_dt)

        if override_breaks and manual_breaks is not None:
            segments = tuple(manual_breaks)
        else:
            required = self._break_policy.required_break_minutes(total)
            # Segments keep their full length even when they end after the shift.
            segments = tuple(self._break_policy.layout_break_segments(start_dt, end_dt, required))
            if segments and segments[-1].end > end_dt:
                logger.debug(
                    "Break layout extends past shift end %s: required=%s last break ends %s",
                    to_iso_minute(end_dt), required, to_iso_minute(segments[-1].end),
                )

        breaks = break_total_minutes(segments)
        premiums = self._classifier.analyze(start_dt, end_dt, segments, frozenset(holidays))

        return ComputedTimeEntry(
            start_iso=start if isinstance(start, str) else to_iso_minute(start_dt),
            end_iso=end if isinstance(end, str) else to_iso_minute(end_dt),
            total_duration_minutes=total,
            paid_duration_minutes=total - breaks,
            break_segments=segments,
            break_total_minutes=breaks,
            premiums=premiums,
            override_breaks=override_breaks,
        )
