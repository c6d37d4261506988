from __future__ import annotations

from enum import Enum


class UnitState(str, Enum):
    """Lifecycle of a single batch unit."""

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    RETRY_SCHEDULED = "RETRY_SCHEDULED"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class PremiumCategory(str, Enum):
    """Premium (Zuschlag) buckets a worked minute can be tagged with."""

    NIGHT = "night"
    SUNDAY = "sunday"
    HOLIDAY = "holiday"
