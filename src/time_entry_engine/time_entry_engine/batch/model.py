from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, Sequence, TypeVar, Union

from ..core.constants import DEFAULT_BASE_DELAY_SECONDS, DEFAULT_MAX_DELAY_SECONDS, DEFAULT_MAX_RETRIES
from ..core.enums import UnitState
from ..core.exceptions import ValidationError

T = TypeVar("T")

UnitFn = Callable[[], Union[Awaitable[T], T]]
ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class RetryConfig:
    """Retry/backoff settings for one batch call. Delays are in seconds."""

    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay: float = DEFAULT_BASE_DELAY_SECONDS
    max_delay: float = DEFAULT_MAX_DELAY_SECONDS

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValidationError("max_retries darf nicht negativ sein")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValidationError("Wartezeiten dürfen nicht negativ sein")

    @classmethod
    def from_settings(cls, settings: Any) -> "RetryConfig":
        return cls(
            max_retries=int(getattr(settings, "RETRY_MAX_RETRIES", DEFAULT_MAX_RETRIES)),
            base_delay=float(getattr(settings, "RETRY_BASE_DELAY", DEFAULT_BASE_DELAY_SECONDS)),
            max_delay=float(getattr(settings, "RETRY_MAX_DELAY", DEFAULT_MAX_DELAY_SECONDS)),
        )


@dataclass(frozen=True)
class BatchUnit(Generic[T]):
    """One independent, idempotent piece of work identified by a readable label."""

    label: str
    fn: UnitFn

    @classmethod
    def from_tasks(cls, tasks: Sequence[UnitFn], labels: Sequence[str]) -> list["BatchUnit"]:
        """Pair tasks with labels by position; missing labels become 'Unbekannt #i'."""
        return [
            cls(label=labels[i] if i < len(labels) and labels[i] else f"Unbekannt #{i}", fn=task)
            for i, task in enumerate(tasks)
        ]


@dataclass(frozen=True)
class UnitOutcome(Generic[T]):
    index: int
    label: str
    state: UnitState
    value: Optional[T] = None
    error: Optional[BaseException] = None
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return self.state == UnitState.SUCCEEDED


@dataclass(frozen=True)
class BatchFailure:
    label: str
    error: BaseException


@dataclass(frozen=True)
class BatchResult(Generic[T]):
    success: bool
    results: tuple[UnitOutcome[T], ...]
    total_processed: int
    success_count: int
    error_count: int
    errors: tuple[BatchFailure, ...]

    @classmethod
    def from_outcomes(cls, outcomes: Sequence[UnitOutcome[T]]) -> "BatchResult[T]":
        ordered = tuple(sorted(outcomes, key=lambda o: o.index))
        errors = tuple(BatchFailure(label=o.label, error=o.error) for o in ordered if not o.ok)
        return cls(
            success=not errors,
            results=ordered,
            total_processed=len(ordered),
            success_count=len(ordered) - len(errors),
            error_count=len(errors),
            errors=errors,
        )

    @property
    def values(self) -> list[Optional[T]]:
        return [o.value for o in self.results]

    @property
    def failed_labels(self) -> list[str]:
        return [e.label for e in self.errors]
