import asyncio

import pytest

from src.time_entry_engine.time_entry_engine.batch.model import RetryConfig
from src.time_entry_engine.time_entry_engine.batch.retry import backoff_delay, is_retryable_error, with_retry
from src.time_entry_engine.time_entry_engine.core.enums import UnitState
from src.time_entry_engine.time_entry_engine.core.exceptions import (
    InvalidRangeError,
    PermanentError,
    TransientIOError,
    ValidationError,
)


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class RecordingSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


@pytest.mark.parametrize(
    "error",
    [
        TransientIOError("kaputt"),
        TimeoutError(),
        asyncio.TimeoutError(),
        ConnectionResetError(),
        RuntimeError("Network request failed"),
        RuntimeError("HTTP 503 Service Unavailable"),
        RuntimeError("read ECONNRESET"),
        RuntimeError("request timed out"),
    ],
)
def test_retryable_errors(error):
    assert is_retryable_error(error)


@pytest.mark.parametrize(
    "error",
    [
        PermanentError("network unreachable"),
        ValidationError("timeout ungültig"),
        InvalidRangeError("Endzeit muss nach Startzeit liegen"),
        RuntimeError("Mitarbeiter nicht gefunden"),
        KeyError("name"),
    ],
)
def test_non_retryable_errors(error):
    assert not is_retryable_error(error)


def test_backoff_delay_grows_exponentially_with_jitter():
    config = RetryConfig(max_retries=3, base_delay=0.5, max_delay=5.0)
    rng = FixedRandom(0.5)

    assert backoff_delay(0, config, rng) == pytest.approx(0.575)
    assert backoff_delay(1, config, rng) == pytest.approx(1.15)
    assert backoff_delay(2, config, rng) == pytest.approx(2.3)
    assert backoff_delay(3, config, rng) == pytest.approx(4.6)
    assert backoff_delay(4, config, rng) == 5.0


def test_backoff_delay_without_jitter_is_exact():
    config = RetryConfig(base_delay=1.0, max_delay=100.0)
    assert backoff_delay(3, config, FixedRandom(0.0)) == 8.0


def test_retry_config_rejects_negative_values():
    with pytest.raises(ValidationError):
        RetryConfig(max_retries=-1)
    with pytest.raises(ValidationError):
        RetryConfig(base_delay=-0.1)


def test_retry_config_from_settings():
    class Settings:
        RETRY_MAX_RETRIES = 1
        RETRY_BASE_DELAY = 0.1

    config = RetryConfig.from_settings(Settings)
    assert config == RetryConfig(max_retries=1, base_delay=0.1, max_delay=5.0)


@pytest.mark.asyncio
async def test_with_retry_records_transitions():
    calls = []
    transitions = []
    sleep = RecordingSleep()

    async def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise TransientIOError("connection reset")
        return "ok"

    result = await with_retry(
        flaky,
        RetryConfig(),
        rng=FixedRandom(0.0),
        sleep=sleep,
        on_transition=lambda state, attempt, error: transitions.append((state, attempt)),
    )

    assert result == "ok"
    assert sleep.delays == [0.5]
    assert transitions == [
        (UnitState.RUNNING, 1),
        (UnitState.RETRY_SCHEDULED, 1),
        (UnitState.RUNNING, 2),
        (UnitState.SUCCEEDED, 2),
    ]


@pytest.mark.asyncio
async def test_with_retry_accepts_sync_callables():
    assert await with_retry(lambda: 42, RetryConfig(), sleep=RecordingSleep()) == 42


@pytest.mark.asyncio
async def test_with_retry_zero_retries_fails_immediately():
    sleep = RecordingSleep()

    def always_down():
        raise TransientIOError("socket closed")

    with pytest.raises(TransientIOError):
        await with_retry(always_down, RetryConfig(max_retries=0), sleep=sleep)
    assert sleep.delays == []
