r"""Unit tests for FibonacciBackoff policy."""

from __future__ import annotations

import pytest

from aretry.backoff import MAX_DELAY_MILLIS, FibonacciBackoff


def test_fibonacci_backoff_starting_at_10() -> None:
    policy = FibonacciBackoff(10)
    assert [next(policy) for _ in range(6)] == [0.01, 0.01, 0.02, 0.03, 0.05, 0.08]


def test_fibonacci_backoff_recurrence() -> None:
    policy = FibonacciBackoff(7, factor=3)
    values = [round(next(policy) * 1000) for _ in range(20)]
    assert values[:2] == [21, 21]
    for n in range(2, 20):
        assert values[n] == values[n - 1] + values[n - 2]


def test_fibonacci_backoff_saturates_at_maximum_value() -> None:
    policy = FibonacciBackoff(MAX_DELAY_MILLIS)
    assert next(policy) == MAX_DELAY_MILLIS / 1000
    assert next(policy) == MAX_DELAY_MILLIS / 1000
    assert next(policy) == MAX_DELAY_MILLIS / 1000


def test_fibonacci_backoff_freezes_after_overflow() -> None:
    policy = FibonacciBackoff(MAX_DELAY_MILLIS // 2)
    values = [next(policy) for _ in range(6)]
    assert values[:2] == [(MAX_DELAY_MILLIS // 2) / 1000] * 2
    assert values[3:] == [MAX_DELAY_MILLIS / 1000] * 3


def test_fibonacci_backoff_stops_increasing_at_max_delay() -> None:
    policy = FibonacciBackoff(10, max_delay=0.05)
    assert [next(policy) for _ in range(6)] == [0.01, 0.01, 0.02, 0.03, 0.05, 0.05]


def test_fibonacci_backoff_returns_max_when_max_less_than_base() -> None:
    policy = FibonacciBackoff(20, max_delay=0.01)
    assert next(policy) == 0.01
    assert next(policy) == 0.01


def test_fibonacci_backoff_factor_to_get_seconds() -> None:
    policy = FibonacciBackoff(1, factor=1000)
    assert [next(policy) for _ in range(3)] == [1.0, 1.0, 2.0]


def test_fibonacci_backoff_invalid_factor() -> None:
    with pytest.raises(ValueError, match=r"factor must be non-negative"):
        FibonacciBackoff(1, factor=-1)
