r"""Unit tests for ExponentialBackoff policy."""

from __future__ import annotations

import pytest

from aretry.backoff import MAX_DELAY_MILLIS, ExponentialBackoff


def test_exponential_backoff_base_10() -> None:
    policy = ExponentialBackoff(10)
    assert next(policy) == 0.01
    assert next(policy) == 0.1
    assert next(policy) == 1.0


def test_exponential_backoff_base_2() -> None:
    policy = ExponentialBackoff(2)
    assert [next(policy) for _ in range(4)] == [0.002, 0.004, 0.008, 0.016]


def test_exponential_backoff_factor_to_get_seconds() -> None:
    policy = ExponentialBackoff(2, factor=1000)
    assert [next(policy) for _ in range(4)] == [2.0, 4.0, 8.0, 16.0]


def test_exponential_backoff_saturates_at_maximum_value() -> None:
    policy = ExponentialBackoff(MAX_DELAY_MILLIS - 1)
    assert next(policy) == (MAX_DELAY_MILLIS - 1) / 1000
    assert next(policy) == MAX_DELAY_MILLIS / 1000
    assert next(policy) == MAX_DELAY_MILLIS / 1000


def test_exponential_backoff_factor_saturates() -> None:
    policy = ExponentialBackoff(MAX_DELAY_MILLIS, factor=10)
    assert next(policy) == MAX_DELAY_MILLIS / 1000


def test_exponential_backoff_stops_increasing_at_max_delay() -> None:
    policy = ExponentialBackoff(2, max_delay=0.004)
    assert [next(policy) for _ in range(5)] == [0.002, 0.004, 0.004, 0.004, 0.004]


def test_exponential_backoff_returns_max_when_max_less_than_base() -> None:
    policy = ExponentialBackoff(20, max_delay=0.01)
    assert next(policy) == 0.01
    assert next(policy) == 0.01


@pytest.mark.parametrize("n", [1, 2, 5, 10, 20])
def test_exponential_backoff_nth_value(n: int) -> None:
    policy = ExponentialBackoff(3, max_delay=60.0)
    values = [next(policy) for _ in range(n)]
    assert values[-1] == min(3**n / 1000, 60.0)


def test_exponential_backoff_ceiling_is_exact_once_reached() -> None:
    policy = ExponentialBackoff(10, factor=7, max_delay=1.5)
    values = [next(policy) for _ in range(50)]
    first = values.index(1.5)
    assert all(value == 1.5 for value in values[first:])


def test_exponential_backoff_invalid_base() -> None:
    with pytest.raises(ValueError, match=r"base must be non-negative"):
        ExponentialBackoff(-1)


def test_exponential_backoff_invalid_max_delay() -> None:
    with pytest.raises(ValueError, match=r"max_delay must be positive"):
        ExponentialBackoff(2, max_delay=-5.0)
