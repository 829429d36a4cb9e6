r"""Unit tests for RetryConfig."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest

from aretry.backoff import FibonacciBackoff, FixedInterval
from aretry.core.config import DEFAULT_JITTER_RANGE, RetryConfig


def test_retry_config_defaults() -> None:
    config = RetryConfig(FixedInterval(0.1))
    assert config.max_retries is None
    assert config.max_total_time is None
    assert config.jitter is False
    assert config.jitter_range == DEFAULT_JITTER_RANGE
    assert config.retry_if is None
    assert config.notify is None


def test_retry_config_invalid_max_retries() -> None:
    with pytest.raises(ValueError, match=r"max_retries must be >= 0"):
        RetryConfig(FixedInterval(0.1), max_retries=-1)


def test_retry_config_invalid_max_total_time() -> None:
    with pytest.raises(ValueError, match=r"max_total_time must be > 0"):
        RetryConfig(FixedInterval(0.1), max_total_time=0)


def test_retry_config_invalid_jitter_range() -> None:
    with pytest.raises(ValueError, match=r"high must be >= low"):
        RetryConfig(FixedInterval(0.1), jitter_range=(2.0, 1.0))


def test_retry_config_build_strategy_max_retries() -> None:
    config = RetryConfig(FibonacciBackoff(10), max_retries=4)
    assert list(config.build_strategy()) == [0.01, 0.01, 0.02, 0.03]


def test_retry_config_build_strategy_copies_template() -> None:
    template = FibonacciBackoff(10)
    config = RetryConfig(template, max_retries=3)
    assert list(config.build_strategy()) == [0.01, 0.01, 0.02]
    assert list(config.build_strategy()) == [0.01, 0.01, 0.02]
    assert next(template) == 0.01


def test_retry_config_build_strategy_plain_iterable() -> None:
    config = RetryConfig([0.1, 0.2, 0.3], max_retries=2)
    assert list(config.build_strategy()) == [0.1, 0.2]


def test_retry_config_build_strategy_jitter() -> None:
    config = RetryConfig(FixedInterval(1.0), max_retries=3, jitter=True, jitter_range=(0.1, 0.2))
    assert all(0.1 <= delay < 0.2 for delay in config.build_strategy())


def test_retry_config_build_strategy_max_total_time() -> None:
    config = RetryConfig(FixedInterval(1.0), max_total_time=5.0)
    with patch("aretry.backoff.max_interval.time.monotonic", return_value=0.0):
        strategy = config.build_strategy()
        assert next(strategy) == 1.0
    with patch("aretry.backoff.max_interval.time.monotonic", return_value=10.0):
        assert next(strategy, None) is None


def test_retry_config_merge() -> None:
    notify = Mock()
    config = RetryConfig(FixedInterval(0.1), max_retries=3)
    merged = config.merge(max_retries=5, notify=notify, retry_if=None)

    assert merged.max_retries == 5
    assert merged.notify is notify
    assert merged.retry_if is None
    assert config.max_retries == 3
    assert config.notify is None


def test_retry_config_merge_validates() -> None:
    with pytest.raises(ValueError, match=r"max_retries must be >= 0"):
        RetryConfig(FixedInterval(0.1)).merge(max_retries=-2)


def test_retry_config_build_strategy_restarts_template_time_budget() -> None:
    with patch("aretry.backoff.max_interval.time.monotonic", return_value=0.0):
        config = RetryConfig(FixedInterval(0.1).max_duration(0.05), max_retries=2)
    with patch("aretry.backoff.max_interval.time.monotonic", return_value=10.0):
        assert list(config.build_strategy()) == [0.1, 0.1]
