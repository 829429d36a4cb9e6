r"""Unit tests for BaseBackoff composition."""

from __future__ import annotations

import copy
import itertools

import pytest

from aretry.backoff import (
    BaseBackoff,
    ExponentialBackoff,
    FibonacciBackoff,
    FixedInterval,
    Map,
    MaxInterval,
    Take,
)


def test_base_backoff_is_abstract() -> None:
    with pytest.raises(TypeError):
        BaseBackoff()  # type: ignore[abstract]


def test_take_limits_values() -> None:
    assert list(FixedInterval(0.1).take(2)) == [0.1, 0.1]


def test_take_zero() -> None:
    assert list(FixedInterval(0.1).take(0)) == []


def test_take_does_not_consume_past_limit() -> None:
    inner = FibonacciBackoff(1)
    assert list(Take(inner, 2)) == [0.001, 0.001]
    assert next(inner) == 0.002


def test_take_invalid_count() -> None:
    with pytest.raises(ValueError, match=r"count must be >= 0"):
        Take([], -1)


def test_take_shorter_inner() -> None:
    assert list(Take([0.1], 5)) == [0.1]


def test_map() -> None:
    policy = FixedInterval(1.0).map(lambda delay: delay * 2).take(2)
    assert isinstance(policy, Take)
    assert list(policy) == [2.0, 2.0]


def test_map_over_iterable() -> None:
    assert list(Map([1.0, 2.0], lambda delay: delay + 1)) == [2.0, 3.0]


def test_jitter_returns_policy() -> None:
    assert isinstance(FixedInterval(1.0).jitter(), Map)


def test_max_duration_returns_policy() -> None:
    policy = FixedInterval(1.0).max_duration(10.0)
    assert isinstance(policy, MaxInterval)
    assert policy.max_duration == 10.0


def test_compatible_with_islice() -> None:
    assert list(itertools.islice(ExponentialBackoff(10), 3)) == [0.01, 0.1, 1.0]


def test_policies_are_stateful() -> None:
    policy = ExponentialBackoff(10)
    assert next(policy) == 0.01
    assert next(iter(policy)) == 0.1


def test_copy_clones_progression() -> None:
    policy = ExponentialBackoff(10)
    next(policy)
    clone = copy.copy(policy)
    assert next(policy) == 0.1
    assert next(clone) == 0.1


def test_deepcopy_composed_policy() -> None:
    policy = FibonacciBackoff(10).take(3)
    clone = copy.deepcopy(policy)
    assert list(policy) == [0.01, 0.01, 0.02]
    assert list(clone) == [0.01, 0.01, 0.02]


def test_copy_composed_policy_advances_independently() -> None:
    policy = FibonacciBackoff(10).take(4)
    clone = copy.copy(policy)
    assert list(clone) == [0.01, 0.01, 0.02, 0.03]
    assert list(policy) == [0.01, 0.01, 0.02, 0.03]


def test_copy_map_copies_inner_policy() -> None:
    policy = ExponentialBackoff(10).map(lambda delay: delay * 2)
    next(policy)
    clone = copy.copy(policy)
    assert next(clone) == 0.2
    assert next(policy) == 0.2


def test_copy_over_list_iterator() -> None:
    policy = Take([0.1, 0.2, 0.3], 3)
    next(policy)
    clone = copy.copy(policy)
    assert list(clone) == [0.2, 0.3]
    assert list(policy) == [0.2, 0.3]


def test_copy_over_generator_fails() -> None:
    policy = Take((delay for delay in [0.1, 0.2]), 2)
    with pytest.raises(TypeError, match=r"cannot copy Take"):
        copy.copy(policy)
