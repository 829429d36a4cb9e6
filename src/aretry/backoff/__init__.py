r"""Backoff policies and modifiers for retry delays.

This package provides lazy sequences of delays (in seconds) consumed by
the retry executor: fixed, exponential, exponential factor and Fibonacci
generators, and modifiers to bound them by count or elapsed time and to
randomize them with jitter.

Any iterable of floats is a valid policy, so the standard library
composes with these classes as well, for example
``itertools.islice(FixedInterval(0.1), 3)`` or ``map(jitter, policy)``.
"""

from __future__ import annotations

__all__ = [
    "MAX_DELAY_MILLIS",
    "BaseBackoff",
    "ExponentialBackoff",
    "ExponentialFactorBackoff",
    "FibonacciBackoff",
    "FixedInterval",
    "Map",
    "MaxInterval",
    "Take",
    "WrappingBackoff",
    "jitter",
    "jitter_range",
    "max_duration",
    "max_interval",
]

from aretry.backoff.base import MAX_DELAY_MILLIS, BaseBackoff, Map, Take, WrappingBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.exponential_factor import ExponentialFactorBackoff
from aretry.backoff.fibonacci import FibonacciBackoff
from aretry.backoff.fixed import FixedInterval
from aretry.backoff.jitter import jitter, jitter_range
from aretry.backoff.max_interval import MaxInterval, max_duration, max_interval
