r"""Bounded duration modifier for backoff policies."""

from __future__ import annotations

__all__ = ["MaxInterval", "max_duration", "max_interval"]

import copy
import logging
import time
from typing import TYPE_CHECKING, Any

from aretry.backoff.base import WrappingBackoff
from aretry.core.validation import validate_non_negative

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: logging.Logger = logging.getLogger(__name__)


class MaxInterval(WrappingBackoff):
    """Policy that stops once a time budget has elapsed.

    The clock starts when the modifier is created and restarts in every
    copy (``copy.copy`` or ``copy.deepcopy``), so a copied policy gets the
    full budget again. Before each delay is produced, the elapsed time is
    compared with ``max_duration``: once it is exceeded the policy is
    exhausted, regardless of how many delays were already produced or how
    long the retried action took.

    Args:
        inner: The wrapped policy or iterable of delays.
        max_duration: The time budget in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import FixedInterval, MaxInterval
        >>> policy = MaxInterval(FixedInterval(0.01), max_duration=60.0)
        >>> next(policy)
        0.01

        ```
    """

    def __init__(self, inner: Iterable[float], max_duration: float) -> None:
        validate_non_negative("max_duration", max_duration)
        super().__init__(inner)
        self.max_duration = max_duration
        self.start_time = time.monotonic()

    def __copy__(self) -> MaxInterval:
        clone = super().__copy__()
        clone.start_time = time.monotonic()
        return clone

    def __deepcopy__(self, memo: dict[int, Any]) -> MaxInterval:
        clone = type(self).__new__(type(self))
        memo[id(self)] = clone
        for name, value in self.__dict__.items():
            setattr(clone, name, copy.deepcopy(value, memo))
        clone.start_time = time.monotonic()
        return clone

    @property
    def elapsed(self) -> float:
        """Seconds elapsed since the modifier was created or copied."""
        return time.monotonic() - self.start_time

    def __next__(self) -> float:
        elapsed = self.elapsed
        if elapsed > self.max_duration:
            logger.debug(
                f"max_duration exceeded ({elapsed:.3f}s > {self.max_duration:.3f}s), "
                "policy exhausted"
            )
            raise StopIteration
        return next(self._inner)


def max_duration(delays: Iterable[float], max_duration: float) -> MaxInterval:
    """Stop ``delays`` once ``max_duration`` seconds have elapsed."""
    return MaxInterval(delays, max_duration)


def max_interval(delays: Iterable[float], max_interval: int) -> MaxInterval:
    """Stop ``delays`` once ``max_interval`` milliseconds have elapsed.

    Example:
        ```pycon
        >>> from aretry.backoff import FixedInterval, max_interval
        >>> policy = max_interval(FixedInterval.from_millis(10), 50)
        >>> policy.max_duration
        0.05

        ```
    """
    return MaxInterval(delays, max_interval / 1000)
