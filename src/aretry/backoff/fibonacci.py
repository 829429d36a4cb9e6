r"""Fibonacci backoff policy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

import logging

from aretry.backoff.base import MAX_DELAY_MILLIS, BaseBackoff
from aretry.core.validation import validate_max_delay, validate_non_negative

logger: logging.Logger = logging.getLogger(__name__)


class FibonacciBackoff(BaseBackoff):
    """Fibonacci backoff policy.

    Produces the Fibonacci sequence seeded with ``millis`` twice
    (``millis, millis, 2 * millis, 3 * millis, 5 * millis, ...``),
    each term multiplied by ``factor``.

    This policy provides a middle ground between fixed and exponential
    backoff, starting slow and ramping up gradually. When the sum of the
    two last terms exceeds ``MAX_DELAY_MILLIS``, the sequence freezes at
    ``MAX_DELAY_MILLIS``.

    Args:
        millis: The seed in milliseconds.
        factor: Integer multiplier applied to every term (default: 1).
            ``FibonacciBackoff(1, factor=1000)`` yields 1s, 1s, 2s, ...
        max_delay: Optional maximum delay in seconds. Once a term exceeds
            it, ``max_delay`` is produced for that call and all later
            calls.

    Example:
        ```pycon
        >>> from aretry.backoff import FibonacciBackoff
        >>> list(FibonacciBackoff(10).take(6))
        [0.01, 0.01, 0.02, 0.03, 0.05, 0.08]
        >>> list(FibonacciBackoff(10, max_delay=0.05).take(6))
        [0.01, 0.01, 0.02, 0.03, 0.05, 0.05]

        ```
    """

    def __init__(self, millis: int, factor: int = 1, max_delay: float | None = None) -> None:
        validate_non_negative("millis", millis)
        validate_non_negative("factor", factor)
        validate_max_delay(max_delay)

        self.millis = millis
        self.factor = factor
        self.max_delay = None if max_delay is None else float(max_delay)
        self._current = millis
        self._next = millis

    def __next__(self) -> float:
        delay = min(self._current * self.factor, MAX_DELAY_MILLIS) / 1000

        if self.max_delay is not None and delay > self.max_delay:
            logger.debug(f"max_delay reached ({self.max_delay:.3f}s), delay saturated")
            return self.max_delay

        following = self._current + self._next
        self._current = self._next
        self._next = min(following, MAX_DELAY_MILLIS)
        return delay

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(millis={self.millis}, factor={self.factor}, "
            f"max_delay={self.max_delay})"
        )
