r"""Exponential backoff policy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import logging

from aretry.backoff.base import MAX_DELAY_MILLIS, BaseBackoff
from aretry.core.validation import validate_max_delay, validate_non_negative

logger: logging.Logger = logging.getLogger(__name__)


class ExponentialBackoff(BaseBackoff):
    """Exponential backoff policy.

    Produces ``base ** n`` milliseconds for the n-th delay (n starting at
    1), multiplied by ``factor``. Values larger than ``MAX_DELAY_MILLIS``
    saturate at ``MAX_DELAY_MILLIS``.

    Args:
        base: The base in milliseconds. The first delay is ``base``
            milliseconds, the second ``base ** 2``, and so on.
        factor: Multiplier applied to every term (default: 1). For
            example ``ExponentialBackoff(2, factor=1000)`` yields 2s,
            4s, 8s, ...
        max_delay: Optional maximum delay in seconds. Once a term exceeds
            it, ``max_delay`` is produced for that call and all later
            calls.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> policy = ExponentialBackoff(10)
        >>> next(policy), next(policy), next(policy)
        (0.01, 0.1, 1.0)
        >>> policy = ExponentialBackoff(2, factor=1000, max_delay=5.0)
        >>> list(policy.take(4))
        [2.0, 4.0, 5.0, 5.0]

        ```
    """

    def __init__(self, base: int, factor: int = 1, max_delay: float | None = None) -> None:
        validate_non_negative("base", base)
        validate_non_negative("factor", factor)
        validate_max_delay(max_delay)

        self.base = base
        self.factor = factor
        self.max_delay = None if max_delay is None else float(max_delay)
        self._current = base

    def __next__(self) -> float:
        millis = min(self._current * self.factor, MAX_DELAY_MILLIS)
        delay = millis / 1000

        if self.max_delay is not None and delay > self.max_delay:
            logger.debug(f"max_delay reached ({self.max_delay:.3f}s), delay saturated")
            return self.max_delay

        self._current = min(self._current * self.base, MAX_DELAY_MILLIS)
        return delay

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base={self.base}, factor={self.factor}, "
            f"max_delay={self.max_delay})"
        )
