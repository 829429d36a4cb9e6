r"""Abstract base class for backoff policies."""

from __future__ import annotations

__all__ = ["MAX_DELAY_MILLIS", "BaseBackoff", "Map", "Take", "WrappingBackoff"]

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from aretry.backoff.jitter import jitter, jitter_range

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.backoff.max_interval import MaxInterval

# Largest delay a generator produces, in milliseconds (about 49.7 days).
# Growing sequences saturate at this value instead of overflowing.
MAX_DELAY_MILLIS = 2**32 - 1


class BaseBackoff(ABC):
    """Abstract base class for backoff policies.

    A backoff policy is a lazy, possibly infinite iterator of delays in
    seconds. The first value is the delay before the second attempt: the
    initial attempt is never delayed. Each call of ``next()`` advances the
    internal progression, so a policy cannot be replayed. Use
    ``copy.copy`` or ``copy.deepcopy`` on a policy before handing it to
    an executor if the same sequence is needed again. Copying a composed
    policy copies every layer; a plain generator at the bottom cannot be
    copied and raises ``TypeError``.

    Policies compose by wrapping: ``take``, ``map``, ``jitter`` and
    ``max_duration`` all return new policies around this one.
    """

    def __iter__(self) -> BaseBackoff:
        return self

    @abstractmethod
    def __next__(self) -> float:
        """Produce the next delay.

        Returns:
            The delay in seconds before the next attempt.

        Raises:
            StopIteration: If the policy is exhausted.
        """

    def take(self, count: int) -> Take:
        """Limit the policy to its first ``count`` delays.

        This caps the number of retries: the executor makes at most
        ``count + 1`` attempts.
        """
        return Take(self, count)

    def map(self, func: Callable[[float], float]) -> Map:
        """Apply ``func`` to every delay produced by the policy."""
        return Map(self, func)

    def jitter(self) -> Map:
        """Randomize every delay in ``[0.5 * d, 1.5 * d)``."""
        return Map(self, jitter)

    def jitter_range(self, low: float, high: float) -> Map:
        """Randomize every delay in ``[low * d, high * d)``."""
        return Map(self, jitter_range(low, high))

    def max_duration(self, max_duration: float) -> MaxInterval:
        """Stop the policy once ``max_duration`` seconds have elapsed
        since this call."""
        from aretry.backoff.max_interval import MaxInterval  # noqa: PLC0415

        return MaxInterval(self, max_duration)

    def max_interval(self, max_interval: int) -> MaxInterval:
        """Stop the policy once ``max_interval`` milliseconds have
        elapsed since this call."""
        return self.max_duration(max_interval / 1000)


class WrappingBackoff(BaseBackoff):
    """Base class for policies that modify another policy.

    ``copy.copy`` of a wrapping policy also copies the wrapped one, so
    the clone and the original advance independently.

    Args:
        inner: The wrapped policy or iterable of delays.
    """

    def __init__(self, inner: Iterable[float]) -> None:
        self._inner = iter(inner)

    def __copy__(self) -> WrappingBackoff:
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        try:
            clone._inner = copy.copy(self._inner)
        except TypeError as exc:
            msg = f"cannot copy {type(self).__name__}: the wrapped iterator is not copyable"
            raise TypeError(msg) from exc
        return clone


class Take(WrappingBackoff):
    """Policy that yields at most ``count`` delays of another policy.

    Args:
        inner: The wrapped policy or iterable of delays.
        count: The maximum number of delays. Must be >= 0.
    """

    def __init__(self, inner: Iterable[float], count: int) -> None:
        if count < 0:
            msg = f"count must be >= 0, got {count}"
            raise ValueError(msg)
        super().__init__(inner)
        self._remaining = count

    def __next__(self) -> float:
        if self._remaining <= 0:
            raise StopIteration
        self._remaining -= 1
        return next(self._inner)


class Map(WrappingBackoff):
    """Policy that transforms each delay of another policy.

    Args:
        inner: The wrapped policy or iterable of delays.
        func: The transform applied to every delay.
    """

    def __init__(self, inner: Iterable[float], func: Callable[[float], float]) -> None:
        super().__init__(inner)
        self._func = func

    def __next__(self) -> float:
        return self._func(next(self._inner))
