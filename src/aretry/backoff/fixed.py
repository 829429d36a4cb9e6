r"""Fixed interval backoff policy."""

from __future__ import annotations

__all__ = ["FixedInterval"]

from aretry.backoff.base import BaseBackoff
from aretry.core.validation import validate_max_delay, validate_non_negative


class FixedInterval(BaseBackoff):
    """Fixed interval backoff policy.

    Produces the same delay forever, regardless of the attempt number.

    This policy is useful for testing or when you know the exact delay
    that works best for a particular service.

    Args:
        delay: The fixed delay in seconds.
        max_delay: Optional maximum delay in seconds. If ``delay`` is
            larger, ``max_delay`` is produced instead.

    Example:
        ```pycon
        >>> from aretry.backoff import FixedInterval
        >>> policy = FixedInterval(2.5)
        >>> next(policy), next(policy), next(policy)
        (2.5, 2.5, 2.5)
        >>> list(FixedInterval.from_millis(100).take(2))
        [0.1, 0.1]

        ```
    """

    def __init__(self, delay: float, max_delay: float | None = None) -> None:
        validate_non_negative("delay", delay)
        validate_max_delay(max_delay)

        self.delay = float(delay)
        self.max_delay = None if max_delay is None else float(max_delay)

    @classmethod
    def from_millis(cls, millis: int, max_delay: float | None = None) -> FixedInterval:
        """Create a policy producing ``millis`` milliseconds every time."""
        validate_non_negative("millis", millis)
        return cls(millis / 1000, max_delay=max_delay)

    def __next__(self) -> float:
        if self.max_delay is not None and self.delay > self.max_delay:
            return self.max_delay
        return self.delay

    def __repr__(self) -> str:
        return f"{type(self).__name__}(delay={self.delay}, max_delay={self.max_delay})"
