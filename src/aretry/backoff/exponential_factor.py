r"""Exponential factor backoff policy."""

from __future__ import annotations

__all__ = ["DEFAULT_INITIAL_DELAY_MILLIS", "ExponentialFactorBackoff"]

import logging
import math

from aretry.backoff.base import MAX_DELAY_MILLIS, BaseBackoff
from aretry.core.validation import validate_max_delay, validate_non_negative

logger: logging.Logger = logging.getLogger(__name__)

# Initial delay used by ``ExponentialFactorBackoff.from_factor``
DEFAULT_INITIAL_DELAY_MILLIS = 500


class ExponentialFactorBackoff(BaseBackoff):
    """Exponential backoff policy with a fixed initial delay.

    Produces ``initial_delay * base_factor ** n`` milliseconds for the n-th
    delay (n starting at 0): the initial delay stays fixed while the
    factor grows exponentially. The progression uses floating point and
    each term is truncated to whole milliseconds, so a small drift can be
    visible with non-integer factors. Terms larger than
    ``MAX_DELAY_MILLIS`` saturate at ``MAX_DELAY_MILLIS``.

    Args:
        initial_delay: The first delay in milliseconds (default: 500).
        base_factor: The growth factor applied at every step
            (default: 2.0).
        max_delay: Optional maximum delay in seconds. Once a term exceeds
            it, ``max_delay`` is produced for that call and all later
            calls.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialFactorBackoff
        >>> policy = ExponentialFactorBackoff(500, 2.0)
        >>> list(policy.take(4))
        [0.5, 1.0, 2.0, 4.0]
        >>> policy = ExponentialFactorBackoff(1, 2.0, max_delay=0.004)
        >>> list(policy.take(4))
        [0.001, 0.002, 0.004, 0.004]

        ```
    """

    def __init__(
        self,
        initial_delay: int = DEFAULT_INITIAL_DELAY_MILLIS,
        base_factor: float = 2.0,
        max_delay: float | None = None,
    ) -> None:
        validate_non_negative("initial_delay", initial_delay)
        validate_non_negative("base_factor", base_factor)
        validate_max_delay(max_delay)

        self.initial_delay = initial_delay
        self.base_factor = base_factor
        self.max_delay = None if max_delay is None else float(max_delay)
        self._factor = 1.0

    @classmethod
    def from_factor(
        cls, base_factor: float, max_delay: float | None = None
    ) -> ExponentialFactorBackoff:
        """Create a policy starting at ``DEFAULT_INITIAL_DELAY_MILLIS``."""
        return cls(DEFAULT_INITIAL_DELAY_MILLIS, base_factor, max_delay=max_delay)

    def __next__(self) -> float:
        raw = self.initial_delay * self._factor
        if math.isnan(raw):
            # zero initial delay times an overflowed factor
            millis = 0
        elif raw > MAX_DELAY_MILLIS:
            millis = MAX_DELAY_MILLIS
        else:
            millis = int(raw)
        delay = millis / 1000

        if self.max_delay is not None and delay > self.max_delay:
            logger.debug(f"max_delay reached ({self.max_delay:.3f}s), delay saturated")
            return self.max_delay

        self._factor *= self.base_factor
        return delay

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(initial_delay={self.initial_delay}, "
            f"base_factor={self.base_factor}, max_delay={self.max_delay})"
        )
