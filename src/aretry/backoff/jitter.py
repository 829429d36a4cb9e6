r"""Jitter functions for randomizing backoff delays.

Jitter is applied as a value transform over the delays produced by a
policy, for example ``map(jitter, policy)`` or ``policy.jitter()``. It
spreads out the retries of many clients that failed at the same time.
"""

from __future__ import annotations

__all__ = ["jitter", "jitter_range"]

import random
from typing import TYPE_CHECKING

from aretry.core.validation import validate_jitter_range

if TYPE_CHECKING:
    from collections.abc import Callable


def jitter(delay: float) -> float:
    """Randomize a delay uniformly in ``[0.5 * delay, 1.5 * delay)``.

    Args:
        delay: The delay in seconds.

    Returns:
        The randomized delay in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import jitter
        >>> 0.05 <= jitter(0.1) < 0.15
        True

        ```
    """
    return delay * (random.random() + 0.5)  # noqa: S311


def jitter_range(low: float, high: float) -> Callable[[float], float]:
    """Create a jitter function with custom multiplicative bounds.

    Args:
        low: The lower multiplier (inclusive).
        high: The upper multiplier (exclusive).

    Returns:
        A function mapping a delay ``d`` to a uniform value in
        ``[low * d, high * d)``.

    Raises:
        ValueError: If ``low`` is negative or ``high < low``.

    Example:
        ```pycon
        >>> from aretry.backoff import jitter_range
        >>> small = jitter_range(0.01, 0.1)
        >>> 0.001 <= small(0.1) < 0.01
        True

        ```
    """
    validate_jitter_range(low, high)
    spread = high - low

    def _jitter(delay: float) -> float:
        return delay * (random.random() * spread + low)  # noqa: S311

    return _jitter
