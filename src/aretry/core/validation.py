r"""Parameter validation utilities for backoff policies and retry
settings.

This module provides validation functions to ensure parameters meet the
required constraints before a policy or executor is built from them.
"""

from __future__ import annotations

__all__ = [
    "validate_jitter_range",
    "validate_max_delay",
    "validate_non_negative",
    "validate_retry_params",
]


def validate_non_negative(name: str, value: float) -> None:
    """Validate that a numeric parameter is non-negative.

    Args:
        name: The parameter name, used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If ``value`` is negative.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_non_negative
        >>> validate_non_negative("delay", 0.5)
        >>> validate_non_negative("delay", -1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: delay must be non-negative, got -1

        ```
    """
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def validate_max_delay(max_delay: float | None) -> None:
    """Validate the optional ``max_delay`` ceiling of a backoff policy.

    Args:
        max_delay: Optional maximum delay in seconds. Must be > 0 if
            provided.

    Raises:
        ValueError: If ``max_delay`` is not positive.
    """
    if max_delay is not None and max_delay <= 0:
        msg = f"max_delay must be positive if specified, got {max_delay}"
        raise ValueError(msg)


def validate_jitter_range(low: float, high: float) -> None:
    """Validate the multiplicative bounds of a jitter range.

    Args:
        low: The lower multiplier. Must be >= 0.
        high: The upper multiplier. Must be >= ``low``.

    Raises:
        ValueError: If the bounds are negative or inverted.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_jitter_range
        >>> validate_jitter_range(0.5, 1.5)

        ```
    """
    validate_non_negative("low", low)
    if high < low:
        msg = f"high must be >= low, got low={low}, high={high}"
        raise ValueError(msg)


def validate_retry_params(
    max_retries: int | None = None,
    max_total_time: float | None = None,
) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Optional maximum number of retries. Must be >= 0.
            A value of 0 means no retries (only the initial attempt).
        max_total_time: Optional time budget in seconds, measured from
            the creation of the policy. Must be > 0 if provided.

    Raises:
        ValueError: If ``max_retries`` is negative or
            ``max_total_time`` is non-positive.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_retry_params
        >>> validate_retry_params(max_retries=3)
        >>> validate_retry_params(max_retries=3, max_total_time=30.0)
        >>> validate_retry_params(max_retries=-1)  # doctest: +SKIP

        ```
    """
    if max_retries is not None and max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if max_total_time is not None and max_total_time <= 0:
        msg = f"max_total_time must be > 0, got {max_total_time}"
        raise ValueError(msg)
