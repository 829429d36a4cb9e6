r"""Configuration dataclass and defaults for retry executors.

This module provides configuration constants and a dataclass-based
configuration object that bundles a backoff policy template with the
modifiers, condition and notifier used by ``AsyncRetryExecutor``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INITIAL_DELAY_MILLIS",
    "DEFAULT_JITTER_RANGE",
    "MAX_DELAY_MILLIS",
    "RetryConfig",
]

import copy
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.backoff import MAX_DELAY_MILLIS, Map, MaxInterval, Take, jitter_range
from aretry.backoff.exponential_factor import DEFAULT_INITIAL_DELAY_MILLIS
from aretry.core.validation import validate_jitter_range, validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

# Multiplicative bounds used when ``RetryConfig.jitter`` is enabled
DEFAULT_JITTER_RANGE = (0.5, 1.5)


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    Backoff policies are stateful, so the configured ``strategy`` is
    treated as a template: ``build_strategy`` deep-copies it before
    applying the modifiers, and every run starts from the beginning of
    the sequence.

    Args:
        strategy: The backoff policy template (any iterable of delays in
            seconds that supports ``copy.deepcopy``).
        max_retries: Optional maximum number of retries. Must be >= 0.
            Total attempts = max_retries + 1 (initial attempt).
        max_total_time: Optional time budget in seconds, measured from
            the moment the policy is built. Must be > 0 if provided.
        jitter: Whether to randomize each delay within ``jitter_range``.
        jitter_range: Multiplicative bounds of the jitter.
        retry_if: Optional condition on the error payload of transient
            failures; ``True`` keeps retrying.
        notify: Optional callable invoked with ``(error, delay)`` before
            each wait.

    Example:
        ```pycon
        >>> from aretry.backoff import FixedInterval
        >>> from aretry.core.config import RetryConfig
        >>> config = RetryConfig(FixedInterval(0.1), max_retries=3)
        >>> list(config.build_strategy())
        [0.1, 0.1, 0.1]
        >>> merged = config.merge(max_retries=1)  # Override specific parameters
        >>> list(merged.build_strategy())
        [0.1]
        >>> config.max_retries  # Original unchanged
        3

        ```
    """

    strategy: Iterable[float]
    max_retries: int | None = None
    max_total_time: float | None = None
    jitter: bool = False
    jitter_range: tuple[float, float] = DEFAULT_JITTER_RANGE
    retry_if: Callable[[Any], bool] | None = None
    notify: Callable[[Any, float], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_retry_params(max_retries=self.max_retries, max_total_time=self.max_total_time)
        validate_jitter_range(*self.jitter_range)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def build_strategy(self) -> Iterator[float]:
        """Build a fresh policy from the template.

        The modifiers are applied in this order: time budget, jitter,
        retry count. Jitter therefore also applies to delays saturated at
        a ``max_delay`` ceiling.

        Returns:
            A new iterator of delays in seconds.
        """
        delays: Iterator[float] = iter(copy.deepcopy(self.strategy))
        if self.max_total_time is not None:
            delays = MaxInterval(delays, self.max_total_time)
        if self.jitter:
            delays = Map(delays, jitter_range(*self.jitter_range))
        if self.max_retries is not None:
            delays = Take(delays, self.max_retries)
        return delays
