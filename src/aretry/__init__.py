r"""aretry - Retry async actions with composable backoff policies.

This package re-runs a fallible async action according to a backoff
policy until it succeeds, the policy is exhausted, or the action reports
a failure that must not be retried.

Key Features:
    - Error classification: permanent, transient, and transient with an
      explicit ``retry_after`` delay
    - Backoff policies as lazy iterators: fixed interval, exponential,
      exponential factor and Fibonacci, with saturation at ``max_delay``
    - Composable modifiers: attempt count, total duration, jitter
    - Optional retry condition and notifier
    - Cancellation-safe: cancelling the task cancels the pending wait

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import Transient, retry_async
    >>> from aretry.backoff import FibonacciBackoff
    >>> calls = []
    >>> async def flaky():
    ...     calls.append(1)
    ...     if len(calls) < 2:
    ...         raise Transient("try again")
    ...     return "ok"
    ...
    >>> asyncio.run(retry_async(FibonacciBackoff(1).take(3), flaky))
    'ok'

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "ClassifiedError",
    "LoggingNotifier",
    "Permanent",
    "RetryConfig",
    "RetryError",
    "Transient",
    "__version__",
    "classify",
    "map_permanent",
    "map_transient",
    "permanent",
    "retry_after",
    "retry_async",
    "retry_if_async",
    "retry_with_config_async",
    "to_permanent",
    "to_retry_after",
    "to_transient",
    "transient",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.core.config import RetryConfig
from aretry.errors import (
    ClassifiedError,
    Permanent,
    RetryError,
    Transient,
    classify,
    map_permanent,
    map_transient,
    permanent,
    retry_after,
    to_permanent,
    to_retry_after,
    to_transient,
    transient,
)
from aretry.notify import LoggingNotifier
from aretry.retry import AsyncRetryExecutor
from aretry.retry_async import retry_async, retry_if_async, retry_with_config_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
