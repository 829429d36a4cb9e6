r"""Contains the async entry points to retry an action."""

from __future__ import annotations

__all__ = ["retry_async", "retry_if_async", "retry_with_config_async"]

from typing import TYPE_CHECKING, Any, TypeVar

from aretry.retry import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from aretry.core.config import RetryConfig

T = TypeVar("T")


async def retry_async(
    strategy: Iterable[float],
    action: Callable[[], Awaitable[T]],
    *,
    notify: Callable[[Any, float], None] | None = None,
) -> T:
    """Run an async action, retrying every transient failure.

    The action is attempted once, then once more after each delay
    produced by ``strategy`` until it succeeds, raises a permanent error,
    or the policy is exhausted.

    Args:
        strategy: The backoff policy (any iterable of delays in seconds).
            It is consumed by this call.
        action: Zero-argument callable returning a fresh awaitable on
            every call.
        notify: Optional callable invoked with ``(error, delay)`` before
            each wait.

    Returns:
        The result of the first successful attempt.

    Raises:
        BaseException: The payload of the last failed attempt, or
            ``RetryError`` carrying it when it is not an exception.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import retry_async
        >>> from aretry.backoff import ExponentialBackoff
        >>> async def fetch():
        ...     return 42
        ...
        >>> asyncio.run(retry_async(ExponentialBackoff(10).take(3), fetch))
        42

        ```
    """
    executor = AsyncRetryExecutor(strategy, notify=notify)
    return await executor.execute(action)


async def retry_if_async(
    strategy: Iterable[float],
    action: Callable[[], Awaitable[T]],
    condition: Callable[[Any], bool],
    *,
    notify: Callable[[Any, float], None] | None = None,
) -> T:
    """Run an async action, retrying transient failures accepted by
    ``condition``.

    Args:
        strategy: The backoff policy (any iterable of delays in seconds).
            It is consumed by this call.
        action: Zero-argument callable returning a fresh awaitable on
            every call.
        condition: Called with the payload of each transient failure.
            Returns ``True`` to keep retrying, ``False`` to stop and raise
            that failure.
        notify: Optional callable invoked with ``(error, delay)`` before
            each wait.

    Returns:
        The result of the first successful attempt.

    Raises:
        BaseException: The payload of the last failed attempt, or
            ``RetryError`` carrying it when it is not an exception.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import retry_if_async
        >>> from aretry.backoff import FixedInterval
        >>> from aretry.errors import RetryError, Transient
        >>> async def always_busy():
        ...     raise Transient("busy")
        ...
        >>> try:
        ...     asyncio.run(
        ...         retry_if_async(FixedInterval(0.001), always_busy, lambda err: err != "busy")
        ...     )
        ... except RetryError as exc:
        ...     print(exc.error)
        ...
        busy

        ```
    """
    executor = AsyncRetryExecutor(strategy, retry_if=condition, notify=notify)
    return await executor.execute(action)


async def retry_with_config_async(action: Callable[[], Awaitable[T]], config: RetryConfig) -> T:
    """Run an async action with the retry behavior described by
    ``config``.

    A fresh policy is built from the configuration for this call, so the
    same config can be reused across calls.

    Args:
        action: Zero-argument callable returning a fresh awaitable on
            every call.
        config: The retry configuration.

    Returns:
        The result of the first successful attempt.
    """
    executor = AsyncRetryExecutor.from_config(config)
    return await executor.execute(action)
