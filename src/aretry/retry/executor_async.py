r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs an async
action, classifies its failures and retries it according to a backoff
policy.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "raise_final_error"]

import asyncio
import logging
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

from aretry.errors import ClassifiedError, RetryError, Transient, classify
from aretry.notify import noop_notify
from aretry.retry.decider import RetryDecider

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from aretry.core.config import RetryConfig

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def raise_final_error(error: ClassifiedError) -> NoReturn:
    """Raise the payload of the error that ended a retry loop.

    The classification is stripped: exception payloads are raised as
    they are, other payloads are wrapped in ``RetryError``.

    Args:
        error: The classified error of the last attempt.

    Raises:
        BaseException: The payload itself, or ``RetryError`` carrying it.
    """
    if isinstance(error.error, BaseException):
        raise error.error
    raise RetryError(error.error)


class AsyncRetryExecutor:
    """Executes an async action with automatic retry logic.

    Each attempt calls ``action()`` and awaits the result. A failure is
    classified with ``classify``: permanent errors end the run at once,
    transient errors are retried while the condition accepts them and the
    policy still produces delays. The notifier is called with the error
    payload and the chosen delay right before each wait.

    The policy is consumed once per retry, even when the error carries an
    explicit ``retry_after`` that replaces the produced delay. Policies
    are stateful, so an executor built around a policy object should run
    a single operation.

    Cancelling the task running ``execute`` cancels the pending wait or
    the running attempt; the notifier is not called and the policy is
    not advanced afterwards.

    Attributes:
        strategy: The backoff policy (any iterable of delays in seconds).
        decider: Logic for deciding whether to retry.
        notify: Callable invoked with ``(error, delay)`` before each wait.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.backoff import FixedInterval
        >>> from aretry.errors import Transient
        >>> from aretry.retry import AsyncRetryExecutor
        >>> attempts = []
        >>> async def action():
        ...     attempts.append(1)
        ...     if len(attempts) < 3:
        ...         raise Transient("not ready")
        ...     return "done"
        ...
        >>> executor = AsyncRetryExecutor(FixedInterval(0.001).take(5))
        >>> asyncio.run(executor.execute(action))
        'done'
        >>> len(attempts)
        3

        ```
    """

    def __init__(
        self,
        strategy: Iterable[float],
        retry_if: Callable[[Any], bool] | None = None,
        notify: Callable[[Any, float], None] | None = None,
    ) -> None:
        self.strategy = strategy
        self.decider: RetryDecider = RetryDecider(retry_if)
        self.notify = notify if notify is not None else noop_notify

    @classmethod
    def from_config(cls, config: RetryConfig) -> AsyncRetryExecutor:
        """Create an executor from a ``RetryConfig``.

        The policy is built from a fresh copy of the configured template,
        so every executor created this way starts a new sequence.
        """
        return cls(config.build_strategy(), retry_if=config.retry_if, notify=config.notify)

    async def execute(self, action: Callable[[], Awaitable[T]]) -> T:
        """Execute the action until it succeeds or stops being retryable.

        Args:
            action: Zero-argument callable returning a fresh awaitable on
                every call. It may be called several times, so any state
                it captures must tolerate repeated invocation.

        Returns:
            The result of the first successful attempt.

        Raises:
            BaseException: The payload of the last failed attempt, when it
                is an exception.
            RetryError: Carrying the payload of the last failed attempt,
                when it is not an exception.
        """
        delays = iter(self.strategy)
        attempt = 0

        while True:
            attempt += 1
            try:
                return await action()
            except Exception as exc:  # noqa: BLE001
                error = classify(exc)

            should_retry, reason = self.decider.should_retry(error)
            if not should_retry:
                logger.debug(f"Attempt {attempt} failed, giving up ({reason})")
                raise_final_error(error)

            delay = next(delays, None)
            if delay is None:
                logger.debug(f"Attempt {attempt} failed, backoff policy exhausted")
                raise_final_error(error)

            if isinstance(error, Transient) and error.retry_after is not None:
                delay = error.retry_after

            logger.debug(f"Attempt {attempt} failed ({reason}), retrying in {delay:.2f}s")
            self.notify(error.error, delay)
            await asyncio.sleep(delay)
