r"""Retry package implementing the async retry loop.

Public API:
    - AsyncRetryExecutor: Asynchronous retry executor
    - RetryDecider: Logic for deciding whether to retry
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "RetryDecider"]

from aretry.retry.decider import RetryDecider
from aretry.retry.executor_async import AsyncRetryExecutor
