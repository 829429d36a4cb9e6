r"""Retry decision logic for classified errors.

This module provides the RetryDecider class that encapsulates the logic
for deciding whether a failed attempt should be retried based on its
classification and an optional condition.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

from typing import TYPE_CHECKING, Any

from aretry.errors import Transient

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.errors import ClassifiedError


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    Args:
        retry_if: Optional condition called with the error payload of a
            transient failure. It returns ``True`` to keep retrying and
            ``False`` to stop. Without a condition, every transient
            failure is retried.
    """

    def __init__(self, retry_if: Callable[[Any], bool] | None = None) -> None:
        self.retry_if = retry_if

    def should_retry(self, error: ClassifiedError) -> tuple[bool, str]:
        """Determine if a classified error should trigger a retry.

        Args:
            error: The classified error of the failed attempt.

        Returns:
            Tuple of (should_retry, reason).
        """
        if not isinstance(error, Transient):
            return (False, error.description)
        if self.retry_if is not None and not self.retry_if(error.error):
            return (False, "retry_if returned False")
        if error.retry_after is not None:
            return (True, f"retry_after={error.retry_after:.2f}s")
        return (True, error.description)
