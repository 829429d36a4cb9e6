r"""Notifiers invoked before each retry wait.

A notifier is any callable accepting ``(error, delay)``: the payload of
the failed attempt and the delay in seconds chosen before the next one.
The executor calls it synchronously, after the delay has been chosen and
before the wait starts, so it should be fast (logging, metrics, ...).
"""

from __future__ import annotations

__all__ = ["LoggingNotifier", "Notify", "noop_notify"]

import logging
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Notify(Protocol):
    """Protocol for retry notifiers."""

    def __call__(self, error: Any, delay: float) -> None:
        """Observe a failed attempt.

        Args:
            error: The payload of the failed attempt.
            delay: The delay in seconds before the next attempt.
        """
        ...


def noop_notify(error: Any, delay: float) -> None:  # noqa: ARG001
    """Notifier that does nothing."""


class LoggingNotifier:
    """Notifier that logs every upcoming retry.

    Args:
        logger: The logger to use. Defaults to this module's logger.
        level: The logging level (default: ``logging.WARNING``).

    Example:
        ```pycon
        >>> import logging
        >>> from aretry.notify import LoggingNotifier
        >>> notify = LoggingNotifier(level=logging.INFO)
        >>> notify(ValueError("boom"), 0.5)

        ```
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.WARNING) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def __call__(self, error: Any, delay: float) -> None:
        self.logger.log(
            self.level,
            f"Retrying in {delay:.2f}s after error: {error}",
        )
