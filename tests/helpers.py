r"""Shared test helpers for retry executor tests."""

from __future__ import annotations

from typing import Any

from aretry.errors import Transient


class CountingAction:
    """Async action recording its attempts.

    Each call pops the next outcome: exceptions are raised, other values
    are returned. The last outcome is repeated once the list is used up.
    """

    def __init__(self, *outcomes: Any) -> None:
        self.outcomes = list(outcomes)
        self.calls = 0

    async def __call__(self) -> Any:
        self.calls += 1
        outcome = self.outcomes[min(self.calls, len(self.outcomes)) - 1]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def always_transient(error: Any = 42) -> CountingAction:
    return CountingAction(Transient(error))
