r"""Error classification for retryable actions.

This module provides the exception types an action raises to tell the
retry executor whether a failure may be retried, and helpers to lift
plain fallible callables into that contract.

An action reports a failure by raising:
- ``Permanent(error)``: the failure is terminal, no further attempt is made
- ``Transient(error)``: the failure is retried according to the backoff policy
- ``Transient(error, retry_after=delay)``: the failure is retried after
  exactly ``delay`` seconds, regardless of the policy's next value

Any other exception is treated as transient (see ``classify``).
"""

from __future__ import annotations

__all__ = [
    "ClassifiedError",
    "Permanent",
    "RetryError",
    "Transient",
    "classify",
    "map_permanent",
    "map_transient",
    "permanent",
    "retry_after",
    "to_permanent",
    "to_retry_after",
    "to_transient",
]

import functools
import inspect
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

from aretry.core.validation import validate_non_negative

if TYPE_CHECKING:
    from collections.abc import Callable

F = TypeVar("F", bound="Callable[..., Any]")


class ClassifiedError(Exception):
    """Base class for classified action failures.

    Args:
        error: The caller payload. It can be any value, for example an
            exception, an error code or a message.
    """

    description = "classified error"

    def __init__(self, error: Any) -> None:
        super().__init__(error)
        self._error = error

    @property
    def error(self) -> Any:
        """The wrapped payload."""
        return self._error

    def __str__(self) -> str:
        return str(self._error)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._error!r})"

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._error == other._error

    def __hash__(self) -> int:
        return hash(type(self).__name__)


class Permanent(ClassifiedError):
    """Failure that must not be retried.

    Example:
        ```pycon
        >>> from aretry.errors import Permanent
        >>> Permanent("boom")
        Permanent('boom')
        >>> str(Permanent("boom"))
        'boom'

        ```
    """

    description = "permanent error"


class Transient(ClassifiedError):
    """Failure that may be retried.

    Args:
        error: The caller payload.
        retry_after: Optional delay in seconds. When set, the executor
            waits exactly this long before the next attempt instead of
            the backoff policy's next value.

    Example:
        ```pycon
        >>> from aretry.errors import Transient
        >>> Transient("busy", retry_after=2.0).retry_after
        2.0
        >>> Transient("busy") == Transient("busy", retry_after=1.0)
        False

        ```
    """

    description = "transient error"

    def __init__(self, error: Any, retry_after: float | None = None) -> None:
        if retry_after is not None:
            validate_non_negative("retry_after", retry_after)
        super().__init__(error)
        self._retry_after = retry_after

    @property
    def retry_after(self) -> float | None:
        """The explicit delay in seconds before the next attempt, if any."""
        return self._retry_after

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._error, self._retry_after), self.__dict__)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._error == other._error and self._retry_after == other._retry_after

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._retry_after))


class RetryError(Exception):
    """Raised when the final error payload is not an exception.

    The executor re-raises exception payloads as they are. Other payloads
    (error codes, strings, ...) cannot be raised, so they are carried by
    this exception instead.

    Args:
        error: The raw payload of the last failed attempt.
    """

    def __init__(self, error: Any) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return str(self.error)


def permanent(error: Any) -> Permanent:
    """Create a permanent error.

    Example:
        ```pycon
        >>> from aretry.errors import permanent
        >>> permanent(42)
        Permanent(42)

        ```
    """
    return Permanent(error)


def transient(error: Any) -> Transient:
    """Create a transient error retried according to the backoff policy.

    Example:
        ```pycon
        >>> from aretry.errors import transient
        >>> transient(42)
        Transient(42)

        ```
    """
    return Transient(error)


def retry_after(error: Any, delay: float) -> Transient:
    """Create a transient error retried after exactly ``delay`` seconds."""
    return Transient(error, retry_after=delay)


def to_permanent(error: Any) -> NoReturn:
    """Raise ``error`` as a permanent failure.

    Shorthand for early exits inside an action.
    """
    raise Permanent(error)


def to_transient(error: Any) -> NoReturn:
    """Raise ``error`` as a transient failure."""
    raise Transient(error)


def to_retry_after(error: Any, delay: float) -> NoReturn:
    """Raise ``error`` as a transient failure with an explicit delay."""
    raise Transient(error, retry_after=delay)


def classify(exc: BaseException) -> ClassifiedError:
    """Classify an exception raised by an action.

    This is the fallback conversion for failures that were not annotated
    by the action: anything that is not already a ``ClassifiedError`` is
    treated as transient, so unknown failures are retried.

    Args:
        exc: The exception raised by the action.

    Returns:
        ``exc`` itself if it is already classified, otherwise
        ``Transient(exc)``.

    Example:
        ```pycon
        >>> from aretry.errors import Permanent, classify
        >>> classify(ValueError("bad"))
        Transient(ValueError('bad'))
        >>> classify(Permanent("stop"))
        Permanent('stop')

        ```
    """
    if isinstance(exc, ClassifiedError):
        return exc
    return Transient(exc)


def _map_errors(func: F, wrapper_cls: type[ClassifiedError]) -> F:
    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except ClassifiedError:
                raise
            except Exception as exc:
                raise wrapper_cls(exc) from exc

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ClassifiedError:
            raise
        except Exception as exc:
            raise wrapper_cls(exc) from exc

    return wrapper  # type: ignore[return-value]


def map_transient(func: F) -> F:
    """Wrap a callable so its exceptions are raised as transient errors.

    Works with both regular and ``async`` callables. Return values are
    passed through unchanged, and errors that are already classified are
    not wrapped a second time.

    Args:
        func: The callable to wrap.

    Returns:
        The wrapped callable.

    Example:
        ```pycon
        >>> from aretry.errors import Transient, map_transient
        >>> @map_transient
        ... def parse(value):
        ...     return int(value)
        ...
        >>> parse("3")
        3
        >>> try:
        ...     parse("x")
        ... except Transient as exc:
        ...     print(type(exc.error).__name__)
        ...
        ValueError

        ```
    """
    return _map_errors(func, Transient)


def map_permanent(func: F) -> F:
    """Wrap a callable so its exceptions are raised as permanent errors.

    Args:
        func: The callable to wrap.

    Returns:
        The wrapped callable.
    """
    return _map_errors(func, Permanent)
