r"""Classification helpers for httpx-based actions.

These helpers let an action built on ``httpx`` report its failures with
the classification expected by the retry executor: retryable status
codes and transport errors become transient, everything else becomes
permanent, and a ``Retry-After`` header is forwarded as an explicit
``retry_after`` delay.

Example:
    ```pycon
    >>> import httpx
    >>> from aretry import retry_async
    >>> from aretry.backoff import ExponentialBackoff
    >>> from aretry.utils import classify_http_error, classify_response
    >>> async def fetch(client: httpx.AsyncClient) -> httpx.Response:
    ...     try:
    ...         response = await client.get("https://api.example.com/data")
    ...     except httpx.HTTPError as exc:
    ...         raise classify_http_error(exc) from exc
    ...     return classify_response(response)
    ...
    >>> async def main():
    ...     async with httpx.AsyncClient() as client:
    ...         policy = ExponentialBackoff(2, factor=100).take(5)
    ...         return await retry_async(policy, lambda: fetch(client))
    ...

    ```
"""

from __future__ import annotations

__all__ = ["RETRY_STATUS_CODES", "classify_http_error", "classify_response"]

import logging

import httpx

from aretry.errors import ClassifiedError, Permanent, Transient
from aretry.utils.retry_after import parse_retry_after

logger: logging.Logger = logging.getLogger(__name__)

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def classify_response(
    response: httpx.Response,
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
) -> httpx.Response:
    """Return a successful response or raise its classified error.

    Args:
        response: The HTTP response to check.
        status_forcelist: HTTP status codes that are retryable.

    Returns:
        The response itself if its status code is below 400.

    Raises:
        Transient: If the status code is in ``status_forcelist``. The
            Retry-After header, if present and valid, becomes the
            explicit ``retry_after`` delay.
        Permanent: For any other error status code.

    The payload of the raised error is an ``httpx.HTTPStatusError``.
    """
    if response.status_code < 400:
        return response

    error = httpx.HTTPStatusError(
        f"{response.request.method} request to {response.request.url} "
        f"failed with status {response.status_code}",
        request=response.request,
        response=response,
    )
    if response.status_code not in status_forcelist:
        logger.debug(f"Non-retryable status {response.status_code}")
        raise Permanent(error)

    retry_after = parse_retry_after(response.headers.get("Retry-After"))
    if retry_after is not None:
        logger.debug(f"Using Retry-After header value: {retry_after:.2f}s")
    raise Transient(error, retry_after=retry_after)


def classify_http_error(exc: Exception) -> ClassifiedError:
    """Classify an exception raised while sending an HTTP request.

    Timeouts and transport errors (connection failures, protocol errors,
    ...) are transient. Any other exception is permanent.

    Args:
        exc: The exception raised by the httpx client.

    Returns:
        The classified error wrapping ``exc``.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.utils import classify_http_error
        >>> classify_http_error(httpx.ConnectTimeout("timed out"))
        Transient(ConnectTimeout('timed out'))
        >>> classify_http_error(httpx.InvalidURL("bad url"))
        Permanent(InvalidURL('bad url'))

        ```
    """
    if isinstance(exc, ClassifiedError):
        return exc
    if isinstance(exc, (httpx.TimeoutException, httpx.TransportError)):
        return Transient(exc)
    return Permanent(exc)
