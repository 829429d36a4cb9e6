r"""Retry-After header parsing utilities.

This module provides functions for parsing the Retry-After header value
from HTTP responses according to RFC 7231, to turn server-dictated
backoff into an explicit ``retry_after`` delay.
"""

from __future__ import annotations

__all__ = ["parse_retry_after"]

import logging
import math
from contextlib import suppress
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

logger: logging.Logger = logging.getLogger(__name__)


def parse_retry_after(retry_after_header: str | None) -> float | None:
    """Parse the Retry-After header value from an HTTP response.

    The header is either a number of seconds (e.g., ``"120"``) or an
    HTTP-date (e.g., ``"Wed, 21 Oct 2015 07:28:00 GMT"``). Dates in the
    past are clamped to ``0.0``.

    Args:
        retry_after_header: The value of the Retry-After header, or None
            if the header is not present.

    Returns:
        The number of seconds to wait, or None if the header is absent,
        cannot be parsed, or is negative or infinite.

    Example:
        ```pycon
        >>> from aretry.utils import parse_retry_after
        >>> parse_retry_after("120")
        120.0
        >>> parse_retry_after(None) is None
        True
        >>> parse_retry_after("invalid") is None
        True

        ```
    """
    if retry_after_header is None:
        return None

    with suppress(ValueError):
        seconds = float(retry_after_header)
        if not 0 <= seconds < math.inf:
            logger.debug(f"Ignoring invalid Retry-After header: {retry_after_header!r}")
            return None
        return seconds

    try:
        retry_date: datetime = parsedate_to_datetime(retry_after_header)
        now = datetime.now(timezone.utc)
        return max(0.0, (retry_date - now).total_seconds())
    except (ValueError, TypeError, OverflowError):
        logger.debug(f"Failed to parse Retry-After header: {retry_after_header!r}")
        return None
