r"""Utility functions to plug HTTP actions into the retry executor.

This package provides helpers for classifying httpx responses and
exceptions, and for parsing the Retry-After header.
"""

from __future__ import annotations

__all__ = [
    "RETRY_STATUS_CODES",
    "classify_http_error",
    "classify_response",
    "parse_retry_after",
]

from aretry.utils.http import RETRY_STATUS_CODES, classify_http_error, classify_response
from aretry.utils.retry_after import parse_retry_after
