r"""Shared validation logic for backoff policies and retry executors.

The configuration dataclass lives in ``aretry.core.config`` and is not
re-exported here because it depends on ``aretry.backoff``, which itself
uses these validators.
"""

from __future__ import annotations

__all__ = [
    "validate_jitter_range",
    "validate_max_delay",
    "validate_non_negative",
    "validate_retry_params",
]

from aretry.core.validation import (
    validate_jitter_range,
    validate_max_delay,
    validate_non_negative,
    validate_retry_params,
)
