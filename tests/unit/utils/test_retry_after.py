r"""Unit tests for Retry-After header parsing utilities."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import Mock, patch

import pytest

from aretry.utils import parse_retry_after

#######################################
#     Tests for parse_retry_after     #
#######################################


@pytest.mark.parametrize(
    ("header", "seconds"),
    [("1", 1.0), ("0", 0.0), ("120", 120.0), ("3600", 3600.0), ("1.5", 1.5)],
)
def test_parse_retry_after_seconds(header: str, seconds: float) -> None:
    assert parse_retry_after(header) == seconds


@pytest.mark.parametrize(
    "header", [None, "invalid", "not a number", "1.2.3", "-5", "inf", "nan"]
)
def test_parse_retry_after_none(header: str | None) -> None:
    assert parse_retry_after(header) is None


def _mock_now(now: datetime) -> Mock:
    return Mock(spec=datetime, now=Mock(return_value=now))


def test_parse_retry_after_http_date() -> None:
    now = datetime(year=2015, month=10, day=21, hour=7, minute=28, second=0, tzinfo=timezone.utc)
    with patch("aretry.utils.retry_after.datetime", _mock_now(now)):
        assert parse_retry_after("Wed, 21 Oct 2015 07:29:00 GMT") == 60.0


def test_parse_retry_after_http_date_in_past() -> None:
    now = datetime(year=2015, month=10, day=21, hour=7, minute=30, second=0, tzinfo=timezone.utc)
    with patch("aretry.utils.retry_after.datetime", _mock_now(now)):
        assert parse_retry_after("Wed, 21 Oct 2015 07:29:00 GMT") == 0.0
