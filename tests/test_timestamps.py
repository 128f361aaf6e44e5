from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone

import pytest

from sitemapwriter.exceptions import InvalidLastModifiedError
from sitemapwriter.timestamps import normalize_timestamp

W3C_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\+00:00$")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-12-01", "2024-12-01T00:00:00+00:00"),
        ("2023-01-15 10:00:00", "2023-01-15T10:00:00+00:00"),
        ("2024-12-15T09:30:00+01:00", "2024-12-15T08:30:00+00:00"),
        ("2024-12-15T09:30:00Z", "2024-12-15T09:30:00+00:00"),
        ("2024-12-15T09:30:00.123456", "2024-12-15T09:30:00+00:00"),
        ("@0", "1970-01-01T00:00:00+00:00"),
        (0, "1970-01-01T00:00:00+00:00"),
        (86400.5, "1970-01-02T00:00:00+00:00"),
        (date(2024, 2, 29), "2024-02-29T00:00:00+00:00"),
        (datetime(2024, 6, 1, 12, 0), "2024-06-01T12:00:00+00:00"),
        (
            datetime(2024, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=-5))),
            "2024-06-01T17:00:00+00:00",
        ),
    ],
)
def test_normalize_timestamp(value, expected: str) -> None:
    assert normalize_timestamp(value) == expected


@pytest.mark.parametrize("value", ["now", "NOW", "today", ""])
def test_relative_keywords(value: str) -> None:
    assert W3C_DATETIME.match(normalize_timestamp(value))


def test_today_is_midnight() -> None:
    assert normalize_timestamp("today").endswith("T00:00:00+00:00")


@pytest.mark.parametrize("value", ["yesterday-ish", "2024-13-01", "@soon", True, [2024]])
def test_invalid_values(value) -> None:
    with pytest.raises(InvalidLastModifiedError):
        normalize_timestamp(value)
