"""Conversion of user supplied last-modified values to W3C datetimes."""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from typing import Union

from sitemapwriter.exceptions import InvalidLastModifiedError

__all__ = ["TimestampInput", "normalize_timestamp"]

TimestampInput = Union[str, datetime, date, int, float]


def _from_epoch(value: float, original: object) -> datetime:
    try:
        return datetime.fromtimestamp(value, UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidLastModifiedError(
            f"Please specify a valid last modification date. You have specified: {original}"
        ) from exc


def _parse_string(value: str) -> datetime:
    text = value.strip()
    keyword = text.lower()

    if keyword in {"", "now"}:
        return datetime.now(UTC)
    if keyword == "today":
        return datetime.combine(datetime.now(UTC).date(), time(), tzinfo=UTC)
    if text.startswith("@"):
        try:
            seconds = float(text[1:])
        except ValueError as exc:
            raise InvalidLastModifiedError(
                f"Please specify a valid last modification date. You have specified: {value}"
            ) from exc
        return _from_epoch(seconds, value)

    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidLastModifiedError(
            f"Please specify a valid last modification date. You have specified: {value}"
        ) from exc


def normalize_timestamp(value: TimestampInput) -> str:
    """Return ``value`` as an ISO-8601 datetime in UTC, e.g. ``2024-12-01T00:00:00+00:00``.

    Accepts ``"now"``, ``"today"``, ``"@<epoch>"``, ISO-8601 date or datetime
    strings, :class:`datetime`/:class:`date` objects and epoch seconds. Values
    without timezone information are read as UTC.
    """

    if isinstance(value, bool):
        raise InvalidLastModifiedError(
            f"Please specify a valid last modification date. You have specified: {value}"
        )

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    elif isinstance(value, (int, float)):
        moment = _from_epoch(value, value)
    elif isinstance(value, str):
        moment = _parse_string(value)
    else:
        raise InvalidLastModifiedError(
            f"Please specify a valid last modification date. You have specified: {value!r}"
        )

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)

    return moment.astimezone(UTC).replace(microsecond=0).isoformat()
