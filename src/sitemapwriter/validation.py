"""Pure checks applied to every entry before it reaches a writer."""

from __future__ import annotations

import math
from urllib.parse import urlparse

from sitemapwriter.exceptions import (
    InvalidFrequencyError,
    InvalidLocationError,
    InvalidPriorityError,
)
from sitemapwriter.frequency import Frequency

__all__ = [
    "join_location",
    "validate_entry",
    "validate_frequency",
    "validate_location",
    "validate_priority",
]


def join_location(website: str, location: str) -> str:
    """Append ``location`` to the ``website`` base with exactly one separator."""

    return f"{website.rstrip('/')}/{location.lstrip('/')}"


def validate_location(location: str) -> str:
    """Return ``location`` unchanged when it is an absolute URL.

    Only printable ASCII without spaces is accepted; anything else has to be
    percent-encoded first.
    """

    message = f"The location must be a valid URL. You have specified: {location}"

    if not isinstance(location, str) or not location:
        raise InvalidLocationError(message)
    if any(not 0x20 < ord(char) < 0x7F for char in location):
        raise InvalidLocationError(message)

    try:
        parsed = urlparse(location)
        # ``port`` raises for malformed port numbers
        parsed.port
    except ValueError as exc:
        raise InvalidLocationError(message) from exc

    if not parsed.scheme or not parsed.netloc or not parsed.hostname:
        raise InvalidLocationError(message)

    return location


def validate_priority(priority: float | None) -> float | None:
    if priority is None:
        return None

    message = (
        "Please specify valid priority. Valid values range from 0.0 to 1.0. "
        f"You have specified: {priority}"
    )
    if isinstance(priority, bool) or not isinstance(priority, (int, float)):
        raise InvalidPriorityError(message)
    if math.isnan(priority) or priority < 0.0 or priority > 1.0:
        raise InvalidPriorityError(message)
    return float(priority)


def validate_frequency(changefreq: Frequency | str | None) -> Frequency | None:
    if changefreq is None:
        return None

    try:
        return Frequency(changefreq)
    except ValueError as exc:
        raise InvalidFrequencyError(
            "Please specify valid changeFrequency. Valid values are: "
            f"{', '.join(Frequency.values())}. You have specified: {changefreq}"
        ) from exc


def validate_entry(
    location: str, priority: float | None, changefreq: Frequency | str | None
) -> None:
    """Validate the parts of an entry in the order a writer would emit them.

    ``location`` must already be joined to the website base.
    """

    validate_location(location)
    validate_priority(priority)
    validate_frequency(changefreq)
