"""Change frequency values defined by the sitemap protocol."""

from __future__ import annotations

from enum import Enum

__all__ = ["Frequency"]


class Frequency(str, Enum):
    """How often the page at a location is likely to change."""

    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
