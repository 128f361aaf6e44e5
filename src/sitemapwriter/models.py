"""Domain models used across the application."""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from sitemapwriter.frequency import Frequency
from sitemapwriter.storage import SITEMAP_SUBDIR
from sitemapwriter.timestamps import normalize_timestamp
from sitemapwriter.validation import (
    join_location,
    validate_frequency,
    validate_location,
    validate_priority,
)

__all__ = [
    "DEFAULT_FREQUENCY",
    "DEFAULT_PRIORITY",
    "FinalizeReport",
    "format_priority",
    "Frequency",
    "Group",
    "SitemapRecord",
    "Url",
]

DEFAULT_FREQUENCY = Frequency.WEEKLY
DEFAULT_PRIORITY = 0.5


def format_priority(priority: float) -> str:
    """Render ``priority`` with one decimal, rounding halves up (0.25 -> "0.3")."""

    return str(Decimal(str(priority)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class SitemapRecord(BaseModel):
    """Fully resolved, serialisable form of a ``<url>`` or ``<sitemap>`` record."""

    model_config = ConfigDict(frozen=True)

    loc: str
    lastmod: Optional[str] = None
    changefreq: Optional[str] = None
    priority: Optional[str] = None

    def elements(self) -> List[Tuple[str, str | None]]:
        """Return the child elements in protocol order; ``None`` values are omitted by writers."""

        return [
            ("loc", self.loc),
            ("lastmod", self.lastmod),
            ("changefreq", self.changefreq),
            ("priority", self.priority),
        ]


class Url(BaseModel):
    """A single location destined for a sitemap file.

    Values are only checked when the entry is resolved against a website, so an
    invalid ``Url`` can be built but will be rejected by :meth:`resolve`.
    """

    model_config = ConfigDict(frozen=True)

    loc: str = Field(..., description="Location, absolute or relative to the website base")
    lastmod: str | datetime | date | int | float | None = Field(
        default="now", description="Last modification time; None omits <lastmod>"
    )
    changefreq: Frequency | str | None = Field(
        default=DEFAULT_FREQUENCY, description="Change frequency; None omits <changefreq>"
    )
    priority: float | None = Field(
        default=DEFAULT_PRIORITY, description="Priority between 0.0 and 1.0; None omits <priority>"
    )

    def resolve(self, website: str) -> SitemapRecord:
        """Join the location onto ``website`` and validate every field."""

        location = validate_location(join_location(website, self.loc))
        priority = validate_priority(self.priority)
        frequency = validate_frequency(self.changefreq)
        lastmod = normalize_timestamp(self.lastmod) if self.lastmod is not None else None

        return SitemapRecord(
            loc=location,
            lastmod=lastmod,
            changefreq=frequency.value if frequency is not None else None,
            priority=format_priority(priority) if priority is not None else None,
        )


class Group(BaseModel):
    """A reference to one sitemap file inside a sitemap index."""

    model_config = ConfigDict(frozen=True)

    loc: str = Field(..., description="Absolute URL of the referenced sitemap file")
    lastmod: str | datetime | date | int | float | None = Field(default="now")

    def resolve(self) -> SitemapRecord:
        location = validate_location(self.loc)
        lastmod = normalize_timestamp(self.lastmod) if self.lastmod is not None else None
        return SitemapRecord(loc=location, lastmod=lastmod)


class FinalizeReport(BaseModel):
    """Files and URLs produced by a finalized :class:`~sitemapwriter.services.sitemap.Map`."""

    written_file_paths: List[Path] = Field(default_factory=list)
    written_urls: List[str] = Field(default_factory=list)

    @property
    def file_names(self) -> List[str]:
        return [path.name for path in self.written_file_paths]

    def sitemap_urls(self, website: str) -> List[str]:
        """Return the public URL of every written file under ``website``."""

        base = website.rstrip("/")
        return [f"{base}/{SITEMAP_SUBDIR}/{name}" for name in self.file_names]
