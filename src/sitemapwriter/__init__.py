"""Streaming writer for sitemap and sitemap index files (https://www.sitemaps.org/)."""

from __future__ import annotations

from .config import AppConfig, MapOptions, SitemapConfig  # noqa: F401
from .exceptions import SitemapError, SitemapIOError, SitemapValidationError  # noqa: F401
from .frequency import Frequency  # noqa: F401
from .models import FinalizeReport, Group, Url  # noqa: F401
from .services import Index, Map  # noqa: F401

__all__ = [
    "AppConfig",
    "FinalizeReport",
    "Frequency",
    "Group",
    "Index",
    "Map",
    "MapOptions",
    "SitemapConfig",
    "SitemapError",
    "SitemapIOError",
    "SitemapValidationError",
    "Url",
]
