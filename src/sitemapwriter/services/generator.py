"""Configuration driven generation of a complete set of sitemaps and their index."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field

from sitemapwriter.config import AppConfig, SitemapConfig
from sitemapwriter.exceptions import SitemapValidationError
from sitemapwriter.models import FinalizeReport, Group
from sitemapwriter.services.index import Index
from sitemapwriter.services.sitemap import Map

__all__ = [
    "EntryError",
    "GenerationResult",
    "SitemapResult",
    "build_index",
    "generate",
    "generate_sitemap",
]

logger = logging.getLogger(__name__)


class EntryError(BaseModel):
    sitemap: str
    loc: str
    error: str


class SitemapResult(BaseModel):
    name: str
    report: FinalizeReport
    errors: List[EntryError] = Field(default_factory=list)


class GenerationResult(BaseModel):
    """Container returned from :func:`generate`."""

    sitemaps: List[SitemapResult] = Field(default_factory=list)
    index_path: Path | None = None

    @property
    def errors(self) -> List[EntryError]:
        return [error for result in self.sitemaps for error in result.errors]


def generate_sitemap(config: AppConfig, sitemap: SitemapConfig) -> SitemapResult:
    """Write one configured sitemap, skipping entries that fail validation."""

    sitemap_map = Map(config.output_dir, sitemap.name, config.website_base, config.options)
    errors: List[EntryError] = []

    for url in sitemap.urls:
        try:
            sitemap_map.add_entry(url)
        except SitemapValidationError as exc:
            logger.warning("Skipping %s in %s: %s", url.loc, sitemap.name, exc)
            errors.append(EntryError(sitemap=sitemap.name, loc=url.loc, error=str(exc)))

    report = sitemap_map.finalize()
    logger.info(
        "Sitemap %s: %d urls in %d files",
        sitemap.name,
        len(report.written_urls),
        len(report.written_file_paths),
    )
    return SitemapResult(name=sitemap.name, report=report, errors=errors)


def build_index(
    output_dir: Path | str,
    website: str,
    reports: List[FinalizeReport],
    *,
    lastmod: str = "now",
    use_indent: bool = True,
) -> Path | None:
    """Write ``sitemap.xml`` referencing every file listed in ``reports``."""

    index = Index(output_dir, use_indent=use_indent)
    for report in reports:
        index.add_groups(Group(loc=loc, lastmod=lastmod) for loc in report.sitemap_urls(website))
    return index.finalize()


def generate(config: AppConfig) -> GenerationResult:
    """Generate every configured sitemap followed by the sitemap index.

    The output directory and its ``sitemap`` subdirectory must already exist.
    I/O errors propagate; validation errors are collected per entry.
    """

    results = [generate_sitemap(config, sitemap) for sitemap in config.iter_sitemaps()]

    index_path = build_index(
        config.output_dir,
        config.website_base,
        [result.report for result in results],
        lastmod=config.index_lastmod,
        use_indent=config.options.use_indent,
    )
    return GenerationResult(sitemaps=results, index_path=index_path)
