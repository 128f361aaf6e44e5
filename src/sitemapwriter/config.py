"""Configuration models and helpers for sitemap generation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from pydantic import BaseModel, Field, HttpUrl, ValidationError

from sitemapwriter.models import Url
from sitemapwriter.storage import DEFAULT_OUTPUT_ROOT

__all__ = [
    "AppConfig",
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_MAX_URLS_PER_FILE",
    "MapOptions",
    "PROTOCOL_MAX_URLS_PER_FILE",
    "SitemapConfig",
]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "data" / "sitemaps.json"

#: Hard limit imposed by the sitemap protocol.
PROTOCOL_MAX_URLS_PER_FILE = 50000
DEFAULT_MAX_URLS_PER_FILE = 40000
DEFAULT_BUFFER_SIZE = 1000


class MapOptions(BaseModel):
    """Tuning knobs for a :class:`~sitemapwriter.services.sitemap.Map`."""

    max_urls_per_file: int = Field(
        default=DEFAULT_MAX_URLS_PER_FILE,
        ge=1,
        le=PROTOCOL_MAX_URLS_PER_FILE,
        description="Number of URLs written to a file before a new file is started",
    )
    buffer_size: int = Field(
        default=DEFAULT_BUFFER_SIZE,
        ge=1,
        description="Number of URLs kept in memory before they are flushed to disk",
    )
    use_indent: bool = Field(default=True, description="Pretty-print the generated XML")


class SitemapConfig(BaseModel):
    """One logical sitemap, written as one or more files named after ``name``."""

    name: str = Field(..., min_length=1, description="Base file name, without extension")
    urls: List[Url] = Field(default_factory=list)


class AppConfig(BaseModel):
    """Website wide configuration listing every sitemap to generate."""

    website: HttpUrl = Field(..., description="Base URL every location is joined to")
    output_dir: Path = Field(
        default=DEFAULT_OUTPUT_ROOT,
        description="Directory receiving sitemap.xml and the sitemap/ subdirectory",
    )
    options: MapOptions = Field(default_factory=MapOptions)
    index_lastmod: str = Field(
        default="now", description="Last modification date recorded for every index entry"
    )
    sitemaps: List[SitemapConfig] = Field(default_factory=list)

    @property
    def website_base(self) -> str:
        """Return the website URL without its trailing slash."""

        return str(self.website).rstrip("/")

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> "AppConfig":
        """Load configuration data from a JSON file."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Configuration file not found: {config_path}") from exc
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in configuration file: {config_path}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Configuration file is invalid: {config_path}\n{exc}") from exc

    def dump(self, path: Path | str | None = None) -> None:
        """Persist the configuration back to disk as JSON."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")

    def iter_sitemaps(self) -> Iterable[SitemapConfig]:
        """Iterate over configured sitemaps."""

        return iter(self.sitemaps)

    def add_sitemap(self, sitemap: SitemapConfig) -> None:
        """Append a new sitemap configuration to the collection."""

        self.sitemaps.append(sitemap)
