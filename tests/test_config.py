from pathlib import Path

import pytest

pytest.importorskip("pydantic")

from pydantic import ValidationError

from sitemapwriter.config import AppConfig, MapOptions, SitemapConfig
from sitemapwriter.frequency import Frequency
from sitemapwriter.models import Url


def test_round_trip(tmp_path: Path) -> None:
    config_path = tmp_path / "sitemaps.json"
    config = AppConfig(
        website="https://example.com",
        output_dir=tmp_path / "public",
        options=MapOptions(max_urls_per_file=100, buffer_size=10, use_indent=False),
        sitemaps=[
            SitemapConfig(
                name="main",
                urls=[Url(loc="/about", changefreq=Frequency.MONTHLY, priority=0.8)],
            )
        ],
    )
    config.dump(config_path)

    loaded = AppConfig.from_file(config_path)
    assert loaded.website_base == "https://example.com"
    assert loaded.output_dir == tmp_path / "public"
    assert loaded.options.max_urls_per_file == 100
    assert loaded.options.use_indent is False
    assert loaded.sitemaps[0].name == "main"
    assert loaded.sitemaps[0].urls[0].resolve(loaded.website_base).changefreq == "monthly"


def test_defaults() -> None:
    options = MapOptions()

    assert options.max_urls_per_file == 40000
    assert options.buffer_size == 1000
    assert options.use_indent is True


@pytest.mark.parametrize(
    "values", [{"max_urls_per_file": 0}, {"max_urls_per_file": 50001}, {"buffer_size": 0}]
)
def test_options_are_bounded(values: dict) -> None:
    with pytest.raises(ValidationError):
        MapOptions(**values)


def test_missing_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="missing.json"):
        AppConfig.from_file(tmp_path / "missing.json")


def test_invalid_json_is_reported(tmp_path: Path) -> None:
    config_path = tmp_path / "sitemaps.json"
    config_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON"):
        AppConfig.from_file(config_path)


def test_invalid_configuration_is_reported(tmp_path: Path) -> None:
    config_path = tmp_path / "sitemaps.json"
    config_path.write_text('{"website": "not a url"}', encoding="utf-8")

    with pytest.raises(ValueError, match="Configuration file is invalid"):
        AppConfig.from_file(config_path)


def test_bundled_configuration_loads() -> None:
    config = AppConfig.from_file()

    assert [sitemap.name for sitemap in config.iter_sitemaps()] == ["main", "blog"]
